"""
Configuration for suggs.

All tunable parameters in one place. Loaded from:
1. Defaults (this file)
2. Config file (~/.config/suggs/config.toml) if exists
3. Environment variables (SUGGS_*) override file
4. CLI flags override everything
"""

from __future__ import annotations

import contextlib
import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class ParserConfig:
    """Tokenizer settings."""
    strip_tag_lines: bool = True  # drop the rest of a line left blank by a tag


@dataclass
class ColorsConfig:
    """Colour names for the terminal view (any colour rich understands)."""
    insertion: str = "green"
    deletion: str = "red"
    comment: str = "cyan"
    author: str = "bright_cyan"


@dataclass
class DiffConfig:
    """Defaults for `suggs diff`."""
    author: str | None = None


@dataclass
class Config:
    """Root config with all settings."""
    parser: ParserConfig = field(default_factory=ParserConfig)
    colors: ColorsConfig = field(default_factory=ColorsConfig)
    diff: DiffConfig = field(default_factory=DiffConfig)


def get_config_path() -> Path:
    """Get config file path, respecting XDG."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "suggs" / "config.toml"
    return Path.home() / ".config" / "suggs" / "config.toml"


def load_config() -> Config:
    """Load config from file if exists, else return defaults."""
    config = Config()
    path = get_config_path()

    if path.exists():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
            config = _apply_toml(config, data)
        except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
            logger.warning("Ignoring config file %s: %s", path, e)
            config = Config()

    config = _apply_env(config)

    return config


def _apply_toml(config: Config, data: dict) -> Config:
    """Apply toml data to config."""
    if "parser" in data:
        p = data["parser"]
        if "strip_tag_lines" in p:
            config.parser.strip_tag_lines = bool(p["strip_tag_lines"])

    if "colors" in data:
        c = data["colors"]
        for attr in ("insertion", "deletion", "comment", "author"):
            if attr in c:
                setattr(config.colors, attr, str(c[attr]))

    if "diff" in data:
        d = data["diff"]
        if "author" in d:
            config.diff.author = str(d["author"])

    return config


def _apply_env(config: Config) -> Config:
    """Apply environment variable overrides."""
    env_map: dict[str, tuple[str, str, type]] = {
        "SUGGS_STRIP_TAG_LINES": ("parser", "strip_tag_lines", bool),
        "SUGGS_COLOR_INSERTION": ("colors", "insertion", str),
        "SUGGS_COLOR_DELETION": ("colors", "deletion", str),
        "SUGGS_COLOR_COMMENT": ("colors", "comment", str),
        "SUGGS_COLOR_AUTHOR": ("colors", "author", str),
        "SUGGS_AUTHOR": ("diff", "author", str),
    }

    for env_key, (section, attr, conv) in env_map.items():
        val = os.environ.get(env_key)
        if val is not None:
            with contextlib.suppress(ValueError, AttributeError):
                # Bool needs special handling: "true", "1", "yes" -> True
                converted = val.lower() in ("true", "1", "yes") if conv is bool else conv(val)
                setattr(getattr(config, section), attr, converted)

    return config


# Module-level config instance, loaded once on first use
_config: Config | None = None


def get_config() -> Config:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Forget the cached config so the next get_config() reloads it."""
    global _config
    _config = None
