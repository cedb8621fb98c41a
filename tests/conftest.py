"""Pytest fixtures shared by all suggs tests."""

import pytest

from suggs import config


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """Run every test against built-in defaults, not the user's config file."""
    monkeypatch.setattr(config, "_config", config.Config())
    yield config._config
