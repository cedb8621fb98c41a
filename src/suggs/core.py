"""
Library entry points for suggs.

File-level operations used by the CLI: diff two files into suggestions,
resolve a suggestions file by accepting or rejecting every change, and
canonicalize author handles.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .diff import suggestions_from_diff
from .parser import parse_file
from .render import render_accept, render_reject

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s")


def canonical_author(raw: str) -> str:
    """
    Normalize an author handle to "@handle".

    Raises ValueError if the handle contains whitespace.
    """
    author = raw if raw.startswith("@") else "@" + raw
    if not author[1:] or WHITESPACE.search(author):
        raise ValueError(f"Author {raw!r} must be a single word like @author")
    return author


def read_text(path: str | Path) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


def write_text(path: str | Path, text: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def diff_files(old_path: str | Path, new_path: str | Path, author: str | None = None) -> str:
    """Suggestions markup for the changes from one file to another."""
    old = read_text(old_path)
    new = read_text(new_path)
    logger.debug("Diffing %s (%d chars) -> %s (%d chars)", old_path, len(old), new_path, len(new))
    return suggestions_from_diff(old, new, author)


def resolve_file(path: str | Path, accept: bool, strip_tag_lines: bool | None = None) -> str:
    """
    Accept (or reject) every change in a suggestions file.

    Returns the resolved text; the file itself is left alone.
    """
    root = parse_file(path, strip_tag_lines=strip_tag_lines)
    return render_accept(root) if accept else render_reject(root)
