"""
Build suggestion trees from word-level diffs.

A diff is a list of (DiffOp, text) pairs in document order. Each EQUAL
segment becomes plain text under the ROOT; each INSERT or DELETE becomes a
single-chunk insertion or deletion node. Adjacent segments are never merged.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from difflib import SequenceMatcher
from enum import Enum

from .dom import Node, NodeKind, TextChunk
from .render import render_literal

# A word with its trailing whitespace, or whitespace at the very start
WORD_PATTERN = re.compile(r"\S+\s*|\s+")


class DiffOp(Enum):
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


def tokenize_words(text: str) -> list[str]:
    """Split text into word tokens; joining them gives back the text."""
    return WORD_PATTERN.findall(text)


def diff_words(old: str, new: str) -> list[tuple[DiffOp, str]]:
    """
    Word-level diff from `old` to `new`.

    EQUAL and DELETE texts concatenate to `old`; EQUAL and INSERT texts
    concatenate to `new`. A replacement is reported as DELETE then INSERT.
    """
    old_words = tokenize_words(old)
    new_words = tokenize_words(new)
    matcher = SequenceMatcher(None, old_words, new_words, autojunk=False)

    ops: list[tuple[DiffOp, str]] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            ops.append((DiffOp.EQUAL, "".join(old_words[i1:i2])))
            continue
        if tag in ("delete", "replace"):
            ops.append((DiffOp.DELETE, "".join(old_words[i1:i2])))
        if tag in ("insert", "replace"):
            ops.append((DiffOp.INSERT, "".join(new_words[j1:j2])))
    return ops


def build_from_diff(ops: Iterable[tuple[DiffOp, str]], author: str | None = None) -> Node:
    """
    Turn diff operations into a two-level suggestions tree.

    `author` (already canonical, e.g. "@alice") is attached to every
    insertion and deletion as " @alice ".
    """
    author_string = f" {author} " if author is not None else None

    root = Node.root()
    for op, text in ops:
        if op is DiffOp.EQUAL:
            root.add_text(text)
        elif op is DiffOp.INSERT:
            root.add_node(Node(NodeKind.INSERTION, author_string, [TextChunk(text)]))
        elif op is DiffOp.DELETE:
            root.add_node(Node(NodeKind.DELETION, author_string, [TextChunk(text)]))
        else:
            raise ValueError(f"Unknown diff operation: {op!r}")
    return root


def suggestions_from_diff(old: str, new: str, author: str | None = None) -> str:
    """Suggestions markup turning `old` into `new`."""
    return render_literal(build_from_diff(diff_words(old, new), author))
