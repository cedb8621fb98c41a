"""
Suggestions markup parser.

Turns text containing ++[insertions]++, --[deletions]-- and %%[comments]%%
into a tree of Nodes. Tags nest (except inside comments) and may carry an
author handle just before the closing tag:

    ++[An addition. @author1 ]++

The scanner is a loop over an explicit stack of partially built nodes: each
step consumes text up to the earliest marker, then pushes (opener), pops and
validates (closer), or finishes (end of input).
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from .config import get_config
from .dom import CLOSERS, OPENERS, Node, NodeKind, closer, kind_for_tag, opener

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(
    r"""
    (?P<text> .*?)                  # everything up to the marker
    (?P<author> [ ]*@\S+?\s*)?      # optionally, an author handle plus whitespace
    (?P<tag>
        \+\+\[ | --\[ | %%\[ |      # an opener
        \]\+\+ | \]-- | \]%% |      # a closer
        \Z                          # or end of input
    )
    """,
    re.DOTALL | re.VERBOSE,
)

# Whitespace-only rest of a line, up to and including the newline
BLANK_LINE_REST = re.compile(r"\s*?\n")


class ParseError(ValueError):
    """Malformed suggestions markup."""


class UnmatchedCloser(ParseError):
    """A closing tag that does not close the innermost open tag."""

    def __init__(self, seen: str, expected: str | None):
        self.seen = seen
        self.expected = expected
        if expected is None:
            message = f"Unmatched closing tag '{seen}', no tag is open."
        else:
            message = f"Unmatched closing tag '{seen}', I was expecting '{expected}'."
        super().__init__(message)


class CommentNesting(ParseError):
    """A tag opened inside a comment."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Comments cannot contain other tags, found '{tag}' inside '%%['.")


class UnterminatedTag(ParseError):
    """Input ended while tags were still open."""

    def __init__(self, open_tags: list[str]):
        self.open_tags = open_tags
        super().__init__(
            f"Unmatched opening tag '{open_tags[-1]}', input ended with "
            f"{len(open_tags)} tag(s) still open."
        )


class EmptyInput(ParseError):
    """Nothing to parse."""

    def __init__(self):
        super().__init__("Couldn't parse suggestions, the input was empty.")


def parse(text: str, *, strip_tag_lines: bool | None = None) -> Node:
    """
    Parse suggestions markup into a ROOT node.

    Args:
        text: The whole document
        strip_tag_lines: When a tag starts a line, drop the whitespace-only
            rest of the line after it so the tag leaves no blank line behind.
            None means use the configured default.

    Raises:
        ParseError: one of UnmatchedCloser, CommentNesting, UnterminatedTag
            or EmptyInput.
    """
    if not text:
        raise EmptyInput()
    if strip_tag_lines is None:
        strip_tag_lines = get_config().parser.strip_tag_lines

    # The nodes we are "in"; the last one receives text and finished children
    stack: list[Node] = [Node.root()]
    pos = 0

    while True:
        match = TOKEN_PATTERN.match(text, pos)
        assert match is not None  # \Z always matches eventually
        chunk_text = match.group("text")
        author = match.group("author") or ""
        tag = match.group("tag")
        pos = match.end()

        if strip_tag_lines and (chunk_text.endswith("\n") or author.endswith("\n")):
            blank = BLANK_LINE_REST.match(text, pos)
            if blank:
                pos = blank.end()

        current = stack[-1]

        if author:
            if tag in CLOSERS:
                current.author = author
            else:
                chunk_text += author
                logger.warning(
                    "Found possible handle %r before an opening tag or end of input. "
                    "Author handles are only recognized before a closing tag, like: "
                    "++[Addition. @author ]++",
                    author.strip(),
                )

        if chunk_text:
            current.add_text(chunk_text)

        if tag in OPENERS:
            if current.kind is NodeKind.COMMENT:
                raise CommentNesting(tag)
            stack.append(Node(kind=kind_for_tag(tag)))
            continue

        # Closer or end of input: the innermost node is finished
        finished = stack.pop()

        if not tag:
            if not stack:
                return finished
            open_tags = [opener(node.kind) for node in stack[1:]] + [opener(finished.kind)]
            raise UnterminatedTag(open_tags)

        if not stack:
            raise UnmatchedCloser(seen=tag, expected=None)

        expected = closer(finished.kind)
        if tag != expected:
            raise UnmatchedCloser(seen=tag, expected=expected)

        logger.debug("Closed %s node at offset %d", finished.kind.value, pos)
        stack[-1].add_node(finished)


def parse_file(path: str | Path, *, strip_tag_lines: bool | None = None) -> Node:
    """Read a UTF-8 suggestions file and parse it."""
    with open(path, encoding="utf-8") as f:
        return parse(f.read(), strip_tag_lines=strip_tag_lines)
