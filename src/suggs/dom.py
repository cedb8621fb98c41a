"""
DOM - Document Object Model for suggs

A suggestions document is a tree of Nodes. The single ROOT node is the whole
document; every other node is one tagged region (an insertion, a deletion or
a comment). A node's contents are chunks in reading order: literal text or
another node.

Key invariant: a COMMENT node holds only text. The parser enforces this when
a tag is opened inside a comment.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    ROOT = "root"
    INSERTION = "insertion"
    DELETION = "deletion"
    COMMENT = "comment"


_TAGS: dict[NodeKind, tuple[str, str]] = {
    NodeKind.ROOT: ("", ""),
    NodeKind.INSERTION: ("++[", "]++"),
    NodeKind.DELETION: ("--[", "]--"),
    NodeKind.COMMENT: ("%%[", "]%%"),
}

OPENERS: tuple[str, ...] = ("++[", "--[", "%%[")
CLOSERS: tuple[str, ...] = ("]++", "]--", "]%%")


def opener(kind: NodeKind) -> str:
    """Opening tag for a kind of node. Empty for ROOT."""
    return _TAGS[kind][0]


def closer(kind: NodeKind) -> str:
    """Closing tag for a kind of node. Empty for ROOT."""
    return _TAGS[kind][1]


def kind_for_tag(tag: str) -> NodeKind:
    """Reverse lookup: the kind an opening or closing tag belongs to."""
    for kind, pair in _TAGS.items():
        if kind is not NodeKind.ROOT and tag in pair:
            return kind
    raise ValueError(f"Not a suggestions tag: {tag!r}")


@dataclass(frozen=True)
class TextChunk:
    """Literal document text."""
    text: str


@dataclass
class NodeChunk:
    """A child node, owned by the node whose contents hold it."""
    node: Node


Chunk = TextChunk | NodeChunk


@dataclass
class Node:
    """One tagged region, or the whole document for ROOT."""
    kind: NodeKind
    # Raw annotation including its spaces (" @handle "), kept for exact round-trip
    author: str | None = None
    contents: list[Chunk] = field(default_factory=list)

    @classmethod
    def root(cls) -> Node:
        """An empty ROOT node representing an entire document."""
        return cls(kind=NodeKind.ROOT)

    @property
    def handle(self) -> str | None:
        """The author trimmed of whitespace, or None if there is no author."""
        if self.author is None:
            return None
        return self.author.strip()

    def add_text(self, text: str) -> None:
        self.contents.append(TextChunk(text))

    def add_node(self, child: Node) -> Node:
        """Append a child node and return it for chaining."""
        self.contents.append(NodeChunk(child))
        return child

    @property
    def children(self) -> list[Node]:
        """Direct child nodes, skipping text."""
        return [chunk.node for chunk in self.contents if isinstance(chunk, NodeChunk)]

    def depth_first(self) -> Iterator[Node]:
        """Traverse tree depth-first, yielding self then child nodes."""
        yield self
        for child in self.children:
            yield from child.depth_first()
