"""
Renderers for suggestion trees.

Every renderer walks the tree depth-first, left to right, and concatenates
the renderings of a node's contents. They differ only in what each kind of
node contributes:

- accept: insertions kept, deletions and comments dropped
- reject: deletions kept, insertions and comments dropped
- literal: everything kept, re-tagged as suggestions markup
- colorized: everything kept, coloured for the terminal
- with_policy: everything kept, wrapped by an output format's decorations
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from .config import ColorsConfig, get_config
from .dom import Node, NodeKind, TextChunk
from .formats.base import MarkupFormat
from .formats.suggestions import SuggestionsFormat

_SUGGESTIONS = SuggestionsFormat()

_DROPPED_ON_ACCEPT = frozenset({NodeKind.DELETION, NodeKind.COMMENT})
_DROPPED_ON_REJECT = frozenset({NodeKind.INSERTION, NodeKind.COMMENT})


def _resolve(node: Node, dropped: frozenset[NodeKind]) -> str:
    """Render a node with whole subtrees of the `dropped` kinds removed."""
    if node.kind in dropped:
        return ""
    parts = []
    for chunk in node.contents:
        if isinstance(chunk, TextChunk):
            parts.append(chunk.text)
        else:
            parts.append(_resolve(chunk.node, dropped))
    return "".join(parts)


def render_accept(node: Node) -> str:
    """The document with all changes accepted."""
    return _resolve(node, _DROPPED_ON_ACCEPT)


def render_reject(node: Node) -> str:
    """The document with all changes rejected."""
    return _resolve(node, _DROPPED_ON_REJECT)


def render_with_policy(node: Node, policy: MarkupFormat) -> str:
    """
    Render a tree with an output format's decorations around every node.

    Exceptions raised by the policy propagate; nothing is returned for a
    partially rendered tree.
    """
    prefix, suffix = policy.decorate(node.kind, node.author)
    parts = [prefix]
    for chunk in node.contents:
        if isinstance(chunk, TextChunk):
            parts.append(policy.escape(chunk.text))
        else:
            parts.append(render_with_policy(chunk.node, policy))
    parts.append(suffix)
    return "".join(parts)


def render_literal(node: Node) -> str:
    """The tree as suggestions markup again (inverse of parse)."""
    return render_with_policy(node, _SUGGESTIONS)


def _kind_color(kind: NodeKind, colors: ColorsConfig) -> str | None:
    if kind is NodeKind.INSERTION:
        return colors.insertion
    if kind is NodeKind.DELETION:
        return colors.deletion
    if kind is NodeKind.COMMENT:
        return colors.comment
    return None  # ROOT text stays undecorated


def render_colorized(node: Node, colors: ColorsConfig | None = None) -> Text:
    """
    Render the tree as rich Text for the terminal.

    Insertions are green, deletions red and struck through, comments cyan in
    [brackets] with their author highlighted. Colours come from config.
    """
    if colors is None:
        colors = get_config().colors

    color = _kind_color(node.kind, colors)
    out = Text()

    if node.kind is NodeKind.COMMENT:
        out.append("[", style=color)

    for chunk in node.contents:
        if isinstance(chunk, TextChunk):
            out.append(chunk.text, style=color)
        else:
            out.append_text(render_colorized(chunk.node, colors))

    if node.kind is NodeKind.COMMENT:
        if node.author:
            out.append(node.author, style=colors.author)
        out.append("]", style=color)

    if node.kind is NodeKind.DELETION:
        # Covers nested nodes too, on top of their own colours
        out.stylize("strike")

    return out


def to_ansi(text: Text, *, color_system: str = "standard") -> str:
    """Turn rich Text into a string with ANSI escape sequences."""
    console = Console(
        force_terminal=True,
        color_system=color_system,
        soft_wrap=True,
        highlight=False,
    )
    with console.capture() as capture:
        console.print(text, end="")
    return capture.get()
