"""
HTML format strategy.

Insertions and deletions map to <ins> and <del>; comments become a span
with the author in a nested span so a stylesheet can place it. Text is
HTML-escaped; the output is a fragment, not a full page.
"""

from html import escape

from ..dom import NodeKind
from .base import MarkupFormat, registry


class HtmlFormat(MarkupFormat):

    @property
    def name(self) -> str:
        return "html"

    @property
    def extensions(self) -> list[str]:
        return [".html", ".htm"]

    def decorate(self, kind: NodeKind, author: str | None) -> tuple[str, str]:
        if kind is NodeKind.INSERTION:
            return "<ins>", "</ins>"
        if kind is NodeKind.DELETION:
            return "<del>", "</del>"
        if kind is NodeKind.COMMENT:
            suffix = "</span>"
            if author and author.strip():
                suffix = f' <span class="author">{escape(author.strip())}</span>' + suffix
            return '<span class="comment">', suffix
        return "", ""

    def escape(self, text: str) -> str:
        return escape(text, quote=False)


registry.register(HtmlFormat())
