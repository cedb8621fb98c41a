"""
Suggestions format: the markup the parser reads.

Rendering a tree with this format is the inverse of parsing it.
"""

from ..dom import NodeKind, closer, opener
from .base import MarkupFormat, registry


class SuggestionsFormat(MarkupFormat):
    """Native ++[ ]++ / --[ ]-- / %%[ ]%% tags, author before the closer."""

    @property
    def name(self) -> str:
        return "suggestions"

    @property
    def extensions(self) -> list[str]:
        return [".suggs"]

    def decorate(self, kind: NodeKind, author: str | None) -> tuple[str, str]:
        return opener(kind), (author or "") + closer(kind)


registry.register(SuggestionsFormat())
