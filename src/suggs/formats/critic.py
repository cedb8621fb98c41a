"""
CriticMarkup format.

    {++addition++}  {--deletion--}  {>>comment<<}

CriticMarkup has no author syntax for additions and deletions, so only
comments keep their author (appended inside the comment).
"""

from ..dom import NodeKind
from .base import MarkupFormat, registry

CRITIC_TAGS = {
    NodeKind.ROOT: ("", ""),
    NodeKind.INSERTION: ("{++", "++}"),
    NodeKind.DELETION: ("{--", "--}"),
    NodeKind.COMMENT: ("{>>", "<<}"),
}


class CriticFormat(MarkupFormat):

    @property
    def name(self) -> str:
        return "critic"

    @property
    def extensions(self) -> list[str]:
        return [".critic"]

    def decorate(self, kind: NodeKind, author: str | None) -> tuple[str, str]:
        prefix, suffix = CRITIC_TAGS[kind]
        if kind is NodeKind.COMMENT and author:
            suffix = author + suffix
        return prefix, suffix


registry.register(CriticFormat())
