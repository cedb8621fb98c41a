r"""
LaTeX format strategy, for the `changes` package.

    \added{...}  \deleted{...}  \comment{...}

Text passes through unescaped: a suggestions file for a LaTeX document is
already LaTeX source.
"""

from ..dom import NodeKind
from .base import MarkupFormat, registry


class LatexFormat(MarkupFormat):

    @property
    def name(self) -> str:
        return "latex"

    @property
    def extensions(self) -> list[str]:
        return [".tex"]

    def decorate(self, kind: NodeKind, author: str | None) -> tuple[str, str]:
        if kind is NodeKind.INSERTION:
            return "\\added{", "}"
        if kind is NodeKind.DELETION:
            return "\\deleted{", "}"
        if kind is NodeKind.COMMENT:
            return "\\comment{", (author or "") + "}"
        return "", ""


registry.register(LatexFormat())
