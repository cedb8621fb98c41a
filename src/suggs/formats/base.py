"""
Base output format interface and registry.

Each output format is a decoration policy: it says what goes before and after
the rendered contents of each kind of node. The traversal lives in
render.render_with_policy, so a new format is just a new strategy class.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..dom import NodeKind


class MarkupFormat(ABC):
    """Base class for output formats."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Format name used by `suggs export --to`."""
        ...

    @property
    @abstractmethod
    def extensions(self) -> list[str]:
        """Output file extensions this format handles (e.g., ['.html'])."""
        ...

    @abstractmethod
    def decorate(self, kind: NodeKind, author: str | None) -> tuple[str, str]:
        """
        Return (prefix, suffix) wrapping the rendered contents of a node.

        `author` is the node's raw author annotation, spaces included.
        ROOT should normally return ("", "").
        """
        ...

    def escape(self, text: str) -> str:
        """Transform literal text before output. Default: unchanged."""
        return text


class FormatRegistry:
    """Registry of output formats, by name and by file extension."""

    def __init__(self):
        self._formats: list[MarkupFormat] = []
        self._by_extension: dict[str, MarkupFormat] = {}
        self._by_name: dict[str, MarkupFormat] = {}

    def register(self, fmt: MarkupFormat) -> None:
        """Register an output format."""
        self._formats.append(fmt)
        self._by_name[fmt.name] = fmt
        for ext in fmt.extensions:
            # First registered wins for extension conflicts
            if ext not in self._by_extension:
                self._by_extension[ext] = fmt

    def get_by_name(self, name: str) -> MarkupFormat | None:
        """Get format by name (for --to)."""
        return self._by_name.get(name)

    def get_by_extension(self, ext: str) -> MarkupFormat | None:
        """Get format by file extension."""
        if not ext.startswith('.'):
            ext = '.' + ext
        return self._by_extension.get(ext.lower())

    def for_filename(self, filename: str) -> MarkupFormat | None:
        """Get format from the extension of an output filename."""
        if '.' not in filename:
            return None
        return self.get_by_extension(filename.rsplit('.', 1)[-1])

    @property
    def names(self) -> list[str]:
        """Names of all registered formats, in registration order."""
        return [fmt.name for fmt in self._formats]


# Global registry instance
registry = FormatRegistry()
