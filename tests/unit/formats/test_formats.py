"""
Unit tests for output formats and the format registry.
"""

import pytest

from suggs.dom import Node, NodeKind, TextChunk
from suggs.formats import critic as _critic  # noqa: F401 - ensure critic format is registered
from suggs.formats import html as _html  # noqa: F401 - ensure html format is registered
from suggs.formats import latex as _latex  # noqa: F401 - ensure latex format is registered
from suggs.formats.base import FormatRegistry, registry
from suggs.formats.critic import CriticFormat
from suggs.formats.html import HtmlFormat
from suggs.formats.latex import LatexFormat
from suggs.formats.suggestions import SuggestionsFormat
from suggs.render import render_literal, render_with_policy


def sample_tree() -> Node:
    root = Node.root()
    root.add_text("a < b ")
    root.add_node(Node(NodeKind.INSERTION, contents=[TextChunk("new")]))
    root.add_node(Node(NodeKind.COMMENT, author=" @bob ", contents=[TextChunk("why?")]))
    root.add_node(Node(NodeKind.DELETION, author=" @bob ", contents=[TextChunk("old")]))
    return root


class TestSuggestionsFormat:
    def setup_method(self):
        self.fmt = SuggestionsFormat()

    def test_name(self):
        assert self.fmt.name == "suggestions"

    def test_render(self):
        assert render_with_policy(sample_tree(), self.fmt) == (
            "a < b ++[new]++%%[why? @bob ]%%--[old @bob ]--"
        )

    def test_same_as_literal(self):
        assert render_with_policy(sample_tree(), self.fmt) == render_literal(sample_tree())


class TestCriticFormat:
    def test_render(self):
        assert render_with_policy(sample_tree(), CriticFormat()) == (
            "a < b {++new++}{>>why? @bob <<}{--old--}"
        )

    def test_comment_without_author(self):
        assert CriticFormat().decorate(NodeKind.COMMENT, None) == ("{>>", "<<}")


class TestHtmlFormat:
    def setup_method(self):
        self.fmt = HtmlFormat()

    def test_extensions(self):
        assert ".html" in self.fmt.extensions
        assert ".htm" in self.fmt.extensions

    def test_render(self):
        assert render_with_policy(sample_tree(), self.fmt) == (
            'a &lt; b <ins>new</ins>'
            '<span class="comment">why? <span class="author">@bob</span></span>'
            '<del>old</del>'
        )

    def test_author_is_escaped(self):
        prefix, suffix = self.fmt.decorate(NodeKind.COMMENT, " @<script> ")
        assert "<script>" not in suffix
        assert "&lt;script&gt;" in suffix

    def test_root_has_no_markup(self):
        assert self.fmt.decorate(NodeKind.ROOT, None) == ("", "")


class TestLatexFormat:
    def test_render(self):
        assert render_with_policy(sample_tree(), LatexFormat()) == (
            "a < b \\added{new}\\comment{why? @bob }\\deleted{old}"
        )

    def test_text_is_not_escaped(self):
        root = Node.root()
        root.add_node(Node(NodeKind.INSERTION, contents=[TextChunk("$x^2$ \\emph{y}")]))
        assert render_with_policy(root, LatexFormat()) == "\\added{$x^2$ \\emph{y}}"


class TestRegistry:
    def test_all_formats_registered(self):
        assert {"suggestions", "critic", "html", "latex"} <= set(registry.names)

    def test_get_by_name(self):
        assert isinstance(registry.get_by_name("html"), HtmlFormat)
        assert registry.get_by_name("nope") is None

    def test_get_by_extension(self):
        assert isinstance(registry.get_by_extension("tex"), LatexFormat)
        assert isinstance(registry.get_by_extension(".HTM"), HtmlFormat)
        assert registry.get_by_extension(".doc") is None

    def test_for_filename(self):
        assert isinstance(registry.for_filename("out/Paper.TEX"), LatexFormat)
        assert isinstance(registry.for_filename("notes.critic"), CriticFormat)
        assert registry.for_filename("README") is None

    def test_first_registered_extension_wins(self):
        reg = FormatRegistry()
        reg.register(HtmlFormat())

        class OtherHtml(HtmlFormat):
            @property
            def name(self) -> str:
                return "other-html"

        reg.register(OtherHtml())
        assert reg.get_by_extension(".html").name == "html"
        assert reg.get_by_name("other-html").name == "other-html"
        assert reg.names == ["html", "other-html"]

    @pytest.mark.parametrize("name", ["suggestions", "critic", "html", "latex"])
    def test_root_decorations_are_empty(self, name):
        assert registry.get_by_name(name).decorate(NodeKind.ROOT, None) == ("", "")
