"""Tests for nesting flat matches into segments."""

from __future__ import annotations

from marksome import Emphasis, ReferenceLink, Strong, Text
from marksome.parser import Parser
from marksome.parsing.matches import InlineStyleMatch, ReferenceLinkMatch


def _build(text: str, matches: list) -> list:  # type: ignore[type-arg]
    return Parser(text)._build_segments(matches)


class TestBuildSegments:
    def test_no_matches(self) -> None:
        assert _build("a \\* b", []) == [Text("a * b")]

    def test_empty_text_is_omitted(self) -> None:
        assert _build("", []) == []

    def test_text_around_match(self) -> None:
        matches = [InlineStyleMatch("emphasis", start=2, end=5, inner_start=3, inner_end=4)]
        assert _build("a *b* c", matches) == [
            Text("a "),
            Emphasis((Text("b"),)),
            Text(" c"),
        ]

    def test_input_order_does_not_matter(self) -> None:
        strong = InlineStyleMatch("strong", start=1, end=6, inner_start=3, inner_end=4)
        emphasis = InlineStyleMatch("emphasis", start=0, end=7, inner_start=1, inner_end=6)
        expected = [Emphasis((Strong((Text("a"),)),))]
        assert _build("***a***", [strong, emphasis]) == expected
        assert _build("***a***", [emphasis, strong]) == expected

    def test_link_tail_is_not_content(self) -> None:
        link = ReferenceLinkMatch(start=0, end=10, inner_start=1, inner_end=4, reference="ref")
        assert _build("[foo][ref]!", [link]) == [
            ReferenceLink((Text("foo"),), "ref"),
            Text("!"),
        ]

    def test_nested_inside_link_text(self) -> None:
        link = ReferenceLinkMatch(start=0, end=10, inner_start=1, inner_end=6, reference="1")
        emphasis = InlineStyleMatch("emphasis", start=2, end=5, inner_start=3, inner_end=4)
        assert _build("[a*b*c][1]", [emphasis, link]) == [
            ReferenceLink((Text("a"), Emphasis((Text("b"),)), Text("c")), "1"),
        ]

    def test_siblings_then_parent_sibling(self) -> None:
        text = "*a* *b* c"
        matches = [
            InlineStyleMatch("emphasis", start=0, end=3, inner_start=1, inner_end=2),
            InlineStyleMatch("emphasis", start=4, end=7, inner_start=5, inner_end=6),
        ]
        assert _build(text, matches) == [
            Emphasis((Text("a"),)),
            Text(" "),
            Emphasis((Text("b"),)),
            Text(" c"),
        ]

    def test_literal_text_is_unescaped_per_fragment(self) -> None:
        text = "\\_*\\**\\_"
        matches = [InlineStyleMatch("emphasis", start=2, end=6, inner_start=3, inner_end=5)]
        assert _build(text, matches) == [
            Text("_"),
            Emphasis((Text("*"),)),
            Text("_"),
        ]
