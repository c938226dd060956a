"""Tests for the high-level Marksome API."""


class TestParseFunction:
    """Tests for the parse() function."""

    def test_parse_returns_segments(self) -> None:
        from marksome import Strong, Text, parse

        assert parse("Hello **World**") == [Text("Hello "), Strong((Text("World"),))]

    def test_parse_matches_parser_class(self) -> None:
        from marksome import Parser, parse

        text = "*a* [b][c] __d__"
        assert Parser(text).parse() == parse(text)

    def test_parse_empty(self) -> None:
        from marksome import parse

        assert parse("") == []


class TestRenderFunction:
    """Tests for the render() and to_html() functions."""

    def test_render(self) -> None:
        from marksome import parse, render

        html = render(parse("Some **strong** and [a link][1]"), {"1": "https://example.com"})
        assert html == 'Some <strong>strong</strong> and <a href="https://example.com">a link</a>'

    def test_to_html(self) -> None:
        from marksome import to_html

        assert to_html("*hi* [there]", {"there": "https://example.com"}) == (
            '<em>hi</em> <a href="https://example.com">there</a>'
        )


class TestPublicExports:
    """The package root exposes the documented API."""

    def test_all_names_resolve(self) -> None:
        import marksome

        for name in marksome.__all__:
            assert hasattr(marksome, name), name

    def test_version(self) -> None:
        import marksome

        assert marksome.__version__ == "0.1.0"

    def test_error_hierarchy(self) -> None:
        from marksome import MarksomeError, RenderError

        assert issubclass(RenderError, MarksomeError)
        assert str(RenderError("bad", "ref")) == "bad (reference 'ref')"
        assert str(RenderError("bad")) == "bad"
