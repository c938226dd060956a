"""
Marksome: inline markup for short texts

Parses a small, CommonMark-inspired subset of inline markdown (``*``/``_``
emphasis and strong emphasis, ``[text][ref]`` / ``[ref]`` reference links
and backslash escapes) into a typed segment tree.

Quick Start:
    >>> from marksome import parse, render
    >>> segments = parse("Some **strong** and [a link][1]")
    >>> render(segments, {"1": "https://example.com"})
    'Some <strong>strong</strong> and <a href="https://example.com">a link</a>'

Parsing never fails: markup that cannot be matched stays literal text.
"""

from marksome.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from marksome.errors import MarksomeError, RenderError
from marksome.nodes import Emphasis, ReferenceLink, Segment, Strong, Text
from marksome.parser import Parser, parse
from marksome.renderers.html import HtmlRenderer, ReferenceRenderFunction, References
from marksome.serialization import from_data, from_json, to_data, to_json
from marksome.text import plain_text, walk

__version__ = "0.1.0"


def render(segments: list[Segment], references: References | None = None) -> str:
    """Render segments to HTML.

    Args:
        segments: Segments as returned by ``parse``
        references: Lookup table from reference key to a URL or a callback
            ``(key, children_html) -> html``

    Returns:
        HTML string
    """
    return HtmlRenderer(references).render(segments)


def to_html(source: str, references: References | None = None) -> str:
    """Parse and render in one step.

    Example:
        >>> to_html("*hi* [there]", {"there": "https://example.com"})
        '<em>hi</em> <a href="https://example.com">there</a>'
    """
    return render(parse(source), references)


__all__ = [
    "Emphasis",
    "HtmlRenderer",
    "MarksomeError",
    "Parser",
    "ReferenceLink",
    "ReferenceRenderFunction",
    "References",
    "RenderConfig",
    "RenderError",
    "Segment",
    "Strong",
    "Text",
    "from_data",
    "from_json",
    "get_render_config",
    "parse",
    "plain_text",
    "render",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    "to_data",
    "to_html",
    "to_json",
    "walk",
]
