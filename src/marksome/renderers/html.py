"""HTML renderer using StringBuilder pattern.

Renders a segment tree to HTML, resolving reference links through a
lookup table whose values are either a URL or a render callback.

Thread Safety:
All per-render state lives in locals of render(). Multiple threads can
safely share a single HtmlRenderer instance and call render() concurrently.

Deep Nesting:
The tree is walked with an explicit stack, so rendering depth is not bound
by the Python recursion limit.
"""

from __future__ import annotations

import html
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass

from marksome.config import RenderConfig, get_render_config
from marksome.errors import RenderError
from marksome.nodes import Container, Emphasis, ReferenceLink, Segment, Strong, Text
from marksome.utils.logger import get_logger
from marksome.utils.stringbuilder import StringBuilder

logger = get_logger(__name__)

# Called with a stable identity key (the segment's index among its
# siblings) and the already rendered children; returns HTML.
type ReferenceRenderFunction = Callable[[int, str], str]

type References = Mapping[str, str | ReferenceRenderFunction | None]


def html_escape(s: str) -> str:
    """Escape HTML special characters.

    Escapes <, >, &, " but NOT single quotes.
    """
    return html.escape(s, quote=False).replace('"', "&quot;")


@dataclass(slots=True)
class _RenderFrame:
    """A container whose children are being rendered."""

    segment: Container | None
    key: int
    sb: StringBuilder
    children: Iterator[tuple[int, Segment]]


class HtmlRenderer:
    """Render segments to HTML.

    Usage:
        >>> from marksome import parse
        >>> renderer = HtmlRenderer({"1": "https://example.com"})
        >>> renderer.render(parse("**see** [here][1]"))
        '<strong>see</strong> <a href="https://example.com">here</a>'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
    """

    __slots__ = ("_references",)

    def __init__(self, references: References | None = None) -> None:
        """Initialize renderer.

        Args:
            references: Lookup table from reference key to a URL or a
                render callback. Missing keys render as a neutral element.
        """
        self._references: References = references or {}

    def render(self, segments: Sequence[Segment]) -> str:
        """Render segments to an HTML string.

        Raises:
            RenderError: On an unknown segment type or a failing reference
                callback.
        """
        config = get_render_config()
        sb = StringBuilder()
        stack = [_RenderFrame(None, 0, sb, iter(enumerate(segments)))]

        while stack:
            frame = stack[-1]
            item = next(frame.children, None)

            if item is None:
                stack.pop()
                if frame.segment is not None:
                    stack[-1].sb.append(
                        self._render_container(frame.segment, frame.key, frame.sb.build(), config)
                    )
                continue

            key, child = item
            match child:
                case Text(content=content):
                    frame.sb.append(html_escape(content))
                case Strong() | Emphasis() | ReferenceLink():
                    stack.append(
                        _RenderFrame(child, key, StringBuilder(), iter(enumerate(child.children)))
                    )
                case _:
                    raise RenderError(f"Cannot render {type(child).__name__}")

        return sb.build()

    def _render_container(
        self, segment: Container, key: int, inner: str, config: RenderConfig
    ) -> str:
        match segment:
            case Strong():
                return f"<strong>{inner}</strong>"
            case Emphasis():
                return f"<em>{inner}</em>"
            case ReferenceLink():
                return self._render_reference_link(segment, key, inner, config)
        raise RenderError(f"Cannot render {type(segment).__name__}")

    def _render_reference_link(
        self, segment: ReferenceLink, key: int, inner: str, config: RenderConfig
    ) -> str:
        target = self._references.get(segment.reference)

        if not target:
            if config.warn_missing_references:
                logger.warning(
                    "Reference %r for reference link is missing from references. "
                    "Falling back to <%s>.",
                    segment.reference,
                    config.missing_reference_tag,
                )
            tag = config.missing_reference_tag
            return f"<{tag}>{inner}</{tag}>"

        if isinstance(target, str):
            return f'<a href="{html.escape(target)}">{inner}</a>'

        try:
            return target(key, inner)
        except Exception as e:
            raise RenderError(f"Reference callback failed: {e}", segment.reference) from e
