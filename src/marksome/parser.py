"""Inline parser producing a typed segment tree.

Architecture:
The parser uses a mixin-based design, one mixin per scanning stage:
- `LinkScanningMixin`: Reference links, which also partition the text into blocks
- `DelimiterScanningMixin`: Emphasis runs, classified and assigned to blocks
- `EmphasisMixin`: Delimiter stack matching within each block
- `SegmentTreeMixin`: Merging and nesting all matches into segments

Data flows one way through the stages. No stage keeps state beyond a
single parse() call.

Thread Safety:
- Parser produces immutable segments (frozen dataclasses)
- Safe to share the result across threads

"""

from __future__ import annotations

from marksome.nodes import Segment
from marksome.parsing import (
    DelimiterScanningMixin,
    EmphasisMixin,
    LinkScanningMixin,
    SegmentTreeMixin,
)
from marksome.parsing.matches import Match
from marksome.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    LinkScanningMixin,
    DelimiterScanningMixin,
    EmphasisMixin,
    SegmentTreeMixin,
):
    """Inline markup parser.

    Usage:
            >>> Parser("foo *bar*").parse()
            [Text(content='foo '), Emphasis(children=(Text(content='bar'),))]

    Parsing never fails: markup that cannot be matched is kept as literal
    text.

    Thread Safety:
        Parser instances are cheap and single-use. Create one per parse
        operation. The resulting segments are immutable and thread-safe.

    """

    __slots__ = ("_source",)

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Args:
            source: Text with inline markup
        """
        self._source = source

    def parse(self) -> list[Segment]:
        """Parse source into top-level segments.

        Returns:
            Ordered list of segments. Empty for empty input.
        """
        links = self._scan_reference_links()
        blocks = self._scan_delimiters(links)

        matches: list[Match] = list(links)
        for delimiters in blocks:
            if delimiters:
                matches.extend(self._process_emphasis(delimiters))

        logger.debug(
            "Matched %d reference links and %d inline styles in %d chars",
            len(links),
            len(matches) - len(links),
            len(self._source),
        )
        return self._build_segments(matches)


def parse(source: str) -> list[Segment]:
    """Parse inline markup into a segment tree.

    Args:
        source: Text with ``*``/``_`` emphasis, reference links and escapes

    Returns:
        Ordered list of top-level segments

    Example:
        >>> parse("[foo][bar]")
        [ReferenceLink(children=(Text(content='foo'),), reference='bar')]
    """
    return Parser(source).parse()
