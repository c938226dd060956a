"""Transient scanning records for the inline parser.

Delimiter is a mutable value record: the matcher shortens it in place as
its width is consumed. Matches are immutable once emitted.

Thread Safety:
All records are created per parse() call and never shared.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

type DelimiterChar = Literal["*", "_"]
type StyleKind = Literal["strong", "emphasis"]

# Block id of the top-level text (reference-link blocks use their list index)
TOP_LEVEL_BLOCK = -1


@dataclass(slots=True)
class Delimiter:
    """A run of ``*`` or ``_`` that can open and/or close emphasis.

    Attributes:
        char: The delimiter character.
        index: Offset of the first unconsumed character of the run.
        length: Remaining (unconsumed) width of the run.
        can_open: Whether the run can open emphasis.
        can_close: Whether the run can close emphasis.

    """

    char: DelimiterChar
    index: int
    length: int
    can_open: bool
    can_close: bool

    @property
    def both(self) -> bool:
        """Run can both open and close (relevant to the rule of 3)."""
        return self.can_open and self.can_close


@dataclass(frozen=True, slots=True)
class InlineStyleMatch:
    """A resolved strong/emphasis span.

    Attributes:
        kind: "strong" or "emphasis".
        start: Offset of the first opening marker.
        end: Offset just past the last closing marker.
        inner_start: Offset of the first content character.
        inner_end: Offset just past the last content character.

    """

    kind: StyleKind
    start: int
    end: int
    inner_start: int
    inner_end: int

    @property
    def marker_width(self) -> int:
        return self.inner_start - self.start

    def inner_text(self, text: str) -> str:
        return text[self.inner_start : self.inner_end]


@dataclass(frozen=True, slots=True)
class ReferenceLinkMatch:
    """A resolved ``[text][ref]``, ``[text][]`` or ``[ref]`` span.

    Attributes:
        start: Offset of the opening ``[``.
        end: Offset just past the final ``]``.
        inner_start: Offset of the first link-text character.
        inner_end: Offset of the ``]`` closing the link text.
        reference: Raw reference key (escapes kept).

    """

    start: int
    end: int
    inner_start: int
    inner_end: int
    reference: str

    @property
    def marker_width(self) -> int:
        return self.inner_start - self.start

    def inner_text(self, text: str) -> str:
        return text[self.inner_start : self.inner_end]


type Match = InlineStyleMatch | ReferenceLinkMatch
