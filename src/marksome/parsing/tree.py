"""Segment tree construction from flat match lists.

Matches of all blocks are merged, sorted by start offset and nested into
the final segment tree. Nesting uses an explicit frame stack, so arbitrarily
deep markup (thousands of nested ``*``) never grows the Python call stack.

Offsets stay absolute: a frame's content is the source slice between its
match's inner span, which is exactly the inner text the nested matches
were found in.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from operator import attrgetter

from marksome.nodes import Emphasis, ReferenceLink, Segment, Strong, Text
from marksome.parsing.escape import unescape
from marksome.parsing.matches import InlineStyleMatch, Match, ReferenceLinkMatch


@dataclass(slots=True)
class _Frame:
    """An open match whose children are still being collected."""

    match: Match | None
    # Where this frame's literal content stops
    inner_end: int
    # Where the parent's literal content resumes once this frame closes
    end: int
    children: list[Segment] = field(default_factory=list)


class SegmentTreeMixin:
    """Mixin for nesting matches into segments.

    Required Host Attributes:
        - _source: str

    """

    _source: str

    def _build_segments(self, matches: list[Match]) -> list[Segment]:
        """Nest matches into a segment tree.

        Args:
            matches: Reference-link and inline style matches of every block,
                in any order. Matches never partially overlap.

        Returns:
            Top-level segments.
        """
        text = self._source
        root = _Frame(match=None, inner_end=len(text), end=len(text))
        stack = [root]
        cursor = 0

        for match in sorted(matches, key=attrgetter("start")):
            while len(stack) > 1 and match.start >= stack[-1].inner_end:
                cursor = self._close_frame(stack, cursor)

            self._append_text(stack[-1].children, cursor, match.start)
            stack.append(_Frame(match=match, inner_end=match.inner_end, end=match.end))
            cursor = match.inner_start

        while len(stack) > 1:
            cursor = self._close_frame(stack, cursor)

        self._append_text(root.children, cursor, len(text))
        return root.children

    def _close_frame(self, stack: list[_Frame], cursor: int) -> int:
        """Pop the innermost frame into its parent; return the new cursor."""
        frame = stack.pop()
        self._append_text(frame.children, cursor, frame.inner_end)
        stack[-1].children.append(_to_segment(frame.match, tuple(frame.children)))
        return frame.end

    def _append_text(self, children: list[Segment], start: int, end: int) -> None:
        """Append the unescaped literal slice, skipping empty text."""
        if start < end:
            content = unescape(self._source[start:end])
            if content:
                children.append(Text(content))


def _to_segment(match: Match | None, children: tuple[Segment, ...]) -> Segment:
    match match:
        case ReferenceLinkMatch(reference=reference):
            return ReferenceLink(children=children, reference=reference)
        case InlineStyleMatch(kind="strong"):
            return Strong(children=children)
        case InlineStyleMatch():
            return Emphasis(children=children)
    raise AssertionError(f"unexpected match: {match!r}")
