"""Reference-link scanning for Marksome.

Recognizes three forms, tried in this order at every unescaped ``[``:

- full: ``[text][ref]``, the shortest non-empty ``text`` followed by ``][``
  and a valid reference label
- collapsed: ``[text][]``, the reference key is the raw ``text``
- shortcut: ``[ref]``, the label doubles as the displayed text

A reference label is non-empty, ends at the first unescaped ``]`` and
contains no unescaped ``[``; it may span lines. Link text stays on one line
and may contain escaped brackets and unbalanced unescaped ones. Escaped
brackets never delimit anything, so
``\\[foo][bar]`` and ``[foo\\][bar]`` both fall back to a shortcut link
``[bar]`` preceded by literal text.

Links never nest: scanning resumes after the end of each accepted link.

"""

from bisect import bisect_left

from marksome.parsing.charsets import LINE_BREAKS
from marksome.parsing.escape import is_escaped
from marksome.parsing.matches import ReferenceLinkMatch


class LinkScanningMixin:
    """Mixin for reference-link scanning.

    Required Host Attributes:
        - _source: str

    """

    _source: str

    def _scan_reference_links(self) -> list[ReferenceLinkMatch]:
        """Find all reference links, ordered by start offset.

        Each accepted link defines a block (its index in the returned list)
        whose text is scanned for emphasis independently.

        Returns:
            Non-overlapping link matches in source order.
        """
        text = self._source
        if "[" not in text:
            return []

        tails = self._scan_full_link_tails()
        tail_closes = [close for close, _ in tails]
        line_breaks = [i for i, char in enumerate(text) if char in LINE_BREAKS]

        links: list[ReferenceLinkMatch] = []
        pos = 0
        while True:
            start = _find_unescaped(text, "[", pos)
            if start == -1:
                break

            link = self._try_full_link(start, tails, tail_closes, line_breaks)
            if link is None:
                link = self._try_shortcut_link(start)

            if link is None:
                pos = start + 1
            else:
                links.append(link)
                pos = link.end

        return links

    def _scan_full_link_tails(self) -> list[tuple[int, int]]:
        """Collect every ``][label]`` tail that could end a full link.

        Label validity does not depend on where the link text starts, so the
        tails are computed once per parse.

        Returns:
            (close, label_end) pairs ordered by ``close``, where ``close`` is
            the unescaped ``]`` ending the link text and ``label_end`` the
            ``]`` ending the reference label.
        """
        text = self._source
        tails: list[tuple[int, int]] = []
        close = text.find("][")
        while close != -1:
            if not is_escaped(text, close):
                label_end = _scan_label(text, close + 2)
                if label_end is not None:
                    tails.append((close, label_end))
            close = text.find("][", close + 1)
        return tails

    def _try_full_link(
        self,
        start: int,
        tails: list[tuple[int, int]],
        tail_closes: list[int],
        line_breaks: list[int],
    ) -> ReferenceLinkMatch | None:
        """Match ``[text][ref]`` or ``[text][]`` opening at ``start``."""
        # Link text must be non-empty
        i = bisect_left(tail_closes, start + 2)
        if i == len(tails):
            return None

        text = self._source
        close, label_end = tails[i]
        inner_start = start + 1

        # Link text cannot cross a line break; later tails are further away
        j = bisect_left(line_breaks, inner_start)
        if j < len(line_breaks) and line_breaks[j] < close:
            return None

        if label_end == close + 2:
            reference = text[inner_start:close]
        else:
            reference = text[close + 2 : label_end]

        return ReferenceLinkMatch(
            start=start,
            end=label_end + 1,
            inner_start=inner_start,
            inner_end=close,
            reference=reference,
        )

    def _try_shortcut_link(self, start: int) -> ReferenceLinkMatch | None:
        """Match ``[ref]`` opening at ``start``."""
        text = self._source
        inner_start = start + 1
        label_end = _scan_label(text, inner_start)
        if label_end is None or label_end == inner_start:
            return None

        return ReferenceLinkMatch(
            start=start,
            end=label_end + 1,
            inner_start=inner_start,
            inner_end=label_end,
            reference=text[inner_start:label_end],
        )


def _find_unescaped(text: str, char: str, pos: int) -> int:
    """Find the next occurrence of ``char`` not preceded by an escape."""
    index = text.find(char, pos)
    while index != -1 and is_escaped(text, index):
        index = text.find(char, index + 1)
    return index


def _scan_label(text: str, pos: int) -> int | None:
    """Scan a reference label starting right after its ``[``.

    Returns:
        Offset of the closing ``]`` (``pos`` itself for an empty label), or
        None if an unescaped ``[`` or the end of text comes first.
    """
    length = len(text)
    i = pos
    while i < length:
        char = text[i]
        if char == "\\":
            i += 2
            continue
        if char == "]":
            return i
        if char == "[":
            return None
        i += 1
    return None
