"""Delimiter-run scanning and flanking classification.

A single left-to-right pass finds maximal runs of ``*`` or ``_``, tracking
the parity of the preceding backslash run instead of relying on regex
lookbehind. Each run is classified per CommonMark flanking rules and
assigned to a block by a two-pointer merge with the ordered link list.

See: https://spec.commonmark.org/0.30/#left-flanking-delimiter-run

"""

from marksome.parsing.charsets import EMPHASIS_DELIMITERS, CharClass, classify
from marksome.parsing.matches import (
    TOP_LEVEL_BLOCK,
    Delimiter,
    DelimiterChar,
    ReferenceLinkMatch,
)


class DelimiterScanningMixin:
    """Mixin for delimiter-run scanning.

    Required Host Attributes:
        - _source: str

    """

    _source: str

    def _scan_delimiters(self, links: list[ReferenceLinkMatch]) -> list[list[Delimiter]]:
        """Find all delimiter runs that can open or close, grouped by block.

        Args:
            links: Reference links from ``_scan_reference_links()``.

        Returns:
            One delimiter list per block, in source order. Entry 0 is the
            top-level block; entry ``i + 1`` holds the runs inside the text
            of ``links[i]``.
        """
        text = self._source
        length = len(text)
        blocks: list[list[Delimiter]] = [[] for _ in range(len(links) + 1)]

        link_idx = 0
        escaped = False
        i = 0
        while i < length:
            char = text[i]
            if char == "\\":
                escaped = not escaped
                i += 1
                continue
            if char not in EMPHASIS_DELIMITERS:
                escaped = False
                i += 1
                continue

            index = i
            while i < length and text[i] == char:
                i += 1

            # An escaped leading marker is literal, the rest of the run is not
            if escaped:
                index += 1
                escaped = False
            if index == i:
                continue

            marker: DelimiterChar = "*" if char == "*" else "_"
            delimiter = self._classify_run(marker, index, i)
            if delimiter is None:
                continue

            # Advance past links that end before this run
            while link_idx < len(links) and links[link_idx].end <= index:
                link_idx += 1

            block = TOP_LEVEL_BLOCK
            if link_idx < len(links) and links[link_idx].start <= index:
                if index > links[link_idx].inner_end:
                    # Inside the ][ref] tail, not renderable content
                    continue
                block = link_idx

            blocks[block + 1].append(delimiter)

        return blocks

    def _classify_run(self, char: DelimiterChar, start: int, end: int) -> Delimiter | None:
        """Build a Delimiter for ``text[start:end]``, or None if it can do nothing."""
        text = self._source
        before = classify(text[start - 1] if start > 0 else "")
        after = classify(text[end] if end < len(text) else "")

        left = self._is_left_flanking(before, after)
        right = self._is_right_flanking(before, after)

        if char == "*":
            can_open = left
            can_close = right
        else:
            # Intraword underscores never open or close
            can_open = left and (not right or before is CharClass.PUNCTUATION)
            can_close = right and (not left or after is CharClass.PUNCTUATION)

        if not can_open and not can_close:
            return None

        return Delimiter(
            char=char,
            index=start,
            length=end - start,
            can_open=can_open,
            can_close=can_close,
        )

    def _is_left_flanking(self, before: CharClass, after: CharClass) -> bool:
        """Check if delimiter run is left-flanking.

        Left-flanking: followed by a word character, or followed by
        punctuation and preceded by whitespace or punctuation.
        """
        if after is CharClass.OTHER:
            return True
        return after is CharClass.PUNCTUATION and before is not CharClass.OTHER

    def _is_right_flanking(self, before: CharClass, after: CharClass) -> bool:
        """Check if delimiter run is right-flanking.

        Right-flanking: preceded by a word character, or preceded by
        punctuation and followed by whitespace or punctuation.
        """
        if before is CharClass.OTHER:
            return True
        return before is CharClass.PUNCTUATION and after is not CharClass.OTHER
