"""Emphasis parsing for Marksome.

Implements the CommonMark delimiter stack algorithm for emphasis/strong,
one block at a time.
See: https://spec.commonmark.org/0.30/#emphasis-and-strong-emphasis

Thread Safety:
All state lives in locals of a single call. Safe for concurrent use.

"""

from marksome.parsing.matches import Delimiter, InlineStyleMatch, StyleKind


class EmphasisMixin:
    """Mixin for emphasis delimiter processing.

    Matches the delimiters of one block left to right against an explicit
    stack of pending openers. Openers are shortened from their inner side
    and closers from their outer side as width is consumed, so the
    innermost pair is always emitted first.

    Each closer kind remembers how deep a failed search went, so later
    closers of that kind skip openers that cannot match them and the whole
    block is matched in linear time.

    Required Host Attributes: None

    Required Host Methods: None

    """

    def _process_emphasis(self, delimiters: list[Delimiter]) -> list[InlineStyleMatch]:
        """Resolve one block's delimiters into strong/emphasis matches.

        Args:
            delimiters: Runs of a single block in source order. Consumed
                (lengths are reduced in place).

        Returns:
            Matches in emission order (not sorted).
        """
        matches: list[InlineStyleMatch] = []
        openers: list[Delimiter] = []
        # Lowest stack index worth searching per closer kind
        bottoms: dict[tuple[str, bool, int], int] = {}

        for closer in delimiters:
            if closer.can_close:
                i = len(openers) - 1
                bottom = bottoms.get(self._bottom_key(closer), 0)
                while i >= bottom:
                    opener = openers[i]
                    if opener.char != closer.char:
                        i -= 1
                        continue

                    if (opener.both or closer.both) and self._violates_rule_of_three(
                        opener.length, closer.length
                    ):
                        i -= 1
                        continue

                    width = min(opener.length, closer.length)
                    while width > 1:
                        matches.append(self._consume(opener, closer, "strong"))
                        width -= 2
                    if width:
                        matches.append(self._consume(opener, closer, "emphasis"))

                    # The opener at i changed; everything below it did not
                    bottoms = {key: min(value, i) for key, value in bottoms.items()}

                    if opener.length:
                        # Opener was wider: keep it, drop everything above
                        del openers[i + 1 :]
                        break

                    del openers[i:]
                    if not closer.length:
                        break
                    # Closer was wider: keep closing deeper in the stack
                    i -= 1
                    bottom = bottoms.get(self._bottom_key(closer), 0)
                else:
                    # No opener at or above bottom can take this closer
                    bottoms[self._bottom_key(closer)] = len(openers)

            # Unmatched width of a run that can open waits for a later closer
            if closer.length and closer.can_open:
                openers.append(closer)

        return matches

    def _bottom_key(self, closer: Delimiter) -> tuple[str, bool, int]:
        """Closers sharing this key fail against the same openers."""
        return (closer.char, closer.can_open, closer.length % 3)

    def _violates_rule_of_three(self, opener_length: int, closer_length: int) -> bool:
        """CommonMark rule 9/10 "multiple of 3" check.

        If one of the delimiters can both open and close, the sum of the
        run lengths must not be a multiple of 3 unless both lengths are.
        """
        if (opener_length + closer_length) % 3:
            return False
        return bool(opener_length % 3 or closer_length % 3)

    def _consume(
        self, opener: Delimiter, closer: Delimiter, kind: StyleKind
    ) -> InlineStyleMatch:
        """Emit one match from the innermost unconsumed markers of a pair."""
        width = 2 if kind == "strong" else 1
        inner_start = opener.index + opener.length
        inner_end = closer.index

        opener.length -= width
        closer.length -= width
        closer.index += width

        return InlineStyleMatch(
            kind=kind,
            start=inner_start - width,
            end=inner_end + width,
            inner_start=inner_start,
            inner_end=inner_end,
        )
