"""Text extraction helpers for segment trees.

Both helpers walk the tree with an explicit stack and are safe on
arbitrarily deep trees.
"""

from collections.abc import Iterator, Sequence

from marksome.nodes import Segment, Text


def walk(segments: Sequence[Segment]) -> Iterator[Segment]:
    """Yield every segment depth-first, in document order.

    Example:
        >>> [type(s).__name__ for s in walk(parse("*a **b***"))]
        ['Emphasis', 'Text', 'Strong', 'Text']
    """
    stack: list[Segment] = list(reversed(segments))
    while stack:
        segment = stack.pop()
        yield segment
        if not isinstance(segment, Text):
            stack.extend(reversed(segment.children))


def plain_text(segments: Sequence[Segment]) -> str:
    """Concatenate all literal text, dropping markup.

    Example:
        >>> plain_text(parse("foo *bar* [baz][1]"))
        'foo bar baz'
    """
    return "".join(s.content for s in walk(segments) if isinstance(s, Text))
