"""Typed segment nodes for Marksome.

All segments are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: ``match`` statements work naturally

Segment Hierarchy:
Segment
├── Text
├── Strong
├── Emphasis
└── ReferenceLink

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text run.

    Escapes of the markup characters have already been resolved.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Strong:
    """Strong (bold) text.

    Markup: **text** or __text__
    HTML: <strong>text</strong>

    """

    children: tuple[Segment, ...]


@dataclass(frozen=True, slots=True)
class Emphasis:
    """Emphasized (italic) text.

    Markup: *text* or _text_
    HTML: <em>text</em>

    """

    children: tuple[Segment, ...]


@dataclass(frozen=True, slots=True)
class ReferenceLink:
    """Reference link.

    Markup: [text][reference], [text][] or [reference]

    The reference key is kept raw; resolving it to a target is left to the
    renderer's lookup table.

    """

    children: tuple[Segment, ...]
    reference: str


type Segment = Text | Strong | Emphasis | ReferenceLink

# Segments that carry nested children
type Container = Strong | Emphasis | ReferenceLink


__all__ = [
    "Container",
    "Emphasis",
    "ReferenceLink",
    "Segment",
    "Strong",
    "Text",
]
