"""Segment serialization: plain-data and JSON round-trip.

The plain-data shape uses strings for text and ``type``-tagged dicts for
containers, which is convenient for fixtures and for handing segments to
non-Python consumers:

    ["foo ", {"type": "emphasis", "content": ["bar"]}]
    [{"type": "reference-link", "content": ["foo"], "reference": "bar"}]

Example:
    from marksome import parse
    from marksome.serialization import to_json, from_json

    segments = parse("**Hello** [World][1]")
    assert from_json(to_json(segments)) == segments

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from collections.abc import Sequence
from typing import Any

from marksome.nodes import Emphasis, ReferenceLink, Segment, Strong, Text

type SegmentData = str | dict[str, Any]

_STYLE_TYPES: dict[str, type[Strong] | type[Emphasis]] = {
    "strong": Strong,
    "emphasis": Emphasis,
}


def to_data(segments: Sequence[Segment]) -> list[SegmentData]:
    """Convert segments to JSON-compatible plain data.

    Args:
        segments: Segments as returned by ``parse``.

    Returns:
        List of strings (text) and dicts (containers).

    """
    return [_segment_to_data(segment) for segment in segments]


def _segment_to_data(segment: Segment) -> SegmentData:
    match segment:
        case Text(content=content):
            return content
        case Strong(children=children):
            return {"type": "strong", "content": to_data(children)}
        case Emphasis(children=children):
            return {"type": "emphasis", "content": to_data(children)}
        case ReferenceLink(children=children, reference=reference):
            return {
                "type": "reference-link",
                "content": to_data(children),
                "reference": reference,
            }
    msg = f"Cannot serialize {type(segment).__name__}"
    raise ValueError(msg)


def from_data(data: Sequence[SegmentData]) -> list[Segment]:
    """Reconstruct segments from plain data.

    Args:
        data: List as produced by ``to_data``.

    Returns:
        Typed segments (frozen dataclasses).

    Raises:
        ValueError: If an item is neither a string nor a known ``type`` dict.

    """
    return [_segment_from_data(item) for item in data]


def _segment_from_data(item: SegmentData) -> Segment:
    if isinstance(item, str):
        return Text(item)
    if not isinstance(item, dict):
        msg = f"Expected str or dict, got {type(item).__name__}"
        raise ValueError(msg)

    type_name = item.get("type")
    if type_name is None:
        msg = "Missing 'type' field in serialized segment"
        raise ValueError(msg)

    children = tuple(from_data(item.get("content", [])))

    if type_name == "reference-link":
        reference = item.get("reference")
        if not isinstance(reference, str):
            msg = "Reference link is missing its 'reference' field"
            raise ValueError(msg)
        return ReferenceLink(children=children, reference=reference)

    style_cls = _STYLE_TYPES.get(type_name)
    if style_cls is None:
        msg = f"Unknown segment type: {type_name!r}"
        raise ValueError(msg)
    return style_cls(children=children)


def to_json(segments: Sequence[Segment], *, indent: int | None = None) -> str:
    """Serialize segments to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        segments: Segments to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_data(segments), sort_keys=True, indent=indent)


def from_json(data: str) -> list[Segment]:
    """Deserialize segments from a JSON string.

    Raises:
        ValueError: If the JSON is not a list of serialized segments.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected list, got {type(raw).__name__}"
        raise ValueError(msg)
    return from_data(raw)
