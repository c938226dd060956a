"""Tests for marksome.serialization: plain-data and JSON round-trip."""

import json

import pytest

from marksome import parse
from marksome.nodes import Emphasis, ReferenceLink, Strong, Text
from marksome.serialization import from_data, from_json, to_data, to_json


class TestToData:
    def test_text_is_plain_string(self) -> None:
        assert to_data([Text("foo")]) == ["foo"]

    def test_containers(self) -> None:
        segments = parse("**bold** _it_ [text][ref]")
        assert to_data(segments) == [
            {"type": "strong", "content": ["bold"]},
            " ",
            {"type": "emphasis", "content": ["it"]},
            " ",
            {"type": "reference-link", "content": ["text"], "reference": "ref"},
        ]

    def test_nested(self) -> None:
        assert to_data(parse("*a **b***")) == [
            {"type": "emphasis", "content": ["a ", {"type": "strong", "content": ["b"]}]},
        ]

    def test_empty(self) -> None:
        assert to_data([]) == []


class TestFromData:
    def test_round_trip(self) -> None:
        segments = parse("Some *nested **markup** with* [a *link*][1] and \\*escapes\\*")
        assert from_data(to_data(segments)) == segments

    def test_builds_frozen_nodes(self) -> None:
        data = [{"type": "reference-link", "content": [{"type": "strong", "content": ["x"]}], "reference": "r"}]
        assert from_data(data) == [ReferenceLink((Strong((Text("x"),)),), "r")]

    def test_missing_content_means_no_children(self) -> None:
        assert from_data([{"type": "emphasis"}]) == [Emphasis(())]

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ([{"type": "code", "content": []}], "Unknown segment type"),
            ([{"content": ["x"]}], "Missing 'type'"),
            ([{"type": "reference-link", "content": ["x"]}], "missing its 'reference'"),
            ([42], "Expected str or dict"),
        ],
        ids=["unknown-type", "missing-type", "missing-reference", "wrong-item"],
    )
    def test_invalid_data(self, data: list, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            from_data(data)


class TestJson:
    def test_round_trip(self) -> None:
        segments = parse("**Hello** [World][1]")
        assert from_json(to_json(segments)) == segments

    def test_keys_are_sorted(self) -> None:
        raw = to_json(parse("[x][y]"))
        assert raw == '[{"content": ["x"], "reference": "y", "type": "reference-link"}]'

    def test_indent(self) -> None:
        raw = to_json(parse("*a*"), indent=2)
        assert "\n" in raw
        assert json.loads(raw) == [{"type": "emphasis", "content": ["a"]}]

    def test_from_json_requires_list(self) -> None:
        with pytest.raises(ValueError, match="Expected list"):
            from_json('{"type": "emphasis"}')
