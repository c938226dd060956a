"""Tests for delimiter-run scanning and flanking classification."""

from __future__ import annotations

import pytest

from marksome.parser import Parser
from marksome.parsing.charsets import CharClass, classify
from marksome.parsing.matches import Delimiter


def _scan(text: str) -> list[list[Delimiter]]:
    parser = Parser(text)
    return parser._scan_delimiters(parser._scan_reference_links())


def _top_level(text: str) -> list[tuple[int, int, bool, bool]]:
    return [(d.index, d.length, d.can_open, d.can_close) for d in _scan(text)[0]]


class TestClassify:
    @pytest.mark.parametrize(
        ("char", "expected"),
        [
            ("", CharClass.WHITESPACE),
            (" ", CharClass.WHITESPACE),
            ("\n", CharClass.WHITESPACE),
            ("\u00a0", CharClass.WHITESPACE),
            ("!", CharClass.PUNCTUATION),
            ("[", CharClass.PUNCTUATION),
            ("\\", CharClass.PUNCTUATION),
            ("a", CharClass.OTHER),
            ("5", CharClass.OTHER),
            ("п", CharClass.OTHER),
        ],
    )
    def test_classify(self, char: str, expected: CharClass) -> None:
        assert classify(char) is expected


class TestFlanking:
    """Open/close capability of single runs."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("*a", (0, 1, True, False)),
            ("a*", (1, 1, False, True)),
            ("a*b", (1, 1, True, True)),
            ("a_b", None),
            ("(_a", (1, 1, True, False)),
            ("a_)", (1, 1, False, True)),
            (")_(", (1, 1, True, True)),
            ("a_(", (1, 1, False, True)),
            ("a*\"", (1, 1, False, True)),
            (" * ", None),
            ("**", None),
        ],
    )
    def test_single_run(self, text: str, expected: tuple[int, int, bool, bool] | None) -> None:
        runs = _top_level(text)
        if expected is None:
            assert runs == []
        else:
            assert runs == [expected]

    def test_underscore_between_word_characters_is_inert(self) -> None:
        assert _top_level("snake_case_name") == []

    def test_runs_of_different_characters_are_separate(self) -> None:
        assert _top_level(" *_a") == [(1, 1, True, False), (2, 1, True, False)]

    def test_run_keeps_its_marker_character(self) -> None:
        assert [d.char for d in _scan(" *_a **b__")[0]] == ["*", "_", "*", "_"]


class TestEscapedRuns:
    def test_escaped_single_marker_is_dropped(self) -> None:
        assert _top_level("\\*a") == []

    def test_escaped_leading_marker_shortens_run(self) -> None:
        assert _top_level("\\***a") == [(2, 2, True, False)]

    def test_double_backslash_does_not_escape(self) -> None:
        assert _top_level("\\\\*a") == [(2, 1, True, False)]


class TestBlockAssignment:
    """Runs are partitioned by reference-link text spans."""

    def test_runs_inside_link_text_get_link_block(self) -> None:
        blocks = _scan("*a [*b*][1] c*")
        assert [d.index for d in blocks[0]] == [0, 13]
        assert [d.index for d in blocks[1]] == [4, 6]

    def test_runs_in_reference_label_are_dropped(self) -> None:
        blocks = _scan("*a [b][*] c*")
        assert [d.index for d in blocks[0]] == [0, 11]
        assert blocks[1] == []

    def test_one_block_per_link(self) -> None:
        blocks = _scan("[*a*] [_b_]")
        assert len(blocks) == 3
        assert [d.char for d in blocks[1]] == ["*", "*"]
        assert [d.char for d in blocks[2]] == ["_", "_"]
