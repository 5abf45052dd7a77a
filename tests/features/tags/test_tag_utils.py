"""Tests for the raw tag value helpers."""

from __future__ import annotations

import pytest

from albumtags.features.tags.codecs._tag_utils import (
    first_text,
    format_number_pair,
    format_release_date,
    parse_number,
    parse_slash_separated,
    parse_tuple_numbers,
    split_artists,
)


class TestSplitArtists:
    def test_single_value_is_kept(self) -> None:
        assert split_artists(["Alice"]) == ["Alice"]

    def test_splits_on_nul_and_semicolon(self) -> None:
        assert split_artists(["Alice\0Bob;Carol"]) == ["Alice", "Bob", "Carol"]

    def test_splits_on_double_backslash(self) -> None:
        assert split_artists(["Alice\\\\Bob"]) == ["Alice", "Bob"]

    def test_multiple_values_are_flattened_in_order(self) -> None:
        assert split_artists(["A;B", "C"]) == ["A", "B", "C"]


class TestNumbers:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("3/12", (3, 12)),
            ("3", (3, None)),
            ("", (None, None)),
            ("x/12", (None, 12)),
            (" 7 / 9 ", (7, 9)),
        ],
    )
    def test_parse_slash_separated(self, value: str, expected: tuple[int | None, int | None]) -> None:
        assert parse_slash_separated(value) == expected

    def test_parse_number(self) -> None:
        assert parse_number("5") == 5
        assert parse_number(None) is None
        assert parse_number("five") is None

    def test_parse_tuple_numbers_treats_zero_as_unknown(self) -> None:
        assert parse_tuple_numbers([(2, 0)]) == (2, None)
        assert parse_tuple_numbers([]) == (None, None)
        assert parse_tuple_numbers(None) == (None, None)

    def test_format_number_pair(self) -> None:
        assert format_number_pair(3, 12) == "3/12"
        assert format_number_pair(3, None) == "3"
        assert format_number_pair(None, 12) is None


class TestText:
    def test_first_text(self) -> None:
        assert first_text(["a", "b"]) == "a"
        assert first_text([]) is None
        assert first_text(None) is None

    def test_format_release_date_requires_all_parts(self) -> None:
        assert format_release_date(2020, 5, 1) == "2020-05-01"
        assert format_release_date(2020, None, None) is None
