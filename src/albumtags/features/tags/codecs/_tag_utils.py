"""Tag utility helpers.

Where: src/albumtags/features/tags/codecs/_tag_utils.py
What: Pure helpers for parsing numbers, dates and artist lists out of raw tag values.
Why: Keep the per-container codecs down to field mapping.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

__all__ = [
    "ARTIST_JOIN_DELIMITER",
    "first_text",
    "format_number_pair",
    "format_release_date",
    "parse_number",
    "parse_slash_separated",
    "parse_tuple_numbers",
    "split_artists",
]

# Single-field artist lists have no agreed delimiter; these are the ones seen in the wild.
_ARTIST_DELIMITERS: Final[re.Pattern[str]] = re.compile("[\0;]")
_ARTIST_SUB_DELIMITER: Final[str] = "\\\\"

ARTIST_JOIN_DELIMITER: Final[str] = ";"


def split_artists(values: Iterable[str]) -> list[str]:
    """Split delimited artist fields into one entry per artist.

    Each value is split on NUL and ``;`` first, then every piece on a literal
    double backslash.
    """
    artists: list[str] = []
    for value in values:
        for chunk in _ARTIST_DELIMITERS.split(value):
            artists.extend(chunk.split(_ARTIST_SUB_DELIMITER))
    return artists


def first_text(values: list[str] | None) -> str | None:
    """Return the first value of a multi-value tag, if any."""
    return str(values[0]) if values else None


def parse_number(value: str | None) -> int | None:
    """Parse a plain unsigned integer tag value."""
    number, _ = parse_slash_separated(value or "")
    return number


def parse_slash_separated(value: str) -> tuple[int | None, int | None]:
    """Parse a string in 'number/total' format.

    Returns a tuple (number, total) with None for missing or non-numeric parts.
    """
    parts: list[str] = value.strip().split(sep="/") if value else []
    num: int | None = int(parts[0]) if parts and parts[0].strip().isdigit() else None
    total: int | None = int(parts[1]) if len(parts) > 1 and parts[1].strip().isdigit() else None
    return num, total


def parse_tuple_numbers(data: list[tuple[int, int]] | None) -> tuple[int | None, int | None]:
    """Return the first (number, total) tuple with zeros converted to None."""
    if data:
        first: tuple[int, int] = data[0]
        num: int | None = first[0] if first[0] != 0 else None
        total: int | None = first[1] if first[1] != 0 else None
        return num, total
    return None, None


def format_number_pair(number: int | None, total: int | None) -> str | None:
    """Render a 'number/total' value, omitting the total when unknown."""
    if number is None:
        return None
    if total is None:
        return str(number)
    return f"{number}/{total}"


def format_release_date(year: int | None, month: int | None, day: int | None) -> str | None:
    """Render ``YYYY-MM-DD`` only when all three components are known."""
    if year is None or month is None or day is None:
        return None
    return f"{year:04d}-{month:02d}-{day:02d}"
