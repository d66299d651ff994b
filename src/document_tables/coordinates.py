"""Spreadsheet-style cell coordinates (``A1``, ``B3``, ``AA12``)."""

from __future__ import annotations

import re

from document_tables.utils.exceptions import InvalidCoordinatesError

_COORDINATES_RE = re.compile(r"^([A-Za-z]+)([1-9][0-9]*)$")


def column_letters(col_num: int) -> str:
    """Return the column letters for a 0-based column index.

    0 -> "A", 25 -> "Z", 26 -> "AA", 701 -> "ZZ", 702 -> "AAA".
    """
    if col_num < 0:
        raise ValueError(f"Column index must be >= 0, got {col_num}")

    letters = ""
    n = col_num + 1
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def column_index(letters: str) -> int:
    """Inverse of :func:`column_letters`, case-insensitive."""
    if not letters or not letters.isalpha() or not letters.isascii():
        raise ValueError(f"Invalid column letters: {letters!r}")

    n = 0
    for ch in letters.upper():
        n = n * 26 + (ord(ch) - ord("A") + 1)
    return n - 1


def format_coordinates(col_num: int, row_num: int) -> str:
    """Build the coordinate string of a cell from its 0-based column and 1-based row."""
    if row_num < 1:
        raise ValueError(f"Row number must be >= 1, got {row_num}")
    return f"{column_letters(col_num)}{row_num}"


def parse_coordinates(coordinates: str) -> tuple[int, int]:
    """Split a coordinate string into ``(col_num, row_num)``.

    Raises:
        InvalidCoordinatesError: If the string is not letters followed by a
            positive row number.
    """
    match = _COORDINATES_RE.match(coordinates.strip())
    if match is None:
        raise InvalidCoordinatesError(coordinates)
    return column_index(match.group(1)), int(match.group(2))
