"""Tests for coordinate helpers."""

import pytest

from document_tables.coordinates import (
    column_index,
    column_letters,
    format_coordinates,
    parse_coordinates,
)
from document_tables.utils.exceptions import InvalidCoordinatesError


@pytest.mark.parametrize(
    ("index", "letters"),
    [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (701, "ZZ"), (702, "AAA")],
)
def test_column_letters(index: int, letters: str) -> None:
    assert column_letters(index) == letters
    assert column_index(letters) == index


def test_column_index_is_case_insensitive() -> None:
    assert column_index("ab") == 27


def test_negative_column_rejected() -> None:
    with pytest.raises(ValueError):
        column_letters(-1)


def test_format_coordinates() -> None:
    assert format_coordinates(1, 3) == "B3"
    with pytest.raises(ValueError):
        format_coordinates(0, 0)


def test_parse_coordinates() -> None:
    assert parse_coordinates("B3") == (1, 3)
    assert parse_coordinates(" aa12 ") == (26, 12)


@pytest.mark.parametrize("text", ["", "3B", "B0", "B", "12", "B-1", "Ä1"])
def test_parse_invalid_coordinates(text: str) -> None:
    with pytest.raises(InvalidCoordinatesError) as exc_info:
        parse_coordinates(text)
    assert exc_info.value.coordinates == text
