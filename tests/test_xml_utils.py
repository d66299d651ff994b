"""Tests for the XML helpers."""

import sys

import pytest

from document_tables.utils.exceptions import ErrorCode, MalformedTableError
from document_tables.xml_utils import (
    format_bool,
    format_width,
    parse_bool,
    parse_width,
    parse_xml,
    qname,
)


@pytest.mark.parametrize(
    ("width", "expected"),
    [
        (1, "1.0"),
        (1.0, "1.0"),
        (1.5, "1.5"),
        (52.25, "52.25"),
        (2.345, "2.35"),
        (2.005, "2.01"),
        (10.999, "11.0"),
        (0, "0.0"),
        (0.004, "0.0"),
    ],
)
def test_format_width(width: float, expected: str) -> None:
    assert format_width(width) == expected


def test_format_width_rejects_non_finite() -> None:
    with pytest.raises(ValueError):
        format_width(float("inf"))
    with pytest.raises(ValueError):
        format_width(float("nan"))


def test_format_width_large_values() -> None:
    """Widths beyond the default decimal precision still format exactly."""
    assert format_width(1e30) == "1" + "0" * 30 + ".0"
    assert format_width(1.5e26) == "15" + "0" * 25 + ".0"
    assert format_width(sys.float_info.max).endswith(".0")


def test_parse_width() -> None:
    assert parse_width("37.5") == 37.5
    assert parse_width(None) == 0.0
    assert parse_width(" ") == 0.0
    with pytest.raises(ValueError):
        parse_width("wide")


def test_booleans() -> None:
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"
    assert parse_bool("true") is True
    assert parse_bool("True") is True
    assert parse_bool("false") is False
    assert parse_bool(None) is False
    assert parse_bool("yes") is False


def test_qname() -> None:
    assert qname("urn:x", "Row") == "{urn:x}Row"
    assert qname("", "Row") == "Row"


def test_parse_xml_rejects_garbage() -> None:
    with pytest.raises(MalformedTableError) as exc_info:
        parse_xml("<Table><Columns></Table>")
    assert exc_info.value.error_code == ErrorCode.XML_SYNTAX_ERROR
