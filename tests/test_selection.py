"""Tests for selection shape inference."""

from __future__ import annotations

import pytest

from document_tables import TableCell, TableSelectionRange, infer_selection_range
from document_tables.config import ONENOTE_NAMESPACE as NS
from document_tables.coordinates import parse_coordinates
from document_tables.utils.exceptions import ErrorCode, SelectionInvariantError


def _cells(*coordinates: str) -> list[TableCell]:
    cells = []
    for coord in coordinates:
        col_num, row_num = parse_coordinates(coord)
        cells.append(TableCell(NS, row_num, col_num))
    return cells


class TestInferSelectionRange:
    """Tests for infer_selection_range."""

    def test_empty(self) -> None:
        assert infer_selection_range([]) is None

    def test_single(self) -> None:
        assert infer_selection_range(_cells("B2")) == TableSelectionRange.SINGLE

    def test_one_column_many_rows(self) -> None:
        result = infer_selection_range(_cells("A1", "A2", "A3"))
        assert result == TableSelectionRange.ROWS

    def test_one_row_many_columns(self) -> None:
        result = infer_selection_range(_cells("A1", "B1", "C1"))
        assert result == TableSelectionRange.COLUMNS

    def test_block(self) -> None:
        result = infer_selection_range(_cells("A1", "B1", "A2", "B2"))
        assert result == TableSelectionRange.RECTANGULAR

    def test_ragged_selection_is_rectangular(self) -> None:
        result = infer_selection_range(_cells("B1", "C1", "B2"))
        assert result == TableSelectionRange.RECTANGULAR

    def test_two_adjacent_cells_in_row(self) -> None:
        result = infer_selection_range(_cells("C4", "D4"))
        assert result == TableSelectionRange.COLUMNS

    def test_accepts_generator(self) -> None:
        cells = _cells("A1", "A2")
        result = infer_selection_range(cell for cell in cells)
        assert result == TableSelectionRange.ROWS

    def test_duplicate_cells_raise(self) -> None:
        cell = _cells("B2")[0]
        with pytest.raises(SelectionInvariantError) as exc_info:
            infer_selection_range([cell, cell])

        error = exc_info.value
        assert error.error_code == ErrorCode.SELECTION_INVARIANT_VIOLATED
        assert error.cell_count == 2
        assert error.coordinates == ["B2", "B2"]
