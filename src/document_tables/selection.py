"""Classification of a set of selected cells into a selection shape."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from document_tables.models import TableSelectionRange
from document_tables.utils.exceptions import SelectionInvariantError
from document_tables.utils.logging import get_logger

if TYPE_CHECKING:
    from document_tables.cell import TableCell

logger = get_logger(__name__)

# Row and column numbers are never negative
_MULTI = -1


def infer_selection_range(
    cells: Iterable[TableCell],
) -> TableSelectionRange | None:
    """Infer the shape formed by the selected cells.

    The cells must be in row-major order: every selected cell of row 1
    before any of row 2. A selection spanning several columns of one row is
    reported as COLUMNS, several rows of one column as ROWS.

    Args:
        cells: Selected cells, row-major.

    Returns:
        The selection shape, or None when nothing is selected.

    Raises:
        SelectionInvariantError: If more than one cell shares a single row
            and column, which means duplicate coordinates were supplied.
    """
    cells = list(cells)
    if not cells:
        return None
    if len(cells) == 1:
        return TableSelectionRange.SINGLE

    first_col: int | None = None
    first_row: int | None = None

    for cell in cells:
        if first_col is None:
            first_col = cell.col_num
        elif first_col != _MULTI and first_col != cell.col_num:
            first_col = _MULTI

        if first_row is None:
            first_row = cell.row_num
        elif first_row != _MULTI and first_row != cell.row_num:
            first_row = _MULTI

        if first_col == _MULTI and first_row == _MULTI:
            break

    if first_col == _MULTI and first_row == _MULTI:
        return TableSelectionRange.RECTANGULAR
    if first_col == _MULTI:
        return TableSelectionRange.COLUMNS
    if first_row == _MULTI:
        return TableSelectionRange.ROWS

    coordinates = [cell.coordinates for cell in cells]
    logger.error("Duplicate cells in selection", coordinates=coordinates)
    raise SelectionInvariantError(len(cells), coordinates)
