"""Document Tables - editable model of tables embedded in page documents."""

from document_tables.cell import TableCell
from document_tables.models import (
    ColumnDefinition,
    SelectedCells,
    Selection,
    TableSelectionRange,
)
from document_tables.row import TableRow
from document_tables.selection import infer_selection_range
from document_tables.table import Table

__all__ = [
    "ColumnDefinition",
    "SelectedCells",
    "Selection",
    "Table",
    "TableCell",
    "TableRow",
    "TableSelectionRange",
    "infer_selection_range",
]
__version__ = "0.1.0"
