"""Value types shared by the table, row and cell entities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from document_tables.cell import TableCell


class Selection(str, Enum):
    """Selection state of a single cell as written by the host application."""

    NONE = "none"
    PARTIAL = "partial"
    ALL = "all"

    @classmethod
    def parse(cls, value: str | None) -> Selection:
        """Read a ``selected`` attribute value, treating absence as NONE."""
        if not value:
            return cls.NONE
        return cls(value)

    @property
    def is_selected(self) -> bool:
        return self is not Selection.NONE


class TableSelectionRange(str, Enum):
    """Shape formed by a set of selected cells."""

    SINGLE = "single"
    COLUMNS = "columns"
    ROWS = "rows"
    RECTANGULAR = "rectangular"


class ColumnDefinition(BaseModel):
    """Definition of one table column.

    Columns are owned by the table; rows only know how many exist.
    """

    model_config = ConfigDict(validate_assignment=True)

    index: int = Field(..., ge=0, description="0-based position of the column")
    width: float = Field(..., ge=0, description="Column width in points")
    is_locked: bool = Field(
        default=False, description="Whether the width is locked by the user"
    )


@dataclass
class SelectedCells:
    """Selected cells in row-major order and the shape they form."""

    cells: list[TableCell] = field(default_factory=list)
    range: TableSelectionRange | None = None

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[TableCell]:
        return iter(self.cells)

    @property
    def coordinates(self) -> list[str]:
        return [cell.coordinates for cell in self.cells]
