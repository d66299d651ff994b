"""A table row: an ordered run of cells, one per column."""

from __future__ import annotations

from collections.abc import Iterator

from lxml import etree

from document_tables.cell import TableCell
from document_tables.xml_utils import child_elements, make_element, namespace_of


class TableRow:
    """Ordered cells of one row.

    The owning table keeps the cell count equal to its column count; a row
    never adds cells on its own initiative.
    """

    def __init__(
        self,
        namespace: str,
        row_num: int,
        cells: list[TableCell] | None = None,
        attributes: dict[str, str] | None = None,
    ) -> None:
        self._namespace = namespace
        self._row_num = row_num
        self._cells = cells if cells is not None else []
        self._attributes = attributes or {}

    @classmethod
    def blank(cls, namespace: str, row_num: int, cell_count: int) -> TableRow:
        """Create a row of ``cell_count`` empty cells."""
        row = cls(namespace, row_num)
        for _ in range(cell_count):
            row._add_cell()
        return row

    @classmethod
    def from_element(cls, element: etree._Element, row_num: int) -> TableRow:
        namespace = namespace_of(element)
        cells = [
            TableCell.from_element(cell_element, row_num, col_num)
            for col_num, cell_element in enumerate(
                child_elements(element, namespace, "Cell")
            )
        ]
        return cls(namespace, row_num, cells, dict(element.attrib))

    @property
    def row_num(self) -> int:
        """1-based position of the row within its table."""
        return self._row_num

    @property
    def cells(self) -> tuple[TableCell, ...]:
        return tuple(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[TableCell]:
        return iter(self._cells)

    def __getitem__(self, col_num: int) -> TableCell:
        return self._cells[col_num]

    def new_cell(self) -> TableCell:
        """Build the blank cell that would come next, without attaching it."""
        return TableCell.blank(self._namespace, self._row_num, len(self._cells))

    def append_cell(self, cell: TableCell) -> None:
        """Attach a cell built by :meth:`new_cell`.

        Meant for :meth:`Table.add_column`, which extends every row together
        with its column list. Appending to a single row of a table leaves that
        row longer than the others.
        """
        if cell.row_num != self._row_num or cell.col_num != len(self._cells):
            raise ValueError(
                f"Cell {cell.coordinates} does not belong at the end of row {self._row_num}"
            )
        self._cells.append(cell)

    def _add_cell(self) -> TableCell:
        # Only for filling a row under construction; Table.add_column keeps
        # existing rows in step with the column list.
        cell = self.new_cell()
        self._cells.append(cell)
        return cell

    def to_element(self) -> etree._Element:
        element = make_element(self._namespace, "Row", self._attributes)
        for cell in self._cells:
            element.append(cell.to_element())
        return element

    def __repr__(self) -> str:
        return f"TableRow({self._row_num}, cells={len(self._cells)})"
