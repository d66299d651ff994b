"""Editable model of a table embedded in a page document.

The table owns its column definitions and rows as plain Python objects and
only touches XML at the edges: :meth:`Table.from_element` /
:meth:`Table.from_xml` on the way in, :meth:`Table.to_element` /
:meth:`Table.to_xml` on the way out. Serialized output always places the
``Columns`` container first, followed by the rows in list order.
"""

from __future__ import annotations

import math
from collections.abc import Iterator

import pandas as pd
from lxml import etree

from document_tables.cell import TableCell
from document_tables.config import settings
from document_tables.coordinates import column_letters
from document_tables.models import ColumnDefinition, SelectedCells
from document_tables.row import TableRow
from document_tables.selection import infer_selection_range
from document_tables.utils.exceptions import (
    ErrorCode,
    InvalidColumnError,
    MalformedTableError,
)
from document_tables.utils.logging import LogContext, get_logger
from document_tables.xml_utils import (
    child_elements,
    format_bool,
    format_width,
    local_name,
    make_element,
    namespace_of,
    parse_bool,
    parse_width,
    parse_xml,
    qname,
    sub_element,
    to_xml_string,
)

logger = get_logger(__name__)

BORDERS_VISIBLE_ATTR = "bordersVisible"
HAS_HEADER_ROW_ATTR = "hasHeaderRow"


class Table:
    """A grid of rows and columns with consistent cell counts.

    Every row always holds exactly one cell per column: adding a column
    appends a blank cell to each existing row, and new rows are created with
    one cell per current column.

    Example:
        table = Table(rows=2, cols=3)
        table.add_column(2.5, locked=True)
        table.get_cell("D2").text = "total"
        xml = table.to_xml()
    """

    def __init__(
        self,
        namespace: str | None = None,
        rows: int = 0,
        cols: int = 0,
    ) -> None:
        """Create an empty table, optionally pre-populated.

        Args:
            namespace: Namespace URI of the table elements. Defaults to the
                configured document namespace.
            rows: Number of blank rows to add.
            cols: Number of unlocked columns to add before any row.
        """
        self._namespace = settings.namespace if namespace is None else namespace
        self._nsmap: dict[str | None, str] | None = (
            {settings.namespace_prefix: self._namespace} if self._namespace else None
        )
        self._attributes: dict[str, str] = {}
        self._columns: list[ColumnDefinition] = []
        self._rows: list[TableRow] = []

        for _ in range(cols):
            self.add_column(settings.default_column_width)
        for _ in range(rows):
            self.add_row()

    # ------------------------------------------------------------------ #
    # Parsing
    # ------------------------------------------------------------------ #

    @classmethod
    def from_element(cls, element: etree._Element) -> Table:
        """Rebuild a table from an existing ``Table`` element.

        Rows are numbered 1..N by position. The element itself is not
        modified or retained.

        Raises:
            MalformedTableError: If the element is not a table, has no
                ``Columns`` container, or a row's cell count differs from
                the column count.
        """
        if local_name(element) != "Table":
            raise MalformedTableError(
                f"Expected a Table element, got {local_name(element)}",
                error_code=ErrorCode.UNEXPECTED_ELEMENT,
                element=local_name(element),
            )

        namespace = namespace_of(element)
        table = cls(namespace)
        table._nsmap = dict(element.nsmap) or None
        table._attributes = dict(element.attrib)

        with LogContext(table_id=table._attributes.get("objectID")):
            columns = element.find(qname(namespace, "Columns"))
            if columns is None:
                logger.error("Table has no Columns container")
                raise MalformedTableError(
                    "Table has no Columns container",
                    error_code=ErrorCode.MISSING_COLUMNS,
                    element="Table",
                )

            for position, column in enumerate(
                child_elements(columns, namespace, "Column")
            ):
                table._columns.append(cls._parse_column(column, position))

            for row_num, row_element in enumerate(
                child_elements(element, namespace, "Row"), start=1
            ):
                row = TableRow.from_element(row_element, row_num)
                if len(row) != len(table._columns):
                    raise MalformedTableError(
                        f"Row {row_num} has {len(row)} cells but the table "
                        f"defines {len(table._columns)} columns",
                        error_code=ErrorCode.CELL_COUNT_MISMATCH,
                        element="Row",
                        row_num=row_num,
                    )
                table._rows.append(row)

            logger.debug(
                "Parsed table",
                columns=len(table._columns),
                rows=len(table._rows),
            )
        return table

    @classmethod
    def from_xml(cls, text: str | bytes) -> Table:
        """Parse a serialized ``Table`` element."""
        return cls.from_element(parse_xml(text))

    @staticmethod
    def _parse_column(column: etree._Element, position: int) -> ColumnDefinition:
        index = column.get("index")
        if index is not None and index != str(position):
            logger.warning(
                "Column index does not match its position, renumbering",
                index=index,
                position=position,
            )
        try:
            width = parse_width(column.get("width"))
        except ValueError as e:
            raise MalformedTableError(
                f"Column {position} has an invalid width: {column.get('width')!r}",
                element="Column",
            ) from e
        return ColumnDefinition(
            index=position,
            width=width,
            is_locked=parse_bool(column.get("isLocked")),
        )

    # ------------------------------------------------------------------ #
    # Properties
    # ------------------------------------------------------------------ #

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def borders_visible(self) -> bool:
        return parse_bool(self._attributes.get(BORDERS_VISIBLE_ATTR))

    @borders_visible.setter
    def borders_visible(self, value: bool) -> None:
        self._attributes[BORDERS_VISIBLE_ATTR] = format_bool(value)

    @property
    def has_header_row(self) -> bool:
        return parse_bool(self._attributes.get(HAS_HEADER_ROW_ATTR))

    @has_header_row.setter
    def has_header_row(self, value: bool) -> None:
        self._attributes[HAS_HEADER_ROW_ATTR] = format_bool(value)

    @property
    def columns(self) -> tuple[ColumnDefinition, ...]:
        """Copies of the column definitions, in index order."""
        return tuple(column.model_copy() for column in self._columns)

    @property
    def rows(self) -> tuple[TableRow, ...]:
        return tuple(self._rows)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __getitem__(self, index: int) -> TableRow:
        """Row at a 0-based position."""
        return self._rows[index]

    def iter_cells(self) -> Iterator[TableCell]:
        """All cells in row-major order."""
        for row in self._rows:
            yield from row

    # ------------------------------------------------------------------ #
    # Structural edits
    # ------------------------------------------------------------------ #

    def add_column(self, width: float, locked: bool = False) -> ColumnDefinition:
        """Add a column definition and a blank cell to every existing row.

        The new cells are built for all rows before any of them is attached,
        so a failure leaves the table unchanged.

        Args:
            width: Column width.
            locked: Whether the column width is locked.

        Returns:
            A copy of the new column definition.

        Raises:
            InvalidColumnError: If width is negative or not finite.
        """
        formatted = self._check_width(width, len(self._columns))
        column = ColumnDefinition(
            index=len(self._columns), width=width, is_locked=locked
        )
        pending = [(row, row.new_cell()) for row in self._rows]

        self._columns.append(column)
        for row, cell in pending:
            row.append_cell(cell)

        logger.debug(
            "Added column",
            index=column.index,
            width=formatted,
            locked=locked,
            rows_extended=len(pending),
        )
        return column.model_copy()

    def add_row(self) -> TableRow:
        """Append a blank row with one cell per column.

        Returns:
            The new row, so the caller can fill in its cells.
        """
        row = TableRow.blank(self._namespace, len(self._rows) + 1, len(self._columns))
        self._rows.append(row)
        logger.debug("Added row", row_num=row.row_num, cells=len(row))
        return row

    def set_column_width(self, index: int, width: float) -> None:
        """Set a column's width and lock it.

        An index outside ``0..column_count-1`` is ignored.

        Raises:
            InvalidColumnError: If width is negative or not finite.
        """
        if not 0 <= index < len(self._columns):
            logger.debug(
                "Ignoring width change for missing column",
                index=index,
                column_count=len(self._columns),
            )
            return

        self._check_width(width, index)
        column = self._columns[index]
        column.width = width
        column.is_locked = True

    @staticmethod
    def _check_width(width: float, index: int) -> str:
        """Validate a width and return its serialized form."""
        if not math.isfinite(width) or width < 0:
            raise InvalidColumnError(
                f"Column width must be a finite number >= 0, got {width!r}",
                index=index,
            )
        try:
            return format_width(width)
        except ValueError as e:
            raise InvalidColumnError(
                f"Column width cannot be serialized: {width!r}", index=index
            ) from e

    # ------------------------------------------------------------------ #
    # Lookup and selection
    # ------------------------------------------------------------------ #

    def get_cell(self, coordinates: str) -> TableCell | None:
        """Find a cell by its coordinates, e.g. ``"B3"``.

        Returns:
            The first matching cell in row-major order, or None.
        """
        for cell in self.iter_cells():
            if cell.coordinates == coordinates:
                return cell
        return None

    def get_selected_cells(self) -> SelectedCells:
        """Collect partially or fully selected cells and infer their shape."""
        cells = [cell for cell in self.iter_cells() if cell.selected.is_selected]
        return SelectedCells(cells=cells, range=infer_selection_range(cells))

    # ------------------------------------------------------------------ #
    # Output
    # ------------------------------------------------------------------ #

    def to_element(self) -> etree._Element:
        """Build a fresh ``Table`` element for the current state."""
        root = make_element(self._namespace, "Table", self._attributes, self._nsmap)
        columns = sub_element(root, self._namespace, "Columns")
        for column in self._columns:
            attrib = {
                "index": str(column.index),
                "width": format_width(column.width),
            }
            if column.is_locked:
                attrib["isLocked"] = "true"
            sub_element(columns, self._namespace, "Column", attrib)

        for row in self._rows:
            root.append(row.to_element())
        return root

    def to_xml(self, pretty_print: bool = False) -> str:
        return to_xml_string(self.to_element(), pretty_print=pretty_print)

    def to_dataframe(self) -> pd.DataFrame:
        """Cell text as a DataFrame indexed by row number, columns by letter."""
        return pd.DataFrame(
            [[cell.text for cell in row] for row in self._rows],
            index=pd.Index([row.row_num for row in self._rows], name="row"),
            columns=[column_letters(column.index) for column in self._columns],
            dtype=object,
        )

    def __repr__(self) -> str:
        return f"Table(rows={len(self._rows)}, columns={len(self._columns)})"
