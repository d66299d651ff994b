"""A single table cell and its page-document representation."""

from __future__ import annotations

import copy

from lxml import etree

from document_tables.coordinates import format_coordinates
from document_tables.models import Selection
from document_tables.utils.exceptions import MalformedTableError
from document_tables.xml_utils import (
    child_elements,
    local_name,
    make_element,
    namespace_of,
    qname,
    sub_element,
)

SELECTED_ATTR = "selected"
SHADING_ATTR = "shadingColor"


class TableCell:
    """One cell of a table row.

    The cell keeps its content subtree (``OEChildren``) as parsed so that
    formatting it does not understand survives a round trip. Assigning
    :attr:`text` replaces that subtree with plain paragraphs.
    """

    def __init__(
        self,
        namespace: str,
        row_num: int,
        col_num: int,
        selected: Selection = Selection.NONE,
        content: list[etree._Element] | None = None,
        attributes: dict[str, str] | None = None,
    ) -> None:
        self._namespace = namespace
        self._row_num = row_num
        self._col_num = col_num
        self._coordinates = format_coordinates(col_num, row_num)
        self.selected = selected
        self._content = content if content is not None else []
        self._attributes = attributes or {}

    @classmethod
    def blank(cls, namespace: str, row_num: int, col_num: int) -> TableCell:
        """Create an empty cell holding a single empty paragraph."""
        cell = cls(namespace, row_num, col_num)
        cell.text = ""
        return cell

    @classmethod
    def from_element(
        cls, element: etree._Element, row_num: int, col_num: int
    ) -> TableCell:
        attributes = dict(element.attrib)
        raw_selected = attributes.pop(SELECTED_ATTR, None)
        try:
            selected = Selection.parse(raw_selected)
        except ValueError as e:
            raise MalformedTableError(
                f"Cell {format_coordinates(col_num, row_num)} has an invalid "
                f"selection state: {raw_selected!r}",
                element="Cell",
                row_num=row_num,
            ) from e
        content = [copy.deepcopy(child) for child in element]
        return cls(
            namespace_of(element),
            row_num,
            col_num,
            selected=selected,
            content=content,
            attributes=attributes,
        )

    @property
    def row_num(self) -> int:
        """1-based row number."""
        return self._row_num

    @property
    def col_num(self) -> int:
        """0-based column number."""
        return self._col_num

    @property
    def coordinates(self) -> str:
        return self._coordinates

    @property
    def shading_color(self) -> str | None:
        return self._attributes.get(SHADING_ATTR)

    @shading_color.setter
    def shading_color(self, value: str | None) -> None:
        if value is None:
            self._attributes.pop(SHADING_ATTR, None)
        else:
            self._attributes[SHADING_ATTR] = value

    @property
    def text(self) -> str:
        """Plain text of the cell, one line per paragraph."""
        lines: list[str] = []
        for container in self._content:
            if local_name(container) != "OEChildren":
                continue
            for paragraph in child_elements(container, self._namespace, "OE"):
                runs = paragraph.iter(qname(self._namespace, "T"))
                lines.append("".join(run.text or "" for run in runs))
        return "\n".join(lines)

    @text.setter
    def text(self, value: str) -> None:
        container = make_element(self._namespace, "OEChildren")
        for line in value.split("\n"):
            paragraph = sub_element(container, self._namespace, "OE")
            run = sub_element(paragraph, self._namespace, "T")
            if line:
                run.text = etree.CDATA(line)
        self._content = [container]

    def to_element(self) -> etree._Element:
        element = make_element(self._namespace, "Cell", self._attributes)
        if self.selected.is_selected:
            element.set(SELECTED_ATTR, self.selected.value)
        for child in self._content:
            element.append(copy.deepcopy(child))
        return element

    def __repr__(self) -> str:
        return f"TableCell({self._coordinates!r}, selected={self.selected.value!r})"
