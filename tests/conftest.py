from __future__ import annotations

import pytest

from document_tables import Table
from document_tables.config import ONENOTE_NAMESPACE

NS = ONENOTE_NAMESPACE


@pytest.fixture
def table_3x3() -> Table:
    """Three rows by three columns, cells filled with their coordinates."""
    table = Table(NS, rows=3, cols=3)
    for cell in table.iter_cells():
        cell.text = cell.coordinates
    return table


@pytest.fixture
def page_table_xml() -> str:
    """A table as written by the host application, with two rows."""
    return f"""\
<one:Table xmlns:one="{NS}" objectID="{{T1}}{{1}}" bordersVisible="true" hasHeaderRow="true">
  <one:Columns>
    <one:Column index="0" width="37.5"/>
    <one:Column index="1" width="120.0" isLocked="true"/>
  </one:Columns>
  <one:Row objectID="{{R1}}{{1}}">
    <one:Cell shadingColor="#DEEBF6">
      <one:OEChildren><one:OE><one:T><![CDATA[Name]]></one:T></one:OE></one:OEChildren>
    </one:Cell>
    <one:Cell selected="partial">
      <one:OEChildren><one:OE><one:T><![CDATA[Amount]]></one:T></one:OE></one:OEChildren>
    </one:Cell>
  </one:Row>
  <one:Row objectID="{{R2}}{{1}}">
    <one:Cell>
      <one:OEChildren><one:OE><one:T><![CDATA[Alice]]></one:T></one:OE></one:OEChildren>
    </one:Cell>
    <one:Cell selected="all">
      <one:OEChildren>
        <one:OE><one:T><![CDATA[123]]></one:T></one:OE>
        <one:OE><one:T><![CDATA[.45]]></one:T></one:OE>
      </one:OEChildren>
    </one:Cell>
  </one:Row>
</one:Table>
"""
