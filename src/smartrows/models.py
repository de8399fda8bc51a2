"""Pydantic models for the API's JSON payloads.

Field names follow Python conventions; the camelCase wire names are aliases.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from smartrows.identifiers import ColumnId, RowId, SheetId
from smartrows.values import EMPTY, CellValue

T = TypeVar("T")


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Cell(_Payload):
    """The value at one (row, column) intersection."""

    column_id: ColumnId = Field(alias="columnId")
    value: CellValue = Field(default=EMPTY)


class Row(_Payload):
    """A row and its cells.

    A row may be partial, listing only the cells relevant to an operation.
    A row must not hold two cells for the same column.
    """

    id: RowId
    cells: tuple[Cell, ...] = ()

    def cell(self, column_id: ColumnId) -> Cell | None:
        for cell in self.cells:
            if cell.column_id == column_id:
                return cell
        return None

    def cell_value(self, column_id: ColumnId) -> CellValue | None:
        """Value of the first cell in ``column_id``, or None if absent."""
        cell = self.cell(column_id)
        return cell.value if cell is not None else None


class Column(_Payload):
    id: ColumnId
    title: str


class SheetHeader(_Payload):
    """Entry of the sheet index: just enough to resolve a name to an id."""

    id: SheetId
    name: str


class SheetDocument(_Payload):
    """Full sheet response: schema plus rows."""

    id: SheetId
    name: str
    columns: tuple[Column, ...] = ()
    rows: tuple[Row, ...] = ()


class IndexResult(BaseModel, Generic[T]):
    """Envelope of list endpoints: ``{"data": [...]}``."""

    data: list[T]


class ApiResult(BaseModel, Generic[T]):
    """Envelope of write endpoints: ``{"result": ...}``."""

    result: T


class ApiErrorPayload(BaseModel):
    """Body of a non-success response."""

    error_code: int = Field(alias="errorCode")
    message: str
