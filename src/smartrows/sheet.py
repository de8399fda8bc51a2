"""In-memory model of one fetched sheet."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from smartrows.identifiers import ColumnId, RowId, SheetId
    from smartrows.models import Column, Row, SheetDocument
    from smartrows.values import CellValue


class Sheet:
    """Columns and rows of a sheet, as last confirmed by the server.

    The column list is fixed at construction. Rows are kept in a mapping
    keyed by their own ``RowId`` and iterated in ascending id order.
    ``merge_rows`` is the only mutator and always replaces whole rows.

    Example:
        >>> sheet = client.fetch_sheet(SheetId(11))
        >>> column_id = sheet.column_id("Status")
        >>> is_open = lambda row: row.cell_value(column_id) == Text("open")
        >>> row_id = sheet.find_row_id(is_open)
        >>> sheet.cell_value(column_id, row_id)
        Text(value='open')
    """

    def __init__(
        self,
        sheet_id: SheetId,
        name: str,
        columns: Iterable[Column] = (),
        rows: Iterable[Row] = (),
    ) -> None:
        self._id = sheet_id
        self._name = name
        self._columns = tuple(columns)
        self._rows: dict[RowId, Row] = {}
        self.merge_rows(rows)

    @classmethod
    def from_document(cls, document: SheetDocument) -> Sheet:
        return cls(document.id, document.name, document.columns, document.rows)

    def __repr__(self) -> str:
        return (
            f"Sheet(id={self._id!r}, name={self._name!r}, "
            f"columns={len(self._columns)}, rows={len(self._rows)})"
        )

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def id(self) -> SheetId:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._columns

    @property
    def rows(self) -> tuple[Row, ...]:
        """Rows in ascending ``RowId`` order."""
        return tuple(self._rows[row_id] for row_id in sorted(self._rows))

    def row(self, row_id: RowId) -> Row | None:
        return self._rows.get(row_id)

    def column_id(self, title: str) -> ColumnId | None:
        """Id of the first column titled ``title``, or None."""
        for column in self._columns:
            if column.title == title:
                return column.id
        return None

    def find_row_id(self, predicate: Callable[[Row], bool]) -> RowId | None:
        """Id of the first row, in ``RowId`` order, matching ``predicate``."""
        for row in self.rows:
            if predicate(row):
                return row.id
        return None

    def cell_value(self, column_id: ColumnId, row_id: RowId) -> CellValue | None:
        """Value at (row, column), or None when the row or the cell is absent."""
        row = self._rows.get(row_id)
        if row is None:
            return None
        return row.cell_value(column_id)

    def merge_rows(self, rows: Iterable[Row]) -> None:
        """Insert or replace each row under its own id.

        Rows returned by the server carry their complete post-write state, so
        the whole row is replaced rather than patched cell by cell. Merging
        the same rows twice leaves the sheet unchanged.
        """
        for row in rows:
            self._rows[row.id] = row
