"""SheetSession - main interface for reading and writing one sheet.

A session is created by fetching a sheet by name. It answers lookups from
its cached copy and, after every write, merges the rows the server returns
so local reads reflect the server's state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smartrows.exceptions import InvalidSheetNameError
from smartrows.models import Cell, Row
from smartrows.values import CellValue, JsonScalar

if TYPE_CHECKING:
    from collections.abc import Callable

    from smartrows.identifiers import ColumnId, RowId, SheetId
    from smartrows.models import Column
    from smartrows.sheet import Sheet
    from smartrows.transport import ApiClient

logger = logging.getLogger(__name__)


class SheetSession:
    """A fetched sheet bound to the client used to update it.

    The only way to get a session is ``SheetSession.fetch``, so every session
    holds a sheet. The column schema is frozen at fetch time. A session is
    not safe for concurrent use; serialize access to it externally.

    Example:
        >>> session = SheetSession.fetch(ApiClient("my-token"), "Roadmap")
        >>> status = session.column_id("Status")
        >>> key = session.column_id("Key")
        >>> row_id = session.find_row_id_by_value(key, "PROJ-12")
        >>> session.push_cell_value(status, row_id, "done")
    """

    def __init__(self, client: ApiClient, sheet: Sheet) -> None:
        self._client = client
        self._sheet = sheet

    @classmethod
    def fetch(cls, client: ApiClient, sheet_name: str) -> SheetSession:
        """Resolve ``sheet_name`` through the sheet index and fetch it.

        Raises:
            InvalidSheetNameError: No sheet has that name. The sheet itself
                is not requested in that case.
        """
        header = next(
            (h for h in client.list_sheets() if h.name == sheet_name),
            None,
        )
        if header is None:
            raise InvalidSheetNameError(sheet_name)
        sheet = client.fetch_sheet(header.id)
        logger.debug(
            "Fetched sheet %s (%s): %d rows", header.id, sheet_name, len(sheet)
        )
        return cls(client.clone(), sheet)

    def __repr__(self) -> str:
        return f"SheetSession({self._sheet!r})"

    @property
    def sheet_id(self) -> SheetId:
        return self._sheet.id

    @property
    def name(self) -> str:
        return self._sheet.name

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._sheet.columns

    @property
    def sheet(self) -> Sheet:
        return self._sheet

    def column_id(self, title: str) -> ColumnId | None:
        return self._sheet.column_id(title)

    def find_row_id(self, predicate: Callable[[Row], bool]) -> RowId | None:
        return self._sheet.find_row_id(predicate)

    def find_row_id_by_value(
        self, column_id: ColumnId, value: CellValue | JsonScalar
    ) -> RowId | None:
        """Id of the first row whose cell in ``column_id`` equals ``value``."""
        expected = CellValue.of(value)
        return self._sheet.find_row_id(
            lambda row: row.cell_value(column_id) == expected
        )

    def cell_value(self, column_id: ColumnId, row_id: RowId) -> CellValue | None:
        return self._sheet.cell_value(column_id, row_id)

    def push_cell_value(
        self,
        column_id: ColumnId,
        row_id: RowId,
        value: CellValue | JsonScalar,
    ) -> None:
        """Write one cell and refresh the rows the server reports as touched.

        Only the written cell is sent. On success every returned row replaces
        its cached copy, which also picks up values the server recalculated.
        On failure the exception propagates and the cache is left untouched.
        """
        cell = Cell(column_id=column_id, value=CellValue.of(value))
        row = Row(id=row_id, cells=(cell,))
        updated_rows = self._client.update_row(self._sheet.id, row)
        self._sheet.merge_rows(updated_rows)
        logger.debug(
            "Updated cell (%s, %s) in sheet %s; merged %d row(s)",
            column_id,
            row_id,
            self._sheet.id,
            len(updated_rows),
        )
