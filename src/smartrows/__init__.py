"""smartrows - typed client for the Smartsheet REST API.

Fetch a sheet by name, find rows by cell content, and read or write single
cells by column title, with the local copy kept in sync with the server.
"""

__version__ = "0.1.0"

from smartrows.exceptions import (
    InvalidJsonError,
    InvalidSheetNameError,
    NetworkError,
    RemoteError,
    SheetError,
    SmartRowsError,
)
from smartrows.identifiers import ColumnId, RowId, SheetId
from smartrows.models import Cell, Column, Row, SheetHeader
from smartrows.session import SheetSession
from smartrows.sheet import Sheet
from smartrows.transport import DEFAULT_URL, ApiClient
from smartrows.values import EMPTY, Boolean, CellValue, Empty, Number, Text

__all__ = [
    "DEFAULT_URL",
    "EMPTY",
    "ApiClient",
    "Boolean",
    "Cell",
    "CellValue",
    "Column",
    "ColumnId",
    "Empty",
    "InvalidJsonError",
    "InvalidSheetNameError",
    "NetworkError",
    "Number",
    "RemoteError",
    "Row",
    "RowId",
    "Sheet",
    "SheetError",
    "SheetHeader",
    "SheetId",
    "SheetSession",
    "SmartRowsError",
    "Text",
    "__version__",
]
