"""Typed wrappers for the opaque numeric identifiers used by the API.

Each identifier is a distinct type, so a ``ColumnId`` can never be passed
where a ``RowId`` is expected and ``ColumnId(1) != RowId(1)``. On the wire
all of them are bare unsigned 64-bit integers.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, Field, RootModel, StrictInt

_Unsigned = Annotated[StrictInt, Field(ge=0, le=2**64 - 1)]


class _Identifier(RootModel[_Unsigned]):
    model_config = ConfigDict(frozen=True)

    def __int__(self) -> int:
        return self.root

    def __str__(self) -> str:
        return str(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.root})"


class SheetId(_Identifier):
    """Identifier of a sheet."""


class ColumnId(_Identifier):
    """Identifier of a column within a sheet."""


class RowId(_Identifier):
    """Identifier of a row within a sheet.

    Totally ordered so rows can be iterated deterministically.
    """

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RowId):
            return NotImplemented
        return self.root < other.root

    def __le__(self, other: object) -> bool:
        if not isinstance(other, RowId):
            return NotImplemented
        return self.root <= other.root

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, RowId):
            return NotImplemented
        return self.root > other.root

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, RowId):
            return NotImplemented
        return self.root >= other.root
