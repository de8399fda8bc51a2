"""Cell values.

A cell holds one of four variants: ``Text``, ``Number``, ``Boolean`` or
``Empty``. On the wire the value is an untagged JSON scalar, so decoding
tries the variants in a fixed order: text, then number, then boolean, and a
missing or ``null`` value becomes ``Empty``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from pydantic_core import core_schema

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

JsonScalar = Union[str, int, float, bool, None]


class CellValue(ABC):
    """Base class of the closed cell value variant.

    The narrowing accessors return the payload when the variant matches and
    ``None`` otherwise. They never raise.
    """

    __slots__ = ()

    def as_text(self) -> str | None:
        return None

    def as_number(self) -> float | None:
        return None

    def as_bool(self) -> bool | None:
        return None

    @property
    def is_empty(self) -> bool:
        return False

    @abstractmethod
    def to_json(self) -> JsonScalar:
        """Encode as the untagged JSON scalar sent on the wire."""
        ...

    @staticmethod
    def of(value: CellValue | JsonScalar) -> CellValue:
        """Lift a plain Python value into the matching variant."""
        if isinstance(value, CellValue):
            return value
        if value is None:
            return EMPTY
        # bool is a subclass of int, so it must be checked first
        if isinstance(value, bool):
            return Boolean(value)
        if isinstance(value, str):
            return Text(value)
        if isinstance(value, (int, float)):
            return Number(float(value))
        raise TypeError(f"Cannot use {type(value).__name__} as a cell value")

    @classmethod
    def decode(cls, raw: Any) -> CellValue:
        """Decode an untagged JSON scalar.

        Objects, arrays and other non-scalar shapes are rejected with
        ``ValueError``.
        """
        if isinstance(raw, CellValue):
            return raw
        if isinstance(raw, str):
            return Text(raw)
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            try:
                return Number(float(raw))
            except OverflowError:
                raise ValueError("cell value number is out of range") from None
        if isinstance(raw, bool):
            return Boolean(raw)
        if raw is None:
            return EMPTY
        raise ValueError(
            f"cell value must be a string, number, boolean or null, "
            f"got {type(raw).__name__}"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler  # noqa: ARG003
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.decode,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _encode, when_used="always"
            ),
        )


@dataclass(frozen=True)
class Text(CellValue):
    value: str

    def as_text(self) -> str:
        return self.value

    def to_json(self) -> str:
        return self.value


@dataclass(frozen=True)
class Number(CellValue):
    value: float

    def as_number(self) -> float:
        return self.value

    def to_json(self) -> int | float:
        if float(self.value).is_integer():
            return int(self.value)
        return self.value


@dataclass(frozen=True)
class Boolean(CellValue):
    value: bool

    def as_bool(self) -> bool:
        return self.value

    def to_json(self) -> bool:
        return self.value


@dataclass(frozen=True)
class Empty(CellValue):
    @property
    def is_empty(self) -> bool:
        return True

    def to_json(self) -> None:
        return None


EMPTY = Empty()


def _encode(value: CellValue) -> JsonScalar:
    return value.to_json()
