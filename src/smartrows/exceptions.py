"""Exceptions raised by smartrows.

Every failure at the external boundary is raised as exactly one of the
classes below. They all derive from ``SmartRowsError`` so callers can catch
the whole family, or branch on the specific class.
"""

from __future__ import annotations

from typing import Any


class SmartRowsError(Exception):
    """Base exception for smartrows errors."""

    def _payload(self) -> tuple[Any, ...]:
        return self.args

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SmartRowsError) or type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))


class NetworkError(SmartRowsError):
    """Raised when no response was received (connection, DNS, TLS, timeout)."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Network error: {detail}")

    def _payload(self) -> tuple[Any, ...]:
        return (self.detail,)


class InvalidJsonError(SmartRowsError):
    """Raised when a response body does not decode into the expected shape.

    ``detail`` is the decoder's diagnostic verbatim, naming the offending
    field and position.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid JSON: {detail}")

    def _payload(self) -> tuple[Any, ...]:
        return (self.detail,)


class InvalidSheetNameError(SmartRowsError):
    """Raised when no sheet with the requested name exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No sheet named '{name}'")

    def _payload(self) -> tuple[Any, ...]:
        return (self.name,)


class RemoteError(SmartRowsError):
    """Raised when the API answers with a structured error.

    ``code`` is the service's own error code from the body, not the HTTP
    status, which is kept separately in ``status_code``.
    """

    def __init__(self, code: int, message: str, status_code: int | None = None) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(f"API error {code}: {message}")

    def _payload(self) -> tuple[Any, ...]:
        return (self.code, self.message)


class SheetError(SmartRowsError):
    """Raised for local, non-I/O failures such as an unknown column title."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(detail)

    def _payload(self) -> tuple[Any, ...]:
        return (self.detail,)
