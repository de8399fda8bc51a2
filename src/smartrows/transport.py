"""HTTP layer for the Smartsheet REST API.

``ApiClient`` issues authenticated requests and maps every failure onto the
exceptions in ``smartrows.exceptions``:

- no response received: ``NetworkError``
- non-success status: the body is decoded as a structured API error and
  raised as ``RemoteError`` (``InvalidJsonError`` if that body is malformed)
- success status with an unexpected body: ``InvalidJsonError``

Each call is a single attempt; retries are left to the caller.
"""

from __future__ import annotations

import copy
import logging
import ssl
from typing import TYPE_CHECKING, Any, TypeVar

import certifi
import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from smartrows.exceptions import InvalidJsonError, NetworkError, RemoteError
from smartrows.models import (
    ApiErrorPayload,
    ApiResult,
    IndexResult,
    Row,
    SheetDocument,
    SheetHeader,
)
from smartrows.sheet import Sheet

if TYPE_CHECKING:
    from smartrows.config import Settings
    from smartrows.identifiers import SheetId

logger = logging.getLogger(__name__)

# API constants
DEFAULT_URL = "https://api.smartsheet.com/2.0"
DEFAULT_TIMEOUT = 60
QUERY_DO_NOT_PAGINATE = {"includeAll": "true"}

T = TypeVar("T")


class ApiClient:
    """Stateless client holding only the base URL, the token and a timeout.

    Every call opens and closes its own ``httpx.Client``, so an instance can
    be copied freely and shared between threads.

    Example:
        >>> client = ApiClient("my-token")
        >>> [header.name for header in client.list_sheets()]
        ['Budget', 'Roadmap']
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: API access token, sent as a bearer token
            base_url: API root, without a trailing slash
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used in tests to stub the
                server
        """
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._ssl_context = ssl.create_default_context(cafile=certifi.where())

    @classmethod
    def from_settings(
        cls, settings: Settings, *, transport: httpx.BaseTransport | None = None
    ) -> ApiClient:
        return cls(
            settings.token,
            settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"ApiClient(base_url={self._base_url!r})"

    @property
    def base_url(self) -> str:
        return self._base_url

    def clone(self) -> ApiClient:
        return copy.copy(self)

    def list_sheets(self) -> list[SheetHeader]:
        """List every sheet visible to the token, in server order."""
        result = self._request(
            "GET",
            "sheets",
            IndexResult[SheetHeader],
            params=QUERY_DO_NOT_PAGINATE,
        )
        return result.data

    def fetch_sheet(self, sheet_id: SheetId) -> Sheet:
        """Fetch the full schema and rows of one sheet."""
        document = self._request("GET", f"sheets/{sheet_id}", SheetDocument)
        return Sheet.from_document(document)

    def update_row(self, sheet_id: SheetId, row: Row) -> list[Row]:
        """Write a partial row and return the server's state of touched rows."""
        result = self._request(
            "PUT",
            f"sheets/{sheet_id}/rows",
            ApiResult[list[Row]],
            json=row.model_dump(mode="json", by_alias=True),
        )
        return result.result

    def get_json(self, path: str, target: type[T] | Any = Any) -> T:
        """GET an arbitrary endpoint and decode the body as ``target``."""
        return self._request("GET", path, target)

    def post_json(self, path: str, body: Any, target: type[T] | Any = Any) -> T:
        """POST a JSON body to an arbitrary endpoint and decode the response."""
        if isinstance(body, BaseModel):
            body = body.model_dump(mode="json", by_alias=True)
        return self._request("POST", path, target, json=body)

    # --- HTTP helpers ---

    def _request(
        self,
        method: str,
        path: str,
        target: Any,
        *,
        params: dict[str, str] | None = None,
        json: Any = None,
    ) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        logger.debug("%s %s", method, url)
        try:
            with httpx.Client(
                timeout=self._timeout,
                verify=self._ssl_context,
                transport=self._transport,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/json",
                },
            ) as client:
                response = client.request(method, url, params=params, json=json)
        except httpx.RequestError as e:
            logger.debug("%s %s failed: %s", method, url, e)
            raise NetworkError(str(e) or type(e).__name__) from e

        logger.debug("%s %s -> %d", method, url, response.status_code)
        if not response.is_success:
            raise self._handle_http_error(response)
        return _decode(target, response.content)

    def _handle_http_error(self, response: httpx.Response) -> Exception:
        """Convert a non-success response to the matching exception."""
        try:
            error = ApiErrorPayload.model_validate_json(response.content)
        except ValidationError as e:
            return InvalidJsonError(str(e))
        return RemoteError(error.error_code, error.message, response.status_code)


def _decode(target: Any, content: bytes) -> Any:
    try:
        if isinstance(target, type) and issubclass(target, BaseModel):
            return target.model_validate_json(content)
        return TypeAdapter(target).validate_json(content)
    except ValidationError as e:
        raise InvalidJsonError(str(e)) from e
