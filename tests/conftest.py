"""Shared test fixtures for smartrows."""

from __future__ import annotations

import pytest

from smartrows.session import SheetSession
from smartrows.transport import ApiClient
from tests.fakes import BASE_URL, SHEET_DOCUMENT, SHEET_INDEX, TOKEN, FakeApi


@pytest.fixture
def api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(api: FakeApi) -> ApiClient:
    return ApiClient(TOKEN, BASE_URL, transport=api.transport)


@pytest.fixture
def sheet_api(api: FakeApi) -> FakeApi:
    """FakeApi serving the sheet index and the full sheet 11."""
    api.add("GET", "/sheets", json_body=SHEET_INDEX)
    api.add("GET", "/sheets/11", json_body=SHEET_DOCUMENT)
    return api


@pytest.fixture
def session(sheet_api: FakeApi, client: ApiClient) -> SheetSession:
    return SheetSession.fetch(client, "my_sheet")
