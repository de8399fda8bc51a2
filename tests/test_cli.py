"""Tests for the smartrows command-line interface."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

import smartrows.__main__ as cli
from smartrows.config import Settings, get_settings
from smartrows.transport import ApiClient
from smartrows.values import EMPTY, Boolean, Number, Text

from tests.fakes import BASE_URL, TOKEN, FakeApi


Runner = Callable[[list[str]], int]


@pytest.fixture
def run(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, sheet_api: FakeApi
) -> Iterator[Runner]:
    """Run the CLI against the fake API, returning the exit code."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SMARTROWS_TOKEN", TOKEN)
    monkeypatch.setenv("SMARTROWS_BASE_URL", BASE_URL)
    monkeypatch.setattr(cli, "configure_logging", lambda _level: None)

    def build_client(settings: Settings) -> ApiClient:
        return ApiClient.from_settings(settings, transport=sheet_api.transport)

    monkeypatch.setattr(cli, "_build_client", build_client)
    get_settings.cache_clear()
    yield cli.main
    get_settings.cache_clear()


class TestSheetsCommand:
    """Tests for `smartrows sheets`."""

    def test_lists_sheets(
        self, run: Runner, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert run(["sheets"]) == 0

        assert capsys.readouterr().out == "11\tmy_sheet\n12\tmy_other_sheet\n"


class TestGetCommand:
    """Tests for `smartrows get`."""

    def test_prints_value(
        self, run: Runner, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = run(
            ["get", "my_sheet", "other_column", "--where", "my_column=data_21_31"]
        )

        assert code == 0
        assert capsys.readouterr().out == "data_22_31\n"

    def test_absent_cell_prints_empty_line(
        self, run: Runner, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = run(["get", "my_sheet", "other_column", "-w", "my_column=data_21_32"])

        assert code == 0
        assert capsys.readouterr().out == "\n"

    def test_unknown_sheet(
        self, run: Runner, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = run(["get", "nope", "my_column", "-w", "my_column=x"])

        assert code == 1
        assert "No sheet named 'nope'" in capsys.readouterr().err

    def test_unknown_column(
        self, run: Runner, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = run(["get", "my_sheet", "missing", "-w", "my_column=data_21_31"])

        assert code == 1
        assert "No column titled 'missing'" in capsys.readouterr().err

    def test_no_matching_row(
        self, run: Runner, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = run(["get", "my_sheet", "my_column", "-w", "my_column=zzz"])

        assert code == 1
        assert "No row where 'my_column' is 'zzz'" in capsys.readouterr().err

    def test_bad_where(self, run: Runner) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run(["get", "my_sheet", "my_column", "-w", "no-equals-sign"])

        assert exc_info.value.code == 2


class TestSetCommand:
    """Tests for `smartrows set`."""

    def test_writes_text(
        self, run: Runner, capsys: pytest.CaptureFixture[str], sheet_api: FakeApi
    ) -> None:
        sheet_api.add(
            "PUT",
            "/sheets/11/rows",
            json_body={
                "result": [
                    {
                        "id": 31,
                        "cells": [
                            {"columnId": 21, "value": "data_21_31"},
                            {"columnId": 22, "value": "done"},
                        ],
                    }
                ]
            },
        )

        code = run(
            ["set", "my_sheet", "other_column", "done", "-w", "my_column=data_21_31"]
        )

        assert code == 0
        assert sheet_api.request_json() == {
            "id": 31,
            "cells": [{"columnId": 22, "value": "done"}],
        }
        assert capsys.readouterr().out == "done\n"

    def test_writes_number(
        self, run: Runner, capsys: pytest.CaptureFixture[str], sheet_api: FakeApi
    ) -> None:
        sheet_api.add(
            "PUT",
            "/sheets/11/rows",
            json_body={"result": [{"id": 32, "cells": [{"columnId": 22, "value": 42}]}]},
        )

        code = run(
            [
                "set",
                "my_sheet",
                "other_column",
                "42",
                "--number",
                "-w",
                "my_column=data_21_32",
            ]
        )

        assert code == 0
        assert sheet_api.request_json()["cells"] == [{"columnId": 22, "value": 42}]
        assert capsys.readouterr().out == "42\n"

    def test_remote_error(
        self, run: Runner, capsys: pytest.CaptureFixture[str], sheet_api: FakeApi
    ) -> None:
        sheet_api.add(
            "PUT",
            "/sheets/11/rows",
            status=403,
            json_body={"errorCode": 1004, "message": "You are not authorized."},
        )

        code = run(
            ["set", "my_sheet", "other_column", "x", "-w", "my_column=data_21_31"]
        )

        assert code == 1
        assert "API error 1004: You are not authorized." in capsys.readouterr().err

    def test_invalid_number(
        self, run: Runner, capsys: pytest.CaptureFixture[str], sheet_api: FakeApi
    ) -> None:
        code = run(
            ["set", "my_sheet", "other_column", "abc", "--number", "-w", "my_column=x"]
        )

        assert code == 1
        assert "Not a number" in capsys.readouterr().err
        assert sheet_api.requests == []


class TestMissingConfiguration:
    """Tests for running without a token."""

    def test_exits_with_error(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("SMARTROWS_TOKEN", raising=False)
        get_settings.cache_clear()

        try:
            assert cli.main(["sheets"]) == 1
        finally:
            get_settings.cache_clear()

        assert "SMARTROWS_TOKEN must be set" in capsys.readouterr().err


class TestValueHelpers:
    """Tests for value parsing and formatting helpers."""

    def test_parse_where(self) -> None:
        assert cli.parse_where("Key=a=b") == ("Key", "a=b")
        assert cli.parse_where("Key=") == ("Key", "")

    def test_parse_value(self) -> None:
        assert cli.parse_value("x", as_number=False, as_bool=False) == Text("x")
        assert cli.parse_value("2.5", as_number=True, as_bool=False) == Number(2.5)
        assert cli.parse_value("Yes", as_number=False, as_bool=True) == Boolean(True)

    def test_format_value(self) -> None:
        assert cli.format_value(None) == ""
        assert cli.format_value(EMPTY) == ""
        assert cli.format_value(Number(3.0)) == "3"
        assert cli.format_value(Number(0.5)) == "0.5"
        assert cli.format_value(Boolean(False)) == "false"
        assert cli.format_value(Text("t")) == "t"
