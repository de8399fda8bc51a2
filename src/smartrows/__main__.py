"""CLI entry point for smartrows.

Usage:
    python -m smartrows sheets
    python -m smartrows get <sheet> <column> --where <column>=<value>
    python -m smartrows set <sheet> <column> <value> --where <column>=<value> [--number|--bool]

The token and API root come from SMARTROWS_* environment variables.
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from loguru import logger
from pydantic import ValidationError

from smartrows.config import Settings, get_settings
from smartrows.exceptions import SheetError, SmartRowsError
from smartrows.logging import configure_logging
from smartrows.session import SheetSession
from smartrows.transport import ApiClient
from smartrows.values import Boolean, CellValue, Number, Text

if TYPE_CHECKING:
    from smartrows.identifiers import ColumnId, RowId


def _build_client(settings: Settings) -> ApiClient:
    return ApiClient.from_settings(settings)


def parse_where(expression: str) -> tuple[str, str]:
    """Split ``<column>=<value>`` on the first ``=``."""
    title, sep, value = expression.partition("=")
    if not sep or not title:
        raise argparse.ArgumentTypeError(
            f"expected <column>=<value>, got {expression!r}"
        )
    return title, value


def format_value(value: CellValue | None) -> str:
    if value is None or value.is_empty:
        return ""
    if isinstance(value, Boolean):
        return "true" if value.value else "false"
    if isinstance(value, Number):
        return str(value.to_json())
    return str(value.as_text())


def parse_value(raw: str, *, as_number: bool, as_bool: bool) -> CellValue:
    if as_number:
        try:
            return Number(float(raw))
        except ValueError:
            raise SheetError(f"Not a number: {raw!r}") from None
    if as_bool:
        lowered = raw.strip().lower()
        if lowered in ("true", "yes", "1"):
            return Boolean(True)
        if lowered in ("false", "no", "0"):
            return Boolean(False)
        raise SheetError(f"Not a boolean: {raw!r}")
    return Text(raw)


def _locate(
    session: SheetSession, column: str, where: tuple[str, str]
) -> tuple[ColumnId, RowId]:
    """Resolve the target column and the row selected by ``where``."""
    column_id = session.column_id(column)
    if column_id is None:
        raise SheetError(f"No column titled '{column}' in sheet '{session.name}'")
    where_title, where_value = where
    where_column_id = session.column_id(where_title)
    if where_column_id is None:
        raise SheetError(f"No column titled '{where_title}' in sheet '{session.name}'")
    row_id = session.find_row_id_by_value(where_column_id, where_value)
    if row_id is None:
        raise SheetError(f"No row where '{where_title}' is '{where_value}'")
    return column_id, row_id


def cmd_sheets(client: ApiClient, args: argparse.Namespace) -> int:  # noqa: ARG001
    """List sheets visible to the token."""
    for header in client.list_sheets():
        print(f"{header.id}\t{header.name}")
    return 0


def cmd_get(client: ApiClient, args: argparse.Namespace) -> int:
    """Print one cell value."""
    session = SheetSession.fetch(client, args.sheet)
    column_id, row_id = _locate(session, args.column, args.where)
    print(format_value(session.cell_value(column_id, row_id)))
    return 0


def cmd_set(client: ApiClient, args: argparse.Namespace) -> int:
    """Write one cell value and print what the server confirmed."""
    value = parse_value(args.value, as_number=args.number, as_bool=args.bool)
    session = SheetSession.fetch(client, args.sheet)
    column_id, row_id = _locate(session, args.column, args.where)
    logger.info("Writing {} to row {} column {}", value, row_id, column_id)
    session.push_cell_value(column_id, row_id, value)
    print(format_value(session.cell_value(column_id, row_id)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartrows",
        description="Read and write Smartsheet cells by column title and row value",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # sheets subcommand
    sheets_parser = subparsers.add_parser(
        "sheets",
        help="List sheets visible to the token",
    )
    sheets_parser.set_defaults(func=cmd_sheets)

    # get subcommand
    get_parser = subparsers.add_parser(
        "get",
        help="Print the value of one cell",
    )
    get_parser.add_argument("sheet", help="Sheet name")
    get_parser.add_argument("column", help="Title of the column to read")
    get_parser.add_argument(
        "-w",
        "--where",
        type=parse_where,
        required=True,
        help="Row selector as <column>=<text value>; the first matching row is used",
    )
    get_parser.set_defaults(func=cmd_get)

    # set subcommand
    set_parser = subparsers.add_parser(
        "set",
        help="Write the value of one cell",
    )
    set_parser.add_argument("sheet", help="Sheet name")
    set_parser.add_argument("column", help="Title of the column to write")
    set_parser.add_argument("value", help="New value (text unless --number or --bool)")
    set_parser.add_argument(
        "-w",
        "--where",
        type=parse_where,
        required=True,
        help="Row selector as <column>=<text value>; the first matching row is used",
    )
    kind = set_parser.add_mutually_exclusive_group()
    kind.add_argument("--number", action="store_true", help="Send the value as a number")
    kind.add_argument("--bool", action="store_true", help="Send the value as a boolean")
    set_parser.set_defaults(func=cmd_set)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    client = _build_client(settings)

    try:
        result: int = args.func(client, args)
        return result
    except SmartRowsError as e:
        logger.debug("Command {} failed: {!r}", args.command, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
