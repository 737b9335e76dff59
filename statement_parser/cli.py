"""CLI for the ``statement_parser`` package.

Command handlers (``cmd_parse``, ``cmd_report_trends``) return an exit code
and are wrapped by a Typer console interface. The root callback loads a local
``.env`` with ``python-dotenv`` and configures logging before any command
runs. Parsing logic lives in ``statement_parser.api``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv

from .logging_setup import configure_logging, get_logger

logger = get_logger("statement_parser.cli")

STDIN_PATH = "-"


class InputError(Exception):
    """The statement text could not be read."""


def read_statement_text(text_path: str) -> str:
    """Read extracted statement text from ``text_path`` (``-`` for stdin).

    Raises :class:`InputError` with a printable message on any read failure.
    """

    if text_path == STDIN_PATH:
        return sys.stdin.read()

    try:
        return Path(text_path).read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise InputError(f"File not found: {text_path}") from e
    except PermissionError as e:
        raise InputError(f"Permission denied: {text_path}") from e
    except IsADirectoryError as e:
        raise InputError(f"Not a file: {text_path}") from e
    except UnicodeDecodeError as e:
        raise InputError(f"File is not valid UTF-8 text: {text_path}") from e


def cmd_parse(text_path: str, *, include_raw_text: bool = False, indent: int | None = 2) -> int:
    """Parse a statement text file and print the JSON payload to stdout.

    Errors are written to stderr and a non-zero status is returned.
    """

    from .api import parse
    from .models import TransactionSetPayload

    try:
        raw_text = read_statement_text(text_path)
    except InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = parse(raw_text)
    logger.info("Parsed %d transactions from %s", len(result.transactions), text_path)

    payload = TransactionSetPayload.from_result(
        result, raw_text=raw_text if include_raw_text else None
    )
    print(payload.to_json(indent=indent))
    return 0


def cmd_report_trends(text_path: str) -> int:
    """Parse a statement text file and print the category-by-month report."""

    from .api import parse
    from .report import report_trends

    try:
        raw_text = read_statement_text(text_path)
    except InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    result = parse(raw_text)
    if not result.transactions:
        print("No transactions found.")
        return 0
    print(report_trends(result))
    return 0


# ---- Typer app ---------------------------------------------------------------

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Parse text extracted from a bank statement into categorized, "
        "month-grouped transactions. Loads settings from a local .env first."
    ),
)

TextPathOption = Annotated[
    str,
    typer.Option(
        "--text-path",
        help="Path to the extracted statement text (UTF-8); '-' reads stdin.",
    ),
]


@app.command("parse")
def parse_cmd(
    text_path: TextPathOption,
    *,
    include_raw_text: bool = typer.Option(
        False, help="Include the input text under 'rawText' in the JSON output."
    ),
    indent: int = typer.Option(2, min=0, help="JSON indentation (0 for compact output)."),
) -> None:
    """Print transactions, groupings and summary as JSON."""

    code = cmd_parse(text_path, include_raw_text=include_raw_text, indent=indent or None)
    if code:
        raise typer.Exit(code)


@app.command("report-trends")
def report_trends_cmd(text_path: TextPathOption) -> None:
    """Print withdrawals by category by month, with totals."""

    code = cmd_report_trends(text_path)
    if code:
        raise typer.Exit(code)


@app.callback()
def _root(
    log_level: str | None = typer.Option(
        None, help="Log level (falls back to STATEMENT_PARSER_LOG_LEVEL, then INFO)."
    ),
) -> None:
    """Load ``.env`` from the working directory and configure logging."""

    # override=False keeps variables already set in the environment
    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)


if __name__ == "__main__":  # pragma: no cover
    app()
