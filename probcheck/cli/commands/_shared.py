"""Helpers shared by the CLI commands."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from typer.models import OptionInfo

from probcheck.config import get_config
from probcheck.core.status_store import StatusStore, StoreError

# ``check`` reports "not due" with exit code 1, so failures use 2
EXIT_NOT_DUE = 1
EXIT_ERROR = 2

err_console = Console(stderr=True)


def data_file_option() -> OptionInfo:
    return typer.Option(
        None,
        "--data-file",
        "-d",
        help="Path to the status file (default: $PROBCHECK_DATA_FILE or .probcheck/status.json).",
    )


def resolve_data_file(data_file: Path | None) -> Path:
    return data_file if data_file is not None else get_config().data_file


def fail(message: str, exc: Exception | None = None) -> typer.Exit:
    """Print an error to stderr and return the ``typer.Exit`` to raise."""
    detail = f" {escape(str(exc))}" if exc is not None else ""
    err_console.print(f"[bold red]{escape(message)}[/bold red]{detail}")
    return typer.Exit(code=EXIT_ERROR)


def load_store(data_file: Path | None) -> StatusStore:
    path = resolve_data_file(data_file)
    try:
        return StatusStore.load(path)
    except StoreError as exc:
        raise fail("Status store error:", exc) from exc


def save_store(store: StatusStore) -> None:
    try:
        store.save()
    except StoreError as exc:
        raise fail("Status store error:", exc) from exc


def parse_commit_time(value: str) -> datetime:
    """Parse an ISO-8601 timestamp that carries a UTC offset."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        raise ValueError(f"commit time {value!r} has no UTC offset")
    return parsed
