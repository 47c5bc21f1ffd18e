"""``probcheck summarise repo-age|check-time`` — histogram of resource ages.

Both summaries are read-only; the status file is never written.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from probcheck.cli.commands._shared import data_file_option, fail, load_store
from probcheck.core.status_store import StatusStore
from probcheck.monitor.renderer import SummaryRenderer
from probcheck.monitor.summary import FutureTimestampError, SummaryField, summarize

console = Console()

summarise_app = typer.Typer(
    help="Summarise tracked resources by age.",
    no_args_is_help=True,
)


def _print_summary(
    store: StatusStore,
    field: SummaryField,
    *,
    ignore_archived: bool,
    plain: bool,
) -> None:
    try:
        summary = summarize(store.items(), field, ignore_archived=ignore_archived)
    except FutureTimestampError as exc:
        raise fail("Corrupt status store:", exc) from exc
    SummaryRenderer(console=console).print_summary(summary, plain=plain)


@summarise_app.command(name="repo-age", help="Count resources by time since last change.")
def repo_age_cmd(
    include_archived: bool = typer.Option(
        False,
        "--include-archived",
        help="Count archived resources too.",
    ),
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print 'label: count' lines instead of a table.",
    ),
    data_file: Path | None = data_file_option(),
) -> None:
    store = load_store(data_file)
    _print_summary(
        store,
        SummaryField.CHANGE_TIME,
        ignore_archived=not include_archived,
        plain=plain,
    )


@summarise_app.command(name="check-time", help="Count resources by time since last check.")
def check_time_cmd(
    plain: bool = typer.Option(
        False,
        "--plain",
        help="Print 'label: count' lines instead of a table.",
    ),
    data_file: Path | None = data_file_option(),
) -> None:
    store = load_store(data_file)
    _print_summary(store, SummaryField.CHECK_TIME, ignore_archived=False, plain=plain)
