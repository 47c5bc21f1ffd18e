"""``probcheck record`` — store the latest commit of a resource.

Creates the status on first use.  Afterwards the commit hash and change
time are replaced and the check time is reset to now.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from probcheck.cli.commands._shared import (
    data_file_option,
    load_store,
    parse_commit_time,
    save_store,
)
from probcheck.models.hashes import CommitHash

console = Console()


def record_cmd(
    name: str = typer.Option(
        ...,
        "--name",
        "-n",
        help="Resource key, e.g. a repository path.",
    ),
    commit_time: datetime = typer.Option(
        ...,
        "--commit-time",
        "-t",
        parser=parse_commit_time,
        help="Time of the latest commit, ISO-8601 with offset (e.g. 2024-05-01T12:00:00+02:00).",
    ),
    commit_hash: CommitHash = typer.Option(
        ...,
        "--commit-hash",
        "-c",
        parser=CommitHash.parse,
        help="Latest commit hash, 40 (SHA-1) or 64 (SHA-256) hex chars.",
    ),
    data_file: Path | None = data_file_option(),
) -> None:
    """Record the latest commit of NAME and mark it as checked now."""
    store = load_store(data_file)
    status = store.record_change(name, commit_time, commit_hash)
    save_store(store)

    console.print(
        f"Recorded [cyan]{escape(name)}[/cyan] at [green]{status.commit_hash.short()}[/green]",
        highlight=False,
    )
