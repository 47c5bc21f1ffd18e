"""``probcheck archive -n NAME`` — flag a resource as archived (or not).

Archived resources are never due for a check and are left out of the
repository age summary.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from probcheck.cli.commands._shared import data_file_option, fail, load_store, save_store

console = Console()


def archive_cmd(
    name: str = typer.Option(
        ...,
        "--name",
        "-n",
        help="Resource key, e.g. a repository path.",
    ),
    undo: bool = typer.Option(
        False,
        "--undo",
        help="Clear the archived flag instead of setting it.",
    ),
    data_file: Path | None = data_file_option(),
) -> None:
    """Set or clear the archived flag of NAME."""
    store = load_store(data_file)
    try:
        store.set_archived(name, not undo)
    except KeyError as exc:
        raise fail(f"No status recorded for {name!r}.") from exc
    save_store(store)

    state = "unarchived" if undo else "archived"
    console.print(f"[cyan]{escape(name)}[/cyan] {state}", highlight=False)
