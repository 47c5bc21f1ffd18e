"""``probcheck show`` — display recorded statuses."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from probcheck.cli.commands._shared import data_file_option, fail, load_store
from probcheck.monitor.renderer import SummaryRenderer

console = Console()


def show_cmd(
    name: str | None = typer.Option(
        None,
        "--name",
        "-n",
        help="Show only this resource.",
    ),
    data_file: Path | None = data_file_option(),
) -> None:
    """Show one status, or a table of every tracked resource."""
    store = load_store(data_file)
    renderer = SummaryRenderer(console=console)

    if name is not None:
        status = store.lookup(name)
        if status is None:
            raise fail(f"No status recorded for {name!r}.")
        console.print(renderer.render_status(name, status))
        return

    if not len(store):
        console.print("[dim]No statuses recorded.[/dim]")
        return
    console.print(renderer.render_status_table(store.items()))
