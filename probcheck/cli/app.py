"""Main Typer application — imports and registers all CLI commands.

Entry point: ``probcheck`` (configured via pyproject.toml console_scripts).

Commands: check, record, archive, show, summarise.
"""

from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from probcheck.cli.commands._shared import fail
from probcheck.cli.commands.archive import archive_cmd
from probcheck.cli.commands.check import check_cmd
from probcheck.cli.commands.record import record_cmd
from probcheck.cli.commands.show import show_cmd
from probcheck.cli.commands.summarise import summarise_app
from probcheck.config import get_config

app = typer.Typer(
    name="probcheck",
    help="probcheck: decide probabilistically whether a resource is due for a recheck.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="check", help="Exit 0 if a resource should be rechecked now.")(check_cmd)
app.command(name="record", help="Record the latest commit of a resource.")(record_cmd)
app.command(name="archive", help="Archive or unarchive a resource.")(archive_cmd)
app.command(name="show", help="Show recorded statuses.")(show_cmd)
app.add_typer(summarise_app, name="summarise")
app.add_typer(summarise_app, name="summarize", hidden=True)


def configure_logging(level: str | int) -> None:
    """Send probcheck log records to stderr through Rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger = logging.getLogger("probcheck")
    pkg_logger.handlers = [handler]
    pkg_logger.setLevel(level)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr.",
    ),
) -> None:
    """Global options."""
    try:
        settings = get_config()
    except ValidationError as exc:
        raise fail("Invalid configuration:", exc) from exc
    configure_logging(logging.DEBUG if verbose else settings.log_level)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
