"""``probcheck check -n NAME`` — decide whether NAME should be rechecked now.

Exit code 0 means "check it now", exit code 1 means "skip this time".
Resources with no recorded status are always due; archived resources
never are.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path

import typer

from probcheck.cli.commands._shared import EXIT_NOT_DUE, data_file_option, load_store
from probcheck.config import get_config
from probcheck.core.decision import should_check_now

logger = logging.getLogger(__name__)


def check_cmd(
    name: str = typer.Option(
        ...,
        "--name",
        "-n",
        help="Resource key, e.g. a repository path.",
    ),
    seed: str | None = typer.Option(
        None,
        "--seed",
        "-s",
        help="Seed string for a reproducible decision.",
    ),
    data_file: Path | None = data_file_option(),
) -> None:
    """Exit 0 if NAME is due for a recheck, 1 otherwise."""
    store = load_store(data_file)
    status = store.lookup(name)

    if status is None:
        logger.info("No status recorded for %s, check is due", name)
        return

    if status.archived:
        logger.info("%s is archived, skipping", name)
        raise typer.Exit(code=EXIT_NOT_DUE)

    due = should_check_now(
        status.change_time,
        status.check_time,
        datetime.now(timezone.utc),
        seed,
        factor=get_config().recheck_factor,
    )
    logger.info("%s due for recheck: %s", name, due)
    if not due:
        raise typer.Exit(code=EXIT_NOT_DUE)
