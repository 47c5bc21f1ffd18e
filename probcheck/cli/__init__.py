"""probcheck CLI — Typer-based command-line interface.

Provides the ``probcheck`` command with subcommands for deciding whether a
resource is due for a recheck, recording new commits, archiving resources,
and summarising the status store.

All output uses Rich for formatted terminal display.
"""
