"""Rich terminal renderer for age summaries and status records."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from probcheck.models.status import RepoStatus
from probcheck.monitor.summary import AgeSummary, SummaryField

_FIELD_TITLES: dict[SummaryField, str] = {
    SummaryField.CHANGE_TIME: "Repository age (since last change)",
    SummaryField.CHECK_TIME: "Time since last check",
}

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


class SummaryRenderer:
    """Renders ``AgeSummary`` and ``RepoStatus`` values with Rich.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    # ------------------------------------------------------------------
    # Summaries
    # ------------------------------------------------------------------

    def render_summary(self, summary: AgeSummary) -> Table:
        table = Table(
            title=_FIELD_TITLES[summary.field],
            min_width=48,
            caption=f"Generated {summary.generated_at.strftime(_TIME_FORMAT)}",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Age", min_width=12)
        table.add_column("Count", justify="right")
        for bucket in summary.buckets:
            style = "dim" if bucket.count == 0 else None
            table.add_row(bucket.label, str(bucket.count), style=style)
        table.add_section()
        table.add_row("[bold]Total[/bold]", f"[bold]{summary.total}[/bold]")
        return table

    def print_summary(self, summary: AgeSummary, *, plain: bool = False) -> None:
        """Print a summary as a table, or as ``label: count`` lines."""
        if plain:
            for label, count in summary.as_dict().items():
                self.console.print(f"{label}: {count}", markup=False, highlight=False)
            return
        self.console.print(self.render_summary(summary))

    # ------------------------------------------------------------------
    # Records
    # ------------------------------------------------------------------

    def render_status(self, name: str, status: RepoStatus) -> Panel:
        archived = "[magenta]yes[/magenta]" if status.archived else "[green]no[/green]"
        body = "\n".join([
            f"[bold]Changed:[/bold]  {status.change_time.strftime(_TIME_FORMAT)}",
            f"[bold]Checked:[/bold]  {status.check_time.strftime(_TIME_FORMAT)}",
            f"[bold]Commit:[/bold]   {status.commit_hash.hex()} "
            f"[dim]({status.commit_hash.kind.value})[/dim]",
            f"[bold]Archived:[/bold] {archived}",
        ])
        return Panel(
            body,
            title=f"[bold]{escape(name)}[/bold]",
            border_style="blue",
            padding=(1, 2),
        )

    def render_status_table(self, items: list[tuple[str, RepoStatus]]) -> Table:
        table = Table(
            title=f"Tracked resources ({len(items)})",
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Name", style="cyan")
        table.add_column("Changed")
        table.add_column("Checked")
        table.add_column("Commit", style="green")
        table.add_column("Archived", justify="center")
        for name, status in items:
            table.add_row(
                escape(name),
                status.change_time.strftime(_TIME_FORMAT),
                status.check_time.strftime(_TIME_FORMAT),
                status.commit_hash.short(),
                "[magenta]Yes[/magenta]" if status.archived else "[dim]No[/dim]",
            )
        return table
