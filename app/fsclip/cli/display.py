"""Shared Rich display functions for batch results, clipboards and metadata."""

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fsclip.engine.metadata import MetadataReport
from fsclip.models.action import BatchResult, ItemStatus
from fsclip.utils.formatting import console, print_success, print_warning

_STATUS_TEXT: dict[ItemStatus, str] = {
    ItemStatus.DONE: "[success]OK[/]",
    ItemStatus.SKIPPED: "[warning]SKIP[/]",
    ItemStatus.FAILED: "[error]FAIL[/]",
    ItemStatus.UNCHANGED: "[muted]SAME[/]",
}


def create_results_table(result: BatchResult, title: str) -> Table:
    """Create a Rich table with one row per processed item.

    Args:
        result: Batch result to display.
        title: Table title.

    Returns:
        Rich Table with Status, Source and Destination columns.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=6, justify="center")
    table.add_column("Source", overflow="fold")
    table.add_column("Destination", overflow="fold")

    for item in result.items:
        destination = item.destination or item.error or ""
        table.add_row(
            _STATUS_TEXT[item.status],
            f"[text]{escape(item.source)}[/text]",
            f"[muted]{escape(destination)}[/muted]",
        )

    return table


def print_batch_result(result: BatchResult, title: str) -> None:
    """Print the results table followed by a one-line summary."""
    console.print(create_results_table(result, title))

    summary = (
        f"{result.done_count} done, {result.skipped_count} skipped, "
        f"{result.failed_count} failed"
    )
    if result.aborted:
        print_warning(f"Aborted after {len(result.items)} item(s): {summary}")
    elif result.failed_count:
        print_warning(summary)
    else:
        print_success(summary)


def create_clipboard_table(entries: list[str], title: str = "Clipboard") -> Table:
    """Create a Rich table listing clipboard entries."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("Path", style="marked", overflow="fold")
    for number, entry in enumerate(entries, start=1):
        table.add_row(str(number), escape(entry))
    return table


def create_metadata_panel(report: MetadataReport) -> Panel:
    """Create a Rich panel with the details of one path."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="header")
    grid.add_column(style="text")
    grid.add_row("Size", f"{report.size} ({report.byte_count} bytes)")
    grid.add_row("Permissions", f"{report.permissions} ({report.octal_mode})")
    grid.add_row("Created", report.created)
    grid.add_row("Accessed", report.accessed)
    grid.add_row("Modified", report.modified)
    return Panel(
        grid,
        title=f"Details for {report.kind.value} '{escape(report.path)}'",
        border_style="border",
        expand=False,
    )
