# ABOUTME: Rich tables for the harvest CLI: per-page outcomes, run summary and logging status
# ABOUTME: All tables share one rounded cyan look; values are always rendered as strings

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.box import ROUNDED, SIMPLE, Box
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from mcc_mnc_harvest.core.models import HarvestReport

LOG_FILE_LABELS = {
    "main": "📝 Main Log",
    "json": "📊 JSON Log",
    "errors": "🚨 Error Log",
}


def _styled_table(title: str, title_style: str = "bold cyan", box: Box = ROUNDED) -> Table:
    return Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        title_justify="left",
        box=box,
        header_style="bold magenta",
        border_style="cyan",
    )


def create_key_value_table(
    title: str,
    data: dict[str, Any],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box: Box = ROUNDED,
) -> Table:
    """Two-column Field/Value table, one row per dict entry in insertion order."""
    table = _styled_table(title, title_style, box)
    table.add_column("Field", style=key_style)
    table.add_column("Value", style=value_style)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_document_outcomes_table(report: HarvestReport) -> Table:
    """One row per processed page: scope, counts and whether it was merged."""
    table = _styled_table("📄 Documents")
    table.add_column("Page", style="blue")
    table.add_column("Scope")
    for counter in ("Records", "New statuses"):
        table.add_column(counter, justify="right", style="green")
    table.add_column("Short rows", justify="right", style="yellow")
    table.add_column("Result")

    for outcome in report.outcomes:
        table.add_row(
            outcome.url.rsplit("/", 1)[-1].replace("_", " "),
            "global" if outcome.globals_only else "region",
            str(outcome.records_added),
            str(outcome.statuses_added),
            str(outcome.skipped_rows),
            "[green]✅ ok[/green]" if outcome.success else f"[red]❌ {outcome.error_type}[/red]",
        )

    return table


def create_harvest_summary_table(report: HarvestReport, records_path: str, status_codes_path: str) -> Table:
    """Totals for a finished run and where its two output files went.

    Args:
        report: Report of the finished run
        records_path: Destination of the record list
        status_codes_path: Destination of the status code list
    """
    result = report.result
    return create_key_value_table(
        "📡 Harvest Summary",
        {
            "📶 Records": len(result.records),
            "🏷️ Status Codes": ", ".join(result.sorted_status_codes()) or "None",
            "✂️ Short Rows Skipped": result.skipped_rows,
            "❌ Failed Documents": len(report.failed),
            "💾 Records File": records_path,
            "💾 Status Codes File": status_codes_path,
        },
        title_style="bold green",
        key_style="cyan",
        value_style="white",
        box=SIMPLE,
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Render the dict returned by get_logging_status; absent log files are left out."""
    rows = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }
    rows.update(
        {label: status["log_files"][key] for key, label in LOG_FILE_LABELS.items() if status["log_files"].get(key)}
    )

    return create_key_value_table(
        "🔍 Logging Configuration", rows, title_style="bold green", key_style="blue", value_style="white"
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a table with a blank line above and below it."""
    console.print()
    console.print(table)
    console.print()
