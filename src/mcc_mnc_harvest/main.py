# ABOUTME: asyncclick entry point for the mcc-mnc-harvest command
# ABOUTME: `fetch` harvests every page and writes both JSON files; `logging-status` shows log routing

from pathlib import Path

import asyncclick as click
from rich.console import Console
from rich.panel import Panel

from mcc_mnc_harvest.config import get_config
from mcc_mnc_harvest.core.models import HarvestReport
from mcc_mnc_harvest.core.service import HarvestService
from mcc_mnc_harvest.extraction.base import OutputError
from mcc_mnc_harvest.persistence import write_outputs
from mcc_mnc_harvest.utils.logging import (
    LoggingMode,
    configure_logging,
    create_document_progress,
    get_logging_status,
    with_pipeline_context,
)
from mcc_mnc_harvest.utils.rich_tables import (
    create_document_outcomes_table,
    create_harvest_summary_table,
    create_logging_status_table,
    print_rich_table,
)

console = Console()

OutputPath = click.Path(dir_okay=False, path_type=Path)


@click.group(invoke_without_command=True)
@click.option("--json", "json_output", is_flag=True, help="Log JSON lines to stdout and skip the rich display")
@click.option("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR (default from settings)")
@click.option("--log-file", default=None, help="Human-readable log file instead of logs/mcc-mnc-harvest.log")
@click.pass_context
def app(ctx, json_output: bool, log_level: str | None, log_file: str | None):
    """
    📶 MCC/MNC Harvest - Mobile Country Code / Mobile Network Code lists from Wikipedia

    Collects every operator table from the ITU region pages and the global
    overview page into a flat record list plus the set of observed statuses.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json_output

    config = get_config()
    configure_logging(
        mode=LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE,
        log_level=(log_level or config.log_level).upper(),
        log_file=log_file or (str(config.log_file) if config.log_file else None),
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@app.command()
@click.option("--records-output", type=OutputPath, help="Record list destination")
@click.option("--status-output", type=OutputPath, help="Status code list destination")
@click.pass_context
async def fetch(ctx, records_output: Path | None, status_output: Path | None):
    """
    📡 Harvest MCC/MNC records from the Wikipedia region and overview pages.

    Region pages are processed first, then the global page with national
    tables skipped. Writes the record list and the sorted status codes as JSON.
    Exits 1 when every page failed or an output file could not be written.
    """
    config = get_config()
    exit_code = await _harvest(
        records_output or config.records_output,
        status_output or config.status_codes_output,
        show_ui=not ctx.obj["json_output"],
    )
    ctx.exit(exit_code)


async def _run_service(service: HarvestService, show_ui: bool) -> HarvestReport:
    if not show_ui:
        return await service.run()

    total = len(service.documents())
    console.print(Panel.fit("📡 [bold cyan]MCC/MNC Harvest[/bold cyan] 📡", border_style="magenta"))
    progress, task_id = create_document_progress(console, total=total)

    def on_document(url: str, index: int, total: int) -> None:
        progress.update(task_id, completed=index - 1, description=f"📄 {url.rsplit('/', 1)[-1]}")

    with progress:
        report = await service.run(progress_callback=on_document)
        progress.update(task_id, completed=total)
    return report


async def _harvest(records_path: Path, status_codes_path: Path, show_ui: bool) -> int:
    """Run one harvest and write its outputs; returns the process exit code."""
    with with_pipeline_context("mcc_mnc_harvest") as logger:
        service = HarvestService()
        try:
            report = await _run_service(service, show_ui)
        finally:
            await service.close()

        if show_ui:
            print_rich_table(console, create_document_outcomes_table(report))

        if report.all_failed:
            logger.error("Every document failed, nothing written", documents=len(report.outcomes))
            if show_ui:
                console.print("[red]❌ Every document failed, nothing written[/red]")
            return 1

        try:
            write_outputs(report.result, records_path, status_codes_path)
        except OutputError as e:
            logger.error("Writing output failed", error=str(e))
            if show_ui:
                console.print(f"[red]❌ {e}[/red]")
            return 1

        logger.info(
            "Harvest written",
            records=len(report.result.records),
            status_codes=len(report.result.status_codes),
            failed_documents=len(report.failed),
        )
        if show_ui:
            print_rich_table(console, create_harvest_summary_table(report, str(records_path), str(status_codes_path)))
        return 0


@app.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    print_rich_table(console, create_logging_status_table(get_logging_status()))


if __name__ == "__main__":
    app()
