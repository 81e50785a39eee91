"""Tests for the mcc-mnc-harvest CLI."""

import json
from unittest.mock import patch

import pytest
import structlog
from asyncclick.testing import CliRunner
from loguru import logger

from mcc_mnc_harvest.core.models import DocumentOutcome, HarvestReport, HarvestResult, Record, RecordType
from mcc_mnc_harvest.extraction.base import OutputError
from mcc_mnc_harvest.main import app


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    logger.remove()
    structlog.reset_defaults()


class StubService:
    """Stands in for HarvestService so the CLI never touches the network."""

    report = HarvestReport()

    def __init__(self, *args, **kwargs):
        self.closed = False

    def documents(self):
        return [(outcome.url, outcome.globals_only) for outcome in self.report.outcomes]

    async def run(self, progress_callback=None):
        for index, outcome in enumerate(self.report.outcomes, start=1):
            if progress_callback:
                progress_callback(outcome.url, index, len(self.report.outcomes))
        return self.report

    async def close(self):
        self.closed = True


def _report(success: bool = True) -> HarvestReport:
    return HarvestReport(
        result=HarvestResult(
            records=[Record(type=RecordType.NATIONAL, country_name="Testland", country_code="TL", mcc="310")]
            if success
            else [],
            status_codes=["Operational", "Building"] if success else [],
        ),
        outcomes=[
            DocumentOutcome(
                url="https://en.wikipedia.org/wiki/Mobile_country_code",
                globals_only=True,
                success=success,
                records_added=1 if success else 0,
                error=None if success else "boom",
                error_type=None if success else "FetchError",
            )
        ],
    )


def test_main_function_exists():
    assert callable(app)


@pytest.mark.asyncio
async def test_main_command_help():
    runner = CliRunner()
    result = await runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "MCC/MNC Harvest" in result.output


@pytest.mark.asyncio
async def test_logging_status_command():
    runner = CliRunner()
    result = await runner.invoke(app, ["logging-status"])

    assert result.exit_code == 0
    assert "Logging Configuration" in result.output


@pytest.mark.asyncio
async def test_fetch_writes_outputs(isolated_cwd):
    StubService.report = _report()
    runner = CliRunner()

    with patch("mcc_mnc_harvest.main.HarvestService", StubService):
        result = await runner.invoke(
            app, ["fetch", "--records-output", "out/records.json", "--status-output", "out/status.json"]
        )

    assert result.exit_code == 0, result.output
    records = json.loads((isolated_cwd / "out" / "records.json").read_text(encoding="utf-8"))
    assert records[0]["countryName"] == "Testland"
    assert records[0]["type"] == "National"
    statuses = json.loads((isolated_cwd / "out" / "status.json").read_text(encoding="utf-8"))
    assert statuses == ["Building", "Operational"]


@pytest.mark.asyncio
async def test_fetch_default_output_paths(isolated_cwd):
    StubService.report = _report()
    runner = CliRunner()

    with patch("mcc_mnc_harvest.main.HarvestService", StubService):
        result = await runner.invoke(app, ["fetch"])

    assert result.exit_code == 0, result.output
    assert (isolated_cwd / "mcc-mnc-list.json").exists()
    assert (isolated_cwd / "status-codes.json").exists()


@pytest.mark.asyncio
async def test_fetch_all_documents_failed(isolated_cwd):
    StubService.report = _report(success=False)
    runner = CliRunner()

    with patch("mcc_mnc_harvest.main.HarvestService", StubService):
        result = await runner.invoke(app, ["fetch"])

    assert result.exit_code == 1
    assert not (isolated_cwd / "mcc-mnc-list.json").exists()
    assert not (isolated_cwd / "status-codes.json").exists()


@pytest.mark.asyncio
async def test_fetch_output_failure_exits_nonzero(isolated_cwd):
    StubService.report = _report()
    runner = CliRunner()

    with (
        patch("mcc_mnc_harvest.main.HarvestService", StubService),
        patch("mcc_mnc_harvest.main.write_outputs", side_effect=OutputError("disk full")),
    ):
        result = await runner.invoke(app, ["fetch"])

    assert result.exit_code == 1
    assert not (isolated_cwd / "status-codes.json").exists()
