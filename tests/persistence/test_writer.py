# ABOUTME: Tests for JSON output of records and status codes
# ABOUTME: Formatting, encoding, sorting and all-or-nothing failure behaviour

import json
import os
from unittest.mock import patch

import pytest

from mcc_mnc_harvest.core.models import HarvestResult, Record, RecordType
from mcc_mnc_harvest.extraction.base import OutputError
from mcc_mnc_harvest.persistence.writer import dumps, write_outputs


@pytest.fixture
def result() -> HarvestResult:
    return HarvestResult(
        records=[
            Record(
                type=RecordType.NATIONAL,
                country_name="Côte d'Ivoire",
                country_code="CI",
                mcc="612",
                mnc="03",
                brand="Orange",
                operator="Orange Côte d'Ivoire",
                status="Operational",
                bands="GSM 900",
                notes=None,
            )
        ],
        status_codes=["Operational", "Not operational", "Building"],
    )


class TestWriteOutputs:
    def test_writes_both_files(self, tmp_path, result):
        records_path = tmp_path / "mcc-mnc-list.json"
        status_path = tmp_path / "status-codes.json"

        write_outputs(result, records_path, status_path)

        records = json.loads(records_path.read_text(encoding="utf-8"))
        assert records == [
            {
                "type": "National",
                "countryName": "Côte d'Ivoire",
                "countryCode": "CI",
                "mcc": "612",
                "mnc": "03",
                "brand": "Orange",
                "operator": "Orange Côte d'Ivoire",
                "status": "Operational",
                "bands": "GSM 900",
                "notes": None,
            }
        ]
        assert json.loads(status_path.read_text(encoding="utf-8")) == ["Building", "Not operational", "Operational"]

    def test_pretty_printed_utf8(self, tmp_path, result):
        records_path = tmp_path / "records.json"
        write_outputs(result, records_path, tmp_path / "status.json")

        text = records_path.read_text(encoding="utf-8")
        assert text.startswith('[\n  {\n    "type": "National",')
        assert "Côte d'Ivoire" in text

    def test_status_file_format(self, tmp_path, result):
        status_path = tmp_path / "status.json"
        write_outputs(result, tmp_path / "records.json", status_path)
        assert status_path.read_text(encoding="utf-8") == '[\n  "Building",\n  "Not operational",\n  "Operational"\n]'

    def test_creates_parent_directories(self, tmp_path, result):
        records_path = tmp_path / "out" / "records.json"
        status_path = tmp_path / "out" / "status.json"

        write_outputs(result, records_path, status_path)

        assert records_path.exists()
        assert status_path.exists()

    def test_failure_writes_neither_file(self, tmp_path, result):
        records_path = tmp_path / "records.json"
        status_path = tmp_path / "status.json"
        records_path.write_text("old records", encoding="utf-8")

        with patch("mcc_mnc_harvest.persistence.writer.os.replace", side_effect=[OSError("disk full")]):
            with pytest.raises(OutputError, match="disk full"):
                write_outputs(result, records_path, status_path)

        assert records_path.read_text(encoding="utf-8") == "old records"
        assert not status_path.exists()
        assert sorted(p.name for p in tmp_path.iterdir()) == ["records.json"]

    @staticmethod
    def _fail_second_replace():
        real_replace = os.replace
        calls = []

        def replace(src, dst):
            calls.append(dst)
            if len(calls) == 2:
                raise OSError("disk full")
            real_replace(src, dst)

        return replace

    def test_status_failure_restores_previous_records(self, tmp_path, result):
        records_path = tmp_path / "records.json"
        status_path = tmp_path / "status.json"
        records_path.write_text("old records", encoding="utf-8")
        status_path.write_text("old status", encoding="utf-8")

        with patch("mcc_mnc_harvest.persistence.writer.os.replace", side_effect=self._fail_second_replace()):
            with pytest.raises(OutputError, match="disk full"):
                write_outputs(result, records_path, status_path)

        assert records_path.read_text(encoding="utf-8") == "old records"
        assert status_path.read_text(encoding="utf-8") == "old status"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["records.json", "status.json"]

    def test_status_failure_removes_new_records_file(self, tmp_path, result):
        records_path = tmp_path / "records.json"
        status_path = tmp_path / "status.json"

        with patch("mcc_mnc_harvest.persistence.writer.os.replace", side_effect=self._fail_second_replace()):
            with pytest.raises(OutputError):
                write_outputs(result, records_path, status_path)

        assert list(tmp_path.iterdir()) == []

    def test_success_leaves_no_temporary_files(self, tmp_path, result):
        records_path = tmp_path / "records.json"
        records_path.write_text("old records", encoding="utf-8")

        write_outputs(result, records_path, tmp_path / "status.json")

        assert sorted(p.name for p in tmp_path.iterdir()) == ["records.json", "status.json"]
        assert "Côte d'Ivoire" in records_path.read_text(encoding="utf-8")

    def test_empty_result(self, tmp_path):
        records_path = tmp_path / "records.json"
        status_path = tmp_path / "status.json"

        write_outputs(HarvestResult(), records_path, status_path)

        assert records_path.read_text(encoding="utf-8") == "[]"
        assert status_path.read_text(encoding="utf-8") == "[]"


def test_dumps_indentation():
    assert dumps({"a": ["é"]}) == '{\n  "a": [\n    "é"\n  ]\n}'
