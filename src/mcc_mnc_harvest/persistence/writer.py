# ABOUTME: Writes the harvested records and sorted status codes as pretty-printed UTF-8 JSON
# ABOUTME: Both files are replaced together or not at all; a failed swap restores the previous records file

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

from mcc_mnc_harvest.core.models import HarvestResult
from mcc_mnc_harvest.extraction.base import OutputError
from mcc_mnc_harvest.utils.logging import get_logger

logger = get_logger(__name__)


def dumps(payload: Any) -> str:
    """Serialize with 2-space indentation, non-ASCII kept as-is."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _temp_sibling(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    os.close(fd)
    return Path(tmp_name)


def _stage(path: Path, content: str) -> Path:
    """Write content to a temporary sibling of path and return the temporary path."""
    tmp = _temp_sibling(path)
    tmp.write_text(content, encoding="utf-8")
    return tmp


def _backup(path: Path) -> Path | None:
    """Copy an existing file to a temporary sibling; None when there is nothing to keep."""
    if not path.exists():
        return None
    backup = _temp_sibling(path)
    shutil.copy2(path, backup)
    return backup


def write_outputs(result: HarvestResult, records_path: Path, status_codes_path: Path) -> None:
    """Persist the record list and the sorted status list.

    Raises:
        OutputError: If serialization or any write fails. Both destinations are
            then left as they were before the call.
    """
    records_path = Path(records_path)
    status_codes_path = Path(status_codes_path)

    try:
        records_json = dumps([record.to_json_dict() for record in result.records])
        status_json = dumps(result.sorted_status_codes())
    except (TypeError, ValueError) as e:
        raise OutputError(f"Failed to serialize harvest output: {e}") from e

    temporaries: list[Path] = []
    records_replaced = False
    backup: Path | None = None
    try:
        staged_records = _stage(records_path, records_json)
        temporaries.append(staged_records)
        staged_status = _stage(status_codes_path, status_json)
        temporaries.append(staged_status)
        backup = _backup(records_path)
        if backup is not None:
            temporaries.append(backup)

        os.replace(staged_records, records_path)
        records_replaced = True
        os.replace(staged_status, status_codes_path)
    except OSError as e:
        if records_replaced:
            _restore(records_path, backup)
        for tmp in temporaries:
            tmp.unlink(missing_ok=True)
        raise OutputError(f"Failed to write harvest output: {e}") from e

    if backup is not None:
        backup.unlink(missing_ok=True)

    logger.info("MCC-MNC list saved", path=str(records_path), records=len(result.records))
    logger.info("Status codes saved", path=str(status_codes_path), status_codes=len(result.status_codes))


def _restore(records_path: Path, backup: Path | None) -> None:
    # Undo the records swap so the pair on disk stays consistent
    if backup is None:
        records_path.unlink(missing_ok=True)
    else:
        shutil.copy2(backup, records_path)
    logger.warning("Records file restored after failed status write", path=str(records_path))
