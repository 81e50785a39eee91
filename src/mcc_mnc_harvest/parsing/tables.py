# ABOUTME: Turns an operator table into normalized MCC/MNC records
# ABOUTME: Skips the header row and short rows; canonicalizes and collects status values

from __future__ import annotations

from typing import TYPE_CHECKING

from bs4 import Tag

from mcc_mnc_harvest.core.models import HarvestResult, Record, RecordType
from mcc_mnc_harvest.parsing.text import canonicalize_status, normalize
from mcc_mnc_harvest.utils.logging import get_logger

if TYPE_CHECKING:
    from mcc_mnc_harvest.parsing.walker import SectionContext

logger = get_logger(__name__)

MIN_CELLS = 7


def _mcc_text(cell: Tag) -> str:
    # Cell 0 can carry a zero-size anchor div repeating the country heading:
    # <td><div style="overflow:hidden;width:0;height:0;..."><h3>...</h3></div>313</td>
    hidden = cell.find("div")
    if hidden is not None:
        hidden.decompose()
    return cell.get_text()


def extract_rows(
    table: Tag,
    context: SectionContext,
    globals_only: bool,
    result: HarvestResult,
) -> list[Record]:
    """Extract the records of one table under the given section context.

    New status values are added to result.status_codes as a side effect; the
    returned records are not added to result.records.
    """
    if globals_only and context.record_type == RecordType.NATIONAL:
        logger.debug("Skipping national table on global page", country=context.country.name)
        return []

    records: list[Record] = []
    rows = table.find_all("tr")

    for row_index, row in enumerate(rows[1:], start=1):
        cells = row.find_all("td")

        if len(cells) < MIN_CELLS:
            result.skipped_rows += 1
            logger.debug("Skipping short table row", row_index=row_index, cells=len(cells))
            continue

        status = canonicalize_status(normalize(cells[4].get_text()))
        result.add_status(status)

        records.append(
            Record(
                type=context.record_type,
                country_name=context.country.name,
                country_code=context.country.code,
                mcc=normalize(_mcc_text(cells[0])),
                mnc=normalize(cells[1].get_text()),
                brand=normalize(cells[2].get_text()),
                operator=normalize(cells[3].get_text()),
                status=status,
                bands=normalize(cells[5].get_text()),
                notes=normalize(cells[6].get_text()),
            )
        )

    return records
