# ABOUTME: Domain models and run orchestration layer
# ABOUTME: Sequential harvest over all configured pages

"""
Core Layer: Domain models and workflow orchestration

This layer handles:
- Record and accumulator models
- Run orchestration over region and global pages
- Per-document outcome reporting

Data Flow: extraction/ documents → parsing/ records → persistence/ output
"""

from .models import (
    CountryInfo,
    DocumentOutcome,
    HarvestReport,
    HarvestResult,
    Record,
    RecordType,
)

# Import service on-demand to avoid circular imports
# Use: from mcc_mnc_harvest.core.service import HarvestService

__all__ = [
    "CountryInfo",
    "DocumentOutcome",
    "HarvestReport",
    "HarvestResult",
    "Record",
    "RecordType",
]
