# ABOUTME: Domain models for harvested MCC/MNC records and run accumulators
# ABOUTME: Record serializes with the camelCase keys of the published JSON dataset

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RecordType(str, Enum):
    """Kind of operator table a record was found under."""

    NATIONAL = "National"
    TEST = "Test"
    INTERNATIONAL = "International"
    OTHER = "other"


class CountryInfo(BaseModel):
    """Country parsed from a `Name – CODE` sub-heading."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    code: str | None = None


class Record(BaseModel):
    """One MCC/MNC assignment row."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    type: RecordType | None = Field(default=None, description="Section the row was found under")
    country_name: str | None = Field(default=None, alias="countryName")
    country_code: str | None = Field(default=None, alias="countryCode")
    mcc: str | None = None
    mnc: str | None = None
    brand: str | None = None
    operator: str | None = None
    status: str | None = None
    bands: str | None = None
    notes: str | None = None

    def to_json_dict(self) -> dict:
        """Dump with the published camelCase keys, nulls included."""
        return self.model_dump(mode="json", by_alias=True)


class HarvestResult(BaseModel):
    """Accumulator shared by every document of a run.

    Records are append-only; status codes are kept in discovery order and
    only exposed sorted.
    """

    records: list[Record] = Field(default_factory=list)
    status_codes: list[str] = Field(default_factory=list)
    skipped_rows: int = 0

    def add_status(self, status: str | None) -> bool:
        """Add status if it is new; returns whether it was added."""
        if not status or status in self.status_codes:
            return False
        self.status_codes.append(status)
        return True

    def sorted_status_codes(self) -> list[str]:
        return sorted(self.status_codes)

    def merge(self, other: "HarvestResult") -> None:
        """Append another result's records and unseen statuses, preserving order."""
        self.records.extend(other.records)
        for status in other.status_codes:
            self.add_status(status)
        self.skipped_rows += other.skipped_rows


class DocumentOutcome(BaseModel):
    """What happened to one document of a run."""

    url: str
    globals_only: bool = False
    success: bool = True
    records_added: int = 0
    statuses_added: int = 0
    skipped_rows: int = 0
    error: str | None = None
    error_type: str | None = None


class HarvestReport(BaseModel):
    """Summary of a full run: the accumulated result plus per-document outcomes."""

    result: HarvestResult = Field(default_factory=HarvestResult)
    outcomes: list[DocumentOutcome] = Field(default_factory=list)

    @property
    def failed(self) -> list[DocumentOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.success]

    @property
    def all_failed(self) -> bool:
        return bool(self.outcomes) and len(self.failed) == len(self.outcomes)
