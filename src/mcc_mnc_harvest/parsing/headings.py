# ABOUTME: Heading interpretation: section headings to record types, sub-headings to countries
# ABOUTME: Pure string functions; node lookup lives in the walker

from mcc_mnc_harvest.core.models import CountryInfo, RecordType

SECTION_RECORD_TYPES = {
    "National operators": RecordType.NATIONAL,
    "Test networks": RecordType.TEST,
    "International operators": RecordType.INTERNATIONAL,
}

# Sections whose rows are not attributed to any record type
EXCLUDED_SECTIONS = frozenset({"See also", "External links", "National MNC Authorities"})

COUNTRY_SEPARATOR = "–"  # en dash, as in "France – FR"


def classify_section(heading_text: str | None) -> RecordType | None:
    """Map a level-2 heading to the record type of the tables below it.

    Excluded sections give None; unknown, empty and missing headings give OTHER.
    """
    if heading_text is None:
        return RecordType.OTHER

    section_name = heading_text.strip()
    if len(section_name) <= 1:
        return RecordType.OTHER

    if section_name in EXCLUDED_SECTIONS:
        return None

    return SECTION_RECORD_TYPES.get(section_name, RecordType.OTHER)


def extract_country(heading_text: str | None) -> CountryInfo:
    """Split a `Name – CODE` sub-heading into a CountryInfo."""
    if heading_text is None:
        return CountryInfo()

    name, separator, code = heading_text.strip().partition(COUNTRY_SEPARATOR)
    if not separator:
        return CountryInfo()

    return CountryInfo(name=name.strip(), code=code.strip())
