# ABOUTME: Walks a wiki page's top-level content nodes and collects MCC/MNC records
# ABOUTME: Threads the current section type and country heading through the walk as explicit state

from dataclasses import dataclass, field, replace

from bs4 import BeautifulSoup, PageElement, Tag

from mcc_mnc_harvest.core.models import CountryInfo, HarvestResult, RecordType
from mcc_mnc_harvest.extraction.base import EmptyContentError
from mcc_mnc_harvest.parsing.headings import classify_section, extract_country
from mcc_mnc_harvest.parsing.references import strip_references
from mcc_mnc_harvest.parsing.tables import extract_rows
from mcc_mnc_harvest.utils.logging import get_logger

logger = get_logger(__name__)

CONTENT_SELECTOR = "#mw-content-text > .mw-parser-output"


@dataclass(frozen=True)
class SectionContext:
    """Last section type and country heading seen so far in the walk.

    A new section heading does not reset the country; it carries over until the
    next country heading.
    """

    record_type: RecordType | None = None
    country: CountryInfo = field(default_factory=CountryInfo)


@dataclass(frozen=True)
class SectionHeading:
    text: str | None


@dataclass(frozen=True)
class CountryHeading:
    text: str | None


@dataclass(frozen=True)
class DataTable:
    table: Tag


@dataclass(frozen=True)
class OtherNode:
    node: PageElement


ContentNode = SectionHeading | CountryHeading | DataTable | OtherNode


def _heading_text(heading: Tag | None) -> str | None:
    if heading is None:
        return None
    # Older MediaWiki markup: <h2><span class="mw-headline">...</span><span class="mw-editsection">...</span></h2>
    headline = heading.find("span", class_="mw-headline")
    return (headline or heading).get_text().strip()


def _node_text(node: PageElement) -> str:
    return node.get_text() if isinstance(node, Tag) else str(node)


def classify_node(node: PageElement) -> ContentNode:
    """Sort a top-level content node into one of the kinds the walker acts on."""
    if not isinstance(node, Tag):
        return OtherNode(node)

    if node.name == "div":
        classes = node.get("class") or []
        if "mw-heading2" in classes:
            return SectionHeading(_heading_text(node.find("h2", recursive=False)))
        if "mw-heading4" in classes:
            return CountryHeading(_heading_text(node.find("h4", recursive=False)))
    elif node.name == "h2":
        return SectionHeading(_heading_text(node))
    elif node.name == "h4":
        return CountryHeading(_heading_text(node))
    elif node.name == "table":
        return DataTable(node)

    return OtherNode(node)


def find_content_root(document: BeautifulSoup) -> Tag:
    """Locate the article body container of a parsed wiki page."""
    content = document.select_one(CONTENT_SELECTOR)
    if content is None:
        raise EmptyContentError(f"No content container matching {CONTENT_SELECTOR!r}")
    return content


def walk_document(root: Tag, result: HarvestResult, globals_only: bool = False) -> None:
    """Collect the records of one page's content root into result.

    Citation links are stripped from root in place before the walk.

    Args:
        root: Content container of the page, owned by the caller
        result: Accumulator receiving records and newly seen statuses
        globals_only: Skip national operator tables (used for the global page)

    Raises:
        EmptyContentError: If root has no child nodes
        MissingAttributeError: If a link under root has no href
    """
    strip_references(root)

    if not root.contents:
        raise EmptyContentError("Content container has no child nodes")

    context = SectionContext()
    records_before = len(result.records)

    for child in list(root.children):
        if not _node_text(child).strip():
            continue

        match classify_node(child):
            case SectionHeading(text=text):
                context = replace(context, record_type=classify_section(text))
            case CountryHeading(text=text):
                context = replace(context, country=extract_country(text))
            case DataTable(table=table):
                result.records.extend(extract_rows(table, context, globals_only, result))
            case OtherNode():
                pass

    logger.debug(
        "Walked document",
        records_added=len(result.records) - records_before,
        status_codes=len(result.status_codes),
        skipped_rows=result.skipped_rows,
        globals_only=globals_only,
    )
