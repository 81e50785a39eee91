# ABOUTME: Document-to-record extraction for MCC/MNC wiki pages
# ABOUTME: Pipeline Stage 2: parsed document → normalized records and status codes

"""
Parsing Layer: Turn parsed wiki pages into records

This layer handles:
- Cell text cleanup and status canonicalization
- Section and country heading interpretation
- Citation link removal
- Table row extraction under the current heading context

Data Flow: Parsed documents → Records + status codes → Persistence layer
"""

from .headings import classify_section, extract_country
from .references import strip_references
from .tables import extract_rows
from .text import canonicalize_status, normalize, normalize_status_codes
from .walker import SectionContext, classify_node, find_content_root, walk_document

__all__ = [
    "SectionContext",
    "canonicalize_status",
    "classify_node",
    "classify_section",
    "extract_country",
    "extract_rows",
    "find_content_root",
    "normalize",
    "normalize_status_codes",
    "strip_references",
    "walk_document",
]
