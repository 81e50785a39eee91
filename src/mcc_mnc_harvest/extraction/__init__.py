# ABOUTME: Document retrieval from external sources (Wikipedia)
# ABOUTME: Pipeline Stage 1: page locator to parsed document tree

"""
Extraction Layer: Get parsed documents from external sources

This layer handles:
- Wiki page retrieval over HTTP
- HTML parsing into a navigable tree
- The error taxonomy shared by the rest of the pipeline

Data Flow: External Sources → Parsed documents → Parsing layer
"""

from .base import (
    DocumentFetcher,
    EmptyContentError,
    ExtractionError,
    FetchError,
    HarvestError,
    MissingAttributeError,
    OutputError,
    ParseError,
)

__all__ = [
    "DocumentFetcher",
    "EmptyContentError",
    "ExtractionError",
    "FetchError",
    "HarvestError",
    "MissingAttributeError",
    "OutputError",
    "ParseError",
]
