# ABOUTME: Protocol interface for retrieving parsed wiki documents, plus the error taxonomy
# ABOUTME: Per-document errors derive from ExtractionError; output failures use OutputError

from typing import Protocol

from bs4 import BeautifulSoup


class DocumentFetcher(Protocol):
    """Protocol for turning a page locator into a parsed document tree."""

    async def fetch(self, url: str) -> BeautifulSoup:
        """Retrieve and parse the page at the given URL.

        Args:
            url: Locator of the page

        Returns:
            The parsed document

        Raises:
            FetchError: If the page could not be retrieved
            ParseError: If the response could not be parsed into a tree
        """
        ...

    async def close(self) -> None:
        """Release any held connections."""
        ...


class HarvestError(Exception):
    """Base class for all harvest errors."""

    pass


class ExtractionError(HarvestError):
    """Raised when a single document cannot be turned into records."""

    pass


class FetchError(ExtractionError):
    """Raised when a document could not be retrieved."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(ExtractionError):
    """Raised when a retrieved document could not be parsed into a tree."""

    pass


class EmptyContentError(ExtractionError):
    """Raised when a parsed document has no usable content container."""

    pass


class MissingAttributeError(ExtractionError):
    """Raised when a link element lacks the attribute the pipeline relies on."""

    pass


class OutputError(HarvestError):
    """Raised when the final datasets cannot be serialized or written."""

    pass
