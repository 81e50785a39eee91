# ABOUTME: httpx + BeautifulSoup implementation of the document fetcher
# ABOUTME: Downloads a Wikipedia page and parses it with lxml into a navigable tree

import re
from urllib.parse import unquote

import httpx
from bs4 import BeautifulSoup

from mcc_mnc_harvest.extraction.base import FetchError, ParseError
from mcc_mnc_harvest.utils.logging import get_logger, log_document_step

DEFAULT_USER_AGENT = "mcc-mnc-harvest/1.0 (+https://en.wikipedia.org/wiki/Mobile_country_code)"


class WikiDocumentFetcher:
    """Fetch wiki pages over HTTP and parse them into BeautifulSoup documents."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.http_client = client or httpx.AsyncClient(  # Allow for dependency injection
            headers={"User-Agent": user_agent},
            timeout=timeout,
        )
        self.logger = get_logger(__name__)

    @log_document_step("fetch_document")
    async def fetch(self, url: str) -> BeautifulSoup:
        """Retrieve the page at url and parse it."""
        page_title = self._extract_page_title_from_url(url)

        self.logger.debug("Requesting wiki page", url=url, page_title=page_title)

        try:
            response = await self.http_client.get(url, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Page request failed with status {e.response.status_code}: {url}",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Page request failed: {e}", url=url) from e

        if not response.text.strip():
            raise ParseError(f"Empty response body: {url}")

        try:
            document = BeautifulSoup(response.text, "lxml")
        except Exception as e:
            raise ParseError(f"Failed to parse page {url}: {e}") from e

        self.logger.info(
            "Retrieved wiki page",
            url=url,
            page_title=page_title,
            final_url=str(response.url),
            content_length=len(response.text),
        )

        return document

    async def close(self) -> None:
        await self.http_client.aclose()

    @staticmethod
    def _extract_page_title_from_url(url: str | None) -> str | None:
        """Extract the readable page title from a /wiki/ URL."""
        if not url:
            return None
        # Example: ".../wiki/Mobile_Network_Codes_in_ITU_region_2xx_(Europe)" -> "Mobile Network Codes ... (Europe)"
        page_title = re.search(r"/wiki/([^#?]+)", str(url))
        return unquote(page_title.group(1)).replace("_", " ") if page_title else None
