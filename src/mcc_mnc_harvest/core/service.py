# ABOUTME: High-level service API for a full MCC/MNC harvest run
# ABOUTME: Processes region pages then the global page strictly one at a time

from __future__ import annotations

from collections.abc import Callable

from mcc_mnc_harvest.config import get_config
from mcc_mnc_harvest.core.models import DocumentOutcome, HarvestReport, HarvestResult
from mcc_mnc_harvest.extraction.base import DocumentFetcher, ExtractionError
from mcc_mnc_harvest.extraction.wiki.fetcher import WikiDocumentFetcher
from mcc_mnc_harvest.parsing.walker import find_content_root, walk_document
from mcc_mnc_harvest.utils.logging import get_logger, with_document_context

ProgressCallback = Callable[[str, int, int], None]


class HarvestService:
    """Service that fetches every configured page and accumulates its records."""

    def __init__(
        self,
        fetcher: DocumentFetcher | None = None,
        region_urls: list[str] | None = None,
        wiki_url: str | None = None,
    ):
        config = get_config()
        self.fetcher = fetcher or WikiDocumentFetcher(user_agent=config.user_agent, timeout=config.request_timeout)
        self.region_urls = list(region_urls) if region_urls is not None else list(config.region_urls)
        self.wiki_url = wiki_url if wiki_url is not None else config.wiki_url
        self.logger = get_logger(__name__)

    def documents(self) -> list[tuple[str, bool]]:
        """(url, globals_only) pairs in processing order."""
        return [(url, False) for url in self.region_urls] + [(self.wiki_url, True)]

    async def process_document(self, url: str, globals_only: bool, result: HarvestResult) -> DocumentOutcome:
        """Fetch and walk one page, merging its records into result on success.

        The page is walked into a private accumulator first, so a failure never
        leaves partial records or statuses in result.
        """
        with with_document_context(url, globals_only) as logger:
            staging = HarvestResult(status_codes=list(result.status_codes))
            known_statuses = len(staging.status_codes)

            try:
                document = await self.fetcher.fetch(url)
                walk_document(find_content_root(document), staging, globals_only=globals_only)
            except ExtractionError as e:
                logger.error("Document skipped", error=str(e), error_type=type(e).__name__)
                return DocumentOutcome(
                    url=url,
                    globals_only=globals_only,
                    success=False,
                    error=str(e),
                    error_type=type(e).__name__,
                )

            statuses_added = len(staging.status_codes) - known_statuses
            result.merge(staging)

            logger.info(
                "Document processed",
                records=len(result.records),
                status_codes=len(result.status_codes),
                records_added=len(staging.records),
            )
            return DocumentOutcome(
                url=url,
                globals_only=globals_only,
                records_added=len(staging.records),
                statuses_added=statuses_added,
                skipped_rows=staging.skipped_rows,
            )

    async def run(self, progress_callback: ProgressCallback | None = None) -> HarvestReport:
        """Process every page in order and return the accumulated report."""
        report = HarvestReport()
        documents = self.documents()
        total = len(documents)

        self.logger.info("Starting harvest", documents=total)

        for index, (url, globals_only) in enumerate(documents, start=1):
            if progress_callback:
                progress_callback(url, index, total)
            outcome = await self.process_document(url, globals_only, report.result)
            report.outcomes.append(outcome)

        self.logger.info(
            "Harvest complete",
            records=len(report.result.records),
            status_codes=len(report.result.status_codes),
            failed_documents=len(report.failed),
        )
        return report

    async def close(self) -> None:
        await self.fetcher.close()
