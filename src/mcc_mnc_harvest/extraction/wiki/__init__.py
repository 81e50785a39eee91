from .fetcher import WikiDocumentFetcher

__all__ = ["WikiDocumentFetcher"]
