from .http_fetcher import BROWSER_HEADERS, HttpPageFetcher

__all__ = ["BROWSER_HEADERS", "HttpPageFetcher"]
