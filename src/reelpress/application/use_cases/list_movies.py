"""Listing use case: fetch one listing page and extract its post cards."""

from __future__ import annotations

from typing import Protocol

import structlog

from reelpress.domain.entities.movies import MovieListResult, PostSummary
from reelpress.domain.ports.page_fetcher import PageFetcherPort
from reelpress.domain.ports.settings_store import SettingsStorePort

log = structlog.get_logger(__name__)


class _ExtractPostsFn(Protocol):
    def __call__(
        self, html: str, *, site_domain: str, limit: int
    ) -> list[PostSummary]: ...


def listing_page_url(base_url: str, page: int) -> str:
    """Page 1 is the site root; page N lives under ``/page/N/``."""
    if page <= 1:
        return base_url
    return f"{base_url.rstrip('/')}/page/{page}/"


class ListMoviesUseCase:
    def __init__(
        self,
        *,
        fetcher: PageFetcherPort,
        settings: SettingsStorePort,
        extract_fn: _ExtractPostsFn,
        max_posts: int = 30,
    ) -> None:
        self._fetcher = fetcher
        self._settings = settings
        self._extract_fn = extract_fn
        self._max_posts = max_posts

    async def execute(self, page: int = 1) -> MovieListResult:
        """Return the posts of listing page *page*.

        An upstream failure is reported in ``error`` with an empty post list.
        """
        domains = self._settings.get()
        url = listing_page_url(domains.listing_base_url, page)

        outcome = await self._fetcher.fetch(url)
        if not outcome.ok:
            error = outcome.failure.message if outcome.failure else "Unknown error"
            log.warning("movies_list_failed", page=page, url=url, error=error)
            return MovieListResult(posts=[], total_found=0, error=error)

        posts = self._extract_fn(
            outcome.html or "",
            site_domain=domains.movies_drive_domain,
            limit=self._max_posts,
        )
        log.info("movies_listed", page=page, count=len(posts))
        return MovieListResult(posts=posts, total_found=len(posts))
