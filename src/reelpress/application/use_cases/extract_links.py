"""Detail use case: fetch a post, extract its metadata, resolve its links.

Flow:
    1. Validate the URL (before any fetch)
    2. Fetch the detail page
    3. Extract MovieDetails (candidate links on the intermediate host)
    4. Resolve candidates to final hosting links
    5. Replace the record's download links with the resolved ones
"""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Protocol
from urllib.parse import urlparse

import structlog

from reelpress.domain.entities.errors import InvalidRequest
from reelpress.domain.entities.movies import (
    DownloadLink,
    LinkFinderResult,
    MovieDetails,
)
from reelpress.domain.ports.page_fetcher import PageFetcherPort
from reelpress.domain.ports.settings_store import SettingsStorePort

log = structlog.get_logger(__name__)


class _ExtractDetailsFn(Protocol):
    def __call__(
        self, html: str, source_url: str, *, intermediate_host: str
    ) -> MovieDetails: ...


class _Resolver(Protocol):
    async def resolve(self, links: list[DownloadLink]) -> list[DownloadLink]: ...


class _ResolverFactory(Protocol):
    def __call__(self, final_host: str) -> _Resolver: ...


def validate_page_url(url: str | None) -> str:
    """Return the stripped URL or raise :class:`InvalidRequest`."""
    url = (url or "").strip()
    if not url:
        raise InvalidRequest("URL is required")
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InvalidRequest(f"Malformed URL: {exc}") from exc
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidRequest("URL must be an absolute http(s) URL")
    return url


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class ExtractLinksUseCase:
    def __init__(
        self,
        *,
        fetcher: PageFetcherPort,
        settings: SettingsStorePort,
        extract_fn: _ExtractDetailsFn,
        resolver_factory: _ResolverFactory,
    ) -> None:
        self._fetcher = fetcher
        self._settings = settings
        self._extract_fn = extract_fn
        self._resolver_factory = resolver_factory

    async def execute(self, url: str | None) -> LinkFinderResult:
        """Extract and resolve the download links of one detail page.

        Raises:
            InvalidRequest: Missing or non-http(s) URL.
        """
        start = time.perf_counter()
        url = validate_page_url(url)
        domains = self._settings.get()

        outcome = await self._fetcher.fetch(url)
        if not outcome.ok:
            error = outcome.failure.message if outcome.failure else "Unknown error"
            log.warning("links_extract_failed", url=url, error=error)
            return LinkFinderResult(
                url=url,
                matched_links=[],
                total_found=0,
                processing_time=_elapsed_ms(start),
                error=error,
            )

        details = self._extract_fn(
            outcome.html or "", url, intermediate_host=domains.mdrive_pattern
        )
        resolver = self._resolver_factory(domains.hubcloud_domain)
        try:
            resolved = await resolver.resolve(details.download_links)
        except Exception:
            # Resolver crashed as a whole: keep the candidate links.
            log.exception("links_resolve_failed", url=url)
        else:
            details = replace(details, download_links=resolved)

        matched = [link.url for link in details.download_links]
        log.info(
            "links_extracted",
            url=url,
            title=details.title,
            matched=len(matched),
        )
        return LinkFinderResult(
            url=url,
            matched_links=matched,
            total_found=len(matched),
            processing_time=_elapsed_ms(start),
            movie_details=details,
        )
