"""Generic link search: every URL on a page containing a pattern."""

from __future__ import annotations

import time
from typing import Callable

import structlog

from reelpress.application.use_cases.extract_links import validate_page_url
from reelpress.domain.entities.errors import InvalidRequest
from reelpress.domain.entities.movies import LinkFinderResult
from reelpress.domain.ports.page_fetcher import PageFetcherPort

log = structlog.get_logger(__name__)


class FindLinksUseCase:
    def __init__(
        self,
        *,
        fetcher: PageFetcherPort,
        find_fn: Callable[[str, str], list[str]],
    ) -> None:
        self._fetcher = fetcher
        self._find_fn = find_fn

    async def execute(self, url: str | None, pattern: str | None) -> LinkFinderResult:
        start = time.perf_counter()
        url = validate_page_url(url)
        pattern = (pattern or "").strip()
        if not pattern:
            raise InvalidRequest("Pattern is required")

        outcome = await self._fetcher.fetch(url)
        elapsed = int((time.perf_counter() - start) * 1000)
        if not outcome.ok:
            error = outcome.failure.message if outcome.failure else "Unknown error"
            return LinkFinderResult(
                url=url,
                matched_links=[],
                total_found=0,
                processing_time=elapsed,
                error=error,
            )

        matched = self._find_fn(outcome.html or "", pattern)
        log.info("links_found", url=url, pattern=pattern, matched=len(matched))
        return LinkFinderResult(
            url=url,
            matched_links=matched,
            total_found=len(matched),
            processing_time=int((time.perf_counter() - start) * 1000),
        )
