"""Resolves intermediate download links to final hosting links.

Each candidate page is fetched through the page fetcher and scanned for the
first ``href`` on the final hosting domain. Candidates run concurrently
(bounded by a semaphore) and are joined with ``asyncio.gather``; one
failing candidate never affects the others.

A candidate that cannot be resolved keeps its original URL and is then
dropped by the final-domain filter, unless that URL already lives on the
final domain.
"""

from __future__ import annotations

import asyncio
import re
from functools import lru_cache

import structlog

from reelpress.domain.entities.movies import DownloadLink
from reelpress.domain.ports.page_fetcher import PageFetcherPort

log = structlog.get_logger(__name__)

DEFAULT_MAX_CONCURRENT = 10


@lru_cache(maxsize=16)
def _final_href_re(final_host: str) -> re.Pattern[str]:
    return re.compile(
        rf"""href\s*=\s*["'](https?://[^"']*{re.escape(final_host)}[^"']*)["']""",
        re.IGNORECASE,
    )


def extract_final_link(html: str, final_host: str) -> str | None:
    """Return the first ``href`` pointing at *final_host*, if any."""
    m = _final_href_re(final_host).search(html or "")
    return m.group(1) if m else None


class LinkResolver:
    """Fan-out resolver for one detail page's candidate links.

    Args:
        fetcher: Page fetcher used for every candidate page.
        final_host: Domain of the final hosting links.
        max_concurrent: Max candidate pages fetched at once.
    """

    def __init__(
        self,
        fetcher: PageFetcherPort,
        final_host: str,
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
    ) -> None:
        self._fetcher = fetcher
        self._final_host = final_host
        self._semaphore = asyncio.Semaphore(max_concurrent)

    async def resolve(self, links: list[DownloadLink]) -> list[DownloadLink]:
        """Resolve all *links* and keep only those on the final domain.

        Output order follows input order.
        """
        if not links:
            return []

        outcomes = await asyncio.gather(
            *(self._resolve_one(link) for link in links),
            return_exceptions=True,
        )

        resolved: list[DownloadLink] = []
        for link, outcome in zip(links, outcomes):
            if isinstance(outcome, BaseException):
                log.warning(
                    "link_resolve_crashed",
                    url=link.url,
                    error=str(outcome) or type(outcome).__name__,
                )
                outcome = link
            if self._final_host in outcome.url:
                resolved.append(outcome)

        log.info(
            "links_resolved",
            candidates=len(links),
            resolved=len(resolved),
            final_host=self._final_host,
        )
        return resolved

    async def _resolve_one(self, link: DownloadLink) -> DownloadLink:
        async with self._semaphore:
            outcome = await self._fetcher.fetch(link.url)

        if not outcome.ok:
            log.debug(
                "link_resolve_fetch_failed",
                url=link.url,
                error=outcome.failure.message if outcome.failure else None,
            )
            return link

        final_url = extract_final_link(outcome.html or "", self._final_host)
        if final_url is None:
            log.debug("link_resolve_no_final_href", url=link.url)
            return link

        return DownloadLink(label=link.label, url=final_url)
