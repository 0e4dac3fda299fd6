"""Page fetcher with browser-emulation headers.

Every outcome (body, HTTP error status, transport error) is folded into a
:class:`FetchOutcome` value; nothing raises past :meth:`HttpPageFetcher.fetch`.
No retries: a failed fetch is terminal for that call.
"""

from __future__ import annotations

import httpx
import structlog

from reelpress.domain.entities.fetch import FetchOutcome

log = structlog.get_logger(__name__)

BROWSER_HEADERS: dict[str, str] = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}


def _transport_error_message(exc: Exception) -> str:
    # Some httpx errors (e.g. bare timeouts) carry an empty message.
    return str(exc) or type(exc).__name__


class HttpPageFetcher:
    """Fetches raw HTML over a shared ``httpx.AsyncClient``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        user_agent: str,
        follow_redirects: bool = True,
    ) -> None:
        self._http = http_client
        self._headers = {"User-Agent": user_agent, **BROWSER_HEADERS}
        self._follow_redirects = follow_redirects

    async def fetch(self, url: str) -> FetchOutcome:
        try:
            resp = await self._http.get(
                url,
                headers=self._headers,
                follow_redirects=self._follow_redirects,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            message = _transport_error_message(exc)
            log.warning("page_fetch_transport_error", url=url, error=message)
            return FetchOutcome.failed(url, message)

        if not resp.is_success:
            message = f"Failed to fetch: {resp.status_code} {resp.reason_phrase}"
            log.warning("page_fetch_http_error", url=url, status=resp.status_code)
            return FetchOutcome.failed(url, message.rstrip(), resp.status_code)

        log.debug("page_fetched", url=url, size=len(resp.text))
        return FetchOutcome.success(url, resp.text)
