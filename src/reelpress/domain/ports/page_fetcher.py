"""Port for fetching raw HTML pages."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from reelpress.domain.entities.fetch import FetchOutcome


@runtime_checkable
class PageFetcherPort(Protocol):
    """Fetches a page and reports the body or a structured failure.

    Implementations must never raise; every error is folded into the
    returned :class:`FetchOutcome`.
    """

    async def fetch(self, url: str) -> FetchOutcome: ...
