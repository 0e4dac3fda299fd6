"""Port for publishing draft posts to a WordPress site."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from reelpress.domain.entities.wordpress import WordPressPostResult, WordPressSite


@runtime_checkable
class PublisherPort(Protocol):
    """Creates draft posts through the WordPress REST API."""

    async def create_draft(
        self, site: WordPressSite, title: str, content: str
    ) -> WordPressPostResult:
        """Create a draft post; failures are returned, not raised."""
        ...

    async def verify(self, site: WordPressSite) -> WordPressPostResult:
        """Check that the credentials authenticate against the site."""
        ...
