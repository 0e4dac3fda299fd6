"""Publish one movie as a draft post on every configured WordPress site."""

from __future__ import annotations

import asyncio
from typing import Callable

import structlog

from reelpress.domain.entities.errors import InvalidRequest
from reelpress.domain.entities.movies import MovieDetails
from reelpress.domain.entities.wordpress import WordPressPostResult, WordPressSite
from reelpress.domain.ports.publisher import PublisherPort

log = structlog.get_logger(__name__)


class PublishPostUseCase:
    def __init__(
        self,
        *,
        publisher: PublisherPort,
        render_title: Callable[[MovieDetails], str],
        render_content: Callable[[MovieDetails], str],
    ) -> None:
        self._publisher = publisher
        self._render_title = render_title
        self._render_content = render_content

    async def execute(
        self, details: MovieDetails, sites: list[WordPressSite]
    ) -> list[WordPressPostResult]:
        """Create one draft per site; results follow the order of *sites*.

        Raises:
            InvalidRequest: No sites given.
        """
        if not sites:
            raise InvalidRequest("At least one WordPress site is required")

        title = self._render_title(details)
        content = self._render_content(details)
        results = await asyncio.gather(
            *(self._publisher.create_draft(site, title, content) for site in sites)
        )
        log.info(
            "movie_published",
            title=title,
            sites=len(sites),
            succeeded=sum(1 for r in results if r.success),
        )
        return list(results)

    async def verify(self, site: WordPressSite) -> WordPressPostResult:
        return await self._publisher.verify(site)
