"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from reelpress.application.use_cases import (
    ExtractLinksUseCase,
    FindLinksUseCase,
    ListMoviesUseCase,
    PublishPostUseCase,
)
from reelpress.infrastructure.extraction import (
    extract_movie_details,
    extract_movie_posts,
    find_matching_urls,
)
from reelpress.infrastructure.fetching import HttpPageFetcher
from reelpress.infrastructure.resolution import LinkResolver
from reelpress.infrastructure.settings import InMemorySettingsStore
from reelpress.infrastructure.wordpress import (
    WordPressPublisher,
    render_post_content,
    render_post_title,
)
from reelpress.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create shared resources on startup and release them on shutdown."""
    state = cast(AppState, app.state)
    config = state.config

    # 1) Shared HTTP client
    state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
        follow_redirects=config.http_follow_redirects,
    )
    log.info(
        "http_client_initialized",
        timeout_seconds=config.http_timeout_seconds,
        follow_redirects=config.http_follow_redirects,
    )

    # 2) Ports
    fetcher = HttpPageFetcher(
        state.http_client,
        user_agent=config.http_user_agent,
        follow_redirects=config.http_follow_redirects,
    )
    state.fetcher = fetcher
    state.settings_store = InMemorySettingsStore(config.domain_settings())
    state.publisher = WordPressPublisher(
        state.http_client, timeout=config.http_timeout_seconds
    )

    # 3) Use cases (known domains are read from the store on every request)
    state.list_movies_uc = ListMoviesUseCase(
        fetcher=fetcher,
        settings=state.settings_store,
        extract_fn=extract_movie_posts,
        max_posts=config.listing_max_posts,
    )
    state.extract_links_uc = ExtractLinksUseCase(
        fetcher=fetcher,
        settings=state.settings_store,
        extract_fn=extract_movie_details,
        resolver_factory=lambda final_host: LinkResolver(
            fetcher, final_host, config.resolver_max_concurrent
        ),
    )
    state.find_links_uc = FindLinksUseCase(
        fetcher=fetcher, find_fn=find_matching_urls
    )
    state.publish_post_uc = PublishPostUseCase(
        publisher=state.publisher,
        render_title=render_post_title,
        render_content=render_post_content,
    )

    log.info("app_startup_complete")

    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("http_client_closed")

        log.info("app_shutdown_complete")
