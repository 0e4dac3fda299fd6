"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from reelpress.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from reelpress.application.use_cases import (
        ExtractLinksUseCase,
        FindLinksUseCase,
        ListMoviesUseCase,
        PublishPostUseCase,
    )
    from reelpress.domain.ports import (
        PageFetcherPort,
        PublisherPort,
        SettingsStorePort,
    )


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient

    # Domain Ports
    fetcher: PageFetcherPort
    settings_store: SettingsStorePort
    publisher: PublisherPort

    # Use cases
    list_movies_uc: ListMoviesUseCase
    extract_links_uc: ExtractLinksUseCase
    find_links_uc: FindLinksUseCase
    publish_post_uc: PublishPostUseCase
