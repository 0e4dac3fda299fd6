"""Process-local store for the known-domain settings."""

from __future__ import annotations

import structlog

from reelpress.domain.entities.settings import DomainSettings

log = structlog.get_logger(__name__)


class InMemorySettingsStore:
    """Holds the current :class:`DomainSettings`; lost on restart."""

    def __init__(self, initial: DomainSettings | None = None) -> None:
        self._settings = initial or DomainSettings()

    def get(self) -> DomainSettings:
        return self._settings

    def set(self, settings: DomainSettings) -> None:
        self._settings = settings
        log.info(
            "domain_settings_updated",
            listing_domain=settings.movies_drive_domain,
            final_host=settings.hubcloud_domain,
            intermediate_host=settings.mdrive_pattern,
        )
