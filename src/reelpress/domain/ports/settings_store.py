"""Port for the mutable known-domain settings."""

from __future__ import annotations

from typing import Protocol

from reelpress.domain.entities.settings import DomainSettings


class SettingsStorePort(Protocol):
    def get(self) -> DomainSettings: ...

    def set(self, settings: DomainSettings) -> None: ...
