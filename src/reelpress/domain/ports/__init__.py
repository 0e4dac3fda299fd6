from .page_fetcher import PageFetcherPort
from .publisher import PublisherPort
from .settings_store import SettingsStorePort

__all__ = [
    "PageFetcherPort",
    "PublisherPort",
    "SettingsStorePort",
]
