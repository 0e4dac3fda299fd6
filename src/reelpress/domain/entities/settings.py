"""Known-domain settings consumed by the extractors and the link resolver."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LISTING_DOMAIN = "moviesdrive.forum"
DEFAULT_FINAL_HOST = "hubcloud.foo"
DEFAULT_INTERMEDIATE_HOST = "mdrive.today"


def normalize_host(value: str) -> str:
    """Reduce ``https://host/path`` or ``host/`` to a bare ``host``.

    Raises:
        ValueError: Nothing is left once scheme and path are dropped.
    """
    host = value.strip()
    for prefix in ("https://", "http://"):
        if host.lower().startswith(prefix):
            host = host[len(prefix):]
    host = host.split("/", 1)[0]
    if not host:
        raise ValueError("host must not be empty")
    return host


@dataclass(frozen=True)
class DomainSettings:
    movies_drive_domain: str = DEFAULT_LISTING_DOMAIN  # listing site host
    hubcloud_domain: str = DEFAULT_FINAL_HOST  # final hosting host
    mdrive_pattern: str = DEFAULT_INTERMEDIATE_HOST  # intermediate link host

    @property
    def listing_base_url(self) -> str:
        return f"https://{self.movies_drive_domain}"
