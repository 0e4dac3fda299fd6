from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WordPressSite:
    """Credentials for one WordPress site (application password auth)."""

    site_url: str
    username: str
    app_password: str

    @property
    def api_root(self) -> str:
        return f"{self.site_url.rstrip('/')}/wp-json/wp/v2"


@dataclass(frozen=True)
class WordPressPostResult:
    success: bool
    site_url: str = ""
    post_id: int | None = None
    post_url: str | None = None
    error: str | None = None
