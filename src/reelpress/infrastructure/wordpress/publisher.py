"""WordPress REST API publisher (application-password auth).

Creates draft posts via ``POST {site}/wp-json/wp/v2/posts`` and verifies
credentials via ``GET {site}/wp-json/wp/v2/users/me``. Failures come back as
:class:`WordPressPostResult` values; nothing raises.
"""

from __future__ import annotations

import json

import httpx
import structlog

from reelpress.domain.entities.wordpress import WordPressPostResult, WordPressSite

log = structlog.get_logger(__name__)


def _error_message(resp: httpx.Response) -> str:
    """Prefer the ``message`` of a WordPress error body over the status line."""
    try:
        body = resp.json()
    except (json.JSONDecodeError, ValueError):
        body = None
    if isinstance(body, dict) and body.get("message"):
        return f"{resp.status_code}: {body['message']}"
    return f"{resp.status_code} {resp.reason_phrase}".rstrip()


class WordPressPublisher:
    def __init__(self, http_client: httpx.AsyncClient, timeout: float = 30.0) -> None:
        self._http = http_client
        self._timeout = timeout

    def _auth(self, site: WordPressSite) -> httpx.BasicAuth:
        # Application passwords are shown with spaces; WordPress accepts both.
        return httpx.BasicAuth(site.username, site.app_password.replace(" ", ""))

    async def create_draft(
        self, site: WordPressSite, title: str, content: str
    ) -> WordPressPostResult:
        url = f"{site.api_root}/posts"
        try:
            resp = await self._http.post(
                url,
                json={"title": title, "content": content, "status": "draft"},
                auth=self._auth(site),
                timeout=self._timeout,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.warning("wordpress_publish_failed", site=site.site_url, error=str(exc))
            return WordPressPostResult(
                success=False,
                site_url=site.site_url,
                error=str(exc) or type(exc).__name__,
            )

        if not resp.is_success:
            error = _error_message(resp)
            log.warning("wordpress_publish_rejected", site=site.site_url, error=error)
            return WordPressPostResult(
                success=False, site_url=site.site_url, error=error
            )

        try:
            body = resp.json()
        except (json.JSONDecodeError, ValueError):
            body = {}
        post_id = body.get("id") if isinstance(body, dict) else None
        post_url = body.get("link") if isinstance(body, dict) else None

        log.info("wordpress_draft_created", site=site.site_url, post_id=post_id)
        return WordPressPostResult(
            success=True,
            site_url=site.site_url,
            post_id=post_id,
            post_url=post_url,
        )

    async def verify(self, site: WordPressSite) -> WordPressPostResult:
        url = f"{site.api_root}/users/me"
        try:
            resp = await self._http.get(
                url, auth=self._auth(site), timeout=self._timeout
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            log.warning("wordpress_verify_failed", site=site.site_url, error=str(exc))
            return WordPressPostResult(
                success=False,
                site_url=site.site_url,
                error=str(exc) or type(exc).__name__,
            )

        if not resp.is_success:
            return WordPressPostResult(
                success=False, site_url=site.site_url, error=_error_message(resp)
            )
        return WordPressPostResult(success=True, site_url=site.site_url)
