"""Tests for WordPressPublisher against a mocked REST API."""

from __future__ import annotations

import base64
import json

import httpx
import pytest
import respx

from reelpress.domain.entities import WordPressSite
from reelpress.infrastructure.wordpress import WordPressPublisher

_POSTS = "https://blog.example.com/wp-json/wp/v2/posts"
_ME = "https://blog.example.com/wp-json/wp/v2/users/me"


class TestCreateDraft:
    @respx.mock
    @pytest.mark.asyncio()
    async def test_success(self, wordpress_site: WordPressSite) -> None:
        route = respx.post(_POSTS).respond(
            201, json={"id": 42, "link": "https://blog.example.com/?p=42"}
        )
        async with httpx.AsyncClient() as client:
            result = await WordPressPublisher(client).create_draft(
                wordpress_site, "Title", "<p>body</p>"
            )

        assert result.success is True
        assert result.post_id == 42
        assert result.post_url == "https://blog.example.com/?p=42"
        assert result.site_url == "https://blog.example.com"

        request = route.calls.last.request
        assert json.loads(request.content) == {
            "title": "Title",
            "content": "<p>body</p>",
            "status": "draft",
        }
        expected = base64.b64encode(b"editor:abcdefghijklmnop").decode()
        assert request.headers["Authorization"] == f"Basic {expected}"

    @respx.mock
    @pytest.mark.asyncio()
    async def test_rejected_uses_wordpress_message(
        self, wordpress_site: WordPressSite
    ) -> None:
        respx.post(_POSTS).respond(
            401,
            json={"code": "rest_cannot_create", "message": "Sorry, you are not allowed."},
        )
        async with httpx.AsyncClient() as client:
            result = await WordPressPublisher(client).create_draft(
                wordpress_site, "Title", "body"
            )
        assert result.success is False
        assert result.error == "401: Sorry, you are not allowed."

    @respx.mock
    @pytest.mark.asyncio()
    async def test_rejected_without_json_body(
        self, wordpress_site: WordPressSite
    ) -> None:
        respx.post(_POSTS).respond(500, text="oops")
        async with httpx.AsyncClient() as client:
            result = await WordPressPublisher(client).create_draft(
                wordpress_site, "Title", "body"
            )
        assert result.error == "500 Internal Server Error"

    @respx.mock
    @pytest.mark.asyncio()
    async def test_transport_error(self, wordpress_site: WordPressSite) -> None:
        respx.post(_POSTS).mock(side_effect=httpx.ConnectError("failed"))
        async with httpx.AsyncClient() as client:
            result = await WordPressPublisher(client).create_draft(
                wordpress_site, "Title", "body"
            )
        assert result.success is False
        assert result.error == "failed"


class TestVerify:
    @respx.mock
    @pytest.mark.asyncio()
    async def test_valid_credentials(self, wordpress_site: WordPressSite) -> None:
        respx.get(_ME).respond(200, json={"id": 1, "name": "editor"})
        async with httpx.AsyncClient() as client:
            result = await WordPressPublisher(client).verify(wordpress_site)
        assert result.success is True

    @respx.mock
    @pytest.mark.asyncio()
    async def test_invalid_credentials(self, wordpress_site: WordPressSite) -> None:
        respx.get(_ME).respond(
            401, json={"code": "invalid_username", "message": "Unknown username."}
        )
        async with httpx.AsyncClient() as client:
            result = await WordPressPublisher(client).verify(wordpress_site)
        assert result.success is False
        assert result.error == "401: Unknown username."


class TestMalformedSiteUrl:
    """httpx rejects the URL before any request; both calls still return values."""

    _SITE = WordPressSite(site_url="http://[::1", username="u", app_password="p")

    @pytest.mark.asyncio()
    async def test_create_draft(self) -> None:
        async with httpx.AsyncClient() as client:
            result = await WordPressPublisher(client).create_draft(
                self._SITE, "Title", "body"
            )
        assert result.success is False
        assert result.site_url == "http://[::1"
        assert result.error

    @pytest.mark.asyncio()
    async def test_verify(self) -> None:
        async with httpx.AsyncClient() as client:
            result = await WordPressPublisher(client).verify(self._SITE)
        assert result.success is False
        assert result.error
