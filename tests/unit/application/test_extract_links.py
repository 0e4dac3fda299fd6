"""Tests for ExtractLinksUseCase."""

from __future__ import annotations

from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import pytest

from reelpress.application.use_cases.extract_links import (
    ExtractLinksUseCase,
    validate_page_url,
)
from reelpress.domain.entities import (
    DomainSettings,
    DownloadLink,
    FetchOutcome,
    InvalidRequest,
    MovieDetails,
)
from reelpress.infrastructure.extraction import extract_movie_details
from reelpress.infrastructure.resolution import LinkResolver
from reelpress.infrastructure.settings import InMemorySettingsStore

DETAIL_URL = "https://moviesdrive.forum/inception-2010-bluray/"


class TestValidatePageUrl:
    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_missing(self, url: str | None) -> None:
        with pytest.raises(InvalidRequest, match="URL is required"):
            validate_page_url(url)

    @pytest.mark.parametrize(
        "url", ["ftp://x.example/a", "moviesdrive.forum/a", "https://", "http://[::1"]
    )
    def test_not_http(self, url: str) -> None:
        with pytest.raises(InvalidRequest):
            validate_page_url(url)

    def test_strips(self) -> None:
        assert validate_page_url("  https://x.example/a ") == "https://x.example/a"

    def test_unparseable_is_invalid_request(self) -> None:
        with pytest.raises(InvalidRequest, match="Malformed URL"):
            validate_page_url("http://[::1/post")


def _pages(
    detail_html: str, intermediate_html: Callable[[str], str]
) -> dict[str, FetchOutcome]:
    return {
        DETAIL_URL: FetchOutcome.success(DETAIL_URL, detail_html),
        "https://mdrive.today/archives/111": FetchOutcome.success(
            "https://mdrive.today/archives/111", intermediate_html("hd")
        ),
        "https://mdrive.today/archives/222": FetchOutcome.failed(
            "https://mdrive.today/archives/222", "Failed to fetch: 502 Bad Gateway", 502
        ),
    }


def _use_case(fetcher: AsyncMock, store: InMemorySettingsStore) -> ExtractLinksUseCase:
    return ExtractLinksUseCase(
        fetcher=fetcher,
        settings=store,
        extract_fn=extract_movie_details,
        resolver_factory=lambda host: LinkResolver(fetcher, host),
    )


class TestExecute:
    @pytest.mark.asyncio()
    async def test_extracts_and_resolves(
        self, detail_html: str, intermediate_html: Callable[[str], str]
    ) -> None:
        pages = _pages(detail_html, intermediate_html)
        fetcher = AsyncMock()
        fetcher.fetch.side_effect = lambda url: pages[url]

        result = await _use_case(fetcher, InMemorySettingsStore()).execute(DETAIL_URL)

        assert result.error is None
        assert result.url == DETAIL_URL
        assert result.matched_links == ["https://hubcloud.foo/drive/hd"]
        assert result.total_found == 1
        assert result.processing_time >= 0
        assert result.movie_details is not None
        assert result.movie_details.title == "Inception (2010) 720p BluRay"
        assert result.movie_details.download_links == [
            DownloadLink("Inception 2010 720p [1.2GB]", "https://hubcloud.foo/drive/hd")
        ]

    @pytest.mark.asyncio()
    async def test_invalid_url_fetches_nothing(self, mock_fetcher: AsyncMock) -> None:
        with pytest.raises(InvalidRequest):
            await _use_case(mock_fetcher, InMemorySettingsStore()).execute("")
        mock_fetcher.fetch.assert_not_called()

    @pytest.mark.asyncio()
    async def test_upstream_failure(self, mock_fetcher: AsyncMock) -> None:
        mock_fetcher.fetch.side_effect = lambda url: FetchOutcome.failed(
            url, "Failed to fetch: 404 Not Found", 404
        )
        result = await _use_case(mock_fetcher, InMemorySettingsStore()).execute(
            DETAIL_URL
        )
        assert result.error == "Failed to fetch: 404 Not Found"
        assert result.matched_links == []
        assert result.total_found == 0
        assert result.movie_details is None

    @pytest.mark.asyncio()
    async def test_uses_current_domain_settings(self, mock_fetcher: AsyncMock) -> None:
        store = InMemorySettingsStore()
        store.set(
            DomainSettings(hubcloud_domain="files.example", mdrive_pattern="hop.example")
        )
        extract = MagicMock(return_value=MovieDetails(title="T", source_url=DETAIL_URL))
        factory = MagicMock()
        factory.return_value.resolve = AsyncMock(return_value=[])

        uc = ExtractLinksUseCase(
            fetcher=mock_fetcher,
            settings=store,
            extract_fn=extract,
            resolver_factory=factory,
        )
        await uc.execute(DETAIL_URL)

        assert extract.call_args.kwargs == {"intermediate_host": "hop.example"}
        factory.assert_called_once_with("files.example")

    @pytest.mark.asyncio()
    async def test_resolver_crash_keeps_candidates(
        self, mock_fetcher: AsyncMock, detail_html: str
    ) -> None:
        mock_fetcher.fetch.side_effect = lambda url: FetchOutcome.success(
            url, detail_html
        )
        factory = MagicMock()
        factory.return_value.resolve = AsyncMock(side_effect=RuntimeError("boom"))
        uc = ExtractLinksUseCase(
            fetcher=mock_fetcher,
            settings=InMemorySettingsStore(),
            extract_fn=extract_movie_details,
            resolver_factory=factory,
        )
        result = await uc.execute(DETAIL_URL)
        assert result.error is None
        assert result.matched_links == [
            "https://mdrive.today/archives/111",
            "https://mdrive.today/archives/222",
        ]
