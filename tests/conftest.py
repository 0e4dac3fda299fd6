"""Shared test fixtures for the reelpress test suite."""

from __future__ import annotations

from typing import Callable
from unittest.mock import AsyncMock

import pytest

from reelpress.domain.entities import (
    DomainSettings,
    DownloadLink,
    FetchOutcome,
    MovieDetails,
    WordPressSite,
)
from reelpress.infrastructure.settings import InMemorySettingsStore

# ---------------------------------------------------------------------------
# HTML fixtures
# ---------------------------------------------------------------------------

LISTING_HTML = """
<div class="posts">
  <a href="https://moviesdrive.forum/inception-2010-bluray/">
    <div class="poster-card">
      <img src="https://img.example/inception.jpg" alt="">
      <p class="poster-title">Inception (2010) BluRay</p>
    </div>
  </a>
  <a href="https://moviesdrive.forum/tom-jerry-2021/">
    <div class="poster-card">
      <img src="https://img.example/tj.jpg" alt="">
      <p class="poster-title">Tom &amp; Jerry &#8211; 2021</p>
    </div>
  </a>
  <a href="https://moviesdrive.forum/inception-2010-bluray/">
    <div class="poster-card">
      <img src="https://img.example/inception-dup.jpg" alt="">
      <p class="poster-title">Inception Again</p>
    </div>
  </a>
</div>
"""

DETAIL_HTML = """
<html><body>
<h1 class="entry-title">Inception (2010) 720p BluRay</h1>
<div class="entry-content">
  <p><img class="aligncenter size-full" src="https://img.example/poster.jpg"></p>
  <p><strong>iMDB Rating:</strong> <em>8.8/10</em><br>
     <strong>Genre:</strong> Action, Sci-Fi<br>
     <strong>Language:</strong> English<br>
     <strong>Quality:</strong> 720p &amp; 1080p<br>
     <strong>Director:</strong> Christopher Nolan</p>
  <h3>Storyline:</h3>
  <p>A thief who steals corporate secrets through dream-sharing technology.</p>
  <p><img src="https://imgbox.com/shot1.jpg"><img src="https://pixhost.to/shot2.jpg">
     <img src="https://imgbox.com/shot1.jpg"><img src="https://cdn.example/ad.jpg"></p>
  <h4>Download Links</h4>
  <h5>Inception 2010 720p [1.2GB]</h5>
  <p><a href="https://mdrive.today/archives/111">Download</a></p>
  <h5>Inception 2010 1080p [2.4GB]</h5>
  <p><a href="https://mdrive.today/archives/222">Download</a></p>
</div>
</body></html>
"""

INTERMEDIATE_HTML_TEMPLATE = """
<html><body>
<a href="https://example.org/ad">Ad</a>
<a href="https://hubcloud.foo/drive/{token}">Instant Download</a>
<a href="https://hubcloud.foo/drive/other">Mirror</a>
</body></html>
"""


@pytest.fixture()
def listing_html() -> str:
    return LISTING_HTML


@pytest.fixture()
def detail_html() -> str:
    return DETAIL_HTML


@pytest.fixture()
def intermediate_html() -> Callable[[str], str]:
    """Factory for an intermediate page pointing at hubcloud.foo/drive/{token}."""

    def _make(token: str) -> str:
        return INTERMEDIATE_HTML_TEMPLATE.format(token=token)

    return _make


# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def domain_settings() -> DomainSettings:
    return DomainSettings()


@pytest.fixture()
def settings_store(domain_settings: DomainSettings) -> InMemorySettingsStore:
    return InMemorySettingsStore(domain_settings)


@pytest.fixture()
def movie_details() -> MovieDetails:
    """Resolved MovieDetails as returned by the extraction use case."""
    return MovieDetails(
        title="Inception (2010) 720p BluRay",
        source_url="https://moviesdrive.forum/inception-2010-bluray/",
        poster_image="https://img.example/poster.jpg",
        screenshots=["https://imgbox.com/shot1.jpg"],
        imdb_rating="8.8/10",
        genre="Action, Sci-Fi",
        language="English",
        quality="720p & 1080p",
        director="Christopher Nolan",
        storyline="A thief who steals corporate secrets.",
        download_links=[
            DownloadLink(label="720p", url="https://hubcloud.foo/drive/aaa"),
        ],
    )


@pytest.fixture()
def wordpress_site() -> WordPressSite:
    return WordPressSite(
        site_url="https://blog.example.com",
        username="editor",
        app_password="abcd efgh ijkl mnop",
    )


# ---------------------------------------------------------------------------
# Port mocks
# ---------------------------------------------------------------------------


@pytest.fixture()
def mock_fetcher() -> AsyncMock:
    """Page fetcher whose fetch() returns an empty successful page by default."""
    fetcher = AsyncMock()
    fetcher.fetch.side_effect = lambda url: FetchOutcome.success(url, "")
    return fetcher
