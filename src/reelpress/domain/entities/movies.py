"""Domain entities for scraped movie posts.

Pure value objects with no framework dependencies and no I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PostSummary:
    """One entry of a listing page."""

    title: str
    url: str  # Detail page URL (absolute)
    thumbnail: str | None = None


@dataclass(frozen=True)
class DownloadLink:
    """A labeled candidate (intermediate) or resolved (final) download link."""

    label: str
    url: str


@dataclass(frozen=True)
class MovieDetails:
    """Full metadata extracted from one detail page."""

    title: str
    source_url: str
    poster_image: str | None = None
    screenshots: list[str] = field(default_factory=list)
    imdb_rating: str | None = None
    genre: str | None = None
    language: str | None = None
    quality: str | None = None
    director: str | None = None
    storyline: str | None = None
    download_links: list[DownloadLink] = field(default_factory=list)


@dataclass(frozen=True)
class MovieListResult:
    """Response of the listing use case."""

    posts: list[PostSummary]
    total_found: int
    error: str | None = None


@dataclass(frozen=True)
class LinkFinderResult:
    """Response of the link extraction and link search use cases."""

    url: str
    matched_links: list[str]
    total_found: int
    processing_time: int  # milliseconds
    movie_details: MovieDetails | None = None
    error: str | None = None
