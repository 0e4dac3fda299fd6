"""JSON presenters: domain entities -> camelCase response payloads."""

from __future__ import annotations

from typing import Any

from reelpress.domain.entities import (
    DomainSettings,
    LinkFinderResult,
    MovieDetails,
    MovieListResult,
    PostSummary,
    WordPressPostResult,
)


def present_post(post: PostSummary) -> dict[str, Any]:
    payload: dict[str, Any] = {"title": post.title, "url": post.url}
    if post.thumbnail:
        payload["thumbnail"] = post.thumbnail
    return payload


def present_movie_list(result: MovieListResult) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "posts": [present_post(p) for p in result.posts],
        "totalFound": result.total_found,
    }
    if result.error:
        payload["error"] = result.error
    return payload


def present_movie_details(details: MovieDetails) -> dict[str, Any]:
    return {
        "title": details.title,
        "posterImage": details.poster_image,
        "screenshots": list(details.screenshots),
        "genre": details.genre,
        "language": details.language,
        "quality": details.quality,
        "imdbRating": details.imdb_rating,
        "director": details.director,
        "storyline": details.storyline,
        "downloadLinks": [
            {"label": link.label, "url": link.url} for link in details.download_links
        ],
        "sourceUrl": details.source_url,
    }


def present_link_result(result: LinkFinderResult) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "url": result.url,
        "matchedLinks": list(result.matched_links),
        "totalFound": result.total_found,
        "processingTime": result.processing_time,
    }
    if result.movie_details is not None:
        payload["movieDetails"] = present_movie_details(result.movie_details)
    if result.error:
        payload["error"] = result.error
    return payload


def present_settings(settings: DomainSettings) -> dict[str, str]:
    return {
        "moviesDriveDomain": settings.movies_drive_domain,
        "hubcloudDomain": settings.hubcloud_domain,
        "mdrivePattern": settings.mdrive_pattern,
    }


def present_wordpress_result(result: WordPressPostResult) -> dict[str, Any]:
    payload: dict[str, Any] = {"success": result.success, "siteUrl": result.site_url}
    if result.post_id is not None:
        payload["postId"] = result.post_id
    if result.post_url:
        payload["postUrl"] = result.post_url
    if result.error:
        payload["error"] = result.error
    return payload
