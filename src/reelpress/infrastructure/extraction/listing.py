"""Listing page extractor: post cards -> ordered, de-duplicated summaries.

Two tiers because the site's markup has drifted across versions:

1. Primary: ``<a href>`` wrapping ``div.poster-card`` wrapping an ``<img>``
   and ``p.poster-title``. Yields URL, thumbnail and title.
2. Secondary (only if the primary tier accepts nothing): any year-bearing
   ``href`` on the site followed eventually by ``p.poster-title``. No
   thumbnail.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Iterator

import structlog

from reelpress.domain.entities.movies import PostSummary
from reelpress.domain.entities.settings import DEFAULT_LISTING_DOMAIN

from .html_text import decode_title_entities

log = structlog.get_logger(__name__)

MAX_POSTS = 30
_MIN_TITLE_CHARS = 6


@lru_cache(maxsize=16)
def _card_patterns(site_domain: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    site = re.escape(site_domain)
    primary = re.compile(
        rf'<a\s+href="(https://{site}/[^"]+)"[^>]*>\s*'
        r'<div\s+class="poster-card"[^>]*>[\s\S]*?'
        r'<img\s+src="([^"]*)"[^>]*>[\s\S]*?'
        r'<p\s+class="poster-title">([^<]+)</p>[\s\S]*?'
        r"</div>\s*</a>",
        re.IGNORECASE,
    )
    secondary = re.compile(
        rf'href="(https://{site}/[^"]*\d{{4}}[^"]*)"[^>]*>[\s\S]*?'
        r'<p\s+class="poster-title">([^<]+)</p>',
        re.IGNORECASE,
    )
    return primary, secondary


def _primary_candidates(
    pattern: re.Pattern[str], html: str
) -> Iterator[tuple[str, str | None, str]]:
    for m in pattern.finditer(html):
        yield m.group(1), m.group(2) or None, m.group(3)


def _secondary_candidates(
    pattern: re.Pattern[str], html: str
) -> Iterator[tuple[str, str | None, str]]:
    for m in pattern.finditer(html):
        yield m.group(1), None, m.group(2)


def _accept(
    candidates: Iterator[tuple[str, str | None, str]],
    seen: set[str],
) -> list[PostSummary]:
    posts: list[PostSummary] = []
    for url, thumbnail, raw_title in candidates:
        title = decode_title_entities(raw_title)
        if url in seen or len(title) < _MIN_TITLE_CHARS:
            continue
        seen.add(url)
        posts.append(PostSummary(title=title, url=url, thumbnail=thumbnail))
    return posts


def extract_movie_posts(
    html: str,
    *,
    site_domain: str = DEFAULT_LISTING_DOMAIN,
    limit: int = MAX_POSTS,
) -> list[PostSummary]:
    """Extract post summaries from a listing page, in document order.

    Titles of five characters or fewer and repeated detail URLs are
    dropped (first occurrence wins). At most *limit* posts are returned.
    """
    if not html:
        return []

    primary, secondary = _card_patterns(site_domain)
    seen: set[str] = set()

    posts = _accept(_primary_candidates(primary, html), seen)
    if not posts:
        posts = _accept(_secondary_candidates(secondary, html), seen)
        if posts:
            log.debug("listing_secondary_pattern_used", count=len(posts))

    return posts[:limit]
