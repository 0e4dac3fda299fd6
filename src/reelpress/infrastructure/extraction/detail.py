"""Detail page extractor: one post page -> :class:`MovieDetails`.

Each field is produced by an independent rule ``(html) -> value``; a miss
yields ``None`` (or an empty list) and never affects the other rules.

Structure of a typical detail page::

    <h1 class="entry-title">Movie Name (2024) WEB-DL</h1>
    <div class="entry-content">
      <p><img class="aligncenter size-full" src="POSTER"></p>
      <p><strong>iMDB Rating:</strong> <em>7.4/10</em><br>
         <strong>Genre:</strong> Action, Thriller<br>
         <strong>Language:</strong> Hindi-English</p>
      <h3>Storyline:</h3>
      <p>PLOT TEXT</p>
      <img src="https://imgbox.com/SCREEN1.jpg"> ...
      <h5>Movie Name 2024 720p [1.2GB]</h5>
      <p><a href="https://mdrive.today/archives/123">Download</a></p>
      <h5>Movie Name 2024 1080p [2.4GB]</h5>
      <p><a href="https://mdrive.today/archives/456">Download</a></p>
    </div>
"""

from __future__ import annotations

import re
from collections import deque
from functools import lru_cache
from typing import Callable
from urllib.parse import urlparse

from reelpress.domain.entities.movies import DownloadLink, MovieDetails
from reelpress.domain.entities.settings import DEFAULT_INTERMEDIATE_HOST

from .html_text import clean_text

DEFAULT_SCREENSHOT_DOMAINS: tuple[str, ...] = (
    "imgbox.com",
    "pixhost.to",
    "imagetwist.com",
    "ibb.co",
    "imgur.com",
)

_MIN_STORYLINE_CHARS = 20
_MIN_CONTENT_PARAGRAPH_CHARS = 100

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------
_TITLE_H1_RE = re.compile(
    r'<h1\b[^>]*class="[^"]*\b(?:entry-title|post-title|page-title)\b[^"]*"[^>]*>'
    r"(.*?)</h1>",
    re.IGNORECASE | re.DOTALL,
)
_ANY_H1_RE = re.compile(r"<h1\b[^>]*>(.*?)</h1>", re.IGNORECASE | re.DOTALL)
_IMG_TAG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_CENTERED_RE = re.compile(r"\baligncenter\b", re.IGNORECASE)

# Value after a "Label:" with adjacent emphasis tags skipped.
_EMPHASIS_SKIP = r"(?:</?(?:strong|b|em|i|u|span)\b[^>]*>\s*)*"


def _labeled(label: str) -> re.Pattern[str]:
    return re.compile(
        rf"\b{label}\s*:\s*{_EMPHASIS_SKIP}([^<\r\n]+)",
        re.IGNORECASE,
    )


_RATING_RE = _labeled(r"(?:IMDb\s*)?Rating")
_GENRE_RE = _labeled(r"Genres?")
_LANGUAGE_RE = _labeled(r"Languages?")
_QUALITY_RE = _labeled(r"Quality")
_DIRECTOR_RE = _labeled(r"Directors?")

_STORYLINE_LABEL_RE = re.compile(
    r"\bStoryline\s*:?\s*(?:<[^>]+>\s*)*([^<]+)",
    re.IGNORECASE,
)
_LABELED_PARAGRAPH_RE = re.compile(
    r"<p\b[^>]*>\s*<(strong|b)\b[^>]*>\s*(?:Plot|Synopsis|Summary)\s*:?\s*</\1>"
    r"\s*:?\s*(.{30,1500}?)</p>",
    re.IGNORECASE | re.DOTALL,
)
_CONTENT_BLOCK_RE = re.compile(
    r'<div\b[^>]*class="[^"]*\bentry-content\b[^"]*"[^>]*>',
    re.IGNORECASE,
)
_PARAGRAPH_RE = re.compile(r"<p\b[^>]*>(.*?)</p>", re.IGNORECASE | re.DOTALL)

_QUALITY_TOKEN_RE = re.compile(r"\b(?:480p|720p|1080p|2160p|4k)\b", re.IGNORECASE)
_SECTION_TITLE_RE = re.compile(r"download\s+links?", re.IGNORECASE)


@lru_cache(maxsize=16)
def _href_re(host: str) -> re.Pattern[str]:
    return re.compile(
        rf"""href\s*=\s*["'](https?://[^"']*{re.escape(host)}[^"']*)["']""",
        re.IGNORECASE,
    )


@lru_cache(maxsize=16)
def _heading_or_href_re(host: str) -> re.Pattern[str]:
    return re.compile(
        r"<h(?P<level>[2-6])\b[^>]*>(?P<heading>.*?)</h(?P=level)\s*>"
        rf"""|href\s*=\s*["'](?P<url>https?://[^"']*{re.escape(host)}[^"']*)["']""",
        re.IGNORECASE | re.DOTALL,
    )


# ---------------------------------------------------------------------------
# Attribute helpers
# ---------------------------------------------------------------------------
def _attr(tag: str, name: str) -> str | None:
    m = re.search(
        rf"""\s{name}\s*=\s*(?:"([^"]*)"|'([^']*)')""", tag, re.IGNORECASE
    )
    if not m:
        return None
    value = m.group(1) if m.group(1) is not None else m.group(2)
    return value.strip() or None


def _img_src(tag: str) -> str | None:
    src = _attr(tag, "src")
    if src and not src.startswith("data:"):
        return src
    return _attr(tag, "data-src")


def _host_matches(url: str, domains: tuple[str, ...]) -> bool:
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return False
    return any(host == d or host.endswith(f".{d}") for d in domains)


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------
def extract_title(html: str) -> str | None:
    for pattern in (_TITLE_H1_RE, _ANY_H1_RE):
        for m in pattern.finditer(html):
            title = clean_text(m.group(1))
            if title:
                return title
    return None


def extract_poster(html: str) -> str | None:
    for m in _IMG_TAG_RE.finditer(html):
        tag = m.group(0)
        css = _attr(tag, "class")
        if css and _CENTERED_RE.search(css):
            src = _img_src(tag)
            if src:
                return src
    return None


def extract_screenshots(
    html: str, domains: tuple[str, ...] = DEFAULT_SCREENSHOT_DOMAINS
) -> list[str]:
    shots: list[str] = []
    seen: set[str] = set()
    for m in _IMG_TAG_RE.finditer(html):
        src = _img_src(m.group(0))
        if src and src not in seen and _host_matches(src, domains):
            seen.add(src)
            shots.append(src)
    return shots


def _first_labeled(pattern: re.Pattern[str]) -> Callable[[str], str | None]:
    def rule(html: str) -> str | None:
        for m in pattern.finditer(html):
            value = clean_text(m.group(1))
            if value:
                return value
        return None

    return rule


extract_rating = _first_labeled(_RATING_RE)
extract_genre = _first_labeled(_GENRE_RE)
extract_language = _first_labeled(_LANGUAGE_RE)
extract_quality = _first_labeled(_QUALITY_RE)
extract_director = _first_labeled(_DIRECTOR_RE)


def _storyline_from_label(html: str) -> str | None:
    for m in _STORYLINE_LABEL_RE.finditer(html):
        text = clean_text(m.group(1))
        if len(text) >= _MIN_STORYLINE_CHARS:
            return text
    return None


def _storyline_from_labeled_paragraph(html: str) -> str | None:
    m = _LABELED_PARAGRAPH_RE.search(html)
    if m:
        return clean_text(m.group(2)) or None
    return None


def _storyline_from_content_block(html: str) -> str | None:
    block = _CONTENT_BLOCK_RE.search(html)
    if not block:
        return None
    for m in _PARAGRAPH_RE.finditer(html, block.end()):
        text = clean_text(m.group(1))
        if len(text) >= _MIN_CONTENT_PARAGRAPH_CHARS:
            return text
    return None


def extract_storyline(html: str) -> str | None:
    for rule in (
        _storyline_from_label,
        _storyline_from_labeled_paragraph,
        _storyline_from_content_block,
    ):
        text = rule(html)
        if text:
            return text
    return None


def _download_label(heading_html: str) -> str | None:
    """Return the heading text if it names a download quality."""
    text = clean_text(heading_html)
    if not text or not _QUALITY_TOKEN_RE.search(text):
        return None
    if _SECTION_TITLE_RE.search(text):
        return None
    return text


def extract_download_links(
    html: str, intermediate_host: str = DEFAULT_INTERMEDIATE_HOST
) -> list[DownloadLink]:
    """Pair quality headings with intermediate-host links in one pass.

    Quality headings (h2-h6; h1 is the post title) queue their text as
    pending labels; each new link takes the oldest pending label, or
    ``"Download Link {n}"`` when no label is pending. Links are
    de-duplicated by exact URL and a duplicate does not consume a label.
    """
    links: list[DownloadLink] = []
    seen: set[str] = set()
    pending: deque[str] = deque()

    def take(url: str) -> None:
        if url in seen:
            return
        seen.add(url)
        label = pending.popleft() if pending else f"Download Link {len(links) + 1}"
        links.append(DownloadLink(label=label, url=url))

    for m in _heading_or_href_re(intermediate_host).finditer(html):
        heading = m.group("heading")
        if heading is None:
            take(m.group("url"))
            continue
        label = _download_label(heading)
        if label:
            pending.append(label)
        # Links nested in the heading itself follow its label.
        for inner in _href_re(intermediate_host).finditer(heading):
            take(inner.group(1))

    return links


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
_TEXT_RULES: tuple[tuple[str, Callable[[str], str | None]], ...] = (
    ("imdb_rating", extract_rating),
    ("genre", extract_genre),
    ("language", extract_language),
    ("quality", extract_quality),
    ("director", extract_director),
    ("storyline", extract_storyline),
)


def extract_movie_details(
    html: str,
    source_url: str,
    *,
    intermediate_host: str = DEFAULT_INTERMEDIATE_HOST,
    screenshot_domains: tuple[str, ...] = DEFAULT_SCREENSHOT_DOMAINS,
) -> MovieDetails:
    """Extract a :class:`MovieDetails` record from a detail page.

    Pure and deterministic: the same input always yields an equal record.
    An empty or unrecognised document yields an empty title, ``None``
    fields and empty lists.
    """
    html = html or ""
    text_fields = {name: rule(html) for name, rule in _TEXT_RULES}
    return MovieDetails(
        title=extract_title(html) or "",
        source_url=source_url,
        poster_image=extract_poster(html),
        screenshots=extract_screenshots(html, screenshot_domains),
        download_links=extract_download_links(html, intermediate_host),
        **text_fields,
    )
