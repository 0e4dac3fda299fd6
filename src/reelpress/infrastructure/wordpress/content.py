"""WordPress post body renderer.

Turns a :class:`MovieDetails` record into the HTML string sent as the
``content`` of a draft post. All interpolated values are HTML-escaped.
"""

from __future__ import annotations

from html import escape

from reelpress.domain.entities.movies import MovieDetails

MAX_SCREENSHOTS = 8

_INFO_FIELDS: tuple[tuple[str, str], ...] = (
    ("imdb_rating", "IMDb Rating"),
    ("genre", "Genre"),
    ("language", "Language"),
    ("quality", "Quality"),
    ("director", "Director"),
)


def render_post_title(details: MovieDetails) -> str:
    return details.title.strip() or "Untitled"


def _poster_block(details: MovieDetails) -> list[str]:
    if not details.poster_image:
        return []
    return [
        '<p style="text-align: center;">'
        f'<img class="aligncenter" src="{escape(details.poster_image)}" '
        f'alt="{escape(details.title)}" /></p>'
    ]


def _info_block(details: MovieDetails) -> list[str]:
    rows = [
        f"<li><strong>{label}:</strong> {escape(value)}</li>"
        for attr, label in _INFO_FIELDS
        if (value := getattr(details, attr))
    ]
    if not rows:
        return []
    return ["<h3>Movie Info</h3>", "<ul>", *rows, "</ul>"]


def _storyline_block(details: MovieDetails) -> list[str]:
    if not details.storyline:
        return []
    return ["<h3>Storyline</h3>", f"<p>{escape(details.storyline)}</p>"]


def _screenshot_block(details: MovieDetails) -> list[str]:
    shots = details.screenshots[:MAX_SCREENSHOTS]
    if not shots:
        return []
    images = [
        f'<img src="{escape(src)}" alt="Screenshot {i}" />'
        for i, src in enumerate(shots, start=1)
    ]
    return ["<h3>Screenshots</h3>", '<p style="text-align: center;">', *images, "</p>"]


def _download_block(details: MovieDetails) -> list[str]:
    if not details.download_links:
        return ["<h3>Download Links</h3>", "<p>No download links available yet.</p>"]
    buttons = [
        f'<p style="text-align: center;"><a href="{escape(link.url)}" '
        f'target="_blank" rel="noopener noreferrer">{escape(link.label)}</a></p>'
        for link in details.download_links
    ]
    return ["<h3>Download Links</h3>", *buttons]


def render_post_content(details: MovieDetails) -> str:
    """Render the post body HTML for *details*.

    Screenshots are capped at :data:`MAX_SCREENSHOTS`. Missing fields
    simply omit their section.
    """
    parts: list[str] = []
    for block in (
        _poster_block,
        _info_block,
        _storyline_block,
        _screenshot_block,
        _download_block,
    ):
        parts.extend(block(details))
    return "\n".join(parts)
