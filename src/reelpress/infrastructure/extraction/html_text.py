"""Text cleanup helpers shared by the regex extractors."""

from __future__ import annotations

import re
from html import unescape

_AMP_ENTITY_RE = re.compile(r"&#0*38;|&amp;", re.IGNORECASE)
_ANY_ENTITY_RE = re.compile(r"&[^;\s]+;")
_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")


def decode_title_entities(raw: str) -> str:
    """Decode a listing title the way the listing cards need it.

    Ampersand entities become ``&``; every other entity collapses to a
    space. Surrounding whitespace is trimmed.
    """
    text = _AMP_ENTITY_RE.sub("&", raw)
    text = _ANY_ENTITY_RE.sub(" ", text)
    return text.strip()


def strip_tags(fragment: str) -> str:
    return _TAG_RE.sub(" ", fragment)


def clean_text(fragment: str) -> str:
    """Strip markup, decode all HTML entities and collapse whitespace."""
    text = unescape(strip_tags(fragment))
    return _WS_RE.sub(" ", text).strip()
