"""Pattern search over every absolute URL found in a page's raw HTML."""

from __future__ import annotations

import re

_URL_RE = re.compile(r"""https?://[^\s"'<>()\\]+""", re.IGNORECASE)
_TRAILING_JUNK = "\\'\""


def find_matching_urls(html: str, pattern: str) -> list[str]:
    """Return absolute URLs containing *pattern* (case-insensitive).

    URLs are taken from anywhere in the document (attributes, inline
    scripts, text), stripped of trailing quote/backslash characters and
    de-duplicated in document order.
    """
    needle = pattern.strip().lower()
    if not html or not needle:
        return []

    matches: list[str] = []
    seen: set[str] = set()
    for m in _URL_RE.finditer(html):
        url = m.group(0)
        if needle not in url.lower():
            continue
        url = url.rstrip(_TRAILING_JUNK)
        if url not in seen:
            seen.add(url)
            matches.append(url)
    return matches
