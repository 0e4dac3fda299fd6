"""Tests for the generic URL pattern search."""

from __future__ import annotations

from reelpress.infrastructure.extraction.links import find_matching_urls


class TestFindMatchingUrls:
    def test_matches_case_insensitively(self) -> None:
        html = '<a href="https://MDRIVE.today/archives/1">x</a>'
        assert find_matching_urls(html, "mdrive.today") == [
            "https://MDRIVE.today/archives/1"
        ]

    def test_finds_urls_outside_attributes(self) -> None:
        html = (
            "<script>var u = 'https://mdrive.today/archives/2';</script>"
            "<p>see https://mdrive.today/archives/3 now</p>"
        )
        assert find_matching_urls(html, "mdrive") == [
            "https://mdrive.today/archives/2",
            "https://mdrive.today/archives/3",
        ]

    def test_trailing_backslash_stripped_and_deduplicated(self) -> None:
        html = (
            '{"a": "https://mdrive.today/archives/4\\\\"}'
            '<a href="https://mdrive.today/archives/4">x</a>'
        )
        assert find_matching_urls(html, "mdrive") == [
            "https://mdrive.today/archives/4"
        ]

    def test_non_matching_urls_skipped(self) -> None:
        html = '<a href="https://other.example/a">x</a>'
        assert find_matching_urls(html, "mdrive") == []

    def test_blank_pattern(self) -> None:
        assert find_matching_urls('<a href="https://x.example/">', "  ") == []
