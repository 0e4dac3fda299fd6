"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

from reelpress.domain.entities.settings import (
    DEFAULT_FINAL_HOST,
    DEFAULT_INTERMEDIATE_HOST,
    DEFAULT_LISTING_DOMAIN,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "reelpress",
    "environment": "dev",
    "http": {
        "timeout_seconds": 30.0,
        "follow_redirects": True,
        "user_agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "sites": {
        "listing_domain": DEFAULT_LISTING_DOMAIN,
        "final_host": DEFAULT_FINAL_HOST,
        "intermediate_host": DEFAULT_INTERMEDIATE_HOST,
    },
    "resolver": {
        "max_concurrent": 10,
    },
    "listing": {
        "max_posts": 30,
    },
}
