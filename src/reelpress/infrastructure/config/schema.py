"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from reelpress.domain.entities.settings import (
    DEFAULT_FINAL_HOST,
    DEFAULT_INTERMEDIATE_HOST,
    DEFAULT_LISTING_DOMAIN,
    DomainSettings,
    normalize_host,
)

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


def _normalize_host(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"Expected host string, got: {type(value)!r}")
    return normalize_host(value)


class AppConfig(BaseModel):
    """Validated runtime configuration.

    Every sectioned field accepts its flat name (``final_host``) or its YAML
    path (``sites.final_host``); load.py derives its flat-to-section map from
    these aliases.
    """

    # General
    app_name: str = Field(default="reelpress", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # HTTP (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="HTTP timeout in seconds for upstream page fetches.",
    )
    http_follow_redirects: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "http_follow_redirects",
            AliasPath("http", "follow_redirects"),
        ),
        description="Whether HTTP client follows redirects.",
    )
    http_user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/120.0.0.0 Safari/537.36"
        ),
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="Browser User-Agent sent with every upstream request.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    # Known domains (YAML section: sites.*)
    listing_domain: str = Field(
        default=DEFAULT_LISTING_DOMAIN,
        validation_alias=AliasChoices(
            "listing_domain",
            AliasPath("sites", "listing_domain"),
        ),
        description="Host of the movie-listing site.",
    )
    final_host: str = Field(
        default=DEFAULT_FINAL_HOST,
        validation_alias=AliasChoices(
            "final_host",
            AliasPath("sites", "final_host"),
        ),
        description="Host of the final download links surfaced to the user.",
    )
    intermediate_host: str = Field(
        default=DEFAULT_INTERMEDIATE_HOST,
        validation_alias=AliasChoices(
            "intermediate_host",
            AliasPath("sites", "intermediate_host"),
        ),
        description="Host of the intermediate redirect links on detail pages.",
    )

    # Link resolution (YAML section: resolver.*)
    resolver_max_concurrent: int = Field(
        default=10,
        validation_alias=AliasChoices(
            "resolver_max_concurrent",
            AliasPath("resolver", "max_concurrent"),
        ),
        description="Max parallel intermediate-link fetches per detail page.",
    )

    # Listing (YAML section: listing.*)
    listing_max_posts: int = Field(
        default=30,
        validation_alias=AliasChoices(
            "listing_max_posts",
            AliasPath("listing", "max_posts"),
        ),
        description="Max posts returned per listing page.",
    )

    @field_validator("listing_domain", "final_host", "intermediate_host", mode="before")
    @classmethod
    def _validate_hosts(cls, v: Any) -> str:
        return _normalize_host(v)

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("resolver_max_concurrent", "listing_max_posts")
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("value must be >= 1")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def domain_settings(self) -> DomainSettings:
        """Initial known-domain settings for the in-memory settings store."""
        return DomainSettings(
            movies_drive_domain=self.listing_domain,
            hubcloud_domain=self.final_host,
            mdrive_pattern=self.intermediate_host,
        )

    def to_sectioned_dict(self) -> dict[str, Any]:
        """Dump in the sectioned shape of config.example.yaml."""
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "follow_redirects": self.http_follow_redirects,
                "user_agent": self.http_user_agent,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
            "sites": {
                "listing_domain": self.listing_domain,
                "final_host": self.final_host,
                "intermediate_host": self.intermediate_host,
            },
            "resolver": {"max_concurrent": self.resolver_max_concurrent},
            "listing": {"max_posts": self.listing_max_posts},
        }


class EnvOverrides(BaseSettings):
    """REELPRESS_* environment variables, one per flat AppConfig field.

    Unset variables stay ``None`` and are left out of the merge, e.g.
    ``REELPRESS_FINAL_HOST=files.example`` overrides only ``sites.final_host``.
    """

    model_config = SettingsConfigDict(
        env_prefix="REELPRESS_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_timeout_seconds: Optional[float] = None
    http_follow_redirects: Optional[bool] = None
    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    listing_domain: Optional[str] = None
    final_host: Optional[str] = None
    intermediate_host: Optional[str] = None

    resolver_max_concurrent: Optional[int] = None
    listing_max_posts: Optional[int] = None

    def to_update_dict(self) -> dict[str, Any]:
        """Values that were actually set."""
        return self.model_dump(exclude_none=True)
