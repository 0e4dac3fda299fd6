"""WordPress endpoints: publish a movie as draft posts, verify credentials."""

from __future__ import annotations

from typing import cast

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, field_validator

from reelpress.domain.entities import (
    DownloadLink,
    InvalidRequest,
    MovieDetails,
    WordPressSite,
)
from reelpress.interfaces.api.presenter import present_wordpress_result
from reelpress.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/wordpress", tags=["wordpress"])


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SiteBody(_CamelModel):
    site_url: str = Field(alias="siteUrl")
    username: str
    app_password: str = Field(alias="appPassword")

    @field_validator("site_url", "username", "app_password")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v

    @field_validator("site_url")
    @classmethod
    def _http_url(cls, v: str) -> str:
        if not v.lower().startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return v

    def to_entity(self) -> WordPressSite:
        return WordPressSite(
            site_url=self.site_url,
            username=self.username,
            app_password=self.app_password,
        )


class DownloadLinkBody(BaseModel):
    label: str
    url: str


class MovieDetailsBody(_CamelModel):
    title: str = ""
    source_url: str = Field(default="", alias="sourceUrl")
    poster_image: str | None = Field(default=None, alias="posterImage")
    screenshots: list[str] = Field(default_factory=list)
    imdb_rating: str | None = Field(default=None, alias="imdbRating")
    genre: str | None = None
    language: str | None = None
    quality: str | None = None
    director: str | None = None
    storyline: str | None = None
    download_links: list[DownloadLinkBody] = Field(
        default_factory=list, alias="downloadLinks"
    )

    def to_entity(self) -> MovieDetails:
        return MovieDetails(
            title=self.title,
            source_url=self.source_url,
            poster_image=self.poster_image,
            screenshots=list(self.screenshots),
            imdb_rating=self.imdb_rating,
            genre=self.genre,
            language=self.language,
            quality=self.quality,
            director=self.director,
            storyline=self.storyline,
            download_links=[
                DownloadLink(label=link.label, url=link.url)
                for link in self.download_links
            ],
        )


class PublishBody(_CamelModel):
    movie_details: MovieDetailsBody = Field(alias="movieDetails")
    sites: list[SiteBody] = Field(default_factory=list)


@router.post("/publish")
async def publish(request: Request, body: PublishBody) -> JSONResponse:
    state = cast(AppState, request.app.state)
    try:
        results = await state.publish_post_uc.execute(
            body.movie_details.to_entity(),
            [site.to_entity() for site in body.sites],
        )
    except InvalidRequest as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    return JSONResponse(
        status_code=200,
        content={"results": [present_wordpress_result(r) for r in results]},
    )


@router.post("/verify")
async def verify(request: Request, body: SiteBody) -> JSONResponse:
    state = cast(AppState, request.app.state)
    result = await state.publish_post_uc.verify(body.to_entity())
    return JSONResponse(status_code=200, content=present_wordpress_result(result))
