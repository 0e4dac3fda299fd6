from __future__ import annotations

import re
from typing import cast

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from reelpress.interfaces.api.presenter import present_movie_list
from reelpress.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(tags=["movies"])

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _parse_page(raw: str | None) -> int:
    """Leading digits win (``2abc`` is page 2); anything else is page 1."""
    m = _LEADING_INT_RE.match(raw or "")
    if not m:
        return 1
    page = int(m.group(1))
    return page if page >= 1 else 1


@router.get("/movies")
async def list_movies(
    request: Request,
    page: str | None = Query(default=None, description="Listing page number."),
) -> JSONResponse:
    state = cast(AppState, request.app.state)
    page_no = _parse_page(page)

    try:
        result = await state.list_movies_uc.execute(page_no)
    except Exception as exc:
        log.exception("movies_endpoint_failed", page=page_no)
        return JSONResponse(
            status_code=200,
            content={"posts": [], "totalFound": 0, "error": str(exc) or "Unknown error"},
        )

    return JSONResponse(status_code=200, content=present_movie_list(result))
