"""Link endpoints: detail-page extraction and generic pattern search."""

from __future__ import annotations

from typing import cast

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from reelpress.domain.entities import InvalidRequest
from reelpress.interfaces.api.presenter import present_link_result
from reelpress.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(tags=["links"])


class ExtractLinksRequest(BaseModel):
    url: str | None = None


class FindLinksRequest(BaseModel):
    url: str | None = None
    pattern: str | None = None


def _error_body(url: str | None, error: str) -> dict[str, object]:
    return {
        "url": url or "",
        "matchedLinks": [],
        "totalFound": 0,
        "processingTime": 0,
        "error": error,
    }


@router.post("/extract-links")
async def extract_links(request: Request, body: ExtractLinksRequest) -> JSONResponse:
    """Extract movie metadata and resolved download links from a detail page."""
    state = cast(AppState, request.app.state)
    try:
        result = await state.extract_links_uc.execute(body.url)
    except InvalidRequest as exc:
        return JSONResponse(status_code=400, content=_error_body(body.url, str(exc)))
    except Exception as exc:
        log.exception("extract_links_endpoint_failed", url=body.url)
        return JSONResponse(
            status_code=200,
            content=_error_body(body.url, str(exc) or "Unknown error"),
        )
    return JSONResponse(status_code=200, content=present_link_result(result))


@router.post("/find-links")
async def find_links(request: Request, body: FindLinksRequest) -> JSONResponse:
    """Return every URL on a page that contains the given pattern."""
    state = cast(AppState, request.app.state)
    try:
        result = await state.find_links_uc.execute(body.url, body.pattern)
    except InvalidRequest as exc:
        return JSONResponse(status_code=400, content=_error_body(body.url, str(exc)))
    except Exception as exc:
        log.exception("find_links_endpoint_failed", url=body.url)
        return JSONResponse(
            status_code=200,
            content=_error_body(body.url, str(exc) or "Unknown error"),
        )
    return JSONResponse(status_code=200, content=present_link_result(result))
