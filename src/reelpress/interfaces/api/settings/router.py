from __future__ import annotations

from typing import cast

from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field, field_validator

from reelpress.domain.entities import DomainSettings
from reelpress.domain.entities.settings import normalize_host
from reelpress.interfaces.api.presenter import present_settings
from reelpress.interfaces.app_state import AppState

router = APIRouter(prefix="/settings", tags=["settings"])


class DomainSettingsBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    movies_drive_domain: str = Field(alias="moviesDriveDomain")
    hubcloud_domain: str = Field(alias="hubcloudDomain")
    mdrive_pattern: str = Field(alias="mdrivePattern")

    @field_validator("movies_drive_domain", "hubcloud_domain", "mdrive_pattern")
    @classmethod
    def _bare_host(cls, v: str) -> str:
        return normalize_host(v)


@router.get("")
async def get_settings(request: Request) -> dict[str, str]:
    state = cast(AppState, request.app.state)
    return present_settings(state.settings_store.get())


@router.put("")
async def put_settings(request: Request, body: DomainSettingsBody) -> dict[str, str]:
    """Replace the known domains used by subsequent requests."""
    state = cast(AppState, request.app.state)
    settings = DomainSettings(
        movies_drive_domain=body.movies_drive_domain,
        hubcloud_domain=body.hubcloud_domain,
        mdrive_pattern=body.mdrive_pattern,
    )
    state.settings_store.set(settings)
    return present_settings(settings)
