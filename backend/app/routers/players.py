from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from npb_scraper import FetchFailure, get_player_detail
from npb_scraper.logging_utils import get_logger

from .. import schemas
from ..config import Settings, get_settings
from ..dependencies import require_authorized
from .teams import get_team_or_404

logger = get_logger(__name__)

router = APIRouter(prefix="/teams", tags=["players"], dependencies=[Depends(require_authorized)])

DETAIL_FETCH_FAILED = "詳細取得失敗"


@router.get(
    "/{code}/players",
    response_model=schemas.PlayerDetailResponse,
    summary="Player profile, with cheering songs where the team publishes them",
)
def get_player(
    code: str,
    direct: str = Query(
        ...,
        pattern=r"^/[^/]",
        description="Site-relative player page path taken from the roster link",
    ),
    num: str = Query("", description="Uniform number shown with the profile"),
    settings: Settings = Depends(get_settings),
) -> schemas.PlayerDetailResponse:
    team = get_team_or_404(code)

    try:
        detail = get_player_detail(team.code, direct, num, timeout=settings.fetch_timeout)
    except FetchFailure as exc:
        logger.error("Player page fetch failed for %s: %s", direct, exc)
        raise HTTPException(status_code=502, detail=DETAIL_FETCH_FAILED)

    return schemas.PlayerDetailResponse(
        team=schemas.TeamSummary.model_validate(team),
        number=detail.number,
        profile=schemas.PlayerProfile.model_validate(detail.profile),
        songs=[schemas.CheeringSong.model_validate(s) for s in detail.songs],
    )
