from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from npb_scraper import FetchFailure, list_roster, list_teams
from npb_scraper.logging_utils import get_logger
from settings.teams import TeamRecord, resolve_team

from .. import schemas
from ..config import Settings, get_settings
from ..dependencies import require_authorized

logger = get_logger(__name__)

router = APIRouter(prefix="/teams", tags=["teams"], dependencies=[Depends(require_authorized)])

ROSTER_FETCH_FAILED = "データ取得失敗"


def get_team_or_404(code: str) -> TeamRecord:
    team = resolve_team(code)
    if team is None:
        raise HTTPException(
            status_code=404,
            detail={
                "message": "Team not found",
                "teams": [t.code for t in list_teams()],
            },
        )
    return team


@router.get("/", response_model=schemas.TeamList, summary="List the twelve NPB teams")
def get_teams() -> schemas.TeamList:
    return schemas.TeamList(
        results=[schemas.TeamSummary.model_validate(team) for team in list_teams()]
    )


@router.get("/{code}/roster", response_model=schemas.RosterResponse, summary="Current roster for one team")
def get_roster(
    code: str,
    q: str = Query("", description="Case-sensitive partial match on player name"),
    num: str = Query("", description="Exact uniform number"),
    settings: Settings = Depends(get_settings),
) -> schemas.RosterResponse:
    team = get_team_or_404(code)
    q = q.strip()
    num = num.strip()

    try:
        players = list_roster(team.code, q, num, timeout=settings.fetch_timeout)
    except FetchFailure as exc:
        logger.error("Roster fetch failed for %s: %s", team.code, exc)
        raise HTTPException(status_code=502, detail=ROSTER_FETCH_FAILED)

    return schemas.RosterResponse(
        team=schemas.TeamSummary.model_validate(team),
        q=q,
        num=num,
        results=[schemas.RosterEntry.model_validate(p) for p in players],
    )
