# directory.py
"""
Operations offered to the HTTP layer and the CLI.

Each call performs its own fetches; nothing is cached between calls.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

from settings.teams import TEAMS, TeamRecord, resolve_team
from .logging_utils import get_logger
from .models import PlayerDetail, RosterEntry
from .profile import fetch_profile
from .roster import fetch_roster, filter_roster
from .songs import find_cheering_songs
from .utils import UnknownTeam

logger = get_logger(__name__)


def list_teams() -> Tuple[TeamRecord, ...]:
    return TEAMS


def list_roster(
    team_code: str,
    name_query: Optional[str] = None,
    number_query: Optional[str] = None,
    timeout: Optional[float] = None,
) -> List[RosterEntry]:
    """
    Roster for ``team_code`` narrowed by the optional queries.

    Raises UnknownTeam for a code outside the directory and FetchFailure
    when the roster page cannot be retrieved.
    """
    team = resolve_team(team_code)
    if team is None:
        raise UnknownTeam(team_code)

    players = fetch_roster(team.code, timeout=timeout)
    filtered = filter_roster(players, name_query, number_query)
    logger.info(
        "%s roster: %d players, %d after filters (q=%r, num=%r)",
        team.code,
        len(players),
        len(filtered),
        name_query,
        number_query,
    )
    return filtered


def get_player_detail(
    team_code: str,
    link: str,
    number: str = "",
    timeout: Optional[float] = None,
    today: Optional[date] = None,
) -> PlayerDetail:
    """
    Profile for the player at ``link``, plus cheering songs when the team
    publishes them. ``number`` is passed through for display only.

    A FetchFailure on the player page propagates; song lookup problems
    never do.
    """
    profile = fetch_profile(link, timeout=timeout, today=today)

    songs = []
    team = resolve_team(team_code)
    if team is not None and team.has_cheering_songs:
        songs = find_cheering_songs(profile.name, timeout=timeout)

    return PlayerDetail(
        team_code=team_code,
        number=number or "",
        profile=profile,
        songs=songs,
    )
