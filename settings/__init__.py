# settings/__init__.py
"""Static configuration: the team directory and upstream URLs."""

from settings.teams import TEAMS, TEAMS_BY_CODE, TeamRecord, resolve_team
from settings.urls import CHEERING_SONG_URL, logo_url, player_url, roster_url

__all__ = [
    "TEAMS",
    "TEAMS_BY_CODE",
    "TeamRecord",
    "resolve_team",
    "CHEERING_SONG_URL",
    "logo_url",
    "player_url",
    "roster_url",
]
