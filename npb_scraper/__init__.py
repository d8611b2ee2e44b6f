# npb_scraper package
# Roster, player profile and cheering-song extraction for npb.jp pages

from .utils import (
    FetchFailure,
    ScraperError,
    UnknownTeam,
    fetch_html,
    strip_whitespace,
)
from .models import PlayerAttribute, PlayerDetail, PlayerProfile, RosterEntry, SongEntry
from .age import age_suffix, calculate_age
from .roster import fetch_roster, filter_roster, parse_roster
from .profile import PROFILE_LABELS, fetch_profile, parse_profile
from .songs import find_cheering_songs, match_songs, names_match
from .directory import get_player_detail, list_roster, list_teams

__all__ = [
    # Utils
    "FetchFailure",
    "ScraperError",
    "UnknownTeam",
    "fetch_html",
    "strip_whitespace",
    # Models
    "PlayerAttribute",
    "PlayerDetail",
    "PlayerProfile",
    "RosterEntry",
    "SongEntry",
    # Age
    "age_suffix",
    "calculate_age",
    # Roster
    "fetch_roster",
    "filter_roster",
    "parse_roster",
    # Profile
    "PROFILE_LABELS",
    "fetch_profile",
    "parse_profile",
    # Songs
    "find_cheering_songs",
    "match_songs",
    "names_match",
    # Directory
    "get_player_detail",
    "list_roster",
    "list_teams",
]
