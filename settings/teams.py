# teams.py
"""
Static team directory.

Teams are read once from teams.json and exposed as immutable records; the
lookup table never changes after import.
"""

import json
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from settings.urls import logo_url

DEFAULT_TEAMS_JSON = Path(__file__).resolve().parent / "teams.json"


@dataclass(frozen=True)
class TeamRecord:
    code: str
    name: str
    has_cheering_songs: bool = False

    @property
    def logo_url(self) -> str:
        return logo_url(self.code)


@lru_cache()
def load_teams(path: Path | str | None = None) -> Tuple[TeamRecord, ...]:
    """
    Load the team list from JSON, preserving file order. Cached for repeated callers.
    """
    p = Path(path) if path else DEFAULT_TEAMS_JSON
    with open(p, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return tuple(
        TeamRecord(
            code=item["code"],
            name=item["name"],
            has_cheering_songs=bool(item.get("cheering_songs", False)),
        )
        for item in raw
    )


TEAMS: Tuple[TeamRecord, ...] = load_teams()
TEAMS_BY_CODE: Mapping[str, TeamRecord] = MappingProxyType({t.code: t for t in TEAMS})


def resolve_team(code: Optional[str]) -> Optional[TeamRecord]:
    """Return the team for ``code``, or None when the code is empty or unknown."""
    if not code:
        return None
    return TEAMS_BY_CODE.get(code)


__all__ = ["TeamRecord", "TEAMS", "TEAMS_BY_CODE", "load_teams", "resolve_team", "DEFAULT_TEAMS_JSON"]
