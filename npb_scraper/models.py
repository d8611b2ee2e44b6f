# models.py
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class RosterEntry:
    """One row of a team roster page, in document order."""

    number: str
    name: str
    link: str = ""


@dataclass(frozen=True)
class PlayerAttribute:
    label: str
    value: str


@dataclass
class PlayerProfile:
    """Name, reading and allow-listed attributes parsed from a player page."""

    name: str
    kana: str = ""
    attributes: List[PlayerAttribute] = field(default_factory=list)

    def attribute(self, label: str) -> Optional[str]:
        for attr in self.attributes:
            if attr.label == label:
                return attr.value
        return None


@dataclass(frozen=True)
class SongEntry:
    """A cheering-song list item; phrase_html is kept as raw markup."""

    player_name: str
    phrase_html: str = ""


@dataclass
class PlayerDetail:
    team_code: str
    number: str
    profile: PlayerProfile
    songs: List[SongEntry] = field(default_factory=list)
