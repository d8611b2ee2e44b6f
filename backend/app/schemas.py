from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TeamSummary(BaseModel):
    code: str
    name: str
    logo_url: str
    has_cheering_songs: bool = False

    model_config = ConfigDict(from_attributes=True)


class TeamList(BaseModel):
    results: List[TeamSummary]


class RosterEntry(BaseModel):
    number: str
    name: str
    link: str

    model_config = ConfigDict(from_attributes=True)


class RosterResponse(BaseModel):
    team: TeamSummary
    q: str = ""
    num: str = ""
    results: List[RosterEntry]


class PlayerAttribute(BaseModel):
    label: str
    value: str

    model_config = ConfigDict(from_attributes=True)


class PlayerProfile(BaseModel):
    name: str
    kana: str
    attributes: List[PlayerAttribute] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class CheeringSong(BaseModel):
    player_name: str
    phrase_html: str

    model_config = ConfigDict(from_attributes=True)


class PlayerDetailResponse(BaseModel):
    team: TeamSummary
    number: str
    profile: PlayerProfile
    songs: List[CheeringSong] = Field(default_factory=list)
