"""Team records."""

from __future__ import annotations

from datetime import datetime
from typing import NotRequired, TypedDict

from .common import ClubPartial, CompetitionPartial, PersonPartial, SeasonPartial, TeamPartial


class Team(TeamPartial):
    primary: str | None
    secondary: str | None
    parentClub: NotRequired[ClubPartial | None]


class TeamPlayerRegistration(TypedDict):
    player: PersonPartial
    competition: CompetitionPartial
    season: SeasonPartial
    registeredAt: datetime
    number: int | None


class TeamStaffRegistration(TypedDict):
    person: PersonPartial
    role: str
    season: SeasonPartial
    registeredAt: datetime


class TeamStatsSummary(TypedDict):
    played: int
    wins: int
    draws: int
    losses: int
    goalsFor: int
    goalsAgainst: int
    cleanSheets: int
    yellowCards: int
    redCards: int


__all__ = [
    "Team",
    "TeamPlayerRegistration",
    "TeamStaffRegistration",
    "TeamStatsSummary",
]
