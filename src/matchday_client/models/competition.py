"""Competition records."""

from __future__ import annotations

from datetime import datetime
from typing import TypedDict

from .common import (
    CompetitionGroupPartial,
    CompetitionPartial,
    CompetitionType,
    PersonPartial,
    SeasonPartial,
    TeamPartial,
)


class CompetitionSeason(SeasonPartial):
    isActiveSeason: bool


class CompetitionHistory(TypedDict):
    id: str
    name: str | None
    logo: str | None
    created_at: datetime


class Competition(TypedDict):
    id: str
    name: str
    type: CompetitionType
    logo: str | None
    group: CompetitionGroupPartial | None
    seasons: list[CompetitionSeason]
    history: list[CompetitionHistory]


class CompetitionGroup(CompetitionGroupPartial):
    competitions: list[CompetitionPartial]


class CompetitionTableRow(TypedDict):
    team: TeamPartial
    position: int
    matchesPlayed: int
    won: int
    drawn: int
    lost: int
    goalsFor: int
    goalsAgainst: int
    goalDifference: int
    points: int


class CompetitionStatsSummary(TypedDict):
    matches: int
    goals: int
    ownGoals: int
    goalsPerMatch: float
    yellowCards: int
    redCards: int
    cleanSheets: int
    teams: int


class CompetitionPlayersStats(TypedDict):
    player: PersonPartial
    team: TeamPartial
    goals: int
    assists: int
    contributions: int
    yellowCards: int
    redCards: int
    appearances: int


class CompetitionTeamsStats(TypedDict):
    team: TeamPartial
    played: int
    wins: int
    draws: int
    losses: int
    goalsFor: int
    goalsAgainst: int
    goalDifference: int
    goalsPerMatch: float
    cleanSheets: int
    yellowCards: int
    redCards: int
    points: int


__all__ = [
    "CompetitionSeason",
    "CompetitionHistory",
    "Competition",
    "CompetitionGroup",
    "CompetitionTableRow",
    "CompetitionStatsSummary",
    "CompetitionPlayersStats",
    "CompetitionTeamsStats",
]
