"""Person records."""

from __future__ import annotations

from datetime import datetime
from typing import NotRequired, TypedDict

from .common import CompetitionPartial, PersonPartial, SeasonPartial, TeamPartial
from .match import Match


class PlayerRegistration(TypedDict):
    team: TeamPartial
    competition: CompetitionPartial
    season: SeasonPartial
    registeredAt: datetime
    number: int | None


class CoachRegistration(TypedDict):
    team: TeamPartial
    competition: CompetitionPartial
    season: SeasonPartial
    registeredAt: datetime


class Person(PersonPartial):
    playerRegistrations: list[PlayerRegistration]
    coachRegistrations: list[CoachRegistration]


class PersonRegistration(TypedDict):
    team: TeamPartial
    competition: CompetitionPartial
    season: SeasonPartial
    registeredAt: datetime
    role: NotRequired[str]
    number: NotRequired[int | None]


class PersonAppearance(TypedDict):
    match: Match
    team: TeamPartial
    number: int | None
    captain: bool


class PersonStatsSummary(TypedDict):
    appearances: int
    goals: int
    assists: int
    yellowCards: int
    redCards: int


class PersonStatsGoal(TypedDict):
    match: Match
    team: TeamPartial
    time: int | None
    penalty: bool
    createdAt: datetime


class PersonStatsAssist(TypedDict):
    match: Match
    team: TeamPartial
    time: int | None
    createdAt: datetime


class PersonStatsCard(TypedDict):
    match: Match
    team: TeamPartial
    type: str
    time: int | None
    createdAt: datetime


__all__ = [
    "PlayerRegistration",
    "CoachRegistration",
    "Person",
    "PersonRegistration",
    "PersonAppearance",
    "PersonStatsSummary",
    "PersonStatsGoal",
    "PersonStatsAssist",
    "PersonStatsCard",
]
