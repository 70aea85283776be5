"""Match records."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import NotRequired, TypedDict

from .common import PersonPartial, SeasonPartial, TeamPartial
from .location import Court


class MatchStatus(str, Enum):
    SCHEDULED = "scheduled"
    FIRST_HALF = "first-half"
    HALF_TIME = "half-time"
    SECOND_HALF = "second-half"
    FULL_TIME = "full-time"
    COMPLETE = "completed"
    POSTPONED = "postponed"
    ABANDONED = "abandoned"
    FIRST_HALF_EXTRA_TIME = "extra-time-first-half"
    HALF_TIME_EXTRA_TIME = "half-time-extra-time"
    SECOND_HALF_EXTRA_TIME = "extra-time-second-half"
    PENALTIES = "penalty-shootout"


class PlayerPosition(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTRE = "centre"
    GOALKEEPER = "goalkeeper"
    SUBSTITUTE = "sub"


class MatchEventType(str, Enum):
    GOAL = "goal"
    YELLOW_CARD = "yellow_card"
    RED_CARD = "red_card"
    SUBSTITUTION = "substitution"


class GoalType(str, Enum):
    GOAL = "goal"
    OWN_GOAL = "own-goal"


class MatchTimes(TypedDict):
    firstHalfStartedAt: datetime | None
    secondHalfStartedAt: datetime | None
    firstHalfExtraTimeStartedAt: datetime | None
    secondHalfExtraTimeStartedAt: datetime | None


class MatchOfficials(TypedDict, total=False):
    referee: PersonPartial
    assistant1: PersonPartial
    assistant2: PersonPartial
    fourthOfficial: PersonPartial


class MatchGroup(TypedDict):
    id: str
    competition: str
    name: str


class MatchCompetition(TypedDict):
    id: str
    name: str
    logo: NotRequired[str | None]


class Match(TypedDict):
    id: str
    homeTeam: TeamPartial
    awayTeam: TeamPartial
    homeScore: int
    awayScore: int
    homeScorePenalty: int
    awayScorePenalty: int
    status: MatchStatus
    scheduledFor: datetime
    times: MatchTimes
    competition: MatchCompetition
    season: SeasonPartial
    court: NotRequired[Court]
    group: NotRequired[MatchGroup]
    officials: MatchOfficials
    streamLink: NotRequired[str]


class MatchPlayer(TypedDict):
    person: PersonPartial
    number: int
    position: PlayerPosition | None
    captain: bool


class MatchEvent(TypedDict):
    """Goal, card or substitution; the extra keys depend on ``type``."""

    type: MatchEventType
    createdAt: datetime
    time: NotRequired[int | None]
    matchPeriod: NotRequired[MatchStatus | None]
    teamId: str
    player: NotRequired[PersonPartial]
    penalty: NotRequired[bool]
    goaltype: NotRequired[GoalType]
    playerOn: NotRequired[PersonPartial]
    playerOff: NotRequired[PersonPartial]


class FullMatch(TypedDict):
    details: Match
    homeLineups: list[MatchPlayer]
    awayLineups: list[MatchPlayer]
    events: list[MatchEvent]


__all__ = [
    "MatchStatus",
    "PlayerPosition",
    "MatchEventType",
    "GoalType",
    "MatchTimes",
    "MatchOfficials",
    "MatchGroup",
    "MatchCompetition",
    "Match",
    "MatchPlayer",
    "MatchEvent",
    "FullMatch",
]
