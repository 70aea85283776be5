"""Typed views of the JSON records returned by the API.

Responses are plain dicts; these ``TypedDict`` declarations only describe
their shape. Date fields hold ``datetime`` values once revived.
"""

from .club import Club
from .common import (
    ClubPartial,
    CompetitionGroupPartial,
    CompetitionPartial,
    CompetitionType,
    ListResponse,
    PaginationMeta,
    PersonPartial,
    SeasonPartial,
    TeamPartial,
)
from .competition import (
    Competition,
    CompetitionGroup,
    CompetitionPlayersStats,
    CompetitionStatsSummary,
    CompetitionTeamsStats,
)
from .location import Court, Location, LocationWithCourts
from .match import FullMatch, Match, MatchEvent, MatchEventType, MatchStatus, PlayerPosition
from .person import (
    Person,
    PersonAppearance,
    PersonRegistration,
    PersonStatsAssist,
    PersonStatsCard,
    PersonStatsGoal,
    PersonStatsSummary,
)
from .search import SearchItem, SearchItemType
from .team import Team, TeamPlayerRegistration, TeamStaffRegistration, TeamStatsSummary
from .user import User, UserPartial

__all__ = [
    "ListResponse",
    "PaginationMeta",
    "CompetitionType",
    "SeasonPartial",
    "TeamPartial",
    "PersonPartial",
    "ClubPartial",
    "CompetitionGroupPartial",
    "CompetitionPartial",
    "Club",
    "Competition",
    "CompetitionGroup",
    "CompetitionPlayersStats",
    "CompetitionStatsSummary",
    "CompetitionTeamsStats",
    "Court",
    "Location",
    "LocationWithCourts",
    "FullMatch",
    "Match",
    "MatchEvent",
    "MatchEventType",
    "MatchStatus",
    "PlayerPosition",
    "Person",
    "PersonAppearance",
    "PersonRegistration",
    "PersonStatsAssist",
    "PersonStatsCard",
    "PersonStatsGoal",
    "PersonStatsSummary",
    "SearchItem",
    "SearchItemType",
    "Team",
    "TeamPlayerRegistration",
    "TeamStaffRegistration",
    "TeamStatsSummary",
    "User",
    "UserPartial",
]
