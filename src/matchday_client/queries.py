"""Query models.

Field names are snake_case; they are sent as camelCase (``items_per_page``
becomes ``itemsPerPage``, ``from_`` becomes ``from``). ``None`` fields are
left out of the query string.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Literal

from .models.match import MatchStatus

DateLike = date | datetime


def _freeze_lists(instance: object) -> None:
    for f in fields(instance):  # type: ignore[arg-type]
        value = getattr(instance, f.name)
        if isinstance(value, list):
            object.__setattr__(instance, f.name, tuple(value))


@dataclass(slots=True, frozen=True)
class BaseListQuery:
    page: int | None = None
    items_per_page: int | None = None
    query: str | None = None

    def __post_init__(self) -> None:
        if self.page is not None and self.page < 1:
            raise ValueError("page must be >= 1")
        if self.items_per_page is not None and self.items_per_page < 1:
            raise ValueError("items_per_page must be >= 1")
        _freeze_lists(self)


@dataclass(slots=True, frozen=True)
class MatchOrder:
    date: Literal["asc", "desc"] = "asc"


@dataclass(slots=True, frozen=True)
class DateFilter:
    """Date predicate; keys inside one filter are ANDed."""

    lt: DateLike | None = None
    eq: DateLike | None = None
    gt: DateLike | None = None


@dataclass(slots=True, frozen=True)
class MatchQuery(BaseListQuery):
    """Match filters. Filters in ``date`` are ORed together."""

    order_by: MatchOrder | None = None
    date: Sequence[DateFilter] | None = None
    team: Sequence[str] | None = None
    competition: Sequence[str] | None = None
    season: Sequence[str] | None = None
    group: Sequence[str] | None = None
    court: Sequence[str] | None = None
    status: Sequence[MatchStatus] | None = None


@dataclass(slots=True, frozen=True)
class CompetitionQuery(BaseListQuery):
    group: Sequence[str] | None = None


@dataclass(slots=True, frozen=True)
class CompetitionStatsSummaryQuery(BaseListQuery):
    from_: DateLike | None = None
    to: DateLike | None = None
    season: Sequence[str] | None = None
    match_group: Sequence[str] | None = None


@dataclass(slots=True, frozen=True)
class CompetitionPlayersStatsQuery(CompetitionStatsSummaryQuery):
    team: Sequence[str] | None = None
    order_by: (
        Literal[
            "name",
            "goals",
            "assists",
            "contributions",
            "yellowCards",
            "redCards",
            "appearances",
        ]
        | None
    ) = None


@dataclass(slots=True, frozen=True)
class CompetitionTeamsStatsQuery(CompetitionStatsSummaryQuery):
    order_by: (
        Literal[
            "name",
            "goalsFor",
            "goalsAgainst",
            "goalDifference",
            "cleanSheets",
            "yellowCards",
            "redCards",
            "played",
            "wins",
            "points",
        ]
        | None
    ) = None


@dataclass(slots=True, frozen=True)
class TeamListQuery(BaseListQuery):
    competition: Sequence[str] | None = None
    season: Sequence[str] | None = None


@dataclass(slots=True, frozen=True)
class TeamStatsSummaryQuery(BaseListQuery):
    from_: DateLike | None = None
    to: DateLike | None = None
    season: Sequence[str] | None = None
    competition: Sequence[str] | None = None


@dataclass(slots=True, frozen=True)
class TeamPlayersStatsQuery(TeamStatsSummaryQuery):
    order_by: str | None = None


@dataclass(slots=True, frozen=True)
class TeamStaffQuery(BaseListQuery):
    season: Sequence[str] | None = None


@dataclass(slots=True, frozen=True)
class PersonQuery(BaseListQuery):
    team: Sequence[str] | None = None


@dataclass(slots=True, frozen=True)
class PersonRegistrationQuery(BaseListQuery):
    season: Sequence[str] | None = None
    competition: Sequence[str] | None = None


@dataclass(slots=True, frozen=True)
class PersonAppearancesQuery(PersonRegistrationQuery):
    team: Sequence[str] | None = None


@dataclass(slots=True, frozen=True)
class PersonStatsSummaryQuery(BaseListQuery):
    from_: DateLike | None = None
    to: DateLike | None = None
    season: Sequence[str] | None = None
    competition: Sequence[str] | None = None


@dataclass(slots=True, frozen=True)
class PlayerStatsQuery(PersonStatsSummaryQuery):
    pass


@dataclass(slots=True, frozen=True)
class PlayerCardsQuery(PlayerStatsQuery):
    type: Literal["yellow", "red"] | None = None


__all__ = [
    "BaseListQuery",
    "MatchOrder",
    "DateFilter",
    "MatchQuery",
    "CompetitionQuery",
    "CompetitionStatsSummaryQuery",
    "CompetitionPlayersStatsQuery",
    "CompetitionTeamsStatsQuery",
    "TeamListQuery",
    "TeamStatsSummaryQuery",
    "TeamPlayersStatsQuery",
    "TeamStaffQuery",
    "PersonQuery",
    "PersonRegistrationQuery",
    "PersonAppearancesQuery",
    "PersonStatsSummaryQuery",
    "PlayerStatsQuery",
    "PlayerCardsQuery",
]
