"""Shared list envelope and partial projections used across resources."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Generic, TypedDict, TypeVar

T = TypeVar("T")


class PaginationMeta(TypedDict):
    totalItems: int
    totalPages: int
    currentPage: int
    itemsPerPage: int
    hasNextPage: bool
    hasPrevPage: bool


class ListResponse(TypedDict, Generic[T]):
    items: list[T]
    pagination: PaginationMeta


class CompetitionType(str, Enum):
    LEAGUE = "league"
    CUP = "cup"
    FRIENDLY = "friendly"


class SeasonPartial(TypedDict):
    id: str
    name: str
    startDate: datetime
    endDate: datetime


class TeamPartial(TypedDict):
    id: str
    name: str
    logo: str | None
    nickname: str | None


class PersonPartial(TypedDict):
    id: str
    firstName: str
    lastName: str
    knownAs: str | None


class ClubPartial(TypedDict):
    id: str
    name: str
    logo: str | None


class CompetitionGroupPartial(TypedDict):
    id: str
    name: str
    shortName: str
    logo: str | None


class CompetitionPartial(TypedDict):
    id: str
    name: str
    type: CompetitionType
    activeSeason: SeasonPartial
    group: CompetitionGroupPartial | None
    logo: str | None


__all__ = [
    "PaginationMeta",
    "ListResponse",
    "CompetitionType",
    "SeasonPartial",
    "TeamPartial",
    "PersonPartial",
    "ClubPartial",
    "CompetitionGroupPartial",
    "CompetitionPartial",
]
