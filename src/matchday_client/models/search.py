"""Search result records."""

from __future__ import annotations

from enum import Enum
from typing import NotRequired, TypedDict


class SearchItemType(str, Enum):
    TEAM = "team"
    PERSON = "person"
    COMPETITION = "competition"
    MATCH = "match"


class SearchItem(TypedDict):
    type: SearchItemType
    id: str
    label: str
    description: str
    image: NotRequired[str | None]
    rank: str


__all__ = [
    "SearchItemType",
    "SearchItem",
]
