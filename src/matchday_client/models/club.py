"""Club records."""

from __future__ import annotations

from .common import ClubPartial, TeamPartial


class Club(ClubPartial):
    contactEmail: str | None
    teams: list[TeamPartial]


__all__ = [
    "Club",
]
