"""Location and court records."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class Location(TypedDict):
    id: str
    name: str
    addressFirstLine: str
    addressSecondLine: NotRequired[str | None]
    postcode: str
    county: str
    country: str


class CourtPartial(TypedDict):
    id: str
    name: str


class Court(CourtPartial):
    location: Location


class LocationWithCourts(Location):
    courts: list[CourtPartial]


__all__ = [
    "Location",
    "CourtPartial",
    "Court",
    "LocationWithCourts",
]
