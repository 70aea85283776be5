"""User records."""

from __future__ import annotations

from datetime import datetime
from typing import TypedDict

from .person import Person


class UserPartial(TypedDict):
    id: str
    name: str
    email: str
    image: str | None
    createdAt: datetime


class User(UserPartial):
    banned: bool
    role: str
    permissions: dict[str, bool]
    persons: list[Person]


__all__ = [
    "UserPartial",
    "User",
]
