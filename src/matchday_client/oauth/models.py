"""OAuth2 request and response models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypedDict


class OAuthScope(str, Enum):
    EMAIL = "email"
    PLAYER = "player"
    STAFF = "staff"


@dataclass(slots=True, frozen=True)
class ScopeInfo:
    id: str
    name: str
    description: str


SCOPES: dict[OAuthScope, ScopeInfo] = {
    OAuthScope.EMAIL: ScopeInfo(
        id="email",
        name="Read your name and email",
        description="Access to your name, email, and profile picture",
    ),
    OAuthScope.PLAYER: ScopeInfo(
        id="player",
        name="Read your player associations",
        description="Access to who you play for and your previous teams",
    ),
    OAuthScope.STAFF: ScopeInfo(
        id="staff",
        name="Read your team staff associations",
        description="Access to who you coach, manage or assist and any previous teams",
    ),
}


@dataclass(slots=True, frozen=True)
class AuthorizeResult:
    """Authorization URL plus the PKCE verifier the caller must keep."""

    url: str
    pkce_verifier: str | None = field(default=None, repr=False)


class TokenResult(TypedDict):
    access_token: str
    token_type: str
    expires_in: int
    scope: str


__all__ = [
    "OAuthScope",
    "ScopeInfo",
    "SCOPES",
    "AuthorizeResult",
    "TokenResult",
]
