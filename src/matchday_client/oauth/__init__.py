"""OAuth2 authorization code flow with PKCE."""

from .async_client import AsyncMatchDayOAuthClient
from .client import MatchDayOAuthClient
from .models import SCOPES, AuthorizeResult, OAuthScope, ScopeInfo, TokenResult

__all__ = [
    "MatchDayOAuthClient",
    "AsyncMatchDayOAuthClient",
    "AuthorizeResult",
    "TokenResult",
    "OAuthScope",
    "ScopeInfo",
    "SCOPES",
]
