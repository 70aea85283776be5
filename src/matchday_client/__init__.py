"""Public package exports for the MatchDay API client."""

from .async_client import AsyncMatchDayClient
from .client import MatchDayClient
from .config import ApiVersion, MatchDayClientConfig, OAuthClientConfig, PkceMethod, TransportConfig
from .core.errors import ErrorKind, MatchDayApiError, ValidationIssue
from .oauth import AsyncMatchDayOAuthClient, AuthorizeResult, MatchDayOAuthClient, OAuthScope, TokenResult

__all__ = [
    "MatchDayClient",
    "AsyncMatchDayClient",
    "MatchDayClientConfig",
    "OAuthClientConfig",
    "TransportConfig",
    "ApiVersion",
    "PkceMethod",
    "MatchDayOAuthClient",
    "AsyncMatchDayOAuthClient",
    "AuthorizeResult",
    "TokenResult",
    "OAuthScope",
    "ErrorKind",
    "MatchDayApiError",
    "ValidationIssue",
]
