"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_BASE_URL = "https://api.thewfa.org.uk"
DEFAULT_AUTH_URL = "https://auth.thewfa.org.uk"
DEFAULT_USER_AGENT = "matchday-client/0.1.0"


class ApiVersion(str, Enum):
    """Version segment inserted between the base URL and the request path."""

    DEFAULT = ""
    V1 = "/v1"


class PkceMethod(str, Enum):
    S256 = "S256"
    PLAIN = "plain"


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class MatchDayClientConfig:
    """Runtime configuration for the MatchDay API client.

    Neither ``api_key`` nor ``access_token`` is required here: the access token
    may be supplied later through ``set_access_token``, so the missing
    credential is reported when a request is made.
    """

    base_url: str = DEFAULT_BASE_URL
    version: ApiVersion = ApiVersion.V1
    api_key: str | None = field(default=None, repr=False)
    access_token: str | None = field(default=None, repr=False)
    user_agent: str = DEFAULT_USER_AGENT

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        if not isinstance(self.version, ApiVersion):
            raise ValueError("version must be an ApiVersion")
        self.transport.validate()


@dataclass(slots=True, frozen=True)
class OAuthClientConfig:
    """Runtime configuration for the OAuth2 authorization code client.

    Omit ``client_secret`` for public clients; PKCE is then always used.
    Confidential clients opt in to PKCE with ``use_pkce``.
    """

    client_id: str
    client_secret: str | None = field(default=None, repr=False)
    auth_url: str = DEFAULT_AUTH_URL
    use_pkce: bool = False
    pkce_method: PkceMethod = PkceMethod.S256
    user_agent: str = DEFAULT_USER_AGENT

    transport: TransportConfig = field(default_factory=TransportConfig)

    @property
    def is_public(self) -> bool:
        return not self.client_secret

    def validate(self) -> None:
        if not self.auth_url:
            raise ValueError("auth_url must not be empty")
        if not isinstance(self.use_pkce, bool):
            raise ValueError("use_pkce must be bool")
        if not isinstance(self.pkce_method, PkceMethod):
            raise ValueError("pkce_method must be a PkceMethod")
        self.transport.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_AUTH_URL",
    "DEFAULT_USER_AGENT",
    "ApiVersion",
    "PkceMethod",
    "TransportConfig",
    "MatchDayClientConfig",
    "OAuthClientConfig",
]
