"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import MatchDayClientConfig, TransportConfig
from .errors import configuration_error

NO_AUTH_MESSAGE = "No authentication method set"


def build_default_headers(user_agent: str) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": user_agent,
    }


def build_default_timeout(config: TransportConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.timeout_connect_seconds,
        read=config.timeout_read_seconds,
        write=config.timeout_write_seconds,
        pool=config.timeout_pool_seconds,
    )


def resolve_auth_header(config: MatchDayClientConfig) -> str:
    """Return the ``Authorization`` value; a bearer token wins over an API key."""

    if config.access_token:
        return f"Bearer {config.access_token}"
    if config.api_key:
        return f"ApiKey {config.api_key}"
    raise configuration_error(NO_AUTH_MESSAGE)


def build_request_headers(
    config: MatchDayClientConfig,
    headers: Mapping[str, str] | None = None,
) -> dict[str, str]:
    merged = {
        "Content-Type": "application/json",
        "Authorization": resolve_auth_header(config),
    }
    # Caller headers replace defaults; names compare case-insensitively.
    for name, value in (headers or {}).items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def build_url(config: MatchDayClientConfig, path: str) -> str:
    return config.base_url + config.version.value + path


__all__ = [
    "NO_AUTH_MESSAGE",
    "build_default_headers",
    "build_default_timeout",
    "resolve_auth_header",
    "build_request_headers",
    "build_url",
]
