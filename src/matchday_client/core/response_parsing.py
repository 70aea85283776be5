"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

from typing import Any, Protocol

from .dates import revive_dates
from .errors import ErrorKind, MatchDayApiError

NO_CONTENT = 204


class JsonPayloadResponse(Protocol):
    @property
    def status_code(self) -> int: ...

    def json(self) -> object: ...


def is_no_content(response: JsonPayloadResponse) -> bool:
    return response.status_code == NO_CONTENT


def parse_success_payload(response: JsonPayloadResponse) -> Any:
    """Decode a successful response body and revive its date strings."""

    try:
        payload = response.json()
    except Exception as exc:
        raise MatchDayApiError(
            ErrorKind.GENERIC,
            "Response body is not valid JSON",
            status=response.status_code,
        ) from exc
    return revive_dates(payload)


__all__ = [
    "NO_CONTENT",
    "is_no_content",
    "parse_success_payload",
]
