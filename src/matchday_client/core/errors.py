"""Error types and status mapping."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    RATE_LIMIT_EXCEEDED = "rate_limit_exceeded"
    GENERIC = "generic"


_DEFAULT_STATUS: dict[ErrorKind, int | None] = {
    ErrorKind.CONFIGURATION: None,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.RATE_LIMIT_EXCEEDED: 429,
    ErrorKind.GENERIC: 500,
}

_DEFAULT_MESSAGE: dict[ErrorKind, str] = {
    ErrorKind.CONFIGURATION: "Invalid client configuration",
    ErrorKind.BAD_REQUEST: "Bad Request",
    ErrorKind.UNAUTHORIZED: "Unauthorized",
    ErrorKind.FORBIDDEN: "Forbidden",
    ErrorKind.NOT_FOUND: "Not Found",
    ErrorKind.RATE_LIMIT_EXCEEDED: "You have exceeded the API rate limit",
    ErrorKind.GENERIC: "API Error",
}

_KIND_BY_STATUS: dict[int, ErrorKind] = {
    400: ErrorKind.BAD_REQUEST,
    401: ErrorKind.UNAUTHORIZED,
    403: ErrorKind.FORBIDDEN,
    404: ErrorKind.NOT_FOUND,
    429: ErrorKind.RATE_LIMIT_EXCEEDED,
}

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"
PARSE_ERROR_MESSAGE = "Failed to parse error"


@dataclass(slots=True, frozen=True)
class ValidationIssue:
    path: str
    message: str
    code: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "ValidationIssue":
        return cls(
            path=str(payload.get("path", "")),
            message=str(payload.get("message", "")),
            code=str(payload.get("code", "")),
        )


class MatchDayApiError(Exception):
    """Single error type for this package; dispatch on ``kind``."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str | None = None,
        *,
        status: int | None = None,
        validation_issues: Sequence[ValidationIssue] | None = None,
    ) -> None:
        resolved_message = message or _DEFAULT_MESSAGE[kind]
        super().__init__(resolved_message)
        self.kind = kind
        self.message = resolved_message
        self.status = status if status is not None else _DEFAULT_STATUS[kind]
        self.validation_issues = (
            tuple(validation_issues) if validation_issues is not None else None
        )

    def to_debug_dict(self) -> dict[str, object]:
        body: dict[str, object] = {"message": self.message}
        if self.validation_issues is not None:
            body["errors"] = [
                {"path": issue.path, "message": issue.message, "code": issue.code}
                for issue in self.validation_issues
            ]
        return {"kind": self.kind.value, "status": self.status, "body": body}

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(kind={self.kind.value!r}, "
            f"status={self.status!r}, message={self.message!r})"
        )


def configuration_error(message: str) -> MatchDayApiError:
    return MatchDayApiError(ErrorKind.CONFIGURATION, message)


class ErrorResponse(Protocol):
    @property
    def status_code(self) -> int: ...

    @property
    def is_success(self) -> bool: ...

    def json(self) -> object: ...


def _extract_message(payload: object) -> str | None:
    if not isinstance(payload, Mapping):
        return None
    value = payload.get("message")
    return str(value) if value else None


def _extract_validation_issues(payload: object) -> tuple[ValidationIssue, ...] | None:
    if not isinstance(payload, Mapping):
        return None
    raw = payload.get("errors")
    if raw is None or not isinstance(raw, Sequence) or isinstance(raw, str):
        return None
    return tuple(
        ValidationIssue.from_payload(item) for item in raw if isinstance(item, Mapping)
    )


def classify_error_payload(payload: object, *, http_status: int) -> MatchDayApiError:
    """Map a decoded error body and its HTTP status to a domain error."""

    kind = _KIND_BY_STATUS.get(http_status)
    if kind is None:
        return MatchDayApiError(
            ErrorKind.GENERIC,
            UNKNOWN_ERROR_MESSAGE,
            status=http_status,
        )
    validation_issues = (
        _extract_validation_issues(payload) if kind is ErrorKind.BAD_REQUEST else None
    )
    return MatchDayApiError(
        kind,
        _extract_message(payload),
        status=http_status,
        validation_issues=validation_issues,
    )


def map_http_error(response: ErrorResponse) -> MatchDayApiError | None:
    """Return the domain error for a non-2xx response, or ``None``.

    The body is only decoded on the error path. A body that cannot be decoded
    yields a generic error regardless of the status that triggered it.
    """

    if response.is_success:
        return None
    try:
        payload = response.json()
    except Exception:
        return MatchDayApiError(ErrorKind.GENERIC, PARSE_ERROR_MESSAGE)
    return classify_error_payload(payload, http_status=response.status_code)


__all__ = [
    "ErrorKind",
    "ValidationIssue",
    "MatchDayApiError",
    "UNKNOWN_ERROR_MESSAGE",
    "PARSE_ERROR_MESSAGE",
    "configuration_error",
    "classify_error_payload",
    "map_http_error",
]
