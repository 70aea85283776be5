from __future__ import annotations

import httpx
import pytest

from matchday_client.core.errors import (
    PARSE_ERROR_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    ErrorKind,
    MatchDayApiError,
    ValidationIssue,
    map_http_error,
)


class _ExplodingBodyResponse:
    """Success response whose body must never be read."""

    status_code = 200
    is_success = True

    def json(self):
        raise AssertionError("body was read on the success path")


def test_map_http_error_returns_none_for_success_without_reading_body():
    assert map_http_error(_ExplodingBodyResponse()) is None


@pytest.mark.parametrize("status", [200, 201, 204])
def test_map_http_error_returns_none_for_2xx(status: int):
    assert map_http_error(httpx.Response(status, text="not json")) is None


def test_map_http_error_400_carries_validation_issues():
    response = httpx.Response(
        400,
        json={
            "message": "Invalid input",
            "errors": [{"path": "email", "message": "Required", "code": "invalid_type"}],
        },
    )

    err = map_http_error(response)

    assert err is not None
    assert err.kind is ErrorKind.BAD_REQUEST
    assert err.status == 400
    assert err.message == "Invalid input"
    assert err.validation_issues == (
        ValidationIssue(path="email", message="Required", code="invalid_type"),
    )


def test_map_http_error_400_without_errors_has_no_validation_issues():
    err = map_http_error(httpx.Response(400, json={"message": "Invalid input"}))
    assert err is not None
    assert err.kind is ErrorKind.BAD_REQUEST
    assert err.validation_issues is None


def test_map_http_error_400_falls_back_to_default_message():
    err = map_http_error(httpx.Response(400, json={}))
    assert err is not None
    assert err.message == "Bad Request"


@pytest.mark.parametrize(
    ("status", "kind", "default_message"),
    [
        (401, ErrorKind.UNAUTHORIZED, "Unauthorized"),
        (403, ErrorKind.FORBIDDEN, "Forbidden"),
        (404, ErrorKind.NOT_FOUND, "Not Found"),
        (429, ErrorKind.RATE_LIMIT_EXCEEDED, "You have exceeded the API rate limit"),
    ],
)
def test_map_http_error_maps_client_statuses(status: int, kind: ErrorKind, default_message: str):
    err = map_http_error(httpx.Response(status, json={"message": "from body"}))
    assert err is not None
    assert err.kind is kind
    assert err.status == status
    assert err.message == "from body"
    assert str(err) == "from body"

    fallback = map_http_error(httpx.Response(status, json={}))
    assert fallback is not None
    assert fallback.message == default_message


@pytest.mark.parametrize("status", [500, 502, 503, 418])
def test_map_http_error_discards_message_for_other_statuses(status: int):
    err = map_http_error(httpx.Response(status, json={"message": "Server exploded"}))
    assert err is not None
    assert err.kind is ErrorKind.GENERIC
    assert err.message == UNKNOWN_ERROR_MESSAGE
    assert err.status == status


@pytest.mark.parametrize("status", [400, 404, 500])
def test_map_http_error_unparseable_body_is_generic_parse_error(status: int):
    err = map_http_error(httpx.Response(status, text="<html>oops</html>"))
    assert err is not None
    assert err.kind is ErrorKind.GENERIC
    assert err.message == PARSE_ERROR_MESSAGE
    assert err.status == 500


def test_error_defaults_and_debug_dict():
    err = MatchDayApiError(
        ErrorKind.BAD_REQUEST,
        validation_issues=[ValidationIssue(path="name", message="Too short", code="too_small")],
    )
    assert err.message == "Bad Request"
    assert err.status == 400
    assert err.to_debug_dict() == {
        "kind": "bad_request",
        "status": 400,
        "body": {
            "message": "Bad Request",
            "errors": [{"path": "name", "message": "Too short", "code": "too_small"}],
        },
    }


def test_configuration_error_has_no_status():
    err = MatchDayApiError(ErrorKind.CONFIGURATION, "No authentication method set")
    assert err.status is None
    assert "configuration" in repr(err)
