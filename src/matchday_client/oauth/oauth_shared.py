"""Shared builders for the sync/async OAuth2 clients."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from typing import Protocol
from urllib.parse import urlencode, urljoin

from ..config import OAuthClientConfig
from ..core.errors import ErrorKind, MatchDayApiError, configuration_error
from .models import AuthorizeResult, OAuthScope, TokenResult
from .pkce import code_challenge, generate_code_verifier

AUTHORIZE_PATH = "/api/auth/oauth2/authorize"
TOKEN_PATH = "/api/auth/oauth2/token"
TOKEN_REQUEST_HEADERS: Mapping[str, str] = {
    "Content-Type": "application/x-www-form-urlencoded",
    "Accept": "application/json",
}
MISSING_CLIENT_ID_MESSAGE = "A client id is required to exchange code"
MISSING_ACCESS_TOKEN_MESSAGE = "Token exchange succeeded but no access_token was returned"


class TokenResponse(Protocol):
    @property
    def status_code(self) -> int: ...

    @property
    def reason_phrase(self) -> str: ...

    @property
    def is_success(self) -> bool: ...

    @property
    def text(self) -> str: ...

    def json(self) -> object: ...


def should_use_pkce(config: OAuthClientConfig) -> bool:
    # Public clients always use PKCE; confidential clients opt in.
    return config.is_public or config.use_pkce


def _scope_value(scope: OAuthScope | str) -> str:
    return scope.value if isinstance(scope, OAuthScope) else str(scope)


def build_authorize_result(
    config: OAuthClientConfig,
    scopes: Iterable[OAuthScope | str],
    redirect_url: str,
    state: str | None = None,
    *,
    verifier_factory: Callable[[], str] = generate_code_verifier,
) -> AuthorizeResult:
    params: dict[str, str] = {
        "response_type": "code",
        "client_id": config.client_id,
        "scope": " ".join(_scope_value(scope) for scope in scopes),
        "redirect_uri": redirect_url,
    }
    if state:
        params["state"] = state

    verifier: str | None = None
    if should_use_pkce(config):
        verifier = verifier_factory()
        params["code_challenge"] = code_challenge(verifier, config.pkce_method)
        params["code_challenge_method"] = config.pkce_method.value

    url = urljoin(config.auth_url, AUTHORIZE_PATH) + "?" + urlencode(params)
    return AuthorizeResult(url=url, pkce_verifier=verifier)


def token_endpoint(config: OAuthClientConfig) -> str:
    return config.auth_url + TOKEN_PATH


def build_token_form(
    config: OAuthClientConfig,
    code: str,
    redirect_url: str,
    pkce_verifier: str | None = None,
) -> dict[str, str]:
    if not config.client_id:
        raise configuration_error(MISSING_CLIENT_ID_MESSAGE)

    form = {
        "grant_type": "authorization_code",
        "code": code,
        "redirect_uri": redirect_url,
        "client_id": config.client_id,
    }
    if config.client_secret:
        form["client_secret"] = config.client_secret
    if pkce_verifier:
        form["code_verifier"] = pkce_verifier
    return form


def extract_error_detail(response: TokenResponse) -> str:
    try:
        payload = response.json()
    except Exception:
        return response.text
    if isinstance(payload, Mapping):
        detail = payload.get("error_description") or payload.get("error")
        if detail:
            return str(detail)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def token_exchange_error(response: TokenResponse) -> MatchDayApiError:
    detail = extract_error_detail(response)
    message = f"Token exchange failed: {response.status_code} {response.reason_phrase}"
    if detail:
        message += f" - {detail}"
    return MatchDayApiError(ErrorKind.GENERIC, message, status=response.status_code)


def parse_token_response(response: TokenResponse) -> TokenResult:
    """Return the token payload, or raise if the exchange did not yield one."""

    if not response.is_success:
        raise token_exchange_error(response)
    try:
        payload = response.json()
    except Exception as exc:
        raise MatchDayApiError(
            ErrorKind.GENERIC,
            "Token exchange succeeded but the response is not valid JSON",
            status=response.status_code,
        ) from exc
    if not isinstance(payload, Mapping) or not payload.get("access_token"):
        raise MatchDayApiError(
            ErrorKind.GENERIC,
            MISSING_ACCESS_TOKEN_MESSAGE,
            status=response.status_code,
        )
    return TokenResult(**payload)  # type: ignore[typeddict-item]


__all__ = [
    "AUTHORIZE_PATH",
    "TOKEN_PATH",
    "TOKEN_REQUEST_HEADERS",
    "MISSING_CLIENT_ID_MESSAGE",
    "MISSING_ACCESS_TOKEN_MESSAGE",
    "should_use_pkce",
    "build_authorize_result",
    "token_endpoint",
    "build_token_form",
    "extract_error_detail",
    "token_exchange_error",
    "parse_token_response",
]
