"""Async OAuth2 authorization code client."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from types import TracebackType
from typing import Protocol

import httpx

from ..config import OAuthClientConfig
from ..core.errors import ErrorKind, MatchDayApiError, configuration_error
from ..core.transport_shared import build_default_headers, build_default_timeout
from .client import validate_oauth_config
from .models import AuthorizeResult, OAuthScope, TokenResult
from .oauth_shared import (
    TOKEN_REQUEST_HEADERS,
    build_authorize_result,
    build_token_form,
    parse_token_response,
    token_endpoint,
)
from .pkce import generate_code_verifier

logger = logging.getLogger("matchday_client")


class AsyncOAuthTransportClient(Protocol):
    async def post(
        self,
        url: str,
        *,
        data: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> httpx.Response: ...

    async def aclose(self) -> None: ...


class AsyncMatchDayOAuthClient:
    """Async counterpart of ``MatchDayOAuthClient``."""

    def __init__(
        self,
        config: OAuthClientConfig,
        *,
        client: AsyncOAuthTransportClient | None = None,
        verifier_factory: Callable[[], str] = generate_code_verifier,
    ) -> None:
        validate_oauth_config(config)
        self._config = config
        self._verifier_factory = verifier_factory
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config.user_agent),
            timeout=build_default_timeout(config.transport),
        )

    @property
    def config(self) -> OAuthClientConfig:
        return self._config

    def authorize(
        self,
        scopes: Iterable[OAuthScope | str],
        redirect_url: str,
        state: str | None = None,
    ) -> AuthorizeResult:
        # No I/O here, so this stays synchronous.
        return build_authorize_result(
            self._config,
            scopes,
            redirect_url,
            state,
            verifier_factory=self._verifier_factory,
        )

    async def exchange(
        self,
        code: str,
        redirect_url: str,
        pkce_verifier: str | None = None,
    ) -> TokenResult:
        self._ensure_open()
        form = build_token_form(self._config, code, redirect_url, pkce_verifier)
        logger.debug("token exchange start pkce=%s", pkce_verifier is not None)
        try:
            response = await self._client.post(
                token_endpoint(self._config),
                data=form,
                headers=TOKEN_REQUEST_HEADERS,
            )
        except httpx.HTTPError as exc:
            logger.warning("token exchange network error error=%s", exc.__class__.__name__)
            raise MatchDayApiError(ErrorKind.GENERIC, "Network/transport error") from exc

        try:
            token = parse_token_response(response)
        except MatchDayApiError:
            logger.error("token exchange failed http_status=%s", response.status_code)
            raise
        logger.info("token exchange success")
        return token

    def _ensure_open(self) -> None:
        if self._closed:
            raise configuration_error("AsyncMatchDayOAuthClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncMatchDayOAuthClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncMatchDayOAuthClient",
]
