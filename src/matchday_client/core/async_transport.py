"""Asynchronous HTTP transport implementing the request pipeline."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, Protocol

import httpx

from ..config import MatchDayClientConfig
from .errors import ErrorKind, MatchDayApiError, map_http_error
from .response_parsing import is_no_content, parse_success_payload
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    build_request_headers,
    build_url,
)

logger = logging.getLogger("matchday_client")


class AsyncTransportClient(Protocol):
    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: str | bytes | None,
    ) -> httpx.Response: ...

    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for the MatchDay API."""

    def __init__(
        self,
        config: MatchDayClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config.user_agent),
            timeout=build_default_timeout(config.transport),
        )

    @property
    def config(self) -> MatchDayClientConfig:
        return self._config

    def set_access_token(self, token: str | None) -> None:
        self._config = replace(self._config, access_token=token)

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> Any:
        if self._closed:
            raise MatchDayApiError(ErrorKind.CONFIGURATION, "transport is already closed")

        # Snapshot so a concurrent set_access_token cannot split one request.
        config = self._config
        request_headers = build_request_headers(config, headers)
        url = build_url(config, path)

        logger.debug("request start method=%s path=%s", method, path)
        try:
            response = await self._client.request(
                method,
                url,
                headers=request_headers,
                content=body,
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "request network error method=%s path=%s error=%s",
                method,
                path,
                exc.__class__.__name__,
            )
            raise MatchDayApiError(
                ErrorKind.GENERIC,
                "Network/transport error",
            ) from exc

        logger.debug(
            "response received method=%s path=%s http_status=%s",
            method,
            path,
            response.status_code,
        )
        if is_no_content(response):
            logger.info("request success method=%s path=%s no_content=true", method, path)
            return {}

        mapped_error = map_http_error(response)
        if mapped_error is not None:
            logger.error(
                "request failed method=%s path=%s http_status=%s kind=%s",
                method,
                path,
                response.status_code,
                mapped_error.kind.value,
            )
            raise mapped_error

        payload = parse_success_payload(response)
        logger.info("request success method=%s path=%s", method, path)
        return payload


__all__ = [
    "AsyncTransport",
]
