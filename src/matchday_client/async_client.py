"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any

from .client_shared import AsyncResourceMixin, validate_client_config
from .config import MatchDayClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import configuration_error


class AsyncMatchDayClient(AsyncResourceMixin):
    """Public async MatchDay API client.

    Resource methods return awaitables: ``await client.matches.get(match_id)``.
    """

    def __init__(
        self,
        *,
        config: MatchDayClientConfig | None = None,
        transport: AsyncTransport | None = None,
    ) -> None:
        config = config or MatchDayClientConfig()
        validate_client_config(config)

        self._transport = transport or AsyncTransport(config)
        self._closed = False
        self._init_resources(self)

    @property
    def config(self) -> MatchDayClientConfig:
        return self._transport.config

    def set_access_token(self, token: str | None) -> None:
        """Use ``token`` as the bearer credential for requests started afterwards."""
        self._transport.set_access_token(token)

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> Any:
        self._ensure_open()
        return await self._transport.request(path, method=method, headers=headers, body=body)

    def _ensure_open(self) -> None:
        if self._closed:
            raise configuration_error("AsyncMatchDayClient is already closed")

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncMatchDayClient":
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
    "AsyncMatchDayClient",
]
