"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from types import TracebackType
from typing import Any

from .client_shared import ResourceMixin, validate_client_config
from .config import MatchDayClientConfig
from .core.errors import configuration_error
from .core.transport import SyncTransport


class MatchDayClient(ResourceMixin):
    """Public MatchDay API client.

    Authenticate with ``api_key`` or ``access_token`` in the config, or call
    ``set_access_token`` after an OAuth exchange. A bearer token is used in
    preference to an API key.
    """

    def __init__(
        self,
        *,
        config: MatchDayClientConfig | None = None,
        transport: SyncTransport | None = None,
    ) -> None:
        config = config or MatchDayClientConfig()
        validate_client_config(config)

        self._transport = transport or SyncTransport(config)
        self._closed = False
        self._init_resources(self)

    @property
    def config(self) -> MatchDayClientConfig:
        return self._transport.config

    def set_access_token(self, token: str | None) -> None:
        """Use ``token`` as the bearer credential for subsequent requests.

        Not synchronized: a request already in flight on another thread may
        still go out with the previous credential.
        """
        self._transport.set_access_token(token)

    def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> Any:
        """Send one request to ``base_url + version + path`` and return the decoded body."""
        self._ensure_open()
        return self._transport.request(path, method=method, headers=headers, body=body)

    def _ensure_open(self) -> None:
        if self._closed:
            raise configuration_error("MatchDayClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "MatchDayClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "MatchDayClient",
]
