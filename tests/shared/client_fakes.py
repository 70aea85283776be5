from __future__ import annotations

from dataclasses import replace

from matchday_client.config import MatchDayClientConfig
from tests.shared.transport import build_config


class DummyTransport:
    """Records what the client asked for and returns a fixed payload."""

    def __init__(self, payload: object = None, config: MatchDayClientConfig | None = None):
        self.payload = {} if payload is None else payload
        self.config = config or build_config()
        self.closed = False
        self.calls: list[tuple[str, str]] = []

    def set_access_token(self, token: str | None) -> None:
        self.config = replace(self.config, access_token=token)

    def close(self):
        self.closed = True

    def request(self, path: str, *, method: str = "GET", headers=None, body=None):
        self.calls.append((method, path))
        return self.payload


class DummyAsyncTransport:
    def __init__(self, payload: object = None, config: MatchDayClientConfig | None = None):
        self.payload = {} if payload is None else payload
        self.config = config or build_config()
        self.closed = False
        self.calls: list[tuple[str, str]] = []

    def set_access_token(self, token: str | None) -> None:
        self.config = replace(self.config, access_token=token)

    async def close(self):
        self.closed = True

    async def request(self, path: str, *, method: str = "GET", headers=None, body=None):
        self.calls.append((method, path))
        return self.payload
