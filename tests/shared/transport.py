from __future__ import annotations

import json
from collections.abc import Sequence

import httpx

from matchday_client.config import ApiVersion, MatchDayClientConfig, OAuthClientConfig
from matchday_client.core.async_transport import AsyncTransport
from matchday_client.core.transport import SyncTransport

Step = httpx.Response | Exception


def json_response(status_code: int, payload: object) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


def text_response(status_code: int, text: str) -> httpx.Response:
    return httpx.Response(status_code, text=text)


class RecordingHandler:
    """``httpx.MockTransport`` handler replaying queued responses."""

    def __init__(self, steps: Sequence[Step]):
        self.steps = list(steps)
        self.requests: list[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        step = self.steps.pop(0)
        if isinstance(step, Exception):
            raise step
        return step


def request_json(request: httpx.Request) -> object:
    return json.loads(request.content)


def build_config(
    *,
    api_key: str | None = "test-key",
    access_token: str | None = None,
    base_url: str = "https://api.example.test",
    version: ApiVersion = ApiVersion.V1,
) -> MatchDayClientConfig:
    cfg = MatchDayClientConfig(
        base_url=base_url,
        version=version,
        api_key=api_key,
        access_token=access_token,
    )
    cfg.validate()
    return cfg


def build_oauth_config(
    *,
    client_id: str = "client-123",
    client_secret: str | None = None,
    use_pkce: bool = False,
    **kwargs,
) -> OAuthClientConfig:
    cfg = OAuthClientConfig(
        client_id=client_id,
        client_secret=client_secret,
        auth_url="https://auth.example.test",
        use_pkce=use_pkce,
        **kwargs,
    )
    cfg.validate()
    return cfg


def sync_transport(
    handler: RecordingHandler,
    config: MatchDayClientConfig | None = None,
) -> SyncTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return SyncTransport(config or build_config(), client=client)


def async_transport(
    handler: RecordingHandler,
    config: MatchDayClientConfig | None = None,
) -> AsyncTransport:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AsyncTransport(config or build_config(), client=client)
