from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from matchday_client import AsyncMatchDayOAuthClient, OAuthScope
from matchday_client.core.errors import MatchDayApiError
from matchday_client.oauth.pkce import code_challenge_s256
from tests.shared.transport import RecordingHandler, build_oauth_config, json_response

REDIRECT_URL = "https://app.example.test/callback"


def _client(handler: RecordingHandler, **config_overrides) -> AsyncMatchDayOAuthClient:
    return AsyncMatchDayOAuthClient(
        build_oauth_config(**config_overrides),
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.asyncio
async def test_async_authorize_then_exchange_round_trip():
    handler = RecordingHandler(
        [json_response(200, {"access_token": "at", "token_type": "Bearer", "expires_in": 60, "scope": "email"})]
    )
    async with _client(handler) as client:
        result = client.authorize([OAuthScope.EMAIL], REDIRECT_URL, "st")
        assert result.pkce_verifier is not None
        assert f"code_challenge={code_challenge_s256(result.pkce_verifier)}" in result.url

        token = await client.exchange("code-1", REDIRECT_URL, result.pkce_verifier)

    assert token["access_token"] == "at"
    form = parse_qs(handler.last_request.content.decode())
    assert form["code_verifier"] == [result.pkce_verifier]
    assert form["grant_type"] == ["authorization_code"]


@pytest.mark.asyncio
async def test_async_exchange_error_message():
    handler = RecordingHandler([json_response(400, {"error_description": "bad code"})])
    client = _client(handler, client_secret="secret")

    with pytest.raises(MatchDayApiError, match="Token exchange failed: 400 Bad Request - bad code"):
        await client.exchange("code-1", REDIRECT_URL)

    form = parse_qs(handler.last_request.content.decode())
    assert form["client_secret"] == ["secret"]
    await client.close()


@pytest.mark.asyncio
async def test_async_exchange_after_close_raises():
    client = _client(RecordingHandler([]))
    await client.close()
    with pytest.raises(MatchDayApiError, match="already closed"):
        await client.exchange("code-1", REDIRECT_URL)
