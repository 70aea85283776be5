from __future__ import annotations

import os

import pytest

from matchday_client import MatchDayClient, MatchDayClientConfig
from matchday_client.queries import BaseListQuery


pytestmark = pytest.mark.live


def _require_live_flag() -> None:
    if os.getenv("MATCHDAY_RUN_LIVE") != "1":
        pytest.skip("Set MATCHDAY_RUN_LIVE=1 to run live contract tests")
    if not os.getenv("MATCHDAY_API_KEY"):
        pytest.skip("Set MATCHDAY_API_KEY to run live contract tests")


def _live_client() -> MatchDayClient:
    cfg = MatchDayClientConfig(api_key=os.environ["MATCHDAY_API_KEY"])
    cfg.validate()
    return MatchDayClient(config=cfg)


def test_live_seasons_contract_minimum():
    _require_live_flag()
    with _live_client() as client:
        result = client.seasons.list(BaseListQuery(items_per_page=5))

    assert isinstance(result, list)
    for season in result:
        assert isinstance(season["id"], str)
        assert isinstance(season["name"], str)


def test_live_matches_contract_minimum():
    _require_live_flag()
    with _live_client() as client:
        matches = client.matches.list({"itemsPerPage": 3})

    assert isinstance(matches, list)
    for match in matches:
        assert isinstance(match["id"], str)
        assert isinstance(match["status"], str)
