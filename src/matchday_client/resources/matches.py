"""Match endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import FullMatch, Match
from ..queries import MatchQuery
from .base import APIResource, AsyncAPIResource, Requester

MatchList = list[Match]


class MatchesResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/matches")

    def list(self, query: MatchQuery | Mapping[str, object] | None = None) -> MatchList:
        """List matches matching ``query``.

        Example: ``client.matches.list(MatchQuery(season=["2025"], items_per_page=10))``
        """
        return self._get(self._list_path(query))

    def get(self, match_id: str) -> FullMatch:
        """Fetch one match with lineups and events."""
        return self._get(self._item_path(match_id))


class AsyncMatchesResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/matches")

    async def list(self, query: MatchQuery | Mapping[str, object] | None = None) -> MatchList:
        return await self._get(self._list_path(query))

    async def get(self, match_id: str) -> FullMatch:
        return await self._get(self._item_path(match_id))


__all__ = [
    "MatchList",
    "MatchesResource",
    "AsyncMatchesResource",
]
