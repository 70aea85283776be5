"""Club endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import Club, ClubPartial
from ..queries import BaseListQuery
from .base import APIResource, AsyncAPIResource, Requester

ClubList = list[ClubPartial]


class ClubsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/clubs")

    def list(self, query: BaseListQuery | Mapping[str, object] | None = None) -> ClubList:
        return self._get(self._list_path(query))

    def get(self, club_id: str) -> Club:
        return self._get(self._item_path(club_id))


class AsyncClubsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/clubs")

    async def list(self, query: BaseListQuery | Mapping[str, object] | None = None) -> ClubList:
        return await self._get(self._list_path(query))

    async def get(self, club_id: str) -> Club:
        return await self._get(self._item_path(club_id))


__all__ = [
    "ClubList",
    "ClubsResource",
    "AsyncClubsResource",
]
