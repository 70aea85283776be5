"""Season endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import SeasonPartial
from ..queries import BaseListQuery
from .base import APIResource, AsyncAPIResource, Requester

SeasonList = list[SeasonPartial]


class SeasonsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/seasons")

    def list(self, query: BaseListQuery | Mapping[str, object] | None = None) -> SeasonList:
        return self._get(self._list_path(query))


class AsyncSeasonsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/seasons")

    async def list(
        self,
        query: BaseListQuery | Mapping[str, object] | None = None,
    ) -> SeasonList:
        return await self._get(self._list_path(query))


__all__ = [
    "SeasonList",
    "SeasonsResource",
    "AsyncSeasonsResource",
]
