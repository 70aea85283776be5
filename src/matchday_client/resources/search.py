"""Search endpoint."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import SearchItem
from ..queries import BaseListQuery
from .base import APIResource, AsyncAPIResource, Requester

SearchResults = list[SearchItem]


class SearchResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/search")

    def list(self, query: BaseListQuery | Mapping[str, object] | None = None) -> SearchResults:
        """Ranked results across teams, persons, competitions and matches."""
        return self._get(self._list_path(query))


class AsyncSearchResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/search")

    async def list(
        self,
        query: BaseListQuery | Mapping[str, object] | None = None,
    ) -> SearchResults:
        return await self._get(self._list_path(query))


__all__ = [
    "SearchResults",
    "SearchResource",
    "AsyncSearchResource",
]
