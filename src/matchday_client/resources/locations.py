"""Location endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import LocationWithCourts
from ..queries import BaseListQuery
from .base import APIResource, AsyncAPIResource, Requester

LocationList = list[LocationWithCourts]


class LocationsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/locations")

    def list(self, query: BaseListQuery | Mapping[str, object] | None = None) -> LocationList:
        return self._get(self._list_path(query))

    def get(self, location_id: str) -> LocationWithCourts:
        return self._get(self._item_path(location_id))


class AsyncLocationsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/locations")

    async def list(
        self,
        query: BaseListQuery | Mapping[str, object] | None = None,
    ) -> LocationList:
        return await self._get(self._list_path(query))

    async def get(self, location_id: str) -> LocationWithCourts:
        return await self._get(self._item_path(location_id))


__all__ = [
    "LocationList",
    "LocationsResource",
    "AsyncLocationsResource",
]
