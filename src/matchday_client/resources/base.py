"""Base classes for endpoint facades."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import quote

from ..core.query_string import stringify_query


class Requester(Protocol):
    """What a facade needs from a client: the request pipeline.

    ``AsyncMatchDayClient.request`` returns an awaitable; async facades
    await it.
    """

    def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: str | bytes | None = None,
    ) -> Any: ...


class APIResource:
    def __init__(self, client: Requester, base_path: str) -> None:
        self._client = client
        self._base_path = base_path

    @property
    def base_path(self) -> str:
        return self._base_path

    def _item_path(self, resource_id: str, suffix: str = "") -> str:
        return f"{self._base_path}/{quote(str(resource_id), safe='')}{suffix}"

    def _list_path(self, query: object) -> str:
        return self._with_query(self._base_path, query)

    @staticmethod
    def _with_query(path: str, query: object) -> str:
        # The "?" is kept even when the query is empty.
        return f"{path}?{stringify_query(query)}"

    def _get(self, path: str) -> Any:
        return self._client.request(path, method="GET")


class AsyncAPIResource(APIResource):
    async def _get(self, path: str) -> Any:
        return await self._client.request(path, method="GET")


__all__ = [
    "Requester",
    "APIResource",
    "AsyncAPIResource",
]
