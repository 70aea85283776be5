"""User endpoints."""

from __future__ import annotations

from ..models import User
from .base import APIResource, AsyncAPIResource, Requester


class UsersResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/users")

    def me(self) -> User:
        """The user the access token belongs to; needs a bearer token."""
        return self._get(f"{self._base_path}/@me")


class AsyncUsersResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/users")

    async def me(self) -> User:
        return await self._get(f"{self._base_path}/@me")


__all__ = [
    "UsersResource",
    "AsyncUsersResource",
]
