"""Person endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import (
    ListResponse,
    Person,
    PersonAppearance,
    PersonRegistration,
    PersonStatsAssist,
    PersonStatsCard,
    PersonStatsGoal,
    PersonStatsSummary,
)
from ..queries import (
    PersonAppearancesQuery,
    PersonQuery,
    PersonRegistrationQuery,
    PersonStatsSummaryQuery,
    PlayerCardsQuery,
    PlayerStatsQuery,
)
from .base import APIResource, AsyncAPIResource, Requester

PersonArg = PersonQuery | Mapping[str, object] | None
RegistrationArg = PersonRegistrationQuery | Mapping[str, object] | None
AppearancesArg = PersonAppearancesQuery | Mapping[str, object] | None
SummaryArg = PersonStatsSummaryQuery | Mapping[str, object] | None
PlayerStatsArg = PlayerStatsQuery | Mapping[str, object] | None
CardsArg = PlayerCardsQuery | Mapping[str, object] | None


class PersonsStatsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/persons")

    def summary(self, person_id: str, query: SummaryArg = None) -> PersonStatsSummary:
        return self._get(self._stats_path(person_id, "summary", query))

    def goals(self, person_id: str, query: PlayerStatsArg = None) -> ListResponse[PersonStatsGoal]:
        return self._get(self._stats_path(person_id, "goals", query))

    def assists(
        self,
        person_id: str,
        query: PlayerStatsArg = None,
    ) -> ListResponse[PersonStatsAssist]:
        return self._get(self._stats_path(person_id, "assists", query))

    def cards(self, person_id: str, query: CardsArg = None) -> ListResponse[PersonStatsCard]:
        return self._get(self._stats_path(person_id, "cards", query))

    def _stats_path(self, person_id: str, name: str, query: object) -> str:
        return self._with_query(self._item_path(person_id, f"/stats/{name}"), query)


class PersonsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/persons")
        self.stats = PersonsStatsResource(client)

    def get(self, person_id: str) -> Person:
        return self._get(self._item_path(person_id))

    def list(self, query: PersonArg = None) -> ListResponse[Person]:
        return self._get(self._list_path(query))

    def registrations(
        self,
        person_id: str,
        query: RegistrationArg = None,
    ) -> ListResponse[PersonRegistration]:
        """Player and staff registrations, newest first."""
        return self._get(self._with_query(self._item_path(person_id, "/registrations/"), query))

    def appearances(
        self,
        person_id: str,
        query: AppearancesArg = None,
    ) -> ListResponse[PersonAppearance]:
        return self._get(self._with_query(self._item_path(person_id, "/appearances/"), query))


class AsyncPersonsStatsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/persons")

    async def summary(self, person_id: str, query: SummaryArg = None) -> PersonStatsSummary:
        return await self._get(self._stats_path(person_id, "summary", query))

    async def goals(
        self,
        person_id: str,
        query: PlayerStatsArg = None,
    ) -> ListResponse[PersonStatsGoal]:
        return await self._get(self._stats_path(person_id, "goals", query))

    async def assists(
        self,
        person_id: str,
        query: PlayerStatsArg = None,
    ) -> ListResponse[PersonStatsAssist]:
        return await self._get(self._stats_path(person_id, "assists", query))

    async def cards(
        self,
        person_id: str,
        query: CardsArg = None,
    ) -> ListResponse[PersonStatsCard]:
        return await self._get(self._stats_path(person_id, "cards", query))

    def _stats_path(self, person_id: str, name: str, query: object) -> str:
        return self._with_query(self._item_path(person_id, f"/stats/{name}"), query)


class AsyncPersonsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/persons")
        self.stats = AsyncPersonsStatsResource(client)

    async def get(self, person_id: str) -> Person:
        return await self._get(self._item_path(person_id))

    async def list(self, query: PersonArg = None) -> ListResponse[Person]:
        return await self._get(self._list_path(query))

    async def registrations(
        self,
        person_id: str,
        query: RegistrationArg = None,
    ) -> ListResponse[PersonRegistration]:
        return await self._get(
            self._with_query(self._item_path(person_id, "/registrations/"), query)
        )

    async def appearances(
        self,
        person_id: str,
        query: AppearancesArg = None,
    ) -> ListResponse[PersonAppearance]:
        return await self._get(
            self._with_query(self._item_path(person_id, "/appearances/"), query)
        )


__all__ = [
    "PersonsStatsResource",
    "PersonsResource",
    "AsyncPersonsStatsResource",
    "AsyncPersonsResource",
]
