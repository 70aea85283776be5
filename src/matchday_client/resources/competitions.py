"""Competition and competition group endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import (
    Competition,
    CompetitionGroup,
    CompetitionPartial,
    CompetitionPlayersStats,
    CompetitionStatsSummary,
    CompetitionTeamsStats,
    ListResponse,
)
from ..queries import (
    CompetitionPlayersStatsQuery,
    CompetitionQuery,
    CompetitionStatsSummaryQuery,
    CompetitionTeamsStatsQuery,
)
from .base import APIResource, AsyncAPIResource, Requester

CompetitionArg = CompetitionQuery | Mapping[str, object] | None
SummaryArg = CompetitionStatsSummaryQuery | Mapping[str, object] | None
PlayersArg = CompetitionPlayersStatsQuery | Mapping[str, object] | None
TeamsArg = CompetitionTeamsStatsQuery | Mapping[str, object] | None


class CompetitionsStatsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/competitions")

    def summary(self, competition_id: str, query: SummaryArg = None) -> CompetitionStatsSummary:
        """Aggregate goals, cards and clean sheets for a competition."""
        return self._get(
            self._with_query(self._item_path(competition_id, "/stats/summary"), query)
        )


class CompetitionGroupsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/competition-groups")

    def list(self, query: CompetitionArg = None) -> ListResponse[CompetitionGroup]:
        return self._get(self._list_path(query))

    def get(self, group_id: str) -> CompetitionGroup:
        return self._get(self._item_path(group_id))


class CompetitionsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/competitions")
        self.stats = CompetitionsStatsResource(client)
        self.groups = CompetitionGroupsResource(client)

    def list(self, query: CompetitionArg = None) -> ListResponse[CompetitionPartial]:
        return self._get(self._list_path(query))

    def get(self, competition_id: str) -> Competition:
        return self._get(self._item_path(competition_id))

    def players(
        self,
        competition_id: str,
        query: PlayersArg = None,
    ) -> ListResponse[CompetitionPlayersStats]:
        """Paginated per-player stats for a competition."""
        return self._get(
            self._with_query(self._item_path(competition_id, "/stats/players"), query)
        )

    def teams(
        self,
        competition_id: str,
        query: TeamsArg = None,
    ) -> ListResponse[CompetitionTeamsStats]:
        """Paginated per-team stats for a competition."""
        return self._get(
            self._with_query(self._item_path(competition_id, "/stats/teams"), query)
        )


class AsyncCompetitionsStatsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/competitions")

    async def summary(
        self,
        competition_id: str,
        query: SummaryArg = None,
    ) -> CompetitionStatsSummary:
        return await self._get(
            self._with_query(self._item_path(competition_id, "/stats/summary"), query)
        )


class AsyncCompetitionGroupsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/competition-groups")

    async def list(self, query: CompetitionArg = None) -> ListResponse[CompetitionGroup]:
        return await self._get(self._list_path(query))

    async def get(self, group_id: str) -> CompetitionGroup:
        return await self._get(self._item_path(group_id))


class AsyncCompetitionsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/competitions")
        self.stats = AsyncCompetitionsStatsResource(client)
        self.groups = AsyncCompetitionGroupsResource(client)

    async def list(self, query: CompetitionArg = None) -> ListResponse[CompetitionPartial]:
        return await self._get(self._list_path(query))

    async def get(self, competition_id: str) -> Competition:
        return await self._get(self._item_path(competition_id))

    async def players(
        self,
        competition_id: str,
        query: PlayersArg = None,
    ) -> ListResponse[CompetitionPlayersStats]:
        return await self._get(
            self._with_query(self._item_path(competition_id, "/stats/players"), query)
        )

    async def teams(
        self,
        competition_id: str,
        query: TeamsArg = None,
    ) -> ListResponse[CompetitionTeamsStats]:
        return await self._get(
            self._with_query(self._item_path(competition_id, "/stats/teams"), query)
        )


__all__ = [
    "CompetitionsStatsResource",
    "CompetitionGroupsResource",
    "CompetitionsResource",
    "AsyncCompetitionsStatsResource",
    "AsyncCompetitionGroupsResource",
    "AsyncCompetitionsResource",
]
