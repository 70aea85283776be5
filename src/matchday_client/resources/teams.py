"""Team endpoints."""

from __future__ import annotations

from collections.abc import Mapping

from ..models import (
    ListResponse,
    Team,
    TeamPartial,
    TeamPlayerRegistration,
    TeamStaffRegistration,
    TeamStatsSummary,
)
from ..queries import TeamListQuery, TeamPlayersStatsQuery, TeamStaffQuery, TeamStatsSummaryQuery
from .base import APIResource, AsyncAPIResource, Requester

TeamPlayerList = list[TeamPlayerRegistration]
TeamStaffList = list[TeamStaffRegistration]

TeamListArg = TeamListQuery | Mapping[str, object] | None
TeamPlayersArg = TeamPlayersStatsQuery | Mapping[str, object] | None
TeamStaffArg = TeamStaffQuery | Mapping[str, object] | None
TeamSummaryArg = TeamStatsSummaryQuery | Mapping[str, object] | None


class TeamsStatsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/teams")

    def summary(self, team_id: str, query: TeamSummaryArg = None) -> TeamStatsSummary:
        return self._get(self._with_query(self._item_path(team_id, "/stats/summary"), query))


class TeamsResource(APIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/teams")
        self.stats = TeamsStatsResource(client)

    def list(self, query: TeamListArg = None) -> ListResponse[TeamPartial]:
        return self._get(self._list_path(query))

    def get(self, team_id: str) -> Team:
        return self._get(self._item_path(team_id))

    def players(self, team_id: str, query: TeamPlayersArg = None) -> TeamPlayerList:
        """Player registrations with stats for a team."""
        return self._get(self._with_query(self._item_path(team_id, "/stats/players"), query))

    def staff(self, team_id: str, query: TeamStaffArg = None) -> TeamStaffList:
        return self._get(self._with_query(self._item_path(team_id, "/staff"), query))


class AsyncTeamsStatsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/teams")

    async def summary(self, team_id: str, query: TeamSummaryArg = None) -> TeamStatsSummary:
        return await self._get(
            self._with_query(self._item_path(team_id, "/stats/summary"), query)
        )


class AsyncTeamsResource(AsyncAPIResource):
    def __init__(self, client: Requester) -> None:
        super().__init__(client, "/teams")
        self.stats = AsyncTeamsStatsResource(client)

    async def list(self, query: TeamListArg = None) -> ListResponse[TeamPartial]:
        return await self._get(self._list_path(query))

    async def get(self, team_id: str) -> Team:
        return await self._get(self._item_path(team_id))

    async def players(self, team_id: str, query: TeamPlayersArg = None) -> TeamPlayerList:
        return await self._get(
            self._with_query(self._item_path(team_id, "/stats/players"), query)
        )

    async def staff(self, team_id: str, query: TeamStaffArg = None) -> TeamStaffList:
        return await self._get(self._with_query(self._item_path(team_id, "/staff"), query))


__all__ = [
    "TeamPlayerList",
    "TeamStaffList",
    "TeamsStatsResource",
    "TeamsResource",
    "AsyncTeamsStatsResource",
    "AsyncTeamsResource",
]
