from __future__ import annotations

import inspect
from typing import Any, get_type_hints

import pytest

from matchday_client import AsyncMatchDayClient, MatchDayClient
from matchday_client.models import FullMatch, ListResponse, TeamPartial, User
from matchday_client.resources import (
    AsyncClubsResource,
    AsyncCompetitionGroupsResource,
    AsyncCompetitionsResource,
    AsyncCompetitionsStatsResource,
    AsyncLocationsResource,
    AsyncMatchesResource,
    AsyncPersonsResource,
    AsyncPersonsStatsResource,
    AsyncSearchResource,
    AsyncSeasonsResource,
    AsyncTeamsResource,
    AsyncTeamsStatsResource,
    AsyncUsersResource,
    ClubsResource,
    CompetitionGroupsResource,
    CompetitionsResource,
    CompetitionsStatsResource,
    LocationsResource,
    MatchesResource,
    PersonsResource,
    PersonsStatsResource,
    SearchResource,
    SeasonsResource,
    TeamsResource,
    TeamsStatsResource,
    UsersResource,
)
from tests.shared.client_fakes import DummyAsyncTransport, DummyTransport

RESOURCE_PAIRS = [
    (ClubsResource, AsyncClubsResource),
    (CompetitionGroupsResource, AsyncCompetitionGroupsResource),
    (CompetitionsResource, AsyncCompetitionsResource),
    (CompetitionsStatsResource, AsyncCompetitionsStatsResource),
    (LocationsResource, AsyncLocationsResource),
    (MatchesResource, AsyncMatchesResource),
    (PersonsResource, AsyncPersonsResource),
    (PersonsStatsResource, AsyncPersonsStatsResource),
    (SearchResource, AsyncSearchResource),
    (SeasonsResource, AsyncSeasonsResource),
    (TeamsResource, AsyncTeamsResource),
    (TeamsStatsResource, AsyncTeamsStatsResource),
    (UsersResource, AsyncUsersResource),
]


def _endpoint_methods(cls: type) -> dict[str, object]:
    return {
        name: member
        for name, member in vars(cls).items()
        if inspect.isfunction(member) and not name.startswith("_")
    }


@pytest.mark.parametrize(("sync_cls", "async_cls"), RESOURCE_PAIRS, ids=lambda cls: cls.__name__)
def test_async_facades_mirror_sync_result_types(sync_cls, async_cls):
    sync_methods = _endpoint_methods(sync_cls)
    async_methods = _endpoint_methods(async_cls)

    assert sync_methods
    assert sync_methods.keys() == async_methods.keys()
    for name, method in sync_methods.items():
        sync_return = get_type_hints(method)["return"]
        async_method = async_methods[name]
        assert inspect.iscoroutinefunction(async_method)
        assert get_type_hints(async_method)["return"] == sync_return
        assert sync_return is not Any


def test_endpoint_result_types():
    assert get_type_hints(MatchesResource.get)["return"] is FullMatch
    assert get_type_hints(TeamsResource.list)["return"] == ListResponse[TeamPartial]
    assert get_type_hints(UsersResource.me)["return"] is User


def test_sync_match_result_reads_typed_fields(match_payload):
    client = MatchDayClient(transport=DummyTransport(payload=match_payload))

    match: FullMatch = client.matches.get("match-123")

    assert match["homeTeam"]["name"] == "Team A"
    assert match["season"]["id"] == "s1"


@pytest.mark.asyncio
async def test_async_team_list_result_reads_typed_fields():
    payload = {
        "items": [{"id": "t1", "name": "Team A", "logo": None, "nickname": "A"}],
        "pagination": {
            "totalItems": 1,
            "totalPages": 1,
            "currentPage": 1,
            "itemsPerPage": 10,
            "hasNextPage": False,
            "hasPrevPage": False,
        },
    }
    client = AsyncMatchDayClient(transport=DummyAsyncTransport(payload=payload))

    teams: ListResponse[TeamPartial] = await client.teams.list()

    assert teams["items"][0]["name"] == "Team A"
    assert teams["pagination"]["hasNextPage"] is False
