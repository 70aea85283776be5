"""Endpoint facades attached to the public clients."""

from .clubs import AsyncClubsResource, ClubsResource
from .competitions import (
    AsyncCompetitionGroupsResource,
    AsyncCompetitionsResource,
    AsyncCompetitionsStatsResource,
    CompetitionGroupsResource,
    CompetitionsResource,
    CompetitionsStatsResource,
)
from .locations import AsyncLocationsResource, LocationsResource
from .matches import AsyncMatchesResource, MatchesResource
from .persons import AsyncPersonsResource, AsyncPersonsStatsResource, PersonsResource, PersonsStatsResource
from .search import AsyncSearchResource, SearchResource
from .seasons import AsyncSeasonsResource, SeasonsResource
from .teams import AsyncTeamsResource, AsyncTeamsStatsResource, TeamsResource, TeamsStatsResource
from .users import AsyncUsersResource, UsersResource

__all__ = [
    "ClubsResource",
    "CompetitionGroupsResource",
    "CompetitionsResource",
    "CompetitionsStatsResource",
    "LocationsResource",
    "MatchesResource",
    "PersonsResource",
    "PersonsStatsResource",
    "SearchResource",
    "SeasonsResource",
    "TeamsResource",
    "TeamsStatsResource",
    "UsersResource",
    "AsyncClubsResource",
    "AsyncCompetitionGroupsResource",
    "AsyncCompetitionsResource",
    "AsyncCompetitionsStatsResource",
    "AsyncLocationsResource",
    "AsyncMatchesResource",
    "AsyncPersonsResource",
    "AsyncPersonsStatsResource",
    "AsyncSearchResource",
    "AsyncSeasonsResource",
    "AsyncTeamsResource",
    "AsyncTeamsStatsResource",
    "AsyncUsersResource",
]
