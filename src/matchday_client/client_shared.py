"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import MatchDayClientConfig
from .core.errors import configuration_error
from .resources import (
    AsyncClubsResource,
    AsyncCompetitionsResource,
    AsyncLocationsResource,
    AsyncMatchesResource,
    AsyncPersonsResource,
    AsyncSearchResource,
    AsyncSeasonsResource,
    AsyncTeamsResource,
    AsyncUsersResource,
    ClubsResource,
    CompetitionsResource,
    LocationsResource,
    MatchesResource,
    PersonsResource,
    SearchResource,
    SeasonsResource,
    TeamsResource,
    UsersResource,
)
from .resources.base import Requester


def validate_client_config(config: MatchDayClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise configuration_error(str(exc)) from exc


class ResourceMixin:
    """Attaches every endpoint facade to a client exposing ``request``."""

    matches: MatchesResource
    competitions: CompetitionsResource
    teams: TeamsResource
    seasons: SeasonsResource
    persons: PersonsResource
    search: SearchResource
    users: UsersResource
    locations: LocationsResource
    clubs: ClubsResource

    def _init_resources(self, requester: Requester) -> None:
        self.matches = MatchesResource(requester)
        self.competitions = CompetitionsResource(requester)
        self.teams = TeamsResource(requester)
        self.seasons = SeasonsResource(requester)
        self.persons = PersonsResource(requester)
        self.search = SearchResource(requester)
        self.users = UsersResource(requester)
        self.locations = LocationsResource(requester)
        self.clubs = ClubsResource(requester)


class AsyncResourceMixin:
    """Async counterpart of ``ResourceMixin``; facade methods are coroutines."""

    matches: AsyncMatchesResource
    competitions: AsyncCompetitionsResource
    teams: AsyncTeamsResource
    seasons: AsyncSeasonsResource
    persons: AsyncPersonsResource
    search: AsyncSearchResource
    users: AsyncUsersResource
    locations: AsyncLocationsResource
    clubs: AsyncClubsResource

    def _init_resources(self, requester: Requester) -> None:
        self.matches = AsyncMatchesResource(requester)
        self.competitions = AsyncCompetitionsResource(requester)
        self.teams = AsyncTeamsResource(requester)
        self.seasons = AsyncSeasonsResource(requester)
        self.persons = AsyncPersonsResource(requester)
        self.search = AsyncSearchResource(requester)
        self.users = AsyncUsersResource(requester)
        self.locations = AsyncLocationsResource(requester)
        self.clubs = AsyncClubsResource(requester)


__all__ = [
    "validate_client_config",
    "ResourceMixin",
    "AsyncResourceMixin",
]
