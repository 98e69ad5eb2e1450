"""
Service Dependencies.

Provides the SQL repository bundle and the application services to the API
endpoints. Tests override ``get_repos`` to point the services at another
database.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from scouts.core.database.session import async_session_maker
from scouts.core.database.utils import SqlRepoBundle, build_sql_repos
from scouts.services import (
    EventManagementService,
    GroupManagementService,
    RegistrationManagementService,
    ScoutManagementService,
)


@lru_cache
def get_repos() -> SqlRepoBundle:
    """Repository bundle bound to the application-wide session factory."""
    return build_sql_repos(session_factory=async_session_maker)


RepoBundleDep = Annotated[SqlRepoBundle, Depends(get_repos)]


def get_group_service(repos: RepoBundleDep) -> GroupManagementService:
    return GroupManagementService(groups=repos.groups)


def get_scout_service(repos: RepoBundleDep) -> ScoutManagementService:
    return ScoutManagementService(scouts=repos.scouts, groups=repos.groups)


def get_event_service(repos: RepoBundleDep) -> EventManagementService:
    return EventManagementService(events=repos.events, groups=repos.groups)


def get_registration_service(repos: RepoBundleDep) -> RegistrationManagementService:
    return RegistrationManagementService(
        registrations=repos.registrations,
        scouts=repos.scouts,
        events=repos.events,
    )


GroupServiceDep = Annotated[GroupManagementService, Depends(get_group_service)]
ScoutServiceDep = Annotated[ScoutManagementService, Depends(get_scout_service)]
EventServiceDep = Annotated[EventManagementService, Depends(get_event_service)]
RegistrationServiceDep = Annotated[RegistrationManagementService, Depends(get_registration_service)]
