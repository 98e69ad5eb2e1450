"""In-memory repositories for service tests.

They follow the repository contracts: ids are assigned on create, updates are
guarded by the version and bump it by one, deletes cascade like the database.
"""

from __future__ import annotations

from typing import Dict, List

import pytest

from scouts.core.errors import OptimisticLockingError
from scouts.core.models.domain import Event, Group, Registration, Scout
from scouts.services import (
    EventManagementService,
    GroupManagementService,
    RegistrationManagementService,
    ScoutManagementService,
)


class _InMemoryStore:
    entity = "Entity"

    def __init__(self) -> None:
        self.items: Dict[int, object] = {}
        self._next_id = 1

    async def create(self, item):
        stored = item.model_copy(update={"id": self._next_id, "version": 0})
        self.items[self._next_id] = stored
        self._next_id += 1
        return stored

    async def update(self, item):
        current = self.items.get(item.id)
        if current is None or current.version != item.version:
            raise OptimisticLockingError(self.entity)
        stored = item.model_copy(update={"version": item.version + 1})
        self.items[item.id] = stored
        return stored

    async def delete(self, item_id: int) -> None:
        self.items.pop(item_id, None)

    async def find_by_id(self, item_id: int):
        return self.items.get(item_id)

    async def find_all(self) -> List:
        return [self.items[k] for k in sorted(self.items)]


class InMemoryGroupRepository(_InMemoryStore):
    entity = "Group"


class InMemoryScoutRepository(_InMemoryStore):
    entity = "Scout"

    async def find_by_name(self, name: str) -> List[Scout]:
        return [s for s in await self.find_all() if s.name == name]


class InMemoryEventRepository(_InMemoryStore):
    entity = "Event"

    async def find_events_by_group_id(self, group_id: int) -> List[Event]:
        return [e for e in await self.find_all() if e.has_group(group_id)]


class InMemoryRegistrationRepository(_InMemoryStore):
    entity = "Registration"

    async def find_by_event_id(self, event_id: int) -> List[Registration]:
        return [r for r in await self.find_all() if r.event.id == event_id]

    async def find_by_scout_id(self, scout_id: int) -> List[Registration]:
        return [r for r in await self.find_all() if r.scout.id == scout_id]

    async def exists_by_event_id_and_scout_id(self, event_id: int, scout_id: int) -> bool:
        return any(r.event.id == event_id and r.scout.id == scout_id for r in self.items.values())


@pytest.fixture
def group_repo() -> InMemoryGroupRepository:
    return InMemoryGroupRepository()


@pytest.fixture
def scout_repo() -> InMemoryScoutRepository:
    return InMemoryScoutRepository()


@pytest.fixture
def event_repo() -> InMemoryEventRepository:
    return InMemoryEventRepository()


@pytest.fixture
def registration_repo() -> InMemoryRegistrationRepository:
    return InMemoryRegistrationRepository()


@pytest.fixture
def group_service(group_repo) -> GroupManagementService:
    return GroupManagementService(groups=group_repo)


@pytest.fixture
def scout_service(scout_repo, group_repo) -> ScoutManagementService:
    return ScoutManagementService(scouts=scout_repo, groups=group_repo)


@pytest.fixture
def event_service(event_repo, group_repo) -> EventManagementService:
    return EventManagementService(events=event_repo, groups=group_repo)


@pytest.fixture
def registration_service(registration_repo, scout_repo, event_repo) -> RegistrationManagementService:
    return RegistrationManagementService(registrations=registration_repo, scouts=scout_repo, events=event_repo)


@pytest.fixture
async def stored_group(group_repo) -> Group:
    return await group_repo.create(Group(name="Wolf Cubs"))


@pytest.fixture
async def stored_scout(scout_repo, make_scout) -> Scout:
    return await scout_repo.create(make_scout())


@pytest.fixture
async def stored_event(event_repo, make_event) -> Event:
    return await event_repo.create(make_event())
