"""Repository interface contracts.

The application services depend on these Protocols instead of concrete
persistence implementations.

Contract guidelines
-------------------

- All methods are async.
- ``create`` ignores any incoming ``id``/``version`` and returns the stored
  entity with its new id and ``version == 0``.
- ``update`` is guarded by optimistic locking: it only succeeds when the row
  still has the version carried by the given entity, and returns the entity
  with the incremented version. Otherwise ``OptimisticLockingError`` is raised.
- ``delete`` of an unknown id is a no-op.
- Lists are ordered by ascending id.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ...models.domain import Event, Group, Registration, Scout


class GroupRepository(Protocol):
    """Persist and query groups."""

    async def create(self, group: Group) -> Group: ...

    async def update(self, group: Group) -> Group: ...

    async def delete(self, group_id: int) -> None: ...

    async def find_by_id(self, group_id: int) -> Optional[Group]: ...

    async def find_all(self) -> List[Group]: ...


class ScoutRepository(Protocol):
    """Persist and query scouts together with their contacts and group memberships."""

    async def create(self, scout: Scout) -> Scout: ...

    async def update(self, scout: Scout) -> Scout:
        """
        Update a scout.

        Contacts and group memberships are replaced as a whole.

        Args:
            scout: The scout carrying the version the caller last read.

        Returns:
            The stored scout with the incremented version.
        """
        ...

    async def delete(self, scout_id: int) -> None: ...

    async def find_by_id(self, scout_id: int) -> Optional[Scout]: ...

    async def find_all(self) -> List[Scout]: ...

    async def find_by_name(self, name: str) -> List[Scout]:
        """
        Find scouts by exact name.

        Args:
            name: The full name to match.

        Returns:
            All scouts with that name.
        """
        ...


class EventRepository(Protocol):
    """Persist and query events together with their participating groups."""

    async def create(self, event: Event) -> Event: ...

    async def update(self, event: Event) -> Event: ...

    async def delete(self, event_id: int) -> None: ...

    async def find_by_id(self, event_id: int) -> Optional[Event]: ...

    async def find_all(self) -> List[Event]: ...

    async def find_events_by_group_id(self, group_id: int) -> List[Event]:
        """
        Find the events a group is explicitly invited to.

        Events open to all groups (no participating groups) are not included.

        Args:
            group_id: The group identifier.

        Returns:
            The matching events, each with its complete participating group list.
        """
        ...


class RegistrationRepository(Protocol):
    """Persist and query registrations of scouts for events."""

    async def create(self, registration: Registration) -> Registration: ...

    async def update(self, registration: Registration) -> Registration: ...

    async def delete(self, registration_id: int) -> None: ...

    async def find_by_id(self, registration_id: int) -> Optional[Registration]: ...

    async def find_by_event_id(self, event_id: int) -> List[Registration]: ...

    async def find_by_scout_id(self, scout_id: int) -> List[Registration]: ...

    async def exists_by_event_id_and_scout_id(self, event_id: int, scout_id: int) -> bool: ...
