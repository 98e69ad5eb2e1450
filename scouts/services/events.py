"""Event management.

Besides plain CRUD, groups can be invited to or removed from an event one at a
time. Both operations persist through a regular versioned update, so they bump
the event's version.
"""

from __future__ import annotations

from typing import List, Optional

from scouts.core.database.repositories.interfaces import EventRepository, GroupRepository
from scouts.core.errors import EntityNotFoundError
from scouts.core.logging_config import get_logger
from scouts.core.models.domain import Event, Group
from scouts.core.monitoring import record_entity_operation

logger = get_logger(__name__)


class EventManagementService:
    """Create, read, update and delete events and manage their participating groups."""

    def __init__(self, *, events: EventRepository, groups: GroupRepository) -> None:
        self._events = events
        self._groups = groups

    async def _require_event(self, event_id: int) -> Event:
        event = await self._events.find_by_id(event_id)
        if event is None:
            raise EntityNotFoundError("Event", event_id)
        return event

    async def _require_group(self, group_id: int) -> Group:
        group = await self._groups.find_by_id(group_id)
        if group is None:
            raise EntityNotFoundError("Group", group_id)
        return group

    async def create_event(self, event: Event) -> Event:
        for group in event.participating_groups:
            await self._require_group(group.id)
        created = await self._events.create(event)
        record_entity_operation("event", "create")
        logger.info(f"Created event {created.id} '{created.name}'")
        return created

    async def get_event(self, event_id: int) -> Optional[Event]:
        return await self._events.find_by_id(event_id)

    async def get_all_events(self) -> List[Event]:
        return await self._events.find_all()

    async def update_event(self, event: Event) -> Event:
        """
        Update an event, replacing its participating groups.

        Raises:
            EntityNotFoundError: If the event or one of its groups does not exist.
            OptimisticLockingError: If the event was changed concurrently.
        """
        if event.id is None:
            raise EntityNotFoundError("Event", event.id)
        await self._require_event(event.id)
        for group in event.participating_groups:
            await self._require_group(group.id)
        updated = await self._events.update(event)
        record_entity_operation("event", "update")
        return updated

    async def delete_event(self, event_id: int) -> None:
        await self._events.delete(event_id)
        record_entity_operation("event", "delete")
        logger.info(f"Deleted event {event_id}")

    async def assign_group_to_event(self, event_id: int, group_id: int) -> Event:
        """
        Invite a group to an event.

        Assigning a group that already participates leaves the group list
        unchanged but still stores a new version.

        Raises:
            EntityNotFoundError: If the event or the group does not exist.
        """
        event = await self._require_event(event_id)
        group = await self._require_group(group_id)
        groups = list(event.participating_groups)
        if not event.has_group(group_id):
            groups.append(group)
        updated = await self._events.update(event.model_copy(update={"participating_groups": groups}))
        record_entity_operation("event", "assign_group")
        logger.info(f"Assigned group {group_id} to event {event_id}")
        return updated

    async def remove_group_from_event(self, event_id: int, group_id: int) -> Event:
        """
        Remove a group from an event's participating groups.

        Raises:
            EntityNotFoundError: If the event or the group does not exist.
        """
        event = await self._require_event(event_id)
        await self._require_group(group_id)
        groups = [g for g in event.participating_groups if g.id != group_id]
        updated = await self._events.update(event.model_copy(update={"participating_groups": groups}))
        record_entity_operation("event", "remove_group")
        logger.info(f"Removed group {group_id} from event {event_id}")
        return updated

    async def get_events_for_group(self, group_id: int) -> List[Event]:
        """
        List the events a group is explicitly invited to.

        Raises:
            EntityNotFoundError: If the group does not exist.
        """
        await self._require_group(group_id)
        return await self._events.find_events_by_group_id(group_id)
