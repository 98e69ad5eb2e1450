"""
Event repository implementation.

Events are stored in ``events``; the groups explicitly invited to an event
live in ``event_groups``. An event without rows in ``event_groups`` is open
to all groups.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...errors import OptimisticLockingError
from ...logging_config import get_logger
from ...models.domain import Event, Group
from ..entities.events import EventGroupRow, EventRow
from ..entities.groups import GroupRow
from .groups import group_from_row
from .interfaces import EventRepository

logger = get_logger(__name__)


def _scalar_values(event: Event) -> dict:
    return {
        "name": event.name,
        "start_date": event.start_date,
        "end_date": event.end_date,
        "meeting_point": event.meeting_point,
        "location": event.location,
        "cost": event.cost,
        "additional_info": event.additional_info,
    }


def _add_groups(s: AsyncSession, event_id: int, event: Event) -> None:
    for group in event.participating_groups:
        s.add(EventGroupRow(event_id=event_id, group_id=group.id))


async def load_events(s: AsyncSession, rows: Sequence[EventRow]) -> List[Event]:
    """Build domain events for ``rows`` with their participating groups."""
    if not rows:
        return []
    groups: Dict[int, List[Group]] = defaultdict(list)
    result = await s.execute(
        select(EventGroupRow.event_id, GroupRow)
        .join(GroupRow, GroupRow.id == EventGroupRow.group_id)
        .where(EventGroupRow.event_id.in_([r.id for r in rows]))
        .order_by(EventGroupRow.event_id, GroupRow.id)
    )
    for event_id, group_row in result.all():
        groups[event_id].append(group_from_row(group_row))
    return [
        Event(id=r.id, version=r.version, participating_groups=groups[r.id], **_scalar_values(r))
        for r in rows
    ]


@dataclass(frozen=True)
class SqlEventRepository(EventRepository):
    """SQL implementation of ``EventRepository``."""

    session_factory: async_sessionmaker[AsyncSession]

    async def create(self, event: Event) -> Event:
        """
        Persist a new event with its participating groups.

        Args:
            event: The event to insert; ``id`` and ``version`` are ignored.

        Returns:
            The stored event with its generated id and ``version == 0``.
        """
        async with self.session_factory() as s:
            row = EventRow(version=0, **_scalar_values(event))
            s.add(row)
            await s.flush()
            _add_groups(s, row.id, event)
            await s.commit()
            logger.debug(f"Created event {row.id} ({row.name})")
            return event.model_copy(update={"id": row.id, "version": 0})

    async def update(self, event: Event) -> Event:
        """
        Update an event guarded by its version; participating groups are replaced.

        Raises:
            OptimisticLockingError: If the row is missing or its version changed.
        """
        async with self.session_factory() as s:
            result = await s.execute(
                update(EventRow)
                .where(EventRow.id == event.id, EventRow.version == event.version)
                .values(version=EventRow.version + 1, **_scalar_values(event))
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                await s.rollback()
                raise OptimisticLockingError("Event")
            await s.execute(delete(EventGroupRow).where(EventGroupRow.event_id == event.id))
            _add_groups(s, event.id, event)
            await s.commit()
            return event.model_copy(update={"version": event.version + 1})

    async def delete(self, event_id: int) -> None:
        async with self.session_factory() as s:
            await s.execute(delete(EventRow).where(EventRow.id == event_id))
            await s.commit()

    async def find_by_id(self, event_id: int) -> Optional[Event]:
        async with self.session_factory() as s:
            row = await s.get(EventRow, event_id)
            if row is None:
                return None
            return (await load_events(s, [row]))[0]

    async def find_all(self) -> List[Event]:
        async with self.session_factory() as s:
            result = await s.execute(select(EventRow).order_by(EventRow.id))
            return await load_events(s, result.scalars().all())

    async def find_events_by_group_id(self, group_id: int) -> List[Event]:
        async with self.session_factory() as s:
            result = await s.execute(
                select(EventRow)
                .join(EventGroupRow, EventGroupRow.event_id == EventRow.id)
                .where(EventGroupRow.group_id == group_id)
                .order_by(EventRow.id)
            )
            return await load_events(s, result.scalars().all())
