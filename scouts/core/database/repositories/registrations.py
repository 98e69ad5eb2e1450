"""
Registration repository implementation.

Registrations are returned with their complete scout and event, which are
loaded in batch through the scout and event loaders.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...errors import DuplicateEntityError, OptimisticLockingError
from ...logging_config import get_logger
from ...models.domain import Registration, RegistrationStatus
from ..entities.events import EventRow
from ..entities.registrations import RegistrationRow
from ..entities.scouts import ScoutRow
from .events import load_events
from .interfaces import RegistrationRepository
from .scouts import load_scouts

logger = get_logger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored values are always UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _scalar_values(registration: Registration) -> dict:
    return {
        "note": registration.note,
        "status": registration.status.value,
        "registration_date": _as_utc(registration.registration_date),
        "account_id": registration.account_id,
    }


async def _load_registrations(s: AsyncSession, rows: Sequence[RegistrationRow]) -> List[Registration]:
    if not rows:
        return []
    scout_rows = await s.execute(select(ScoutRow).where(ScoutRow.id.in_(sorted({r.scout_id for r in rows}))))
    event_rows = await s.execute(select(EventRow).where(EventRow.id.in_(sorted({r.event_id for r in rows}))))
    scouts = {sc.id: sc for sc in await load_scouts(s, scout_rows.scalars().all())}
    events = {ev.id: ev for ev in await load_events(s, event_rows.scalars().all())}
    return [
        Registration(
            id=r.id,
            version=r.version,
            scout=scouts[r.scout_id],
            event=events[r.event_id],
            note=r.note,
            status=RegistrationStatus(r.status),
            registration_date=_as_utc(r.registration_date),
            account_id=r.account_id,
        )
        for r in rows
    ]


@dataclass(frozen=True)
class SqlRegistrationRepository(RegistrationRepository):
    """SQL implementation of ``RegistrationRepository``."""

    session_factory: async_sessionmaker[AsyncSession]

    async def create(self, registration: Registration) -> Registration:
        """
        Persist a new registration.

        Args:
            registration: The registration to insert; its scout and event must be stored already.

        Returns:
            The stored registration with its generated id and ``version == 0``.

        Raises:
            DuplicateEntityError: The scout is already registered for the event,
                e.g. by a concurrent request that committed first.
        """
        async with self.session_factory() as s:
            row = RegistrationRow(
                version=0,
                scout_id=registration.scout.id,
                event_id=registration.event.id,
                **_scalar_values(registration),
            )
            s.add(row)
            try:
                await s.commit()
            except IntegrityError as e:
                await s.rollback()
                if await self.exists_by_event_id_and_scout_id(registration.event.id, registration.scout.id):
                    raise DuplicateEntityError("Scout is already registered for this event") from e
                raise
            logger.debug(f"Registered scout {row.scout_id} for event {row.event_id} as {row.id}")
            return registration.model_copy(
                update={"id": row.id, "version": 0, "registration_date": row.registration_date}
            )

    async def update(self, registration: Registration) -> Registration:
        """
        Update note, status, date and account of a registration guarded by its version.

        Raises:
            OptimisticLockingError: If the row is missing or its version changed.
        """
        async with self.session_factory() as s:
            values = _scalar_values(registration)
            result = await s.execute(
                update(RegistrationRow)
                .where(RegistrationRow.id == registration.id, RegistrationRow.version == registration.version)
                .values(
                    version=RegistrationRow.version + 1,
                    scout_id=registration.scout.id,
                    event_id=registration.event.id,
                    **values,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                await s.rollback()
                raise OptimisticLockingError("Registration")
            await s.commit()
            return registration.model_copy(
                update={"version": registration.version + 1, "registration_date": values["registration_date"]}
            )

    async def delete(self, registration_id: int) -> None:
        async with self.session_factory() as s:
            await s.execute(delete(RegistrationRow).where(RegistrationRow.id == registration_id))
            await s.commit()

    async def find_by_id(self, registration_id: int) -> Optional[Registration]:
        async with self.session_factory() as s:
            row = await s.get(RegistrationRow, registration_id)
            if row is None:
                return None
            return (await _load_registrations(s, [row]))[0]

    async def find_by_event_id(self, event_id: int) -> List[Registration]:
        async with self.session_factory() as s:
            result = await s.execute(
                select(RegistrationRow).where(RegistrationRow.event_id == event_id).order_by(RegistrationRow.id)
            )
            return await _load_registrations(s, result.scalars().all())

    async def find_by_scout_id(self, scout_id: int) -> List[Registration]:
        async with self.session_factory() as s:
            result = await s.execute(
                select(RegistrationRow).where(RegistrationRow.scout_id == scout_id).order_by(RegistrationRow.id)
            )
            return await _load_registrations(s, result.scalars().all())

    async def exists_by_event_id_and_scout_id(self, event_id: int, scout_id: int) -> bool:
        async with self.session_factory() as s:
            result = await s.execute(
                select(RegistrationRow.id)
                .where(RegistrationRow.event_id == event_id, RegistrationRow.scout_id == scout_id)
                .limit(1)
            )
            return result.scalar_one_or_none() is not None
