"""
Scout repository implementation.

A scout is stored across three tables: the ``scouts`` row, its ordered
``scout_contacts`` and its ``scout_groups`` memberships. Writes touch all
three inside one session; reads load contacts and groups in batch for every
requested scout.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...errors import OptimisticLockingError
from ...logging_config import get_logger
from ...models.domain import Contact, Group, Scout
from ..entities.groups import GroupRow
from ..entities.scouts import ScoutContactRow, ScoutGroupRow, ScoutRow
from .groups import group_from_row
from .interfaces import ScoutRepository

logger = get_logger(__name__)


def _scalar_values(scout: Scout) -> dict:
    return {
        "name": scout.name,
        "birth_date": scout.birth_date,
        "address": scout.address,
        "phone_number": scout.phone_number,
        "health_insurance": scout.health_insurance,
        "allergy_info": scout.allergy_info,
        "vaccination_info": scout.vaccination_info,
        "last_updated": scout.last_updated,
    }


def _add_associations(s: AsyncSession, scout_id: int, scout: Scout) -> None:
    for order, contact in enumerate(scout.contacts):
        s.add(
            ScoutContactRow(
                scout_id=scout_id,
                contact_order=order,
                name=contact.name,
                phone_number=contact.phone_number,
                email=str(contact.email),
                relationship=contact.relationship,
            )
        )
    for group in scout.groups:
        s.add(ScoutGroupRow(scout_id=scout_id, group_id=group.id))


async def load_scouts(s: AsyncSession, rows: Sequence[ScoutRow]) -> List[Scout]:
    """Build domain scouts for ``rows`` with their contacts and groups.

    The result keeps the order of ``rows``.
    """
    if not rows:
        return []
    ids = [r.id for r in rows]

    contacts: Dict[int, List[Contact]] = defaultdict(list)
    contact_rows = await s.execute(
        select(ScoutContactRow)
        .where(ScoutContactRow.scout_id.in_(ids))
        .order_by(ScoutContactRow.scout_id, ScoutContactRow.contact_order)
    )
    for c in contact_rows.scalars().all():
        contacts[c.scout_id].append(
            Contact(name=c.name, phone_number=c.phone_number, email=c.email, relationship=c.relationship)
        )

    groups: Dict[int, List[Group]] = defaultdict(list)
    group_rows = await s.execute(
        select(ScoutGroupRow.scout_id, GroupRow)
        .join(GroupRow, GroupRow.id == ScoutGroupRow.group_id)
        .where(ScoutGroupRow.scout_id.in_(ids))
        .order_by(ScoutGroupRow.scout_id, GroupRow.id)
    )
    for scout_id, group_row in group_rows.all():
        groups[scout_id].append(group_from_row(group_row))

    return [
        Scout(
            id=r.id,
            version=r.version,
            groups=groups[r.id],
            contacts=contacts[r.id],
            **_scalar_values(r),
        )
        for r in rows
    ]


@dataclass(frozen=True)
class SqlScoutRepository(ScoutRepository):
    """SQL implementation of ``ScoutRepository``."""

    session_factory: async_sessionmaker[AsyncSession]

    async def create(self, scout: Scout) -> Scout:
        """
        Persist a new scout with its contacts and group memberships.

        Args:
            scout: The scout to insert; ``id`` and ``version`` are ignored.

        Returns:
            The stored scout with its generated id and ``version == 0``.
        """
        async with self.session_factory() as s:
            row = ScoutRow(version=0, **_scalar_values(scout))
            s.add(row)
            await s.flush()
            _add_associations(s, row.id, scout)
            await s.commit()
            logger.debug(f"Created scout {row.id} with {len(scout.contacts)} contact(s)")
            return scout.model_copy(update={"id": row.id, "version": 0})

    async def update(self, scout: Scout) -> Scout:
        """
        Update a scout guarded by its version.

        Contacts and group memberships are replaced as a whole.

        Raises:
            OptimisticLockingError: If the row is missing or its version changed.
        """
        async with self.session_factory() as s:
            result = await s.execute(
                update(ScoutRow)
                .where(ScoutRow.id == scout.id, ScoutRow.version == scout.version)
                .values(version=ScoutRow.version + 1, **_scalar_values(scout))
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                await s.rollback()
                raise OptimisticLockingError("Scout")
            await s.execute(delete(ScoutContactRow).where(ScoutContactRow.scout_id == scout.id))
            await s.execute(delete(ScoutGroupRow).where(ScoutGroupRow.scout_id == scout.id))
            _add_associations(s, scout.id, scout)
            await s.commit()
            return scout.model_copy(update={"version": scout.version + 1})

    async def delete(self, scout_id: int) -> None:
        async with self.session_factory() as s:
            await s.execute(delete(ScoutRow).where(ScoutRow.id == scout_id))
            await s.commit()

    async def find_by_id(self, scout_id: int) -> Optional[Scout]:
        async with self.session_factory() as s:
            row = await s.get(ScoutRow, scout_id)
            if row is None:
                return None
            return (await load_scouts(s, [row]))[0]

    async def find_all(self) -> List[Scout]:
        async with self.session_factory() as s:
            result = await s.execute(select(ScoutRow).order_by(ScoutRow.id))
            return await load_scouts(s, result.scalars().all())

    async def find_by_name(self, name: str) -> List[Scout]:
        async with self.session_factory() as s:
            result = await s.execute(select(ScoutRow).where(ScoutRow.name == name).order_by(ScoutRow.id))
            return await load_scouts(s, result.scalars().all())
