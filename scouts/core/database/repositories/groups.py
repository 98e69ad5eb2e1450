"""
Group repository implementation.

SQL implementation of ``GroupRepository``. Each method opens its own
``AsyncSession`` and commits once, so every call is a single transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...errors import OptimisticLockingError
from ...logging_config import get_logger
from ...models.domain import Group
from ..entities.groups import GroupRow
from .interfaces import GroupRepository

logger = get_logger(__name__)


def group_from_row(row: GroupRow) -> Group:
    return Group(id=row.id, version=row.version, name=row.name)


@dataclass(frozen=True)
class SqlGroupRepository(GroupRepository):
    """SQL implementation of ``GroupRepository``."""

    session_factory: async_sessionmaker[AsyncSession]

    async def create(self, group: Group) -> Group:
        """
        Persist a new group.

        Args:
            group: The group to insert; ``id`` and ``version`` are ignored.

        Returns:
            The stored group with its generated id.
        """
        async with self.session_factory() as s:
            row = GroupRow(name=group.name, version=0)
            s.add(row)
            await s.commit()
            logger.debug(f"Created group {row.id} ({row.name})")
            return group_from_row(row)

    async def update(self, group: Group) -> Group:
        """
        Update the name of a group guarded by its version.

        Raises:
            OptimisticLockingError: If the row is missing or its version changed.
        """
        async with self.session_factory() as s:
            result = await s.execute(
                update(GroupRow)
                .where(GroupRow.id == group.id, GroupRow.version == group.version)
                .values(name=group.name, version=GroupRow.version + 1)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                await s.rollback()
                raise OptimisticLockingError("Group")
            await s.commit()
            return group.model_copy(update={"version": group.version + 1})

    async def delete(self, group_id: int) -> None:
        async with self.session_factory() as s:
            await s.execute(delete(GroupRow).where(GroupRow.id == group_id))
            await s.commit()

    async def find_by_id(self, group_id: int) -> Optional[Group]:
        async with self.session_factory() as s:
            row = await s.get(GroupRow, group_id)
            return group_from_row(row) if row is not None else None

    async def find_all(self) -> List[Group]:
        async with self.session_factory() as s:
            result = await s.execute(select(GroupRow).order_by(GroupRow.id))
            return [group_from_row(r) for r in result.scalars().all()]
