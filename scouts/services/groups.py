"""Group management.

Group names are unique across the organisation: creating a group, or
renaming one, onto a name that another group already uses is rejected.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from scouts.core.database.repositories.interfaces import GroupRepository
from scouts.core.errors import DuplicateEntityError, EntityNotFoundError
from scouts.core.logging_config import get_logger
from scouts.core.models.domain import Group
from scouts.core.monitoring import record_entity_operation

logger = get_logger(__name__)


class GroupManagementService:
    """Create, read, update and delete groups."""

    def __init__(self, *, groups: GroupRepository) -> None:
        self._groups = groups

    async def _ensure_name_available(self, name: str, *, exclude_id: Optional[int] = None) -> None:
        for existing in await self._groups.find_all():
            if existing.name == name and existing.id != exclude_id:
                raise DuplicateEntityError(f"Group with name '{name}' already exists")

    async def create_group(self, group: Group) -> Group:
        """
        Create a group.

        Args:
            group: The group to create.

        Returns:
            The stored group.

        Raises:
            DuplicateEntityError: If a group with the same name exists.
        """
        await self._ensure_name_available(group.name)
        created = await self._groups.create(group)
        record_entity_operation("group", "create")
        logger.info(f"Created group {created.id} '{created.name}'")
        return created

    async def get_group(self, group_id: int) -> Optional[Group]:
        return await self._groups.find_by_id(group_id)

    async def get_all_groups(self) -> List[Group]:
        return await self._groups.find_all()

    async def get_groups(self, group_ids: Iterable[int]) -> List[Group]:
        """
        Resolve group ids to groups.

        Duplicate ids are collapsed; the order of first occurrence is kept.

        Raises:
            EntityNotFoundError: If any id does not exist.
        """
        resolved: List[Group] = []
        seen: set[int] = set()
        for group_id in group_ids:
            if group_id in seen:
                continue
            seen.add(group_id)
            group = await self._groups.find_by_id(group_id)
            if group is None:
                raise EntityNotFoundError("Group", group_id)
            resolved.append(group)
        return resolved

    async def update_group(self, group: Group) -> Group:
        """
        Update a group.

        Raises:
            EntityNotFoundError: If the group does not exist.
            DuplicateEntityError: If the new name belongs to another group.
            OptimisticLockingError: If the group was changed concurrently.
        """
        if group.id is None or await self._groups.find_by_id(group.id) is None:
            raise EntityNotFoundError("Group", group.id)
        await self._ensure_name_available(group.name, exclude_id=group.id)
        updated = await self._groups.update(group)
        record_entity_operation("group", "update")
        return updated

    async def delete_group(self, group_id: int) -> None:
        await self._groups.delete(group_id)
        record_entity_operation("group", "delete")
        logger.info(f"Deleted group {group_id}")
