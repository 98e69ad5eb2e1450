"""Scout management."""

from __future__ import annotations

from typing import List, Optional

from scouts.core.database.repositories.interfaces import GroupRepository, ScoutRepository
from scouts.core.errors import EntityNotFoundError
from scouts.core.logging_config import get_logger
from scouts.core.models.domain import Scout
from scouts.core.monitoring import record_entity_operation

logger = get_logger(__name__)


class ScoutManagementService:
    """Create, read, update and delete scouts."""

    def __init__(self, *, scouts: ScoutRepository, groups: GroupRepository) -> None:
        self._scouts = scouts
        self._groups = groups

    async def _ensure_groups_exist(self, scout: Scout) -> None:
        for group in scout.groups:
            if group.id is None or await self._groups.find_by_id(group.id) is None:
                raise EntityNotFoundError("Group", group.id)

    async def create_scout(self, scout: Scout) -> Scout:
        """
        Create a scout.

        Raises:
            EntityNotFoundError: If one of the scout's groups does not exist.
        """
        await self._ensure_groups_exist(scout)
        created = await self._scouts.create(scout)
        record_entity_operation("scout", "create")
        logger.info(f"Created scout {created.id}")
        return created

    async def get_scout(self, scout_id: int) -> Optional[Scout]:
        return await self._scouts.find_by_id(scout_id)

    async def get_all_scouts(self) -> List[Scout]:
        return await self._scouts.find_all()

    async def find_scouts_by_name(self, name: str) -> List[Scout]:
        return await self._scouts.find_by_name(name)

    async def update_scout(self, scout: Scout) -> Scout:
        """
        Update a scout, replacing its contacts and group memberships.

        Raises:
            EntityNotFoundError: If the scout or one of its groups does not exist.
            OptimisticLockingError: If the scout was changed concurrently.
        """
        if scout.id is None or await self._scouts.find_by_id(scout.id) is None:
            raise EntityNotFoundError("Scout", scout.id)
        await self._ensure_groups_exist(scout)
        updated = await self._scouts.update(scout)
        record_entity_operation("scout", "update")
        return updated

    async def delete_scout(self, scout_id: int) -> None:
        await self._scouts.delete(scout_id)
        record_entity_operation("scout", "delete")
        logger.info(f"Deleted scout {scout_id}")
