"""Registration management.

A scout can be registered for an event at most once. Once created, a
registration stays bound to its scout and event: updates may change note,
status, date and account only.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from scouts.core.database.repositories.interfaces import (
    EventRepository,
    RegistrationRepository,
    ScoutRepository,
)
from scouts.core.errors import DomainValidationError, DuplicateEntityError, EntityNotFoundError
from scouts.core.logging_config import get_logger
from scouts.core.models.domain import Event, Registration, RegistrationStatus, Scout
from scouts.core.monitoring import record_entity_operation

logger = get_logger(__name__)


class RegistrationManagementService:
    """Register scouts for events and manage their registrations."""

    def __init__(
        self,
        *,
        registrations: RegistrationRepository,
        scouts: ScoutRepository,
        events: EventRepository,
    ) -> None:
        self._registrations = registrations
        self._scouts = scouts
        self._events = events

    async def _require_scout(self, scout_id: Optional[int]) -> Scout:
        scout = await self._scouts.find_by_id(scout_id) if scout_id is not None else None
        if scout is None:
            raise EntityNotFoundError("Scout", scout_id)
        return scout

    async def _require_event(self, event_id: Optional[int]) -> Event:
        event = await self._events.find_by_id(event_id) if event_id is not None else None
        if event is None:
            raise EntityNotFoundError("Event", event_id)
        return event

    async def create_registration(self, registration: Registration) -> Registration:
        """
        Create a registration.

        Raises:
            EntityNotFoundError: If the scout or the event does not exist.
            DuplicateEntityError: If the scout is already registered for the event.
        """
        await self._require_scout(registration.scout.id)
        await self._require_event(registration.event.id)
        if await self._registrations.exists_by_event_id_and_scout_id(registration.event.id, registration.scout.id):
            raise DuplicateEntityError("Scout is already registered for this event")
        created = await self._registrations.create(registration)
        record_entity_operation("registration", "create")
        logger.info(f"Registered scout {registration.scout.id} for event {registration.event.id}")
        return created

    async def register_scout(
        self,
        scout_id: int,
        event_id: int,
        *,
        note: str = "",
        account_id: str = "",
        status: RegistrationStatus = RegistrationStatus.PENDING,
        registration_date: Optional[datetime] = None,
    ) -> Registration:
        """
        Register a scout for an event by ids.

        Args:
            scout_id: The scout to register.
            event_id: The event to register for.
            note: Free-text note.
            account_id: Account submitting the registration.
            status: Initial status.
            registration_date: Defaults to the current UTC time.

        Returns:
            The stored registration.
        """
        registration = Registration(
            scout=await self._require_scout(scout_id),
            event=await self._require_event(event_id),
            note=note,
            status=status,
            registration_date=registration_date or datetime.now(timezone.utc),
            account_id=account_id,
        )
        return await self.create_registration(registration)

    async def update_registration(self, registration: Registration) -> Registration:
        """
        Update a registration.

        Raises:
            EntityNotFoundError: If the registration does not exist.
            DomainValidationError: If the scout or the event would change.
            OptimisticLockingError: If the registration was changed concurrently.
        """
        existing = await self.get_registration(registration.id)
        if existing.scout.id != registration.scout.id:
            raise DomainValidationError("Cannot change the scout of an existing registration")
        if existing.event.id != registration.event.id:
            raise DomainValidationError("Cannot change the event of an existing registration")
        updated = await self._registrations.update(registration)
        record_entity_operation("registration", "update")
        return updated

    async def delete_registration(self, registration_id: int) -> None:
        """
        Delete a registration.

        Raises:
            EntityNotFoundError: If the registration does not exist.
        """
        await self.get_registration(registration_id)
        await self._registrations.delete(registration_id)
        record_entity_operation("registration", "delete")
        logger.info(f"Deleted registration {registration_id}")

    async def get_registration(self, registration_id: Optional[int]) -> Registration:
        registration = (
            await self._registrations.find_by_id(registration_id) if registration_id is not None else None
        )
        if registration is None:
            raise EntityNotFoundError("Registration", registration_id)
        return registration

    async def get_registrations_by_event(self, event_id: int) -> List[Registration]:
        await self._require_event(event_id)
        return await self._registrations.find_by_event_id(event_id)

    async def get_registrations_by_scout(self, scout_id: int) -> List[Registration]:
        await self._require_scout(scout_id)
        return await self._registrations.find_by_scout_id(scout_id)

    async def change_registration(
        self,
        registration_id: int,
        *,
        version: int,
        scout_id: int,
        event_id: int,
        note: str,
        status: RegistrationStatus,
        account_id: str,
        registration_date: Optional[datetime] = None,
    ) -> Registration:
        """
        Update a registration from plain field values.

        ``scout_id`` and ``event_id`` must match the stored registration; an
        omitted ``registration_date`` keeps the stored one.

        Raises:
            EntityNotFoundError: If the registration does not exist.
            DomainValidationError: If the scout or the event would change.
            OptimisticLockingError: If ``version`` is stale.
        """
        existing = await self.get_registration(registration_id)
        if existing.scout.id != scout_id:
            raise DomainValidationError("Cannot change the scout of an existing registration")
        if existing.event.id != event_id:
            raise DomainValidationError("Cannot change the event of an existing registration")
        return await self.update_registration(
            existing.model_copy(
                update={
                    "version": version,
                    "note": note,
                    "status": status,
                    "account_id": account_id,
                    "registration_date": registration_date or existing.registration_date,
                }
            )
        )
