"""
API endpoints for managing registrations of scouts for events.

A scout can be registered for an event only once. The scout and event of an
existing registration cannot be changed.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from scouts.core.logging_config import get_logger
from scouts.core.models.io import RegistrationCreate, RegistrationRead, RegistrationUpdate

from ...services.deps import RegistrationServiceDep

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=RegistrationRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register Scout for Event",
    description="Register a scout for an event.",
    response_description="The created registration with its generated ID.",
    responses={
        201: {"description": "Registration created successfully"},
        404: {"description": "Scout or event not found"},
        409: {"description": "Scout is already registered for this event"},
    },
    operation_id="createRegistration",
)
async def create_registration(body: RegistrationCreate, service: RegistrationServiceDep) -> RegistrationRead:
    """
    Register a scout for an event.

    - **scout_id**, **event_id**: The scout and the event.
    - **status**: Initial status, `PENDING` by default.
    - **registration_date**: Defaults to the current time (UTC).
    - **account_id**: The account submitting the registration.
    """
    registration = await service.register_scout(
        body.scout_id,
        body.event_id,
        note=body.note,
        account_id=body.account_id,
        status=body.status,
        registration_date=body.registration_date,
    )
    return RegistrationRead.from_domain(registration)


@router.get(
    "/{registration_id}",
    response_model=RegistrationRead,
    summary="Get Registration",
    description="Retrieve a single registration by ID.",
    response_description="The requested registration.",
    responses={404: {"description": "Registration not found"}},
    operation_id="getRegistration",
)
async def get_registration(registration_id: int, service: RegistrationServiceDep) -> RegistrationRead:
    return RegistrationRead.from_domain(await service.get_registration(registration_id))


@router.put(
    "/{registration_id}",
    response_model=RegistrationRead,
    summary="Update Registration",
    description="Change note, status, date or account of a registration.",
    response_description="The updated registration with its new version.",
    responses={
        400: {"description": "Scout or event of the registration would change"},
        404: {"description": "Registration not found"},
        409: {"description": "Registration modified concurrently"},
    },
    operation_id="updateRegistration",
)
async def update_registration(
    registration_id: int, body: RegistrationUpdate, service: RegistrationServiceDep
) -> RegistrationRead:
    """
    Update a registration.

    **scout_id** and **event_id** must match the stored registration and
    **version** must be the version last read by the client.
    """
    registration = await service.change_registration(
        registration_id,
        version=body.version,
        scout_id=body.scout_id,
        event_id=body.event_id,
        note=body.note,
        status=body.status,
        account_id=body.account_id,
        registration_date=body.registration_date,
    )
    return RegistrationRead.from_domain(registration)


@router.delete(
    "/{registration_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Registration",
    description="Delete a registration.",
    responses={404: {"description": "Registration not found"}},
    operation_id="deleteRegistration",
)
async def delete_registration(registration_id: int, service: RegistrationServiceDep) -> None:
    await service.delete_registration(registration_id)
