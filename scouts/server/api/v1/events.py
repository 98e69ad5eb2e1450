"""
API endpoints for managing events.

Events list the groups invited to take part; an event without participating
groups is open to all groups. Groups can also be invited or removed one at a
time.
"""

from __future__ import annotations

from typing import List, Optional, Union

from fastapi import APIRouter, HTTPException, status

from scouts.core.logging_config import get_logger
from scouts.core.models.domain import Event
from scouts.core.models.io import EventCreate, EventRead, EventUpdate, RegistrationRead

from ...services.deps import EventServiceDep, GroupServiceDep, RegistrationServiceDep
from ._domain import build_domain

logger = get_logger(__name__)

router = APIRouter()


async def _to_domain(
    body: Union[EventCreate, EventUpdate],
    groups: GroupServiceDep,
    *,
    event_id: Optional[int] = None,
    version: int = 0,
) -> Event:
    return build_domain(
        Event,
        id=event_id,
        version=version,
        name=body.name,
        start_date=body.start_date,
        end_date=body.end_date,
        meeting_point=body.meeting_point,
        location=body.location,
        participating_groups=await groups.get_groups(body.group_ids),
        cost=body.cost,
        additional_info=body.additional_info,
    )


@router.post(
    "",
    response_model=EventRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Event",
    description="Create a new event, optionally restricted to a set of groups.",
    response_description="The created event with its generated ID.",
    responses={
        201: {"description": "Event created successfully"},
        400: {"description": "Event data rejected, e.g. a blank location"},
        404: {"description": "A referenced group does not exist"},
    },
    operation_id="createEvent",
)
async def create_event(body: EventCreate, service: EventServiceDep, groups: GroupServiceDep) -> EventRead:
    """
    Create a new event.

    - **name**, **location**: Required, must not be blank.
    - **start_date**, **end_date**: Dates of the event.
    - **group_ids**: Participating groups; leave empty to open the event to all groups.
    """
    event = await service.create_event(await _to_domain(body, groups))
    return EventRead.model_validate(event)


@router.get(
    "",
    response_model=List[EventRead],
    summary="List Events",
    description="Retrieve all events ordered by ID.",
    response_description="A list of events.",
    operation_id="getAllEvents",
)
async def get_all_events(service: EventServiceDep) -> List[EventRead]:
    return [EventRead.model_validate(e) for e in await service.get_all_events()]


@router.get(
    "/{event_id}",
    response_model=EventRead,
    summary="Get Event",
    description="Retrieve a single event by ID.",
    response_description="The requested event.",
    responses={404: {"description": "Event not found"}},
    operation_id="getEvent",
)
async def get_event(event_id: int, service: EventServiceDep) -> EventRead:
    event = await service.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Event not found")
    return EventRead.model_validate(event)


@router.put(
    "/{event_id}",
    response_model=EventRead,
    summary="Update Event",
    description="Replace the data of an event, including its participating groups.",
    response_description="The updated event with its new version.",
    responses={
        400: {"description": "Event data rejected, e.g. a blank location"},
        404: {"description": "Event or referenced group not found"},
        409: {"description": "Event modified concurrently"},
    },
    operation_id="updateEvent",
)
async def update_event(
    event_id: int, body: EventUpdate, service: EventServiceDep, groups: GroupServiceDep
) -> EventRead:
    event = await service.update_event(await _to_domain(body, groups, event_id=event_id, version=body.version))
    return EventRead.model_validate(event)


@router.delete(
    "/{event_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Event",
    description="Delete an event together with its group invitations and registrations.",
    operation_id="deleteEvent",
)
async def delete_event(event_id: int, service: EventServiceDep) -> None:
    await service.delete_event(event_id)


@router.put(
    "/{event_id}/groups/{group_id}",
    response_model=EventRead,
    summary="Assign Group to Event",
    description="Invite a group to an event.",
    response_description="The updated event.",
    responses={404: {"description": "Event or group not found"}},
    operation_id="assignGroupToEvent",
)
async def assign_group_to_event(event_id: int, group_id: int, service: EventServiceDep) -> EventRead:
    return EventRead.model_validate(await service.assign_group_to_event(event_id, group_id))


@router.delete(
    "/{event_id}/groups/{group_id}",
    response_model=EventRead,
    summary="Remove Group from Event",
    description="Remove a group from the participating groups of an event.",
    response_description="The updated event.",
    responses={404: {"description": "Event or group not found"}},
    operation_id="removeGroupFromEvent",
)
async def remove_group_from_event(event_id: int, group_id: int, service: EventServiceDep) -> EventRead:
    return EventRead.model_validate(await service.remove_group_from_event(event_id, group_id))


@router.get(
    "/{event_id}/registrations",
    response_model=List[RegistrationRead],
    summary="List Registrations of Event",
    description="Retrieve all registrations for an event.",
    response_description="A list of registrations.",
    responses={404: {"description": "Event not found"}},
    operation_id="getRegistrationsByEvent",
)
async def get_registrations_by_event(event_id: int, service: RegistrationServiceDep) -> List[RegistrationRead]:
    return [RegistrationRead.from_domain(r) for r in await service.get_registrations_by_event(event_id)]
