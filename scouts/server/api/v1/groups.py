"""
API endpoints for managing groups.

Groups are the organisational units of the scout organisation. Group names
are unique.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, HTTPException, status

from scouts.core.logging_config import get_logger
from scouts.core.models.domain import Group
from scouts.core.models.io import EventRead, GroupCreate, GroupRead, GroupUpdate

from ...services.deps import EventServiceDep, GroupServiceDep
from ._domain import build_domain

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=GroupRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Group",
    description="Create a new group. The name must not be used by another group.",
    response_description="The created group with its generated ID.",
    responses={
        201: {"description": "Group created successfully"},
        400: {"description": "Group data rejected, e.g. a blank name"},
        409: {"description": "A group with this name already exists"},
    },
    operation_id="createGroup",
)
async def create_group(body: GroupCreate, service: GroupServiceDep) -> GroupRead:
    """
    Create a new group.

    - **name**: The group name, unique across the organisation.
    """
    group = await service.create_group(build_domain(Group, name=body.name))
    return GroupRead.model_validate(group)


@router.get(
    "",
    response_model=List[GroupRead],
    summary="List Groups",
    description="Retrieve all groups ordered by ID.",
    response_description="A list of groups.",
    operation_id="getAllGroups",
)
async def get_all_groups(service: GroupServiceDep) -> List[GroupRead]:
    return [GroupRead.model_validate(g) for g in await service.get_all_groups()]


@router.get(
    "/{group_id}",
    response_model=GroupRead,
    summary="Get Group",
    description="Retrieve a single group by ID.",
    response_description="The requested group.",
    responses={404: {"description": "Group not found"}},
    operation_id="getGroup",
)
async def get_group(group_id: int, service: GroupServiceDep) -> GroupRead:
    group = await service.get_group(group_id)
    if group is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Group not found")
    return GroupRead.model_validate(group)


@router.put(
    "/{group_id}",
    response_model=GroupRead,
    summary="Update Group",
    description="Rename a group. The request must carry the version the client last read.",
    response_description="The updated group with its new version.",
    responses={
        400: {"description": "Group data rejected, e.g. a blank name"},
        404: {"description": "Group not found"},
        409: {"description": "Name already taken or group modified concurrently"},
    },
    operation_id="updateGroup",
)
async def update_group(group_id: int, body: GroupUpdate, service: GroupServiceDep) -> GroupRead:
    """
    Update a group.

    - **name**: The new group name.
    - **version**: The version of the group as last read by the client.
    """
    group = await service.update_group(build_domain(Group, id=group_id, version=body.version, name=body.name))
    return GroupRead.model_validate(group)


@router.delete(
    "/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Group",
    description="Delete a group. Memberships and event invitations of the group are removed as well.",
    operation_id="deleteGroup",
)
async def delete_group(group_id: int, service: GroupServiceDep) -> None:
    await service.delete_group(group_id)


@router.get(
    "/{group_id}/events",
    response_model=List[EventRead],
    summary="List Events for Group",
    description="Retrieve the events the group is explicitly invited to.",
    response_description="A list of events.",
    responses={404: {"description": "Group not found"}},
    operation_id="getEventsForGroup",
)
async def get_events_for_group(group_id: int, service: EventServiceDep) -> List[EventRead]:
    """
    List the events of a group.

    Events open to all groups are not part of the result.
    """
    return [EventRead.model_validate(e) for e in await service.get_events_for_group(group_id)]
