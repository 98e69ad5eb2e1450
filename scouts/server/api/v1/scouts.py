"""
API endpoints for managing scouts.

A scout carries personal, health and emergency contact data and belongs to
zero or more groups. Request bodies reference groups by ID.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional, Union

from fastapi import APIRouter, HTTPException, Query, status

from scouts.core.logging_config import get_logger
from scouts.core.models.domain import Scout
from scouts.core.models.io import RegistrationRead, ScoutCreate, ScoutRead, ScoutUpdate

from ...services.deps import GroupServiceDep, RegistrationServiceDep, ScoutServiceDep
from ._domain import build_domain

logger = get_logger(__name__)

router = APIRouter()


async def _to_domain(
    body: Union[ScoutCreate, ScoutUpdate],
    groups: GroupServiceDep,
    *,
    scout_id: Optional[int] = None,
    version: int = 0,
) -> Scout:
    return build_domain(
        Scout,
        id=scout_id,
        version=version,
        groups=await groups.get_groups(body.group_ids),
        name=body.name,
        birth_date=body.birth_date,
        address=body.address,
        phone_number=body.phone_number,
        health_insurance=body.health_insurance,
        allergy_info=body.allergy_info,
        vaccination_info=body.vaccination_info,
        contacts=[c.model_dump() for c in body.contacts],
        last_updated=body.last_updated or date.today(),
    )


@router.post(
    "",
    response_model=ScoutRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Scout",
    description="Register a new member with personal, health and emergency contact data.",
    response_description="The created scout with its generated ID.",
    responses={
        201: {"description": "Scout created successfully"},
        400: {"description": "Scout data rejected, e.g. a blank name"},
        404: {"description": "A referenced group does not exist"},
    },
    operation_id="createScout",
)
async def create_scout(body: ScoutCreate, service: ScoutServiceDep, groups: GroupServiceDep) -> ScoutRead:
    """
    Create a new scout.

    - **name**, **address**, **health_insurance**: Required, must not be blank.
    - **birth_date**: Date of birth.
    - **contacts**: At least one emergency contact, in order of priority.
    - **group_ids**: Groups the scout belongs to.
    - **last_updated**: Defaults to today.
    """
    scout = await service.create_scout(await _to_domain(body, groups))
    return ScoutRead.model_validate(scout)


@router.get(
    "",
    response_model=List[ScoutRead],
    summary="List Scouts",
    description="Retrieve all scouts ordered by ID, optionally filtered by exact name.",
    response_description="A list of scouts.",
    operation_id="getAllScouts",
)
async def get_all_scouts(
    service: ScoutServiceDep,
    name: Optional[str] = Query(default=None, description="Return only scouts with exactly this name"),
) -> List[ScoutRead]:
    scouts = await service.find_scouts_by_name(name) if name is not None else await service.get_all_scouts()
    return [ScoutRead.model_validate(s) for s in scouts]


@router.get(
    "/{scout_id}",
    response_model=ScoutRead,
    summary="Get Scout",
    description="Retrieve a single scout by ID, including contacts and groups.",
    response_description="The requested scout.",
    responses={404: {"description": "Scout not found"}},
    operation_id="getScout",
)
async def get_scout(scout_id: int, service: ScoutServiceDep) -> ScoutRead:
    scout = await service.get_scout(scout_id)
    if scout is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scout not found")
    return ScoutRead.model_validate(scout)


@router.put(
    "/{scout_id}",
    response_model=ScoutRead,
    summary="Update Scout",
    description="Replace the data of a scout, including contacts and group memberships.",
    response_description="The updated scout with its new version.",
    responses={
        400: {"description": "Scout data rejected, e.g. a blank name"},
        404: {"description": "Scout or referenced group not found"},
        409: {"description": "Scout modified concurrently"},
    },
    operation_id="updateScout",
)
async def update_scout(
    scout_id: int, body: ScoutUpdate, service: ScoutServiceDep, groups: GroupServiceDep
) -> ScoutRead:
    """
    Update a scout.

    All fields are replaced; **version** must be the version last read by the client.
    """
    scout = await service.update_scout(await _to_domain(body, groups, scout_id=scout_id, version=body.version))
    return ScoutRead.model_validate(scout)


@router.delete(
    "/{scout_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Scout",
    description="Delete a scout together with contacts, memberships and registrations.",
    operation_id="deleteScout",
)
async def delete_scout(scout_id: int, service: ScoutServiceDep) -> None:
    await service.delete_scout(scout_id)


@router.get(
    "/{scout_id}/registrations",
    response_model=List[RegistrationRead],
    summary="List Registrations of Scout",
    description="Retrieve all event registrations of a scout.",
    response_description="A list of registrations.",
    responses={404: {"description": "Scout not found"}},
    operation_id="getRegistrationsByScout",
)
async def get_registrations_by_scout(scout_id: int, service: RegistrationServiceDep) -> List[RegistrationRead]:
    return [RegistrationRead.from_domain(r) for r in await service.get_registrations_by_scout(scout_id)]
