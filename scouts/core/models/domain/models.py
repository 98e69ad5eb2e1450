"""
Domain models of the scout organisation.

These models are persistence-agnostic: the SQL adapters in
``scouts.core.database`` map them to and from table rows, and the HTTP layer
maps them to and from the IO schemas in ``scouts.core.models.io``.

Every entity carries an ``id`` (``None`` until the database assigns one) and a
``version`` used for optimistic locking.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from ..base import BaseSchema
from .enums import RegistrationStatus


def _require_text(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field_name} must not be blank")
    return value


def _unique_groups(groups: List["Group"]) -> List["Group"]:
    seen: set[int] = set()
    unique: List[Group] = []
    for group in groups:
        if group.id is not None:
            if group.id in seen:
                continue
            seen.add(group.id)
        unique.append(group)
    return unique


class Group(BaseSchema):
    """An organisational unit of the scout organisation (e.g. "Wolf Cubs")."""

    id: Optional[int] = None
    version: int = Field(default=0, ge=0)
    name: str

    @field_validator("name")
    @classmethod
    def _name_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("name must not be empty")
        return v


class Contact(BaseSchema):
    """Emergency contact of a scout. Value object without identity."""

    name: str
    phone_number: str
    email: EmailStr
    relationship: str = ""

    @field_validator("name", "phone_number")
    @classmethod
    def _not_empty(cls, v: str, info) -> str:
        if not v:
            raise ValueError(f"{info.field_name} must not be empty")
        return v


class Scout(BaseSchema):
    """
    A member of the organisation.

    ``contacts`` keeps the order in which the contacts were given; at least one
    contact is required. ``groups`` may be empty and is unique by group id.
    """

    id: Optional[int] = None
    version: int = Field(default=0, ge=0)
    groups: List[Group] = Field(default_factory=list)
    name: str
    birth_date: date
    address: str
    phone_number: str = ""
    health_insurance: str
    allergy_info: str = ""
    vaccination_info: str = ""
    contacts: List[Contact] = Field(min_length=1)
    last_updated: date

    @field_validator("name", "address", "health_insurance")
    @classmethod
    def _not_blank(cls, v: str, info) -> str:
        return _require_text(v, info.field_name)

    @field_validator("groups")
    @classmethod
    def _dedupe_groups(cls, v: List[Group]) -> List[Group]:
        return _unique_groups(v)


class Event(BaseSchema):
    """
    A camp, hike or other happening.

    An empty ``participating_groups`` list means the event is open to all groups.
    """

    id: Optional[int] = None
    version: int = Field(default=0, ge=0)
    name: str
    start_date: date
    end_date: date
    meeting_point: str = ""
    location: str
    participating_groups: List[Group] = Field(default_factory=list)
    cost: str = ""
    additional_info: str = ""

    @field_validator("name", "location")
    @classmethod
    def _not_blank(cls, v: str, info) -> str:
        return _require_text(v, info.field_name)

    @field_validator("participating_groups")
    @classmethod
    def _dedupe_groups(cls, v: List[Group]) -> List[Group]:
        return _unique_groups(v)

    def has_group(self, group_id: int) -> bool:
        return any(g.id == group_id for g in self.participating_groups)


class Registration(BaseSchema):
    """Registration of a scout for an event."""

    id: Optional[int] = None
    version: int = Field(default=0, ge=0)
    scout: Scout
    event: Event
    note: str = ""
    status: RegistrationStatus = RegistrationStatus.PENDING
    registration_date: datetime
    account_id: str = ""
