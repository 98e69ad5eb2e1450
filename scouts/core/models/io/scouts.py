"""Scout I/O models for API requests and responses."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .groups import GroupRead


class ContactSchema(BaseModel):
    """Emergency contact of a scout."""

    model_config = ConfigDict(from_attributes=True)

    name: str = Field(min_length=1, description="Contact person name")
    phone_number: str = Field(min_length=1, description="Contact phone number")
    email: EmailStr = Field(description="Contact e-mail address")
    relationship: str = Field(default="", description="Relationship to the scout (e.g. 'mother')")


class _ScoutFields(BaseModel):
    name: str = Field(min_length=1, description="Full name of the scout")
    birth_date: date = Field(description="Date of birth")
    address: str = Field(min_length=1, description="Postal address")
    phone_number: str = Field(default="", description="Phone number of the scout")
    health_insurance: str = Field(min_length=1, description="Health insurance provider")
    allergy_info: str = Field(default="", description="Known allergies")
    vaccination_info: str = Field(default="", description="Vaccination information")
    contacts: List[ContactSchema] = Field(min_length=1, description="Emergency contacts, in order of priority")
    group_ids: List[int] = Field(default_factory=list, description="Ids of the groups the scout belongs to")
    last_updated: Optional[date] = Field(default=None, description="Date the data was last confirmed; defaults to today")


class ScoutCreate(_ScoutFields):
    """Schema for creating a scout via the API."""


class ScoutUpdate(_ScoutFields):
    """Schema for updating a scout via the API."""

    version: int = Field(ge=0, description="Version the client last read")


class ScoutRead(BaseModel):
    """Schema for reading a scout from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    version: int
    name: str
    birth_date: date
    address: str
    phone_number: str
    health_insurance: str
    allergy_info: str
    vaccination_info: str
    contacts: List[ContactSchema]
    groups: List[GroupRead]
    last_updated: date
