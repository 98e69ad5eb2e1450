"""Event I/O models for API requests and responses."""

from __future__ import annotations

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .groups import GroupRead


class _EventFields(BaseModel):
    name: str = Field(min_length=1, description="Event name")
    start_date: date = Field(description="First day of the event")
    end_date: date = Field(description="Last day of the event")
    meeting_point: str = Field(default="", description="Where participants meet")
    location: str = Field(min_length=1, description="Where the event takes place")
    cost: str = Field(default="", description="Participation cost, free text")
    additional_info: str = Field(default="", description="Additional information for participants")
    group_ids: List[int] = Field(
        default_factory=list,
        description="Ids of the participating groups; empty means open to all groups",
    )


class EventCreate(_EventFields):
    """Schema for creating an event via the API."""


class EventUpdate(_EventFields):
    """Schema for updating an event via the API."""

    version: int = Field(ge=0, description="Version the client last read")


class EventRead(BaseModel):
    """Schema for reading an event from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    version: int
    name: str
    start_date: date
    end_date: date
    meeting_point: str
    location: str
    cost: str
    additional_info: str
    participating_groups: List[GroupRead]
