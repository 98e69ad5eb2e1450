"""Group I/O models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GroupRead(BaseModel):
    """Schema for reading a group from the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    version: int = Field(description="Optimistic locking version")
    name: str = Field(description="Group name (e.g. 'Wolf Cubs')")


class GroupCreate(BaseModel):
    """Schema for creating a group via the API."""

    name: str = Field(min_length=1, description="Group name, unique across the organisation")


class GroupUpdate(BaseModel):
    """Schema for updating a group via the API."""

    name: str = Field(min_length=1, description="New group name")
    version: int = Field(ge=0, description="Version the client last read")
