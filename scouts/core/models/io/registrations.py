"""Registration I/O models for API requests and responses."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..domain import Registration, RegistrationStatus


class RegistrationRead(BaseModel):
    """Schema for reading a registration from the API."""

    id: int
    version: int
    scout_id: int
    scout_name: str
    event_id: int
    event_name: str
    note: str
    status: RegistrationStatus
    registration_date: datetime
    account_id: str

    @classmethod
    def from_domain(cls, registration: Registration) -> "RegistrationRead":
        return cls(
            id=registration.id,
            version=registration.version,
            scout_id=registration.scout.id,
            scout_name=registration.scout.name,
            event_id=registration.event.id,
            event_name=registration.event.name,
            note=registration.note,
            status=registration.status,
            registration_date=registration.registration_date,
            account_id=registration.account_id,
        )


class RegistrationCreate(BaseModel):
    """Schema for registering a scout for an event via the API."""

    scout_id: int = Field(description="Id of the scout to register")
    event_id: int = Field(description="Id of the event")
    note: str = Field(default="", description="Free-text note (e.g. dietary wishes)")
    status: RegistrationStatus = Field(default=RegistrationStatus.PENDING, description="Initial status")
    registration_date: Optional[datetime] = Field(default=None, description="Defaults to now (UTC)")
    account_id: str = Field(default="", description="Account that submits the registration")


class RegistrationUpdate(BaseModel):
    """Schema for updating a registration via the API.

    ``scout_id`` and ``event_id`` must match the stored registration.
    """

    version: int = Field(ge=0, description="Version the client last read")
    scout_id: int
    event_id: int
    note: str = ""
    status: RegistrationStatus
    registration_date: Optional[datetime] = Field(default=None, description="Keeps the stored date when omitted")
    account_id: str = ""
