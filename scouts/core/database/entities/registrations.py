"""Registration entity model."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, UniqueConstraint
from sqlmodel import Field

from ..base import Base


class RegistrationRow(Base, table=True):
    """Entity for event registrations.

    A scout can be registered at most once per event.

    Table: registrations
    """

    __tablename__ = "registrations"
    __table_args__ = (UniqueConstraint("event_id", "scout_id", name="uq_registrations_event_scout"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    version: int = Field(default=0)
    scout_id: int = Field(
        sa_column=Column(Integer, ForeignKey("scouts.id", ondelete="CASCADE"), nullable=False, index=True)
    )
    event_id: int = Field(
        sa_column=Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True)
    )
    note: str = Field(default="", sa_type=Text)
    status: str = Field(max_length=16)
    registration_date: datetime = Field(sa_type=DateTime(timezone=True))
    account_id: str = Field(default="", max_length=255)

    def __repr__(self) -> str:
        return f"RegistrationRow(id={self.id}, scout_id={self.scout_id}, event_id={self.event_id})"
