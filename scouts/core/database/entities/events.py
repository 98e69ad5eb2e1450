"""Event entity models."""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlmodel import Field

from ..base import Base


class EventRow(Base, table=True):
    """Entity for events.

    Table: events
    """

    __tablename__ = "events"

    id: Optional[int] = Field(default=None, primary_key=True)
    version: int = Field(default=0)
    name: str = Field(max_length=255)
    start_date: date
    end_date: date
    meeting_point: str = Field(default="", max_length=512)
    location: str = Field(max_length=512)
    cost: str = Field(default="", max_length=255)
    additional_info: str = Field(default="", sa_type=Text)

    def __repr__(self) -> str:
        return f"EventRow(id={self.id}, name={self.name})"


class EventGroupRow(Base, table=True):
    """Groups explicitly invited to an event.

    Table: event_groups
    """

    __tablename__ = "event_groups"

    event_id: int = Field(
        sa_column=Column(Integer, ForeignKey("events.id", ondelete="CASCADE"), primary_key=True)
    )
    group_id: int = Field(
        sa_column=Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True)
    )
