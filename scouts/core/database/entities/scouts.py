"""
Scout entity models.

A scout row owns its ordered emergency contacts (``scout_contacts``) and its
group memberships (``scout_groups``). Both association tables are removed
together with the scout by ``ON DELETE CASCADE``.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlmodel import Field

from ..base import Base


class ScoutRow(Base, table=True):
    """Entity for scouts.

    Table: scouts
    """

    __tablename__ = "scouts"

    id: Optional[int] = Field(default=None, primary_key=True)
    version: int = Field(default=0)
    name: str = Field(max_length=255, index=True)
    birth_date: date
    address: str = Field(max_length=512)
    phone_number: str = Field(default="", max_length=64)
    health_insurance: str = Field(max_length=255)
    allergy_info: str = Field(default="", sa_type=Text)
    vaccination_info: str = Field(default="", sa_type=Text)
    last_updated: date

    def __repr__(self) -> str:
        return f"ScoutRow(id={self.id}, name={self.name})"


class ScoutContactRow(Base, table=True):
    """Entity for the emergency contacts of a scout.

    Table: scout_contacts
    """

    __tablename__ = "scout_contacts"

    scout_id: int = Field(
        sa_column=Column(Integer, ForeignKey("scouts.id", ondelete="CASCADE"), primary_key=True)
    )
    contact_order: int = Field(primary_key=True)
    name: str = Field(max_length=255)
    phone_number: str = Field(max_length=64)
    email: str = Field(max_length=255)
    relationship: str = Field(default="", max_length=128)


class ScoutGroupRow(Base, table=True):
    """Association of scouts to groups.

    Table: scout_groups
    """

    __tablename__ = "scout_groups"

    scout_id: int = Field(
        sa_column=Column(Integer, ForeignKey("scouts.id", ondelete="CASCADE"), primary_key=True)
    )
    group_id: int = Field(
        sa_column=Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True)
    )
