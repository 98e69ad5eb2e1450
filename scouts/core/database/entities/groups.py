"""Group entity model."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class GroupRow(Base, table=True):
    """Entity for organisational groups.

    Table: groups
    """

    __tablename__ = "groups"

    id: Optional[int] = Field(default=None, primary_key=True)
    version: int = Field(default=0)
    name: str = Field(max_length=255)

    def __repr__(self) -> str:
        return f"GroupRow(id={self.id}, name={self.name})"
