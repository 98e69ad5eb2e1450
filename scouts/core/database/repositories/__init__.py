"""
Repository layer.

``interfaces`` holds the persistence ports the application services depend
on; the sibling modules hold their SQL implementations.
"""

from .events import SqlEventRepository
from .groups import SqlGroupRepository
from .interfaces import (
    EventRepository,
    GroupRepository,
    RegistrationRepository,
    ScoutRepository,
)
from .registrations import SqlRegistrationRepository
from .scouts import SqlScoutRepository

__all__ = [
    "EventRepository",
    "GroupRepository",
    "RegistrationRepository",
    "ScoutRepository",
    "SqlEventRepository",
    "SqlGroupRepository",
    "SqlRegistrationRepository",
    "SqlScoutRepository",
]
