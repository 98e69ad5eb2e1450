"""
Application services.

Each service holds the business rules for one aggregate and depends only on
the persistence ports in ``scouts.core.database.repositories.interfaces``.
"""

from .events import EventManagementService
from .groups import GroupManagementService
from .registrations import RegistrationManagementService
from .scouts import ScoutManagementService

__all__ = [
    "EventManagementService",
    "GroupManagementService",
    "RegistrationManagementService",
    "ScoutManagementService",
]
