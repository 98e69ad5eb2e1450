"""Domain models and enums of the scouts service."""

from .enums import RegistrationStatus
from .models import Contact, Event, Group, Registration, Scout

__all__ = [
    "Contact",
    "Event",
    "Group",
    "Registration",
    "RegistrationStatus",
    "Scout",
]
