"""
API I/O models.

Pydantic schemas describing request and response bodies of the REST API.
Requests refer to related groups, scouts and events by id; update requests
carry the ``version`` the client last read.
"""

from .events import EventCreate, EventRead, EventUpdate
from .groups import GroupCreate, GroupRead, GroupUpdate
from .registrations import RegistrationCreate, RegistrationRead, RegistrationUpdate
from .scouts import ContactSchema, ScoutCreate, ScoutRead, ScoutUpdate

__all__ = [
    "ContactSchema",
    "EventCreate",
    "EventRead",
    "EventUpdate",
    "GroupCreate",
    "GroupRead",
    "GroupUpdate",
    "RegistrationCreate",
    "RegistrationRead",
    "RegistrationUpdate",
    "ScoutCreate",
    "ScoutRead",
    "ScoutUpdate",
]
