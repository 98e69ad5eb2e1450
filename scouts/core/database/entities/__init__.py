"""
Database entity models.

One module per business domain; each holds the table of the aggregate root
and its association tables:

- groups: ``groups``
- scouts: ``scouts``, ``scout_contacts``, ``scout_groups``
- events: ``events``, ``event_groups``
- registrations: ``registrations``
"""

from .events import EventGroupRow, EventRow
from .groups import GroupRow
from .registrations import RegistrationRow
from .scouts import ScoutContactRow, ScoutGroupRow, ScoutRow

__all__ = [
    "EventGroupRow",
    "EventRow",
    "GroupRow",
    "RegistrationRow",
    "ScoutContactRow",
    "ScoutGroupRow",
    "ScoutRow",
]
