"""Domain enums for the scouts models."""

from __future__ import annotations

from enum import Enum


class RegistrationStatus(str, Enum):
    """Lifecycle status of a registration for an event."""

    PENDING = "PENDING"  # Submitted, awaiting confirmation by a leader.
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
