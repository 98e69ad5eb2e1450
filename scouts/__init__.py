"""Scouts: group, member, event and registration management for a scout organisation."""

__version__ = "0.1.0"
