"""Scheduling infrastructure package."""
from .deferred import Schedule, blocking_schedule

__all__ = [
    "Schedule",
    "blocking_schedule",
]
