"""Exceptions raised by the travel pace core."""

from __future__ import annotations


class TravelPaceError(Exception):
    """Base exception for travel pace failures."""


class BadInputError(TravelPaceError):
    """Raised when user supplied values cannot be normalised."""


class InvalidUnitError(TravelPaceError):
    """Raised when a distance unit is not one of ft, m, mi or km."""


class UnknownMountError(TravelPaceError):
    """Raised when a mount id is not configured or not enabled."""

    def __init__(self, mount_id: str):
        super().__init__(f"Unknown mount '{mount_id}'.")
        self.mount_id = mount_id


__all__ = ["TravelPaceError", "BadInputError", "InvalidUnitError", "UnknownMountError"]
