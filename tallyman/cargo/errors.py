"""Errors raised by cargo lookups and handling event construction."""

from __future__ import annotations


class CargoError(Exception):
    """Base class for cargo module errors."""


class HandlingEventConstructionError(CargoError):
    """Raised when a handling event cannot be built from its parts.

    Lookup failures for the cargo, voyage and location all derive from this
    class so callers can treat them as one family of domain rejections.
    """


class UnknownCargoError(HandlingEventConstructionError):
    """Raised when no cargo exists for a tracking ID."""

    def __init__(self, tracking_id: str) -> None:
        """Initialise with the unknown tracking ID."""
        self.tracking_id = tracking_id
        super().__init__(f"Unknown cargo: {tracking_id}")
