"""Errors specific to location lookups."""

from __future__ import annotations

from tallyman.cargo.errors import HandlingEventConstructionError


class UnknownLocationError(HandlingEventConstructionError):
    """Raised when no location exists for a UN/LOCODE."""

    def __init__(self, un_locode: str) -> None:
        """Initialise with the unknown UN/LOCODE."""
        self.un_locode = un_locode
        super().__init__(f"Unknown location: {un_locode}")
