"""Errors specific to voyage lookups."""

from __future__ import annotations

from tallyman.cargo.errors import HandlingEventConstructionError


class UnknownVoyageError(HandlingEventConstructionError):
    """Raised when no voyage exists for a voyage number."""

    def __init__(self, voyage_number: str) -> None:
        """Initialise with the unknown voyage number."""
        self.voyage_number = voyage_number
        super().__init__(f"Unknown voyage: {voyage_number}")
