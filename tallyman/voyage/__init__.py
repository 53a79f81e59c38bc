"""Carrier voyages that move cargo between locations."""

from tallyman.voyage.errors import UnknownVoyageError
from tallyman.voyage.memory import InMemoryVoyageRepository
from tallyman.voyage.models import Voyage
from tallyman.voyage.protocol import VoyageRepository

__all__ = [
    "InMemoryVoyageRepository",
    "UnknownVoyageError",
    "Voyage",
    "VoyageRepository",
]
