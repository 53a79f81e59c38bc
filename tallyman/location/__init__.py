"""Locations where cargo can be handled, identified by UN/LOCODE."""

from tallyman.location.errors import UnknownLocationError
from tallyman.location.memory import InMemoryLocationRepository
from tallyman.location.models import Location
from tallyman.location.protocol import LocationRepository

__all__ = [
    "InMemoryLocationRepository",
    "Location",
    "LocationRepository",
    "UnknownLocationError",
]
