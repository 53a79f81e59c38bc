"""In-memory LocationRepository adapter."""

from __future__ import annotations

import threading
import typing as typ

from tallyman.location.errors import UnknownLocationError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from tallyman.cargo.models import UNLocode
    from tallyman.location.models import Location


class InMemoryLocationRepository:
    """Keep known locations in a dictionary keyed by UN/LOCODE."""

    def __init__(self, locations: cabc.Iterable[Location] = ()) -> None:
        """Seed the repository with ``locations``."""
        self._lock = threading.Lock()
        self._locations: dict[UNLocode, Location] = {
            location.un_locode: location for location in locations
        }

    def store(self, location: Location) -> None:
        """Add or replace a location."""
        with self._lock:
            self._locations[location.un_locode] = location

    def find(self, un_locode: UNLocode) -> Location:
        """Return the location for ``un_locode``.

        Raises
        ------
        UnknownLocationError
            If no location has been stored under ``un_locode``.

        """
        with self._lock:
            location = self._locations.get(un_locode)
        if location is None:
            raise UnknownLocationError(un_locode)
        return location
