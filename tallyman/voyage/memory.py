"""In-memory VoyageRepository adapter."""

from __future__ import annotations

import threading
import typing as typ

from tallyman.voyage.errors import UnknownVoyageError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from tallyman.cargo.models import VoyageNumber
    from tallyman.voyage.models import Voyage


class InMemoryVoyageRepository:
    """Keep known voyages in a dictionary keyed by voyage number."""

    def __init__(self, voyages: cabc.Iterable[Voyage] = ()) -> None:
        """Seed the repository with ``voyages``."""
        self._lock = threading.Lock()
        self._voyages: dict[VoyageNumber, Voyage] = {
            voyage.number: voyage for voyage in voyages
        }

    def store(self, voyage: Voyage) -> None:
        """Add or replace a voyage."""
        with self._lock:
            self._voyages[voyage.number] = voyage

    def find(self, voyage_number: VoyageNumber) -> Voyage:
        """Return the voyage for ``voyage_number``.

        Raises
        ------
        UnknownVoyageError
            If no voyage has been stored under ``voyage_number``.

        """
        with self._lock:
            voyage = self._voyages.get(voyage_number)
        if voyage is None:
            raise UnknownVoyageError(voyage_number)
        return voyage
