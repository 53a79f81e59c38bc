"""In-memory adapters for cargo and handling event storage.

These adapters keep everything in process memory behind a lock. They suit
local runs and tests; a durable store only has to satisfy the same
protocols.
"""

from __future__ import annotations

import collections
import threading
import typing as typ

from tallyman.cargo.errors import UnknownCargoError
from tallyman.cargo.models import HandlingHistory

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from tallyman.cargo.models import Cargo, HandlingEvent, TrackingID


class InMemoryHandlingEventRepository:
    """Append-only handling event store keyed by tracking ID."""

    def __init__(self) -> None:
        """Create an empty store."""
        self._lock = threading.Lock()
        self._events: collections.defaultdict[TrackingID, list[HandlingEvent]] = (
            collections.defaultdict(list)
        )

    def store(self, event: HandlingEvent) -> None:
        """Append ``event`` to the history of its cargo."""
        with self._lock:
            self._events[event.tracking_id].append(event)

    def query_handling_history(self, tracking_id: TrackingID) -> HandlingHistory:
        """Return a snapshot of the events stored for ``tracking_id``."""
        with self._lock:
            events = tuple(self._events.get(tracking_id, ()))
        return HandlingHistory(tracking_id=tracking_id, events=events)


class InMemoryCargoRepository:
    """Keep booked cargo in a dictionary keyed by tracking ID."""

    def __init__(self, cargos: cabc.Iterable[Cargo] = ()) -> None:
        """Seed the repository with ``cargos``."""
        self._lock = threading.Lock()
        self._cargos: dict[TrackingID, Cargo] = {
            cargo.tracking_id: cargo for cargo in cargos
        }

    def store(self, cargo: Cargo) -> None:
        """Add or replace a cargo."""
        with self._lock:
            self._cargos[cargo.tracking_id] = cargo

    def find(self, tracking_id: TrackingID) -> Cargo:
        """Return the cargo for ``tracking_id``.

        Raises
        ------
        UnknownCargoError
            If no cargo has been stored under ``tracking_id``.

        """
        with self._lock:
            cargo = self._cargos.get(tracking_id)
        if cargo is None:
            raise UnknownCargoError(tracking_id)
        return cargo
