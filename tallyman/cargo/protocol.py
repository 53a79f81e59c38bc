"""Collaborator protocols for storing and constructing handling events.

The registration service depends only on these protocols, so any object
with the matching method can be injected: the in-memory adapters shipped
with Tallyman, a database-backed store, or a test double.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import datetime as dt

    from tallyman.cargo.models import (
        Cargo,
        HandlingEvent,
        HandlingEventType,
        HandlingHistory,
        TrackingID,
        UNLocode,
        VoyageNumber,
    )


@typ.runtime_checkable
class HandlingEventRepository(typ.Protocol):
    """Append-only store of handling events keyed by tracking ID."""

    def store(self, event: HandlingEvent) -> None:
        """Persist ``event``.

        Events for the same tracking ID keep the order in which they were
        stored.
        """
        ...

    def query_handling_history(self, tracking_id: TrackingID) -> HandlingHistory:
        """Return every stored event for ``tracking_id``.

        An unknown tracking ID yields an empty history rather than an error.
        """
        ...


@typ.runtime_checkable
class HandlingEventFactory(typ.Protocol):
    """Builds validated handling events from raw registration fields.

    Implementations must not have side effects beyond returning the event.
    Domain rejections are raised as exceptions and are expected to reach the
    caller of the registration service unchanged.
    """

    def create_handling_event(  # noqa: PLR0913
        self,
        registration_time: dt.datetime,
        completion_time: dt.datetime,
        tracking_id: TrackingID,
        voyage_number: VoyageNumber,
        un_locode: UNLocode,
        event_type: HandlingEventType,
    ) -> HandlingEvent:
        """Create a handling event.

        Parameters
        ----------
        registration_time
            When the event is being recorded.
        completion_time
            When the handling actually happened.
        tracking_id
            Shipment the event applies to.
        voyage_number
            Carrier voyage involved.
        un_locode
            Location where the handling took place.
        event_type
            Kind of handling.

        Returns
        -------
        HandlingEvent
            The immutable event record.

        """
        ...


@typ.runtime_checkable
class CargoRepository(typ.Protocol):
    """Lookup of booked cargo by tracking ID."""

    def find(self, tracking_id: TrackingID) -> Cargo:
        """Return the cargo or raise ``UnknownCargoError``."""
        ...
