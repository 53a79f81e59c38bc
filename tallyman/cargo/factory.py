"""Default HandlingEventFactory backed by cargo, voyage and location lookups."""

from __future__ import annotations

import typing as typ

from tallyman.cargo.models import HandlingEvent

if typ.TYPE_CHECKING:
    import datetime as dt

    from tallyman.cargo.models import (
        HandlingEventType,
        TrackingID,
        UNLocode,
        VoyageNumber,
    )
    from tallyman.cargo.protocol import CargoRepository
    from tallyman.location.protocol import LocationRepository
    from tallyman.voyage.protocol import VoyageRepository


class DefaultHandlingEventFactory:
    """Build handling events that reference known cargo, voyages and locations.

    Parameters
    ----------
    cargo_repository
        Lookup used to confirm the cargo exists.
    voyage_repository
        Lookup used to confirm the voyage exists.
    location_repository
        Lookup used to confirm the location exists.

    """

    def __init__(
        self,
        cargo_repository: CargoRepository,
        voyage_repository: VoyageRepository,
        location_repository: LocationRepository,
    ) -> None:
        """Configure the factory with its lookup repositories."""
        self._cargo_repository = cargo_repository
        self._voyage_repository = voyage_repository
        self._location_repository = location_repository

    def create_handling_event(  # noqa: PLR0913
        self,
        registration_time: dt.datetime,
        completion_time: dt.datetime,
        tracking_id: TrackingID,
        voyage_number: VoyageNumber,
        un_locode: UNLocode,
        event_type: HandlingEventType,
    ) -> HandlingEvent:
        """Create a handling event after checking every reference.

        Returns
        -------
        HandlingEvent
            Immutable event built from the arguments.

        Raises
        ------
        UnknownCargoError
            If the tracking ID does not name a booked cargo.
        UnknownVoyageError
            If a voyage number is given and no such voyage exists.
        UnknownLocationError
            If the UN/LOCODE does not name a known location.

        """
        self._cargo_repository.find(tracking_id)

        # Received cargo has not boarded a voyage yet.
        if voyage_number:
            self._voyage_repository.find(voyage_number)

        self._location_repository.find(un_locode)

        return HandlingEvent(
            registration_time=registration_time,
            completion_time=completion_time,
            tracking_id=tracking_id,
            voyage_number=voyage_number,
            location=un_locode,
            event_type=event_type,
        )
