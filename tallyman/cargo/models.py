"""Cargo and handling event records."""

from __future__ import annotations

import datetime as dt  # noqa: TC003
import enum
from typing import TypeAlias

import msgspec

TrackingID: TypeAlias = str
VoyageNumber: TypeAlias = str
UNLocode: TypeAlias = str


class HandlingEventType(enum.StrEnum):
    """Classification of what happened to a cargo.

    ``NOT_HANDLED`` marks the absence of a selection and is never a valid
    type for a registered event.
    """

    NOT_HANDLED = "not_handled"
    RECEIVE = "receive"
    LOAD = "load"
    UNLOAD = "unload"
    CLAIM = "claim"
    CUSTOMS = "customs"


class Cargo(msgspec.Struct, kw_only=True, frozen=True):
    """A cargo shipment known to the booking side of the system.

    Attributes
    ----------
    tracking_id
        Unique identifier for the shipment.
    origin
        UN/LOCODE where the cargo starts its journey.
    destination
        UN/LOCODE where the cargo should be claimed.

    """

    tracking_id: TrackingID
    origin: UNLocode
    destination: UNLocode


class HandlingEvent(msgspec.Struct, kw_only=True, frozen=True):
    """Recorded fact that a cargo was handled at a location.

    Attributes
    ----------
    registration_time
        When Tallyman recorded the event.
    completion_time
        When the handling actually happened, as reported by the caller.
    tracking_id
        Shipment the event applies to.
    voyage_number
        Carrier voyage involved in the handling.
    location
        UN/LOCODE where the handling took place.
    event_type
        What kind of handling occurred.

    """

    registration_time: dt.datetime
    completion_time: dt.datetime
    tracking_id: TrackingID
    voyage_number: VoyageNumber
    location: UNLocode
    event_type: HandlingEventType


class HandlingHistory(msgspec.Struct, kw_only=True, frozen=True):
    """Handling events recorded for one cargo, in storage order."""

    tracking_id: TrackingID
    events: tuple[HandlingEvent, ...] = ()

    def __len__(self) -> int:
        """Return the number of recorded events."""
        return len(self.events)

    def most_recently_completed_event(self) -> HandlingEvent | None:
        """Return the event with the latest completion time.

        When several events share the latest completion time the one stored
        last wins. An empty history yields ``None``.
        """
        latest: HandlingEvent | None = None
        for event in self.events:
            if latest is None or event.completion_time >= latest.completion_time:
                latest = event
        return latest
