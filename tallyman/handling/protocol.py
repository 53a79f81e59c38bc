"""Protocols exposed by the handling subsystem."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import datetime as dt

    from tallyman.cargo.models import (
        HandlingEvent,
        HandlingEventType,
        TrackingID,
        UNLocode,
        VoyageNumber,
    )


@typ.runtime_checkable
class EventHandler(typ.Protocol):
    """Subscriber notified after a handling event has been stored.

    Any object with a ``cargo_was_handled`` method can be wired into the
    registration service, whether it forwards to inspection, fans out to
    several subscribers, or records calls in a test.
    """

    def cargo_was_handled(self, event: HandlingEvent) -> None:
        """React to a newly stored handling event."""
        ...


@typ.runtime_checkable
class HandlingService(typ.Protocol):
    """Registration entry point used by transport adapters."""

    def register_handling_event(
        self,
        completion_time: dt.datetime,
        tracking_id: TrackingID,
        voyage_number: VoyageNumber,
        un_locode: UNLocode,
        event_type: HandlingEventType,
    ) -> None:
        """Register a handling event and notify interested parties.

        Raises
        ------
        InvalidArgumentError
            If any argument fails validation.
        HandlingEventConstructionError
            If the factory rejects the combination of references.

        """
        ...
