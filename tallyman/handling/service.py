"""Handling registration service.

This module provides ``HandlingRegistrationService``, the use case that
records a handling event and notifies interested parties. Registration runs
as one synchronous pipeline:

1. Validate the raw arguments
2. Ask the factory to build the event
3. Store the event in the repository
4. Notify the event handler

Usage
-----
>>> from tallyman.cargo import (
...     DefaultHandlingEventFactory,
...     HandlingEventType,
...     InMemoryHandlingEventRepository,
... )
>>> from tallyman.handling import HandlingRegistrationService, InspectionEventHandler
>>>
>>> service = HandlingRegistrationService(
...     InMemoryHandlingEventRepository(),
...     DefaultHandlingEventFactory(cargos, voyages, locations),
...     InspectionEventHandler(inspection_service),
... )
>>> service.register_handling_event(
...     completed_at, "ABC123", "V001", "USNYC", HandlingEventType.LOAD
... )

"""

from __future__ import annotations

import datetime as dt
import time
import typing as typ

from tallyman.cargo.models import HandlingEventType
from tallyman.common.time import is_zero_time, utcnow
from tallyman.handling.config import HandlingConfig
from tallyman.handling.errors import InvalidArgumentError
from tallyman.handling.observability import HandlingEventLogger

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from tallyman.cargo.models import (
        HandlingEvent,
        TrackingID,
        UNLocode,
        VoyageNumber,
    )
    from tallyman.cargo.protocol import HandlingEventFactory, HandlingEventRepository
    from tallyman.handling.protocol import EventHandler


def _is_blank(value: object) -> bool:
    return not isinstance(value, str) or value == ""


def _coerce_event_type(value: object) -> HandlingEventType | None:
    """Return ``value`` as a handling event type, or ``None`` if it is not one."""
    if isinstance(value, HandlingEventType):
        return value
    try:
        return HandlingEventType(value)
    except ValueError:
        return None


class HandlingRegistrationService:
    """Register handling events and notify the configured event handler.

    Parameters
    ----------
    repository
        Store that receives every successfully built event.
    factory
        Builder that turns raw arguments into a ``HandlingEvent``; its
        exceptions reach the caller unchanged.
    event_handler
        Subscriber notified synchronously after each store.
    config
        Registration behaviour; defaults to ``HandlingConfig()``.
    clock
        Source of registration timestamps; defaults to aware UTC now.
    event_logger
        Structured lifecycle logger; defaults to ``HandlingEventLogger()``.

    """

    def __init__(  # noqa: PLR0913
        self,
        repository: HandlingEventRepository,
        factory: HandlingEventFactory,
        event_handler: EventHandler,
        *,
        config: HandlingConfig | None = None,
        clock: cabc.Callable[[], dt.datetime] = utcnow,
        event_logger: HandlingEventLogger | None = None,
    ) -> None:
        """Wire the service to its collaborators."""
        self._repository = repository
        self._factory = factory
        self._event_handler = event_handler
        self._config = config or HandlingConfig()
        self._clock = clock
        self._event_logger = event_logger or HandlingEventLogger()

    def register_handling_event(
        self,
        completion_time: dt.datetime,
        tracking_id: TrackingID,
        voyage_number: VoyageNumber,
        un_locode: UNLocode,
        event_type: HandlingEventType,
    ) -> None:
        """Register a handling event and notify interested parties.

        Parameters
        ----------
        completion_time
            When the handling happened. ``None`` and ``datetime.min`` are
            rejected as unset.
        tracking_id
            Shipment that was handled; must be non-empty.
        voyage_number
            Voyage involved; must be non-empty.
        un_locode
            Location of the handling; must be non-empty.
        event_type
            Kind of handling. Plain strings are accepted when they match a
            ``HandlingEventType`` value; ``NOT_HANDLED`` is rejected.

        Raises
        ------
        InvalidArgumentError
            If any argument fails validation. No collaborator is called.
        Exception
            Whatever the factory or the repository raises, unchanged. The
            event handler is not called in that case.

        """
        started = time.monotonic()
        try:
            resolved_type = self._validate(
                completion_time, tracking_id, voyage_number, un_locode, event_type
            )
            event = self._factory.create_handling_event(
                registration_time=self._clock(),
                completion_time=completion_time,
                tracking_id=tracking_id,
                voyage_number=voyage_number,
                un_locode=un_locode,
                event_type=resolved_type,
            )
        except Exception as exc:
            self._event_logger.log_event_rejected(tracking_id=tracking_id, error=exc)
            raise

        self._repository.store(event)
        self._notify(event)

        self._event_logger.log_event_registered(
            event=event,
            duration=dt.timedelta(seconds=time.monotonic() - started),
        )

    def _validate(
        self,
        completion_time: object,
        tracking_id: object,
        voyage_number: object,
        un_locode: object,
        event_type: object,
    ) -> HandlingEventType:
        """Check every argument and return the resolved event type.

        Raises
        ------
        InvalidArgumentError
            Naming every argument that failed, in argument order.

        """
        invalid: list[str] = []
        if not isinstance(completion_time, dt.datetime) or is_zero_time(
            completion_time
        ):
            invalid.append("completion_time")
        if _is_blank(tracking_id):
            invalid.append("tracking_id")
        if _is_blank(voyage_number):
            invalid.append("voyage_number")
        if _is_blank(un_locode):
            invalid.append("un_locode")

        resolved_type = _coerce_event_type(event_type)
        if resolved_type is None or resolved_type is HandlingEventType.NOT_HANDLED:
            invalid.append("event_type")

        if invalid or resolved_type is None:
            raise InvalidArgumentError(invalid)
        return resolved_type

    def _notify(self, event: HandlingEvent) -> None:
        """Pass ``event`` to the event handler, applying the error policy."""
        try:
            self._event_handler.cargo_was_handled(event)
        except Exception as exc:
            self._event_logger.log_handler_failed(event=event, error=exc)
            if self._config.propagate_handler_errors:
                raise
