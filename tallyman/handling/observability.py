"""Emit structured observability events for handling registration.

``HandlingRegistrationService`` reports each registration outcome through
``HandlingEventLogger`` so operators can follow registrations, rejections
and notifier failures in the logs.

Usage
-----
>>> event_logger = HandlingEventLogger()
>>> event_logger.log_event_rejected(
...     tracking_id="ABC123",
...     error=UnknownVoyageError("V999"),
... )

"""

from __future__ import annotations

import enum
import typing as typ

from tallyman.logging import get_logger, log_error, log_info, log_warning

if typ.TYPE_CHECKING:
    import datetime as dt

    from tallyman.cargo.models import HandlingEvent

logger = get_logger(__name__)


class HandlingLogEvent(enum.StrEnum):
    """Structured log event types for handling registration."""

    EVENT_REGISTERED = "handling.event.registered"
    EVENT_REJECTED = "handling.event.rejected"
    HANDLER_FAILED = "handling.handler.failed"


class HandlingEventLogger:
    """Emit structured handling events via femtologging."""

    def log_event_registered(
        self,
        *,
        event: HandlingEvent,
        duration: dt.timedelta,
    ) -> None:
        """Log a stored and dispatched handling event.

        Parameters
        ----------
        event
            The event that was stored.
        duration
            Elapsed time from validation to the end of notification.

        """
        log_info(
            logger,
            "[%s] tracking_id=%s event_type=%s location=%s voyage_number=%s "
            "completion_time=%s duration_seconds=%.3f",
            HandlingLogEvent.EVENT_REGISTERED,
            event.tracking_id,
            event.event_type,
            event.location,
            event.voyage_number,
            event.completion_time.isoformat(),
            duration.total_seconds(),
        )

    def log_event_rejected(
        self,
        *,
        tracking_id: str | None,
        error: BaseException,
    ) -> None:
        """Log a registration refused by validation or by the factory.

        Parameters
        ----------
        tracking_id
            Tracking ID supplied by the caller, possibly blank.
        error
            The validation or construction error being raised.

        """
        log_warning(
            logger,
            "[%s] tracking_id=%r error_type=%s error_message=%s",
            HandlingLogEvent.EVENT_REJECTED,
            tracking_id,
            type(error).__name__,
            str(error),
        )

    def log_handler_failed(
        self,
        *,
        event: HandlingEvent,
        error: BaseException,
    ) -> None:
        """Log an event handler failure after the event was stored.

        Parameters
        ----------
        event
            The stored event whose notification failed.
        error
            Exception raised by the event handler.

        """
        log_error(
            logger,
            "[%s] tracking_id=%s event_type=%s error_type=%s error_message=%s",
            HandlingLogEvent.HANDLER_FAILED,
            event.tracking_id,
            event.event_type,
            type(error).__name__,
            str(error),
            exc_info=error,
        )
