"""Handling event registration use case.

Public API
----------
HandlingService
    Protocol for the registration entry point.
HandlingRegistrationService
    Validates, builds, stores and dispatches handling events.
EventHandler
    Protocol for subscribers notified after a store.
InspectionEventHandler
    Forwards handled cargo to an ``InspectionService``.
CompositeEventHandler
    Fans one event out to several handlers.
HandlingConfig
    Registration behaviour loaded from the environment.
HandlingEventLogger
    Structured lifecycle logging.
InvalidArgumentError
    Raised when registration input fails validation.

Examples
--------
>>> from tallyman.handling import CompositeEventHandler, InspectionEventHandler
>>> handler = CompositeEventHandler(
...     InspectionEventHandler(inspection_service),
...     audit_handler,
... )

"""

from __future__ import annotations

from tallyman.handling.config import HandlingConfig
from tallyman.handling.errors import HandlingError, InvalidArgumentError
from tallyman.handling.handlers import CompositeEventHandler, InspectionEventHandler
from tallyman.handling.observability import HandlingEventLogger, HandlingLogEvent
from tallyman.handling.protocol import EventHandler, HandlingService
from tallyman.handling.service import HandlingRegistrationService

__all__ = [
    "CompositeEventHandler",
    "EventHandler",
    "HandlingConfig",
    "HandlingError",
    "HandlingEventLogger",
    "HandlingLogEvent",
    "HandlingRegistrationService",
    "HandlingService",
    "InspectionEventHandler",
    "InvalidArgumentError",
]
