"""Cargo domain: shipments, handling events and their storage.

Public API
----------
HandlingEvent
    Immutable record of one handling of a cargo.
HandlingEventType
    Kinds of handling, including the ``NOT_HANDLED`` sentinel.
HandlingHistory
    Ordered handling events for one cargo.
HandlingEventRepository
    Protocol for the append-only event store.
HandlingEventFactory
    Protocol for building validated events.
DefaultHandlingEventFactory
    Factory that checks cargo, voyage and location references.
InMemoryHandlingEventRepository
    Process-local event store.

"""

from __future__ import annotations

from tallyman.cargo.errors import (
    CargoError,
    HandlingEventConstructionError,
    UnknownCargoError,
)
from tallyman.cargo.factory import DefaultHandlingEventFactory
from tallyman.cargo.memory import InMemoryCargoRepository, InMemoryHandlingEventRepository
from tallyman.cargo.models import (
    Cargo,
    HandlingEvent,
    HandlingEventType,
    HandlingHistory,
    TrackingID,
    UNLocode,
    VoyageNumber,
)
from tallyman.cargo.protocol import (
    CargoRepository,
    HandlingEventFactory,
    HandlingEventRepository,
)

__all__ = [
    "Cargo",
    "CargoError",
    "CargoRepository",
    "DefaultHandlingEventFactory",
    "HandlingEvent",
    "HandlingEventConstructionError",
    "HandlingEventFactory",
    "HandlingEventRepository",
    "HandlingEventType",
    "HandlingHistory",
    "InMemoryCargoRepository",
    "InMemoryHandlingEventRepository",
    "TrackingID",
    "UNLocode",
    "UnknownCargoError",
    "VoyageNumber",
]
