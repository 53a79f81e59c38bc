"""In-process wiring for the handling subsystem.

This module assembles a working handling stack from the in-memory adapters,
for local runs, demos and integration tests. Deployments with durable
storage construct ``HandlingRegistrationService`` directly with their own
adapters.

Configuration is driven by environment variables:

- ``TALLYMAN_LOG_LEVEL``: Log level (default ``INFO``)
- ``TALLYMAN_PROPAGATE_HANDLER_ERRORS``: Re-raise event handler failures
  (default ``false``)

"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ

from tallyman.cargo import (
    DefaultHandlingEventFactory,
    InMemoryCargoRepository,
    InMemoryHandlingEventRepository,
)
from tallyman.handling import (
    HandlingConfig,
    HandlingRegistrationService,
    InspectionEventHandler,
)
from tallyman.location import InMemoryLocationRepository
from tallyman.logging import configure_logging, get_logger, log_info, log_warning
from tallyman.voyage import InMemoryVoyageRepository

if typ.TYPE_CHECKING:
    from tallyman.inspection import InspectionService

__all__ = ["HandlingRuntime", "build_in_memory_runtime", "configure_runtime_logging"]

logger = get_logger(__name__)


@dc.dataclass(frozen=True, slots=True)
class HandlingRuntime:
    """A fully wired in-memory handling stack.

    The lookup repositories are exposed so callers can seed cargo, voyages
    and locations before registering events.
    """

    service: HandlingRegistrationService
    handling_events: InMemoryHandlingEventRepository
    cargos: InMemoryCargoRepository
    voyages: InMemoryVoyageRepository
    locations: InMemoryLocationRepository


def configure_runtime_logging() -> str:
    """Configure femtologging from ``TALLYMAN_LOG_LEVEL``.

    Returns
    -------
    str
        The normalized level that was applied.

    """
    raw_level = os.environ.get("TALLYMAN_LOG_LEVEL", "INFO")
    normalized_level, invalid_level = configure_logging(raw_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid TALLYMAN_LOG_LEVEL %r, falling back to %s",
            raw_level,
            normalized_level,
        )
    return normalized_level


def build_in_memory_runtime(
    inspection_service: InspectionService,
    *,
    config: HandlingConfig | None = None,
) -> HandlingRuntime:
    """Wire the in-memory repositories into a registration service.

    Parameters
    ----------
    inspection_service
        Receives the tracking ID of every successfully registered event.
    config
        Registration behaviour; read from the environment when omitted.

    Returns
    -------
    HandlingRuntime
        The service together with the repositories behind it.

    """
    handling_config = config if config is not None else HandlingConfig.from_env()

    cargos = InMemoryCargoRepository()
    voyages = InMemoryVoyageRepository()
    locations = InMemoryLocationRepository()
    handling_events = InMemoryHandlingEventRepository()

    service = HandlingRegistrationService(
        handling_events,
        DefaultHandlingEventFactory(cargos, voyages, locations),
        InspectionEventHandler(inspection_service),
        config=handling_config,
    )
    log_info(
        logger,
        "Built in-memory handling runtime (propagate_handler_errors=%s)",
        handling_config.propagate_handler_errors,
    )
    return HandlingRuntime(
        service=service,
        handling_events=handling_events,
        cargos=cargos,
        voyages=voyages,
        locations=locations,
    )
