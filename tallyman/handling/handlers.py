"""EventHandler implementations."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from tallyman.cargo.models import HandlingEvent
    from tallyman.handling.protocol import EventHandler
    from tallyman.inspection.protocol import InspectionService


class InspectionEventHandler:
    """Forward handled cargo to the inspection service.

    Only the tracking ID is passed on; inspection loads whatever history it
    needs itself.
    """

    def __init__(self, inspection_service: InspectionService) -> None:
        """Hold the inspection service that receives notifications."""
        self._inspection_service = inspection_service

    def cargo_was_handled(self, event: HandlingEvent) -> None:
        """Ask inspection to re-evaluate the handled cargo."""
        self._inspection_service.inspect_cargo(event.tracking_id)


class CompositeEventHandler:
    """Notify several handlers, in order, about the same event.

    The first handler to raise stops the fan-out and its exception
    propagates.
    """

    def __init__(self, *handlers: EventHandler) -> None:
        """Store the handlers in notification order."""
        self._handlers = handlers

    @property
    def handlers(self) -> tuple[EventHandler, ...]:
        """Return the wrapped handlers."""
        return self._handlers

    def cargo_was_handled(self, event: HandlingEvent) -> None:
        """Pass ``event`` to every wrapped handler."""
        for handler in self._handlers:
            handler.cargo_was_handled(event)
