"""InspectionService protocol."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from tallyman.cargo.models import TrackingID


@typ.runtime_checkable
class InspectionService(typ.Protocol):
    """Re-evaluates a cargo after it has been handled.

    Examples
    --------
    >>> class PrintingInspection:
    ...     def inspect_cargo(self, tracking_id: str) -> None:
    ...         print(f"inspecting {tracking_id}")
    >>> isinstance(PrintingInspection(), InspectionService)
    True

    """

    def inspect_cargo(self, tracking_id: TrackingID) -> object:
        """Inspect the cargo identified by ``tracking_id``.

        Any return value is ignored by the handling subsystem.
        """
        ...
