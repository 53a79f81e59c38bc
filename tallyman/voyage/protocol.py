"""VoyageRepository protocol."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from tallyman.cargo.models import VoyageNumber
    from tallyman.voyage.models import Voyage


@typ.runtime_checkable
class VoyageRepository(typ.Protocol):
    """Lookup of voyages by voyage number."""

    def find(self, voyage_number: VoyageNumber) -> Voyage:
        """Return the voyage or raise ``UnknownVoyageError``."""
        ...
