"""LocationRepository protocol."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from tallyman.cargo.models import UNLocode
    from tallyman.location.models import Location


@typ.runtime_checkable
class LocationRepository(typ.Protocol):
    """Lookup of locations by UN/LOCODE."""

    def find(self, un_locode: UNLocode) -> Location:
        """Return the location or raise ``UnknownLocationError``."""
        ...
