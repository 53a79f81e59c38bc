"""Location records."""

from __future__ import annotations

import msgspec

from tallyman.cargo.models import UNLocode  # noqa: TC001


class Location(msgspec.Struct, kw_only=True, frozen=True):
    """A port or city identified by its UN/LOCODE."""

    un_locode: UNLocode
    name: str
