"""Voyage records."""

from __future__ import annotations

import msgspec

from tallyman.cargo.models import VoyageNumber  # noqa: TC001


class Voyage(msgspec.Struct, kw_only=True, frozen=True):
    """A scheduled carrier voyage.

    Schedules and carrier movements belong to routing and are not modelled
    here; handling only needs to know the voyage exists.
    """

    number: VoyageNumber
