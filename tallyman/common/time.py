"""Common time utilities."""

from __future__ import annotations

import datetime as dt


def utcnow() -> dt.datetime:
    """Return an aware UTC timestamp for registration times."""
    return dt.datetime.now(dt.UTC)


def is_zero_time(value: dt.datetime | None) -> bool:
    """Return True when ``value`` is unset or the earliest representable time.

    ``datetime.min`` stands in for an uninitialised timestamp whether or not
    it carries a timezone.
    """
    if value is None:
        return True
    return value.replace(tzinfo=None) == dt.datetime.min
