"""Errors specific to handling event registration."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class HandlingError(Exception):
    """Base class for handling module errors."""


class InvalidArgumentError(HandlingError):
    """Raised when registration input fails validation.

    Attributes
    ----------
    fields
        Names of the arguments that failed validation, in argument order.

    """

    fields: tuple[str, ...]

    def __init__(self, fields: cabc.Iterable[str]) -> None:
        """Initialise with the names of the offending arguments."""
        self.fields = tuple(fields)
        super().__init__(f"invalid argument: {', '.join(self.fields)}")
