"""Configuration for handling event registration.

Usage
-----
Create a configuration with defaults:

>>> config = HandlingConfig()
>>> config.propagate_handler_errors
False

Or load from environment variables:

>>> import os
>>> os.environ["TALLYMAN_PROPAGATE_HANDLER_ERRORS"] = "true"
>>> HandlingConfig.from_env().propagate_handler_errors
True

"""

from __future__ import annotations

import dataclasses as dc
import os

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dc.dataclass(frozen=True, slots=True)
class HandlingConfig:
    """Configuration for ``HandlingRegistrationService``.

    Attributes
    ----------
    propagate_handler_errors
        When ``False`` (the default) an exception raised by the event
        handler is logged and registration still succeeds, because the
        event is already stored. When ``True`` the exception is logged and
        then re-raised to the caller.

    """

    propagate_handler_errors: bool = False

    @staticmethod
    def _parse_bool(env_var: str, *, default: bool) -> bool:
        """Read a boolean env var, falling back to a default when blank."""
        raw = os.environ.get(env_var, "")
        value = raw.strip().lower()
        if not value:
            return default
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        msg = f"{env_var} must be a boolean, got: {raw!r}"
        raise ValueError(msg)

    @classmethod
    def from_env(cls) -> HandlingConfig:
        """Create configuration from environment variables.

        Reads ``TALLYMAN_PROPAGATE_HANDLER_ERRORS``; accepted values are
        ``1/true/yes/on`` and ``0/false/no/off`` in any case.

        Raises
        ------
        ValueError
            If the variable holds any other non-blank value.

        """
        return cls(
            propagate_handler_errors=cls._parse_bool(
                "TALLYMAN_PROPAGATE_HANDLER_ERRORS", default=False
            ),
        )
