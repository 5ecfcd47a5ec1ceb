"""Verbose mode switch.

Off unless ``NEO_DEBUG`` holds a truthy value or ``neo --verbose`` is used.
"""

import os

from .config import coerce_to_bool

__all__ = ["DEBUG_ENV_VAR", "is_debug", "set_debug"]

DEBUG_ENV_VAR = "NEO_DEBUG"


class _Verbosity:
    enabled: bool = coerce_to_bool(os.environ.get(DEBUG_ENV_VAR))


def is_debug() -> bool:
    """Return True when debug logging is on."""
    return _Verbosity.enabled


def set_debug(value: bool) -> None:
    _Verbosity.enabled = value
