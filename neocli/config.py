"""Configuration loading and typed access.

The configuration lives in ``$XDG_CONFIG_HOME/neo/config.toml``. It is
optional for the completion commands: a missing file yields an empty
configuration, while a file with syntax errors is fatal.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import CONFIG_FILE, DEFAULT_COMPLETIONS_DIR
from .models import NeoError

if TYPE_CHECKING:
    import logging

__all__ = ["BOOL_FALSE_STRINGS", "Configuration", "coerce_to_bool", "load_config"]

# Type alias for config values
ConfigValueType = float | bool | str | list | dict

BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})


def coerce_to_bool(value: ConfigValueType | None, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Behavior:
        - None → default
        - Empty string → False
        - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
        - Any other non-empty string → True
        - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


def load_config(log: logging.Logger, config_filename: str = "") -> Configuration:
    """Load the configuration file.

    Args:
        log: Logger instance for status and error messages
        config_filename: Optional path to the config file, defaults to CONFIG_FILE

    Returns:
        The loaded configuration (empty when the file does not exist)

    Raises:
        NeoError: If the file has syntax errors
    """
    fname = Path(os.path.expandvars(config_filename)).expanduser() if config_filename else CONFIG_FILE
    if not fname.exists():
        log.debug("No config file at %s, using defaults", fname)
        return Configuration({}, logger=log)

    log.info("Loading %s", fname)
    with fname.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            log.critical("Problem reading %s: %s", fname, e)
            raise NeoError(str(e)) from e
    return Configuration(data, logger=log)


class Configuration(dict):
    """Configuration wrapper providing typed access to dotted keys.

    ``conf.get("installation.completions_path")`` walks nested tables.
    """

    def __init__(self, *args: Any, logger: logging.Logger, **kwargs: Any):  # noqa: ANN401
        super().__init__(*args, **kwargs)
        self.log = logger

    def _get_raw(self, name: str) -> ConfigValueType:
        """Get raw value from nested tables. Raises KeyError if not found."""
        node: Any = self
        for part in name.split("."):
            if not isinstance(node, dict) or part not in node:
                raise KeyError(name)
            node = dict.get(node, part)
        return node  # type: ignore[no-any-return]

    def get(self, name: str, default: ConfigValueType | None = None) -> ConfigValueType | None:  # type: ignore[override]
        """Get a value, or `default` when the key is missing."""
        try:
            return self._get_raw(name)
        except KeyError:
            return default

    def get_bool(self, name: str, default: bool = False) -> bool:
        """Get a boolean value, handling loose typing."""
        return coerce_to_bool(self.get(name), default)

    def get_str(self, name: str, default: str = "") -> str:
        """Get a string value."""
        value = self.get(name)
        if value is None:
            return default
        return str(value)

    @property
    def completions_dir(self) -> Path:
        """Directory receiving the generated completion files."""
        custom = self.get_str("installation.completions_path")
        if custom:
            return Path(os.path.expandvars(custom)).expanduser()
        return DEFAULT_COMPLETIONS_DIR

    @property
    def alias_enabled(self) -> bool:
        """Whether the short alias gets its own completion wiring."""
        return self.get_bool("preferences.aliases.n", default=True)
