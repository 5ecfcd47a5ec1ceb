"""Shared constants for neocli."""

import os
from enum import StrEnum
from pathlib import Path

__all__ = [
    "ALIAS_NAME",
    "CLI_NAME",
    "CONFIG_DIR",
    "CONFIG_FILE",
    "DEFAULT_COMPLETIONS_DIR",
    "SUPPORTED_SHELLS",
    "Shell",
]

# Primary command name and its short alias
CLI_NAME = "neo"
ALIAS_NAME = "n"

# Config file paths - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_DIR = _xdg_config_home / CLI_NAME
CONFIG_FILE = CONFIG_DIR / "config.toml"

DEFAULT_COMPLETIONS_DIR = CONFIG_DIR / "completions"


class Shell(StrEnum):
    """Shells completion scripts are generated for."""

    ZSH = "zsh"
    BASH = "bash"
    FISH = "fish"


# Supported shells for completion generation
SUPPORTED_SHELLS = tuple(shell.value for shell in Shell)
