"""Error and exit code types shared by the CLI."""

from enum import IntEnum

__all__ = ["ExitCode", "NeoError"]


class NeoError(Exception):
    """Used for errors which already triggered logging."""


class ExitCode(IntEnum):
    """Exit codes of the neo CLI.

    The first three match what click uses for the same situations.
    """

    SUCCESS = 0
    COMMAND_ERROR = 1  # Command execution failed (e.g. write error)
    USAGE_ERROR = 2  # Invalid arguments, unsupported shell
    ENV_ERROR = 3  # Unreadable configuration
