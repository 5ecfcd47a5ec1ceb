"""Data models and constants for shell completions.

Contains the intermediate representation (IR) shared by every generator,
and the registry of completion sources used while generating scripts.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..constants import ALIAS_NAME, CLI_NAME

__all__ = [
    "COMMIT_TYPES",
    "CONFIG_KEYS",
    "DEFAULT_PATHS",
    "DYNAMIC_COMPLETIONS",
    "ArgumentNode",
    "CommandNode",
    "DynamicCompletion",
    "OptionNode",
]

# Default user-level completion paths for a single script
DEFAULT_PATHS = {
    "bash": f"~/.local/share/bash-completion/completions/{CLI_NAME}",
    "zsh": f"~/.zsh/completions/_{CLI_NAME}",
    "fish": f"~/.config/fish/completions/{CLI_NAME}.fish",
}


@dataclass(frozen=True)
class OptionNode:  # pylint: disable=too-many-instance-attributes
    """One command line flag."""

    flags: str  # As declared, e.g. "-t, --type <type>"
    long: str  # Without dashes, unique within the owning command
    description: str = ""
    short: str | None = None  # Single letter, without dash
    required: bool = False  # Value mandatory when the flag is used
    is_boolean: bool = True  # Takes no value
    is_variadic: bool = False
    arg_name: str | None = None  # Only set for valued options
    choices: tuple[str, ...] | None = None


@dataclass(frozen=True)
class ArgumentNode:
    """One positional argument."""

    name: str
    description: str = ""
    required: bool = True
    variadic: bool = False  # Only allowed on the last argument
    choices: tuple[str, ...] | None = None
    completion: str | None = None  # Explicit DYNAMIC_COMPLETIONS key


@dataclass(frozen=True)
class CommandNode:
    """One command or subcommand.

    A node with subcommands completes subcommand names, never its own
    positional arguments.
    """

    name: str
    description: str = ""
    options: tuple[OptionNode, ...] = ()
    arguments: tuple[ArgumentNode, ...] = ()
    subcommands: tuple[CommandNode, ...] = ()
    allow_unknown_option: bool = False

    @property
    def is_leaf(self) -> bool:
        """Return True if this command has no subcommands."""
        return not self.subcommands

    def find(self, *path: str) -> CommandNode | None:
        """Return the descendant at `path` (subcommand names), if any."""
        node = self
        for name in path:
            for sub in node.subcommands:
                if sub.name == name:
                    node = sub
                    break
            else:
                return None
        return node

    def walk(self, path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], CommandNode]]:
        """Yield (path, node) for this node and all descendants, parents first."""
        yield path, self
        for sub in self.subcommands:
            yield from sub.walk((*path, sub.name))


@dataclass(frozen=True)
class DynamicCompletion:
    """A completion source evaluated by the shell at completion time."""

    function_name: str  # Shell function name inside generated scripts
    shell_command: str  # Prints one candidate per line
    description: str


DYNAMIC_COMPLETIONS: Mapping[str, DynamicCompletion] = MappingProxyType(
    {
        "branches": DynamicCompletion(
            function_name=f"_{CLI_NAME}_git_branches",
            shell_command="git branch --list --format='%(refname:short)' 2>/dev/null",
            description="Git branch names",
        ),
        "remotes": DynamicCompletion(
            function_name=f"_{CLI_NAME}_git_remotes",
            shell_command="git remote 2>/dev/null",
            description="Git remote names",
        ),
    }
)

# Conventional commit types
COMMIT_TYPES: tuple[str, ...] = ("feat", "fix", "docs", "style", "refactor", "test", "chore")

# Dotted configuration keys offered by `config get` / `config set`
CONFIG_KEYS: tuple[str, ...] = (
    "preferences.banner",
    "preferences.theme",
    f"preferences.aliases.{ALIAS_NAME}",
    "ai.enabled",
    "ai.model",
    "shell.type",
    "shell.rcFile",
    "updates.lastCheckedAt",
    "updates.latestVersion",
    "plugins.enabled",
)
