"""Completion façade: script generation and installation.

Selects a generator by shell name and writes the full set of completion
files to a directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import aiofiles
import aiofiles.os

from ..constants import ALIAS_NAME, Shell
from ..logging_setup import get_logger
from .discovery import walk_command_tree
from .fallback import build_fallback_tree
from .generators import GENERATORS
from .models import DEFAULT_PATHS

if TYPE_CHECKING:
    import click

    from .models import CommandNode

__all__ = [
    "completion_filenames",
    "generate_completions",
    "get_command_tree",
    "get_default_path",
    "write_completion_files",
]

log = get_logger("neo.completions")


def get_default_path(shell: str) -> str:
    """Get the default user-level completion path for a shell.

    Args:
        shell: Shell type ("bash", "zsh", or "fish")

    Returns:
        Expanded absolute path to the default completion file
    """
    return str(Path(DEFAULT_PATHS[shell]).expanduser())


def get_command_tree(program: click.Command | None = None) -> CommandNode:
    """Return the IR of `program`, or the built-in tree when there is none."""
    if program is None:
        log.debug("No command definitions available, using the built-in command tree")
        return build_fallback_tree()
    return walk_command_tree(program)


def generate_completions(root: CommandNode, shell: str, alias: str | None = ALIAS_NAME) -> str:
    """Generate the completion script of `root` for `shell`.

    Args:
        root: The root of the command tree
        shell: One of SUPPORTED_SHELLS
        alias: Secondary command name sharing the completions, if any

    Returns:
        The script content

    Raises:
        ValueError: If the shell is not supported
    """
    return GENERATORS[Shell(shell)](root, alias)


def completion_filenames(name: str, alias: str | None = ALIAS_NAME) -> dict[str, str]:
    """Return the file name of each generated script.

    The "alias" entry is a zsh file delegating to the main definition.
    """
    filenames = {
        Shell.ZSH.value: f"_{name}",
        Shell.BASH.value: f"{name}.bash",
        Shell.FISH.value: f"{name}.fish",
    }
    if alias:
        filenames["alias"] = f"_{alias}"
    return filenames


def _alias_script(name: str, alias: str) -> str:
    return f"#compdef {alias}\n# Completion for '{alias}' alias (points to {name})\ncompdef {alias}={name}\n"


async def _write(path: Path, content: str) -> None:
    async with aiofiles.open(path, "w", encoding="utf-8") as f:
        await f.write(content)


async def write_completion_files(directory: str | Path, root: CommandNode, alias: str | None = ALIAS_NAME) -> list[Path]:
    """Write the zsh, bash and fish scripts (plus the zsh alias file) to `directory`.

    Files are written one after the other. A failure is reported as is:
    files written before it stay on disk.

    Args:
        directory: Target directory, created if missing
        root: The root of the command tree
        alias: Secondary command name sharing the completions, if any

    Returns:
        The written paths, in order

    Raises:
        OSError: If the directory or a file cannot be written
    """
    target = Path(directory).expanduser()
    filenames = completion_filenames(root.name, alias)
    written: list[Path] = []
    try:
        await aiofiles.os.makedirs(target, exist_ok=True)
        for shell in Shell:
            path = target / filenames[shell.value]
            await _write(path, generate_completions(root, shell, alias))
            log.debug("Created completion file: %s", path)
            written.append(path)
        if alias:
            path = target / filenames["alias"]
            await _write(path, _alias_script(root.name, alias))
            log.debug("Created alias completion file: %s", path)
            written.append(path)
    except OSError as e:
        log.error("Failed to create completion files: %s", e)  # noqa: TRY400
        raise
    return written
