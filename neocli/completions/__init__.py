"""Shell completion generators for neo.

This package provides:
- The command tree IR (CommandNode, OptionNode, ArgumentNode)
- Command tree discovery from the live click application
- A built-in command tree for when no application is available
- Shell-specific completion script generators (zsh, bash, fish)
- The façade writing completion files to disk
"""

from __future__ import annotations

from .discovery import walk_command_tree
from .fallback import build_fallback_tree
from .generators import GENERATORS
from .handlers import (
    completion_filenames,
    generate_completions,
    get_command_tree,
    get_default_path,
    write_completion_files,
)
from .models import ArgumentNode, CommandNode, DynamicCompletion, OptionNode

__all__ = [
    "GENERATORS",
    "ArgumentNode",
    "CommandNode",
    "DynamicCompletion",
    "OptionNode",
    "build_fallback_tree",
    "completion_filenames",
    "generate_completions",
    "get_command_tree",
    "get_default_path",
    "walk_command_tree",
    "write_completion_files",
]
