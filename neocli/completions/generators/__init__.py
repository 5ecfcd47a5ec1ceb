"""Shell completion generators.

Provides generator functions for each supported shell.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...constants import Shell
from .bash import generate_bash
from .fish import generate_fish
from .zsh import generate_zsh

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..models import CommandNode

__all__ = ["GENERATORS", "generate_bash", "generate_fish", "generate_zsh"]

GENERATORS: dict[Shell, Callable[[CommandNode, str | None], str]] = {
    Shell.ZSH: generate_zsh,
    Shell.BASH: generate_bash,
    Shell.FISH: generate_fish,
}
