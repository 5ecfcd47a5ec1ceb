"""Argument completion sources.

Decides where the candidates of a positional argument come from. Every
generator goes through `resolve_argument_source`, so the name based rules
below are the only place to change when arguments start declaring their
source explicitly (see `ArgumentNode.completion`).
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import CONFIG_KEYS, DYNAMIC_COMPLETIONS, ArgumentNode, CommandNode, DynamicCompletion

__all__ = [
    "GIT_CONTEXT_COMMANDS",
    "CompletionSource",
    "SourceKind",
    "resolve_argument_source",
]

# Parent commands whose "name" argument is a git branch
GIT_CONTEXT_COMMANDS = frozenset({"add", "remove", "switch", "branch"})

# Parent commands whose "key" argument is a configuration key
CONFIG_KEY_COMMANDS = frozenset({"get", "set"})


class SourceKind:
    """Kinds of argument completion sources."""

    DYNAMIC = "dynamic"  # Shell helper function, evaluated at completion time
    CHOICES = "choices"  # Fixed list baked into the script
    FREE = "free"  # No candidates


@dataclass(frozen=True)
class CompletionSource:
    """Where the candidates of an argument come from."""

    kind: str
    values: tuple[str, ...] = ()
    dynamic: DynamicCompletion | None = None


_FREE = CompletionSource(SourceKind.FREE)


def _dynamic(key: str) -> CompletionSource:
    return CompletionSource(SourceKind.DYNAMIC, dynamic=DYNAMIC_COMPLETIONS[key])


def resolve_argument_source(argument: ArgumentNode, parent: CommandNode) -> CompletionSource:
    """Return the completion source of `argument` declared on `parent`.

    Rules, first match wins:
    - an explicit `completion` naming a dynamic source
    - `branch`, or `name` under a git-ish parent: git branches
    - `remote`: git remotes
    - declared choices
    - `key` under a get/set parent: configuration keys
    - anything else: free text
    """
    if argument.completion is not None:
        return _dynamic(argument.completion)

    if argument.name == "branch" or (argument.name == "name" and parent.name in GIT_CONTEXT_COMMANDS):
        return _dynamic("branches")

    if argument.name == "remote":
        return _dynamic("remotes")

    if argument.choices:
        return CompletionSource(SourceKind.CHOICES, values=tuple(argument.choices))

    if argument.name == "key" and parent.name in CONFIG_KEY_COMMANDS:
        return CompletionSource(SourceKind.CHOICES, values=CONFIG_KEYS)

    return _FREE
