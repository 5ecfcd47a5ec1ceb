"""Command completion discovery.

Walks a live click command tree and turns it into the completion IR.
"""

from __future__ import annotations

import click

from ..logging_setup import get_logger
from .models import ArgumentNode, CommandNode, OptionNode

__all__ = ["walk_command_tree"]

# click's auto generated help is never a real subcommand
_HELP_COMMAND = "help"

log = get_logger("neo.completions")


def _split_opts(option: click.Option) -> tuple[str, str | None]:
    """Return the (long, short) names of an option, without dashes.

    Options declared without a long form fall back to their parameter name.
    """
    long_name = ""
    short_name = None
    for opt in option.opts:
        if opt.startswith("--"):
            long_name = long_name or opt[2:]
        elif opt.startswith("-") and len(opt) == 2:  # noqa: PLR2004
            short_name = short_name or opt[1:]
    if not long_name:
        long_name = (option.name or "").replace("_", "-")
    return long_name, short_name


def _choices(param_type: click.ParamType) -> tuple[str, ...] | None:
    if isinstance(param_type, click.Choice):
        return tuple(str(choice) for choice in param_type.choices)
    return None


def _build_option(option: click.Option) -> OptionNode:
    """Build an OptionNode from a click option."""
    long_name, short_name = _split_opts(option)
    is_boolean = bool(option.is_flag or option.count)
    flags = ", ".join([*option.opts, *option.secondary_opts])
    if not is_boolean:
        flags += f" <{long_name}>"
    return OptionNode(
        flags=flags,
        long=long_name,
        short=short_name,
        description=option.help or "",
        required=not is_boolean,
        is_boolean=is_boolean,
        is_variadic=bool(option.multiple or option.nargs == -1),
        arg_name=None if is_boolean else long_name,
        choices=_choices(option.type),
    )


def _build_argument(argument: click.Argument) -> ArgumentNode:
    """Build an ArgumentNode from a click argument."""
    return ArgumentNode(
        name=argument.name or argument.human_readable_name.lower(),
        description=getattr(argument, "help", None) or "",
        required=argument.required,
        variadic=argument.nargs == -1,
        choices=_choices(argument.type),
    )


def _description(command: click.Command) -> str:
    """Return the first paragraph of the command help, on one line."""
    text = command.short_help or (command.help or "").split("\f", 1)[0]
    return " ".join(text.strip().split("\n\n", 1)[0].split())


def _accepts_unknown_options(command: click.Command) -> bool:
    if command.context_settings.get("ignore_unknown_options"):
        return True
    return bool(getattr(command, "ignore_unknown_options", False))


def _walk(command: click.Command, name: str, ancestors: tuple[int, ...]) -> CommandNode:
    if id(command) in ancestors:
        msg = f"Command tree has a cycle at {name!r}"
        raise ValueError(msg)
    ancestors = (*ancestors, id(command))

    options: dict[str, OptionNode] = {}
    arguments: list[ArgumentNode] = []
    for param in command.params:
        if isinstance(param, click.Option):
            if param.hidden:
                continue
            opt_node = _build_option(param)
            if opt_node.long in options:
                log.warning("Duplicate option --%s on %s, keeping the first one", opt_node.long, name)
                continue
            options[opt_node.long] = opt_node
        elif isinstance(param, click.Argument):
            arguments.append(_build_argument(param))

    subcommands: list[CommandNode] = []
    if isinstance(command, click.Group):
        for sub_name, sub in command.commands.items():
            if sub_name == _HELP_COMMAND or sub.hidden:
                continue
            subcommands.append(_walk(sub, sub_name, ancestors))

    return CommandNode(
        name=name,
        description=_description(command),
        options=tuple(options.values()),
        arguments=tuple(arguments),
        subcommands=tuple(subcommands),
        allow_unknown_option=_accepts_unknown_options(command),
    )


def walk_command_tree(command: click.Command) -> CommandNode:
    """Convert a click command (usually the root group) into a CommandNode tree.

    Args:
        command: The command to walk

    Returns:
        The root CommandNode, named after the command

    Raises:
        ValueError: If the command has no name or the group graph has a cycle
    """
    if not command.name:
        msg = "Cannot build completions for a command without a name"
        raise ValueError(msg)
    return _walk(command, command.name, ())
