"""Zsh completion script generator.

Emits one completion function per command. Children are written before
their parents so every dispatch target is already defined.
"""

from __future__ import annotations

from ...constants import ALIAS_NAME
from ..models import DYNAMIC_COMPLETIONS, ArgumentNode, CommandNode, OptionNode
from ..sources import SourceKind, resolve_argument_source

__all__ = ["escape_zsh", "generate_zsh", "zsh_function_name"]


def escape_zsh(text: str, brackets: bool = False) -> str:
    """Escape text for use inside a single quoted zsh word.

    Args:
        text: Human readable text
        brackets: Also escape `[` and `]` (option specs use them as delimiters)

    Returns:
        The escaped text
    """
    text = text.replace("'", "'\\''")
    if brackets:
        text = text.replace("[", "\\[").replace("]", "\\]")
    return text


def _zsh_words(values: tuple[str, ...] | list[str]) -> str:
    """Join values into the body of a quoted `(...)` action list."""
    words = []
    for value in values:
        word = escape_zsh(value.replace("\\", "\\\\"), brackets=True)
        for char in (" ", "(", ")"):
            word = word.replace(char, f"\\{char}")
        words.append(word)
    return " ".join(words)


def _zsh_message(text: str) -> str:
    """Escape the message field of an argument spec."""
    return escape_zsh(text).replace(":", "\\:")


def zsh_function_name(root_name: str, path: tuple[str, ...] | list[str]) -> str:
    """Return the completion function name of the command at `path`."""
    return "_" + "_".join([root_name, *path])


def _format_option(opt: OptionNode) -> str:
    desc = escape_zsh(opt.description, brackets=True)
    long_flag = f"--{opt.long}"
    if opt.is_boolean:
        return f"{long_flag}[{desc}]"
    arg_name = opt.arg_name or opt.long
    if opt.choices:
        return f"{long_flag}=[{desc}]:{arg_name}:({_zsh_words(opt.choices)})"
    return f"{long_flag}=[{desc}]:{arg_name}:"


def _format_argument(arg: ArgumentNode, position: int, parent: CommandNode) -> str:
    desc = _zsh_message(arg.description or arg.name)
    slot = "*" if arg.variadic else str(position)
    source = resolve_argument_source(arg, parent)
    if source.kind == SourceKind.DYNAMIC and source.dynamic:
        return f"{slot}: :{source.dynamic.function_name}"
    if source.kind == SourceKind.CHOICES:
        return f"{slot}:{desc}:({_zsh_words(source.values)})"
    return f"{slot}:{desc}:"


def _emit_arguments_call(lines: list[str], specs: list[str], flags: str = "") -> None:
    """Append an `_arguments` call with one quoted spec per line."""
    if not specs:
        lines.append("  _message 'no more arguments'")
        return
    head = f"  _arguments {flags}".rstrip()
    lines.append(f"{head} \\")
    for i, spec in enumerate(specs):
        sep = " \\" if i < len(specs) - 1 else ""
        lines.append(f"    '{spec}'{sep}")


def _emit_function(root_name: str, node: CommandNode, lines: list[str], path: tuple[str, ...]) -> None:
    # Children first: post-order emission
    for sub in node.subcommands:
        _emit_function(root_name, sub, lines, (*path, sub.name))

    lines.append(f"{zsh_function_name(root_name, path)}() {{")

    option_specs = [_format_option(opt) for opt in node.options]

    if node.subcommands:
        lines.append("  local context state line")
        lines.append("")
        _emit_arguments_call(lines, ["1: :->cmds", "*::arg:->args", *option_specs], flags="-C")
        lines.append("")
        lines.append("  case $state in")
        lines.append("    cmds)")
        lines.append("      local -a commands")
        lines.append("      commands=(")
        for sub in node.subcommands:
            lines.append(f"        '{sub.name}:{escape_zsh(sub.description)}'")
        lines.append("      )")
        lines.append("      _describe 'commands' commands")
        lines.append("      ;;")
        lines.append("    args)")
        lines.append("      case $words[1] in")
        for sub in node.subcommands:
            lines.append(f"        {sub.name})")
            lines.append(f"          {zsh_function_name(root_name, (*path, sub.name))}")
            lines.append("          ;;")
        lines.append("      esac")
        lines.append("      ;;")
        lines.append("  esac")
    else:
        arg_specs = [_format_argument(arg, pos, node) for pos, arg in enumerate(node.arguments, start=1)]
        if node.allow_unknown_option and not any(arg.variadic for arg in node.arguments):
            arg_specs.append("*::arg:_default")
        _emit_arguments_call(lines, option_specs + arg_specs)

    lines.append("}")
    lines.append("")


def generate_zsh(root: CommandNode, alias: str | None = ALIAS_NAME) -> str:
    """Generate zsh completion script content.

    Args:
        root: The root of the command tree
        alias: Secondary command name sharing the completions, if any

    Returns:
        The zsh completion script content
    """
    name = root.name
    base_function = zsh_function_name(name, ())
    compdef_names = f"{name} {alias}" if alias else name
    lines = [
        f"#compdef {compdef_names}",
        "",
        f"# Zsh completion for {name} (auto-generated)",
        f"# Do not edit manually - regenerate with: {name} completions zsh",
        "",
        "# Dynamic completion helpers",
    ]

    for dc in DYNAMIC_COMPLETIONS.values():
        lines.append(f"{dc.function_name}() {{")
        lines.append("  local -a items")
        lines.append(f'  items=(${{(f)"$({dc.shell_command})"}})')
        lines.append("  compadd -a items")
        lines.append("}")
        lines.append("")

    _emit_function(name, root, lines, ())

    lines.append("# Main completion function")
    lines.append(f'{base_function} "$@"')
    if alias:
        lines.append("")
        lines.append(f"# Also provide completion for '{alias}' alias")
        lines.append(f"compdef {base_function} {alias}")
    lines.append("")
    return "\n".join(lines)
