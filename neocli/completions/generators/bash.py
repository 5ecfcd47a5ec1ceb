"""Bash completion script generator.

Bash completion is driven by word position: the dispatcher switches on the
first word, then on the second one. Anything deeper is completed with the
union of that subcommand's children and options.

The dynamic helpers are emitted but not wired into argument positions.
"""

from __future__ import annotations

from ...constants import ALIAS_NAME
from ..models import COMMIT_TYPES, DYNAMIC_COMPLETIONS, CommandNode

__all__ = ["escape_bash", "generate_bash"]

# Options whose value is a conventional commit type
_COMMIT_TYPE_FLAGS = ("--type", "-t")


def escape_bash(word: str) -> str:
    """Escape a word for use inside a double quoted `compgen -W` list."""
    for char in ("\\", '"', "$", "`"):
        word = word.replace(char, f"\\{char}")
    return word


def _words(*groups: list[str]) -> str:
    return " ".join(escape_bash(word) for group in groups for word in group)


def _option_words(node: CommandNode) -> list[str]:
    return [f"--{opt.long}" for opt in node.options]


def _child_words(node: CommandNode) -> list[str]:
    return [sub.name for sub in node.subcommands]


def _compreply(indent: str, words: str) -> str:
    return f'{indent}COMPREPLY=($(compgen -W "{words}" -- "$cur"))'


def _is_commit_context(parent: CommandNode, leaf: CommandNode) -> bool:
    return parent.name == "git" and leaf.name == "commit"


def _emit_leaf(lines: list[str], parent: CommandNode, leaf: CommandNode, indent: str) -> None:
    """Complete the options of a leaf command."""
    opts = _words(_option_words(leaf))
    if _is_commit_context(parent, leaf):
        test = " || ".join(f'"$prev" == "{flag}"' for flag in _COMMIT_TYPE_FLAGS)
        lines.append(f"{indent}if [[ {test} ]]; then")
        lines.append(_compreply(indent + "  ", _words(list(COMMIT_TYPES))))
        lines.append(f"{indent}else")
        lines.append(_compreply(indent + "  ", opts))
        lines.append(f"{indent}fi")
    else:
        lines.append(_compreply(indent, opts))
    if leaf.allow_unknown_option:
        lines.append(f'{indent}COMPREPLY+=($(compgen -f -- "$cur"))')


def _emit_second_level(lines: list[str], node: CommandNode, indent: str) -> None:
    """Complete below a first level command that has subcommands."""
    lines.append(f"{indent}if [[ $cword -eq 2 ]]; then")
    lines.append(_compreply(indent + "  ", _words(_child_words(node), _option_words(node))))
    lines.append(f"{indent}  return")
    lines.append(f"{indent}fi")
    lines.append(f'{indent}case "${{words[2]}}" in')
    for sub in node.subcommands:
        lines.append(f"{indent}  {sub.name})")
        if sub.subcommands:
            # Deeper levels are flattened
            lines.append(_compreply(indent + "    ", _words(_child_words(sub), _option_words(sub))))
        else:
            _emit_leaf(lines, node, sub, indent + "    ")
        lines.append(f"{indent}    ;;")
    lines.append(f"{indent}esac")


def _emit_dispatcher(lines: list[str], root: CommandNode) -> None:
    indent = "  "
    if not root.subcommands:
        _emit_leaf(lines, root, root, indent)
        return

    lines.append(f"{indent}if [[ $cword -eq 1 ]]; then")
    lines.append(_compreply(indent + "  ", _words(_child_words(root), _option_words(root))))
    lines.append(f"{indent}  return")
    lines.append(f"{indent}fi")
    lines.append("")
    lines.append(f'{indent}case "${{words[1]}}" in')
    for sub in root.subcommands:
        lines.append(f"{indent}  {sub.name})")
        if sub.subcommands:
            _emit_second_level(lines, sub, indent + "    ")
        else:
            _emit_leaf(lines, root, sub, indent + "    ")
        lines.append(f"{indent}    ;;")
    lines.append(f"{indent}esac")


def generate_bash(root: CommandNode, alias: str | None = ALIAS_NAME) -> str:
    """Generate bash completion script content.

    Args:
        root: The root of the command tree
        alias: Secondary command name sharing the completions, if any

    Returns:
        The bash completion script content
    """
    name = root.name
    function = f"_{name}_completions"
    lines = [
        "#!/bin/bash",
        "",
        f"# Bash completion for {name} (auto-generated)",
        f"# Do not edit manually - regenerate with: {name} completions bash",
        "",
        "# Dynamic completion helpers",
    ]

    for dc in DYNAMIC_COMPLETIONS.values():
        lines.append(f"{dc.function_name}() {{")
        lines.append(f"  {dc.shell_command}")
        lines.append("}")
        lines.append("")

    lines.append(f"{function}() {{")
    lines.append("  local cur prev words cword")
    lines.append("  _init_completion || return")
    lines.append("")
    _emit_dispatcher(lines, root)
    lines.append("}")
    lines.append("")
    lines.append(f"complete -F {function} {name}")
    if alias:
        lines.append(f"complete -F {function} {alias}")
    lines.append("")
    return "\n".join(lines)
