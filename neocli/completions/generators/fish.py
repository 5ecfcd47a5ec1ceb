"""Fish completion script generator.

Fish has no nested completion functions: every rule is a standalone
`complete` directive guarded by a condition on the subcommands already typed.
"""

from __future__ import annotations

from ...constants import ALIAS_NAME
from ..models import DYNAMIC_COMPLETIONS, CommandNode, OptionNode
from ..sources import SourceKind, resolve_argument_source

__all__ = ["escape_fish", "fish_condition", "generate_fish"]

_NO_SUBCOMMAND = "__fish_use_subcommand"


def escape_fish(text: str) -> str:
    """Escape text for use inside a single quoted fish string."""
    return text.replace("\\", "\\\\").replace("'", "\\'")


def fish_condition(path: tuple[str, ...]) -> str:
    """Return the guard matching the subcommand chain `path`.

    The root level (empty path) matches while no subcommand was typed yet.
    """
    if not path:
        return _NO_SUBCOMMAND
    return "; and ".join(f"__fish_seen_subcommand_from {name}" for name in path)


def _option_rule(name: str, opt: OptionNode, condition: str) -> str:
    parts = [f"complete -c {name}", f'-n "{condition}"']
    if opt.short:
        parts.append(f"-s {opt.short}")
    parts.append(f"-l {opt.long}")
    parts.append(f"-d '{escape_fish(opt.description)}'")
    if opt.choices:
        parts.append(f"-r -f -a '{escape_fish(' '.join(opt.choices))}'")
    elif not opt.is_boolean:
        parts.append("-r")
    return " ".join(parts)


def _emit_argument_rules(lines: list[str], name: str, node: CommandNode, condition: str) -> None:
    """Add candidates for the positional arguments of a leaf command."""
    for arg in node.arguments:
        source = resolve_argument_source(arg, node)
        if source.kind == SourceKind.DYNAMIC and source.dynamic:
            candidates = f"({source.dynamic.function_name})"
        elif source.kind == SourceKind.CHOICES:
            candidates = escape_fish(" ".join(source.values))
        else:
            continue
        lines.append(f"complete -c {name} -n \"{condition}\" -f -a '{candidates}' -d '{escape_fish(arg.description or arg.name)}'")
    if node.allow_unknown_option:
        lines.append(f'complete -c {name} -n "{condition}" -F')


def _emit_command(lines: list[str], name: str, node: CommandNode, path: tuple[str, ...]) -> None:
    condition = fish_condition(path)

    if not path:
        for opt in node.options:
            lines.append(_option_rule(name, opt, _NO_SUBCOMMAND))
        lines.append("")
        if node.is_leaf:
            _emit_argument_rules(lines, name, node, _NO_SUBCOMMAND)

    for sub in node.subcommands:
        lines.append(f"complete -c {name} -n \"{condition}\" -f -a {sub.name} -d '{escape_fish(sub.description)}'")
    if node.subcommands:
        lines.append("")

    for sub in node.subcommands:
        sub_path = (*path, sub.name)
        sub_condition = fish_condition(sub_path)
        for opt in sub.options:
            lines.append(_option_rule(name, opt, sub_condition))
        if sub.subcommands:
            _emit_command(lines, name, sub, sub_path)
        else:
            _emit_argument_rules(lines, name, sub, sub_condition)


def generate_fish(root: CommandNode, alias: str | None = ALIAS_NAME) -> str:
    """Generate fish completion script content.

    Args:
        root: The root of the command tree
        alias: Secondary command name sharing the completions, if any

    Returns:
        The fish completion script content
    """
    name = root.name
    lines = [
        f"# Fish completion for {name} (auto-generated)",
        f"# Do not edit manually - regenerate with: {name} completions fish",
        "",
    ]

    for dc in DYNAMIC_COMPLETIONS.values():
        lines.append(f"function {dc.function_name} -d '{escape_fish(dc.description)}'")
        lines.append(f"  {dc.shell_command}")
        lines.append("end")
        lines.append("")

    lines.append("# Clear existing completions")
    lines.append(f"complete -c {name} -e")
    lines.append("")

    _emit_command(lines, name, root, ())

    if alias:
        lines.append("")
        lines.append(f"# Alias '{alias}' completions")
        lines.append(f"complete -c {alias} -w {name}")
    lines.append("")
    return "\n".join(lines)
