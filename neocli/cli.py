"""Command line entry point of neo."""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

import click

from .ansi import StatusMarks, colorize, should_colorize
from .config import Configuration, load_config
from .constants import ALIAS_NAME, CLI_NAME, SUPPORTED_SHELLS, Shell
from .completions import generate_completions, get_command_tree, get_default_path, write_completion_files
from .logging_setup import get_logger, init_logger
from .models import ExitCode, NeoError

__all__ = ["cli", "detect_shell", "main"]

log = get_logger(CLI_NAME)


def detect_shell() -> str:
    """Guess the user's shell from $SHELL, defaulting to zsh."""
    shell = os.environ.get("SHELL", "")
    for candidate in (Shell.ZSH, Shell.FISH, Shell.BASH):
        if candidate.value in shell:
            return candidate.value
    return Shell.ZSH.value


def _status(mark: tuple[str, str], message: str, err: bool = False) -> None:
    symbol, color = mark
    stream = sys.stderr if err else sys.stdout
    if should_colorize(stream):
        symbol = colorize(symbol, color)
    click.echo(f"{symbol} {message}", err=err)


def _display_path(path: str | Path) -> str:
    path = str(path)
    home = os.path.expanduser("~")
    if path.startswith(home + os.sep):
        return "~" + path[len(home) :]
    return path


def _alias(config: Configuration) -> str | None:
    return ALIAS_NAME if config.alias_enabled else None


def _success_message(shell: str, output_path: str, used_default: bool) -> str:
    """Return the message shown after writing a single script."""
    display_path = _display_path(output_path)

    if not used_default:
        return f"Completions written to {display_path}"

    if shell == Shell.BASH:
        return f"Completions installed to {display_path}\nReload your shell or run: source ~/.bashrc"

    if shell == Shell.ZSH:
        return (
            f"Completions installed to {display_path}\n"
            "Ensure ~/.zsh/completions is in your fpath. Add to ~/.zshrc:\n"
            "  fpath=(~/.zsh/completions $fpath)\n"
            "  autoload -Uz compinit && compinit\n"
            "Then reload your shell."
        )

    return f"Completions installed to {display_path}\nReload your shell or run: source ~/.config/fish/config.fish"


def _activation_hint(shell: str, directory: Path) -> str:
    """Return the snippet activating the installed files for `shell`."""
    display_dir = _display_path(directory)
    if shell == Shell.ZSH:
        return (
            "Add to ~/.zshrc:\n"
            f"  fpath=({display_dir} $fpath)\n"
            "  autoload -Uz compinit && compinit\n"
            "Restart your terminal or run: source ~/.zshrc"
        )
    if shell == Shell.BASH:
        return f"Add to ~/.bashrc:\n  source {display_dir}/{CLI_NAME}.bash\nRestart your terminal or run: source ~/.bashrc"
    return (
        "Add to ~/.config/fish/config.fish:\n"
        f"  source {display_dir}/{CLI_NAME}.fish\n"
        "Completions are available in new Fish sessions"
    )


@click.group(name=CLI_NAME, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="enable verbose logging")
@click.option("-c", "--config", "config_path", metavar="PATH", help="path to config file")
@click.option("--no-color", is_flag=True, help="disable colored output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: str | None, no_color: bool) -> None:
    """Neo CLI."""
    if no_color:
        os.environ["NO_COLOR"] = "1"
    init_logger(force_debug=verbose)
    try:
        ctx.obj = load_config(log, config_path or "")
    except NeoError:
        ctx.exit(ExitCode.ENV_ERROR)


@cli.group(invoke_without_command=True)
@click.pass_context
def completions(ctx: click.Context) -> None:
    """Generate or install shell completions.

    Without a subcommand, prints the script for the shell found in $SHELL.
    """
    if ctx.invoked_subcommand is not None:
        return
    shell = detect_shell()
    log.debug("Detected shell: %s", shell)
    click.echo(generate_completions(get_command_tree(cli), shell, _alias(ctx.obj)), nl=False)


@completions.command()
@click.argument("shell", type=click.Choice(SUPPORTED_SHELLS))
@click.option("-o", "--output", metavar="default|PATH", help="write to 'default' or an absolute path")
@click.option("--fallback", is_flag=True, help="use the built-in command tree")
@click.pass_obj
def show(config: Configuration, shell: str, output: str | None, fallback: bool) -> None:
    """Print the completion script for a shell."""
    root = get_command_tree(None if fallback else cli)
    content = generate_completions(root, shell, _alias(config))

    if output is None:
        click.echo(content, nl=False)
        return

    if output == "default":
        output_path = get_default_path(shell)
        used_default = True
    elif output.startswith(("/", "~")):
        output_path = os.path.expanduser(output)
        used_default = False
    else:
        raise click.BadParameter("Relative paths not supported. Use absolute path, ~/path, or 'default'.", param_hint="'--output'")

    log.debug("Writing completions to: %s", output_path)
    try:
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        Path(output_path).write_text(content, encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Failed to write completion file: {e}") from e

    _status(StatusMarks.SUCCESS, _success_message(shell, output_path, used_default))


@completions.command()
@click.option("-d", "--dir", "directory", metavar="PATH", help="directory receiving the completion files")
@click.pass_obj
def install(config: Configuration, directory: str | None) -> None:
    """Install completions for the current shell."""
    target = Path(os.path.expandvars(directory)).expanduser() if directory else config.completions_dir
    shell = detect_shell()
    try:
        written = asyncio.run(write_completion_files(target, get_command_tree(cli), _alias(config)))
    except OSError as e:
        raise click.ClickException(f"Failed to write completion files: {e}") from e

    for path in written:
        _status(StatusMarks.INFO, f"Created {_display_path(path)}")
    _status(StatusMarks.SUCCESS, f"{shell} completions installed to {_display_path(target)}")
    click.echo(_activation_hint(shell, target))


def main() -> None:
    """Run the neo command line."""
    cli()
