"""Hard-coded command tree of the neo CLI.

Used when no live click command is available (e.g. generating completions
while packaging). Keep it in sync with the public command surface.
"""

from __future__ import annotations

from ..constants import CLI_NAME
from .models import COMMIT_TYPES, ArgumentNode, CommandNode, OptionNode

__all__ = ["build_fallback_tree"]


def _flag(long: str, description: str, short: str | None = None) -> OptionNode:
    flags = f"-{short}, --{long}" if short else f"--{long}"
    return OptionNode(flags=flags, long=long, short=short, description=description)


def _valued(  # noqa: PLR0913
    long: str,
    description: str,
    arg_name: str,
    short: str | None = None,
    variadic: bool = False,
    choices: tuple[str, ...] | None = None,
) -> OptionNode:
    dots = "..." if variadic else ""
    flags = f"-{short}, --{long} <{arg_name}{dots}>" if short else f"--{long} <{arg_name}{dots}>"
    return OptionNode(
        flags=flags,
        long=long,
        short=short,
        description=description,
        required=True,
        is_boolean=False,
        is_variadic=variadic,
        arg_name=arg_name,
        choices=choices,
    )


_PR_OPTIONS = (
    _valued("title", "PR title", "title", short="t"),
    _valued("body", "PR description", "body", short="b"),
    _valued("base", "base branch for the PR", "branch", short="B"),
    _flag("draft", "create as draft PR", short="d"),
    _valued("reviewer", "request reviewers", "reviewers", short="r", variadic=True),
    _valued("label", "add labels", "labels", short="l", variadic=True),
    _flag("web", "open PR in browser after creation", short="w"),
)

_CONFIG_KEY = ArgumentNode("key", "configuration key (supports dot notation, e.g., preferences.banner)")
_PROFILE_NAME = ArgumentNode("name", "profile name")


def build_fallback_tree() -> CommandNode:
    """Return the command tree of the neo CLI."""
    return CommandNode(
        name=CLI_NAME,
        description="Neo CLI",
        options=(
            _flag("verbose", "enable verbose logging", short="v"),
            _valued("config", "path to config file", "path", short="c"),
            _flag("no-color", "disable colored output"),
            _flag("no-banner", "hide banner"),
        ),
        subcommands=(
            CommandNode(
                "init",
                "Install and configure Neo CLI globally",
                options=(
                    _flag("force", "force reconfiguration if already initialized"),
                    _flag("skip-install", "skip global installation (configuration only)"),
                ),
            ),
            CommandNode(
                "config",
                "Manage configuration",
                subcommands=(
                    CommandNode("get", "Get a configuration value", arguments=(_CONFIG_KEY,)),
                    CommandNode(
                        "set",
                        "Set a configuration value",
                        arguments=(_CONFIG_KEY, ArgumentNode("value", "configuration value")),
                    ),
                    CommandNode("list", "List all configuration values"),
                    CommandNode(
                        "profile",
                        "Manage configuration profiles",
                        subcommands=(
                            CommandNode("list", "List all configuration profiles"),
                            CommandNode(
                                "create",
                                "Create a new configuration profile",
                                options=(_valued("from", "copy configuration from existing profile", "profile", short="f"),),
                                arguments=(_PROFILE_NAME,),
                            ),
                            CommandNode("use", "Switch to a configuration profile", arguments=(_PROFILE_NAME,)),
                            CommandNode("delete", "Delete a configuration profile", arguments=(_PROFILE_NAME,)),
                            CommandNode(
                                "show",
                                "Show profile configuration",
                                arguments=(ArgumentNode("name", "profile name (defaults to active profile)", required=False),),
                            ),
                            CommandNode(
                                "export",
                                "Export a profile to JSON",
                                options=(_valued("output", "output file (defaults to stdout)", "file", short="o"),),
                                arguments=(_PROFILE_NAME,),
                            ),
                            CommandNode(
                                "import",
                                "Import a profile from JSON file",
                                options=(_valued("name", "profile name (defaults to filename)", "name", short="n"),),
                                arguments=(ArgumentNode("file", "JSON file to import"),),
                            ),
                        ),
                    ),
                ),
            ),
            CommandNode(
                "git",
                "Git operations and utilities",
                subcommands=(
                    CommandNode(
                        "commit",
                        "Create a conventional commit with interactive wizard",
                        options=(
                            _valued("type", "commit type", "type", short="t", choices=COMMIT_TYPES),
                            _valued("scope", "commit scope (optional)", "scope", short="s"),
                            _valued("message", "commit message description", "message", short="m"),
                            _valued("body", "commit body (optional)", "body", short="b"),
                            _flag("breaking", "mark as breaking change"),
                            _flag("all", "automatically stage all modified files", short="a"),
                        ),
                    ),
                    CommandNode(
                        "push",
                        "Push changes to remote repository",
                        options=(
                            _flag("force", "force push (overwrites remote)", short="f"),
                            _valued("set-upstream", "set upstream branch", "branch", short="u"),
                            _flag("dry-run", "show what would be pushed without actually pushing"),
                            _flag("tags", "push tags along with commits"),
                        ),
                    ),
                    CommandNode(
                        "pull",
                        "Pull changes from remote repository with automatic rebase fallback",
                        options=(
                            _flag("rebase", "force rebase strategy"),
                            _flag("no-rebase", "prevent automatic rebase fallback"),
                        ),
                    ),
                    CommandNode(
                        "branch",
                        "Analyze and manage local git branches",
                        options=(
                            _flag("dry-run", "show what would be deleted without actually deleting"),
                            _flag("force", "force delete branches without confirmation prompts"),
                        ),
                    ),
                    CommandNode("stash", "Interactively manage git stashes"),
                    CommandNode(
                        "worktree",
                        "Manage git worktrees",
                        subcommands=(
                            CommandNode(
                                "add",
                                "Create a worktree for a branch",
                                options=(
                                    _valued("branch", "create a new branch", "name", short="b"),
                                    _flag("detach", "detach HEAD at the commit", short="d"),
                                    _flag("force", "force creation even if branch is checked out", short="f"),
                                    _flag("lock", "lock the worktree after creation"),
                                    _valued("path", "custom path for worktree", "path", short="p"),
                                ),
                                arguments=(ArgumentNode("branch", "branch name or commit to checkout"),),
                            ),
                            CommandNode("list", "List all worktrees"),
                            CommandNode(
                                "remove",
                                "Remove a worktree",
                                options=(_flag("force", "force removal even if dirty or locked", short="f"),),
                                arguments=(ArgumentNode("path", "path to the worktree to remove"),),
                            ),
                            CommandNode("switch", "Interactively select and switch to a worktree"),
                        ),
                    ),
                ),
            ),
            CommandNode(
                "gh",
                "GitHub CLI operations",
                subcommands=(
                    CommandNode(
                        "pr",
                        "Pull request operations",
                        subcommands=(CommandNode("create", "Create a pull request on GitHub", options=_PR_OPTIONS),),
                    ),
                ),
            ),
            CommandNode("pr", "Create a pull request (alias for gh pr create)", options=_PR_OPTIONS),
            CommandNode(
                "alias",
                "Manage shell aliases for Neo CLI",
                subcommands=(
                    CommandNode(
                        "setup",
                        "Setup ZSH aliases for Neo CLI (gp, gpu)",
                        options=(_flag("force", "skip confirmation and overwrite conflicting aliases", short="f"),),
                    ),
                ),
            ),
            CommandNode(
                "update",
                "Update Neo CLI to the latest version",
                options=(
                    _flag("check-only", "only check for updates without installing"),
                    _flag("force", "force update even if already on latest version"),
                ),
            ),
            CommandNode(
                "agent",
                "Manage AI agent context and configuration",
                subcommands=(
                    CommandNode(
                        "init",
                        "Initialize agent context management in the current project",
                        options=(
                            _valued("project", "project name", "name"),
                            _flag("force", "force initialization even if already initialized"),
                        ),
                    ),
                    CommandNode(
                        "context",
                        "Manage agent contexts",
                        subcommands=(
                            CommandNode(
                                "add",
                                "Add a new context item",
                                options=(
                                    _valued("tag", "tags to assign", "tags", variadic=True),
                                    _valued(
                                        "priority",
                                        "priority level",
                                        "priority",
                                        choices=("low", "medium", "high", "critical"),
                                    ),
                                ),
                                arguments=(ArgumentNode("content", "context content"),),
                            ),
                            CommandNode(
                                "list",
                                "List context items",
                                options=(
                                    _valued("tag", "filter by tag", "tag"),
                                    _valued("priority", "filter by priority", "priority"),
                                ),
                            ),
                            CommandNode("remove", "Remove a context item", arguments=(ArgumentNode("id", "context ID to remove"),)),
                        ),
                    ),
                ),
            ),
            CommandNode(
                "completions",
                "Generate or install shell completions",
                subcommands=(
                    CommandNode(
                        "show",
                        "Print the completion script for a shell",
                        options=(
                            _valued("output", "write to 'default' or an absolute path", "path", short="o"),
                            _flag("fallback", "use the built-in command tree"),
                        ),
                        arguments=(ArgumentNode("shell", "shell type", choices=("zsh", "bash", "fish")),),
                    ),
                    CommandNode(
                        "install",
                        "Install completions for the current shell",
                        options=(_valued("dir", "directory receiving the completion files", "path", short="d"),),
                    ),
                ),
            ),
        ),
    )
