" generic fixtures "
from unittest.mock import Mock
import logging

import click
import pytest

from neocli.completions.models import ArgumentNode, CommandNode, OptionNode


def pytest_configure():
    "Runs once before all"
    from neocli.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def sample_program() -> click.Group:
    "A small click program covering every kind of parameter"

    @click.group(name="neo")
    @click.option("-v", "--verbose", is_flag=True, help="enable verbose logging")
    @click.option("-c", "--config", help="path to config file")
    @click.option("--secret", hidden=True)
    def root(**_):
        "Neo CLI"

    @root.group()
    def git():
        "Git operations and utilities"

    @git.command()
    @click.option("-t", "--type", type=click.Choice(["feat", "fix"]), help="commit type")
    @click.option("--breaking", is_flag=True, help="mark as breaking change")
    def commit(**_):
        "Create a conventional commit"

    @git.command(context_settings={"ignore_unknown_options": True})
    @click.option("-f", "--force", is_flag=True, help="force push")
    @click.argument("args", nargs=-1, type=click.UNPROCESSED)
    def push(**_):
        "Push changes"

    @git.group()
    def worktree():
        "Manage git worktrees"

    @worktree.command()
    @click.argument("branch")
    def add(**_):
        "Create a worktree for a branch"

    @root.command(name="help")
    def help_command():
        "Show help"

    @root.command(hidden=True)
    def internal():
        "Not for users"

    return root


@pytest.fixture
def sample_tree() -> CommandNode:
    "A hand written IR"
    return CommandNode(
        name="neo",
        description="Neo CLI",
        options=(OptionNode(flags="-v, --verbose", long="verbose", short="v", description="enable verbose logging"),),
        subcommands=(
            CommandNode(
                "git",
                "Git operations and utilities",
                subcommands=(
                    CommandNode(
                        "commit",
                        "Create a conventional commit",
                        options=(
                            OptionNode(
                                flags="-t, --type <type>",
                                long="type",
                                short="t",
                                description="commit type",
                                required=True,
                                is_boolean=False,
                                arg_name="type",
                                choices=("feat", "fix"),
                            ),
                        ),
                    ),
                    CommandNode("push", "Push changes", arguments=(ArgumentNode("args", "git arguments", required=False, variadic=True),)),
                    CommandNode(
                        "worktree",
                        "Manage git worktrees",
                        subcommands=(CommandNode("add", "Create a worktree", arguments=(ArgumentNode("branch", "branch to checkout"),)),),
                    ),
                ),
            ),
            CommandNode("list", "List things"),
        ),
    )


@pytest.fixture
def test_logger() -> Mock:
    "A logger recording its calls"
    return Mock(spec=logging.Logger)
