"""Tests for the completion IR and its extraction from click commands."""

from __future__ import annotations

from unittest.mock import Mock

import click
import pytest

from neocli.completions import discovery
from neocli.completions.discovery import walk_command_tree
from neocli.completions.fallback import build_fallback_tree
from neocli.completions.models import DYNAMIC_COMPLETIONS, CommandNode


class TestCommandNode:
    """Tree helpers of the IR."""

    def test_find(self, sample_tree: CommandNode) -> None:
        assert sample_tree.find("git", "worktree", "add").name == "add"
        assert sample_tree.find() is sample_tree
        assert sample_tree.find("git", "nope") is None

    def test_walk_is_pre_order(self, sample_tree: CommandNode) -> None:
        paths = [path for path, _ in sample_tree.walk()]
        assert paths[0] == ()
        assert paths.index(("git",)) < paths.index(("git", "worktree")) < paths.index(("git", "worktree", "add"))

    def test_is_leaf(self, sample_tree: CommandNode) -> None:
        assert sample_tree.find("list").is_leaf
        assert not sample_tree.find("git").is_leaf

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DYNAMIC_COMPLETIONS["tags"] = DYNAMIC_COMPLETIONS["branches"]  # type: ignore[index]


class TestWalker:
    """Extraction from a live click program."""

    @pytest.fixture
    def tree(self, sample_program: click.Group) -> CommandNode:
        return walk_command_tree(sample_program)

    def test_root(self, tree: CommandNode) -> None:
        assert tree.name == "neo"
        assert tree.description == "Neo CLI"

    def test_help_and_hidden_are_skipped(self, tree: CommandNode) -> None:
        assert [sub.name for sub in tree.subcommands] == ["git"]
        assert all(node.name != "help" for _, node in tree.walk())

    def test_hidden_options_are_skipped(self, tree: CommandNode) -> None:
        assert [opt.long for opt in tree.options] == ["verbose", "config"]

    def test_boolean_option(self, tree: CommandNode) -> None:
        verbose = tree.options[0]
        assert verbose.is_boolean
        assert verbose.short == "v"
        assert verbose.arg_name is None
        assert verbose.flags == "-v, --verbose"

    def test_valued_option(self, tree: CommandNode) -> None:
        config = tree.options[1]
        assert not config.is_boolean
        assert config.required
        assert config.arg_name == "config"
        assert config.flags == "-c, --config <config>"

    def test_choices(self, tree: CommandNode) -> None:
        commit = tree.find("git", "commit")
        assert commit.options[0].choices == ("feat", "fix")

    def test_variadic_argument_and_unknown_options(self, tree: CommandNode) -> None:
        push = tree.find("git", "push")
        assert push.allow_unknown_option
        assert push.arguments[0].name == "args"
        assert push.arguments[0].variadic
        assert not tree.find("git", "commit").allow_unknown_option

    def test_nested_group(self, tree: CommandNode) -> None:
        add = tree.find("git", "worktree", "add")
        assert add.is_leaf
        assert add.arguments[0].name == "branch"
        assert add.arguments[0].required

    def test_siblings_are_unique(self, tree: CommandNode) -> None:
        for _, node in tree.walk():
            names = [sub.name for sub in node.subcommands]
            assert len(names) == len(set(names))

    def test_duplicate_option_keeps_first(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(discovery, "log", Mock())

        dup = click.Command(
            "dup",
            params=[click.Option(["--name"], help="first"), click.Option(["--name", "other"], help="second")],
        )

        node = walk_command_tree(dup)
        assert [opt.description for opt in node.options] == ["first"]
        discovery.log.warning.assert_called_once()

    def test_cycle(self) -> None:
        root = click.Group(name="neo")
        child = click.Group(name="loop")
        root.add_command(child)
        child.add_command(root, name="back")
        with pytest.raises(ValueError, match="cycle"):
            walk_command_tree(root)

    def test_no_name(self) -> None:
        with pytest.raises(ValueError):
            walk_command_tree(click.Command(name=None))

    def test_deterministic(self, sample_program: click.Group) -> None:
        assert walk_command_tree(sample_program) == walk_command_tree(sample_program)


class TestFallbackTree:
    """The built-in command tree."""

    def test_top_level(self) -> None:
        names = {sub.name for sub in build_fallback_tree().subcommands}
        assert {"init", "config", "git", "update", "agent"} <= names

    def test_valued_options_carry_arg_name(self) -> None:
        commit = build_fallback_tree().find("git", "commit")
        by_long = {opt.long: opt for opt in commit.options}
        assert by_long["type"].arg_name == "type"
        assert by_long["type"].flags == "-t, --type <type>"
        assert by_long["type"].choices
        assert by_long["breaking"].is_boolean

    def test_siblings_are_unique(self) -> None:
        for _, node in build_fallback_tree().walk():
            names = [sub.name for sub in node.subcommands]
            assert len(names) == len(set(names))


def test_long_description_is_kept() -> None:
    text = "Synchronize every worktree with its upstream branch, even when the summary runs past eighty chars"

    @click.command(name="sync", help=f"{text}\n\nDetails that stay out of the completion.")
    def sync():
        pass

    assert walk_command_tree(sync).description == text
