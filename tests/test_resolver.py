"""Tests for initializer deduplication and phase ordering."""
import itertools

from spectr_cli.core.filesystem import Scope
from spectr_cli.core.resolver import build_plan, deduplicate, order_by_phase, resolve
from spectr_cli.initializers import (
    ConfigFileInitializer,
    DirectoryInitializer,
    GeneratedFileInitializer,
    Initializer,
    SlashCommandsInitializer,
)
from spectr_cli.templates import PROJECT


class UnkeyedInitializer(Initializer):
    """Initializer that opts out of deduplication."""

    kind = "unkeyed"

    @property
    def identity(self):
        return None

    def init(self, project_fs, home_fs, config, templates):
        raise NotImplementedError

    def is_setup(self, project_fs, home_fs, config):
        return False


class TestDeduplicate:

    def test_first_declared_wins(self):
        initializers = [ConfigFileInitializer(f"FILE{i}.md") for i in range(8)]
        first = ConfigFileInitializer("CLAUDE.md")
        second = ConfigFileInitializer("CLAUDE.md")
        initializers[2] = first
        initializers[6] = second

        resolved = resolve(initializers)

        assert len(resolved) == 7
        assert any(i is first for i in resolved)
        assert not any(i is second for i in resolved)
        assert resolved.index(first) == 2

    def test_reports_dropped_duplicates(self):
        winner = DirectoryInitializer(".agents/skills")
        dropped = DirectoryInitializer(".agents/skills/")

        plan = deduplicate([winner, ConfigFileInitializer("AMP.md"), dropped])

        assert plan.has_duplicates()
        assert plan.dropped_count() == 1
        info = plan.duplicates[0]
        assert info.key == "dir:.agents/skills"
        assert info.winner is winner
        assert info.dropped == [dropped]

    def test_same_path_different_kind_is_kept(self):
        plan = deduplicate([DirectoryInitializer("x"), GeneratedFileInitializer("x", PROJECT)])

        assert len(plan.initializers) == 2
        assert not plan.has_duplicates()

    def test_prefix_named_like_a_scope_does_not_collide_with_home(self):
        project = SlashCommandsInitializer("cmds", prefix="home")
        home = SlashCommandsInitializer("cmds", scope=Scope.HOME)

        resolved = resolve([project, home])

        assert resolved == [project, home]
        assert project.key != home.key

    def test_path_ending_in_scope_name_does_not_collide_with_home(self):
        project = ConfigFileInitializer("notes:home")
        home = ConfigFileInitializer("notes", scope=Scope.HOME)

        plan = build_plan([project, home])

        assert plan.initializers == [project, home]
        assert not plan.has_duplicates()

    def test_same_path_in_both_scopes_is_kept(self):
        project = DirectoryInitializer(".codex/prompts")
        home = DirectoryInitializer(".codex/prompts", scope=Scope.HOME)

        assert resolve([project, home, DirectoryInitializer(".codex/prompts", scope=Scope.HOME)]) == [project, home]

    def test_unkeyed_initializers_are_never_dropped(self):
        a, b = UnkeyedInitializer("a"), UnkeyedInitializer("a")
        assert deduplicate([a, b]).initializers == [a, b]

    def test_deterministic_for_every_permutation(self):
        pool = [
            ConfigFileInitializer("AGENTS.md"),
            ConfigFileInitializer("AGENTS.md"),
            DirectoryInitializer("spectr"),
            ConfigFileInitializer("CLAUDE.md"),
        ]

        for permutation in itertools.permutations(pool):
            first = resolve(permutation)
            second = resolve(permutation)
            assert [id(i) for i in first] == [id(i) for i in second]

            agents = [i for i in permutation if i.key == "config:AGENTS.md"][0]
            assert agents in first
            assert sorted(i.key for i in first) == ["config:AGENTS.md", "config:CLAUDE.md", "dir:spectr"]


class TestPhaseOrdering:

    def test_directories_then_files_then_commands(self):
        commands = SlashCommandsInitializer(".claude/commands/spectr")
        config = ConfigFileInitializer("CLAUDE.md")
        directory = DirectoryInitializer(".claude/commands/spectr")

        assert order_by_phase([commands, config, directory]) == [directory, config, commands]

    def test_stable_within_a_phase(self):
        files = [ConfigFileInitializer(name) for name in ("Z.md", "A.md", "M.md")]
        dirs = [DirectoryInitializer(name) for name in ("z", "a")]

        ordered = order_by_phase([files[0], dirs[0], files[1], dirs[1], files[2]])

        assert ordered == [dirs[0], dirs[1], files[0], files[1], files[2]]

    def test_build_plan_keys(self):
        plan = build_plan([
            ConfigFileInitializer("CLAUDE.md"),
            DirectoryInitializer("spectr"),
            ConfigFileInitializer("CLAUDE.md"),
        ])

        assert plan.keys() == ["dir:spectr", "config:CLAUDE.md"]
        assert [info.key for info in plan.duplicates] == ["config:CLAUDE.md"]
