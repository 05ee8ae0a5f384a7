"""End-to-end tests for the initialization executor."""
import threading

import pytest

from spectr_cli.errors import (
    ConfigError,
    InitializationCancelled,
    InitializationError,
    OrphanedEndMarkerError,
    UnknownProviderError,
)
from spectr_cli.config import InitConfig
from spectr_cli.core.executor import InitExecutor
from spectr_cli.markers import END_MARKER, START_MARKER


class TestExecute:

    def test_claude_from_scratch(self, executor, project_dir):
        execution = executor.execute(["claude"])

        assert execution.succeeded
        assert execution.created_files == [
            "spectr",
            "spectr/specs",
            "spectr/changes",
            ".claude/commands/spectr",
            "spectr/project.md",
            "spectr/AGENTS.md",
            "CLAUDE.md",
            ".claude/commands/spectr/proposal.md",
            ".claude/commands/spectr/apply.md",
        ]
        assert execution.updated_files == []
        assert (project_dir / "CLAUDE.md").read_text().startswith(START_MARKER)
        assert (project_dir / "spectr" / "AGENTS.md").is_file()

    def test_rerun_changes_nothing(self, executor):
        executor.execute(["claude", "gemini"])

        execution = executor.execute(["claude", "gemini"])

        assert execution.succeeded
        assert execution.created_files == []
        assert execution.updated_files == []

    def test_shared_instruction_file_written_once(self, executor, project_dir, home_dir):
        plan = executor.plan(["antigravity", "codex", "kimi"])

        assert plan.keys().count("config:AGENTS.md") == 1
        assert "config:AGENTS.md" in [info.key for info in plan.duplicates]

        execution = executor.run_plan(plan)

        assert execution.succeeded
        assert execution.created_files.count("AGENTS.md") == 1
        assert "config:AGENTS.md" in execution.duplicates
        assert (home_dir / ".codex" / "prompts" / "spectr-proposal.md").is_file()
        assert (project_dir / ".agent" / "workflows" / "spectr-apply.md").is_file()
        assert (project_dir / ".agents" / "skills" / "spectr-proposal" / "SKILL.md").is_file()
        assert not (project_dir / ".codex").exists()

    def test_user_content_survives(self, executor, project_dir):
        (project_dir / "CLAUDE.md").write_text(f"# Team rules\n{START_MARKER}\nstale\n{END_MARKER}\nKeep me\n")

        execution = executor.execute(["claude"])

        content = (project_dir / "CLAUDE.md").read_text()
        assert "CLAUDE.md" in execution.updated_files
        assert content.startswith(f"# Team rules\n{START_MARKER}\n")
        assert content.endswith(f"{END_MARKER}\nKeep me\n")
        assert "stale" not in content

    def test_unknown_provider(self, executor):
        with pytest.raises(UnknownProviderError) as exc_info:
            executor.execute(["does-not-exist"])

        assert isinstance(exc_info.value, KeyError)
        assert "does-not-exist" in str(exc_info.value)

    def test_without_base_initializers(self, executor, project_dir):
        execution = executor.execute(["cursor"], include_base=False)

        assert execution.succeeded
        assert not (project_dir / "spectr").exists()
        assert (project_dir / ".cursor" / "commands" / "spectr" / "proposal.md").is_file()

    def test_rejects_invalid_config(self, project_dir):
        with pytest.raises(ConfigError):
            InitExecutor(project_dir, config=InitConfig(spectr_dir="../outside"))


class TestFailures:

    def test_stops_at_first_failure_and_keeps_partial_result(self, executor, project_dir):
        broken = f"notes\n{END_MARKER}\n"
        (project_dir / "CLAUDE.md").write_text(broken)

        execution = executor.execute(["claude"])

        assert not execution.succeeded
        assert isinstance(execution.error, InitializationError)
        assert isinstance(execution.error.cause, OrphanedEndMarkerError)
        assert execution.error.__cause__ is execution.error.cause
        assert execution.failed_key == "config:CLAUDE.md"
        assert "spectr/project.md" in execution.created_files
        assert execution.skipped == ["slashcmds:.claude/commands/spectr"]
        assert (project_dir / "CLAUDE.md").read_text() == broken
        assert not (project_dir / ".claude" / "commands" / "spectr" / "proposal.md").exists()

    def test_summary(self, executor, project_dir):
        (project_dir / "CLAUDE.md").write_text(END_MARKER)

        summary = executor.execute(["claude"]).get_summary()

        assert summary["succeeded"] is False
        assert summary["failed_key"] == "config:CLAUDE.md"
        assert summary["skipped"] == 1

    def test_cancelled_before_start(self, executor, project_dir):
        cancel = threading.Event()
        cancel.set()

        execution = executor.execute(["claude"], cancel=cancel)

        assert isinstance(execution.error, InitializationCancelled)
        assert execution.executed == []
        assert len(execution.skipped) == len(executor.plan(["claude"]).initializers)
        assert not (project_dir / "spectr").exists()


class TestStatus:

    def test_reports_per_provider(self, executor):
        executor.execute(["claude"])

        report = executor.status(["claude", "cursor"])

        assert report == {"claude": True, "cursor": False}

    def test_all_providers_by_default(self, executor):
        report = executor.status()

        assert set(report) == set(executor.registry.ids())
        assert not any(report.values())
