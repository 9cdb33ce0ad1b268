"""
Tests for CommandDispatcher and process execution.

Tests cover:
- Output selection (stdout preferred, stderr fallback)
- Non-zero exit codes reported as ordinary output
- Validation failures never launch a process
- Independent invocations per call
- Launch failures
"""

import asyncio
import json
from unittest.mock import AsyncMock, patch

import pytest
from pydantic import ValidationError

from less_mcp import (
    CommandDispatcher,
    CommandLaunchError,
    Config,
    UnknownOperationError,
)
from less_mcp.runner import CommandOutput, select_output


class TestSelectOutput:
    """Tests for select_output()"""

    def test_stdout_only(self):
        assert select_output("projects\n", "") == "projects\n"

    def test_stderr_only(self):
        assert select_output("", "not logged in\n") == "not logged in\n"

    def test_stdout_wins(self):
        assert select_output("ok\n", "warning\n") == "ok\n"

    def test_both_empty(self):
        assert select_output("", "") == ""


class TestDispatchOutput:
    """Tests for CommandDispatcher.dispatch() against a fake CLI process."""

    def test_stdout_returned(self, fake_cli):
        config = fake_cli("print('project-a project-b')")
        dispatcher = CommandDispatcher(config)

        result = asyncio.run(dispatcher.dispatch("list-projects", {}))

        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == "project-a project-b\n"

    def test_stderr_returned_when_stdout_empty(self, fake_cli):
        config = fake_cli("sys.stderr.write('Not authenticated\\n')")
        dispatcher = CommandDispatcher(config)

        result = asyncio.run(dispatcher.dispatch("list-projects", {}))

        assert result.content[0].text == "Not authenticated\n"

    def test_stdout_preferred_over_stderr(self, fake_cli):
        config = fake_cli(
            """
            sys.stderr.write('deprecation warning\\n')
            sys.stdout.write('deployed\\n')
            """
        )
        dispatcher = CommandDispatcher(config)

        result = asyncio.run(
            dispatcher.dispatch("deploy-project", {"project_name": "store"})
        )

        assert result.content[0].text == "deployed\n"

    def test_non_zero_exit_is_ordinary_output(self, fake_cli):
        """A failing CLI's stderr is returned, not raised."""
        config = fake_cli(
            """
            sys.stderr.write('Project not found\\n')
            sys.exit(2)
            """
        )
        dispatcher = CommandDispatcher(config)

        output = asyncio.run(
            dispatcher.execute("delete-project", {"project_name": "ghost"})
        )
        result = asyncio.run(
            dispatcher.dispatch("delete-project", {"project_name": "ghost"})
        )

        assert output.exit_code == 2
        assert output.text == "Project not found\n"
        assert result.content[0].text == "Project not found\n"
        assert not result.is_error

    def test_arguments_reach_process(self, fake_cli):
        config = fake_cli("import json; print(json.dumps(sys.argv[1:]))")
        dispatcher = CommandDispatcher(config)

        result = asyncio.run(
            dispatcher.dispatch(
                "create-socket",
                {"name": "chat", "language": "ts", "channels": ["join", "leave"]},
            )
        )

        assert json.loads(result.content[0].text) == [
            "create", "socket", "-n", "chat", "-l", "ts", "-c", "join", "leave",
        ]

    def test_project_dir_used_as_cwd(self, fake_cli, tmp_path):
        project = tmp_path / "store"
        project.mkdir()
        config = fake_cli("import os; print(os.getcwd())")
        config.project_dir = str(project)
        dispatcher = CommandDispatcher(config)

        result = asyncio.run(dispatcher.dispatch("list-projects", {}))

        assert result.content[0].text.strip() == str(project.resolve())


class TestDispatchLifecycle:
    """Tests for validation ordering and statelessness."""

    def test_missing_required_never_executes(self):
        dispatcher = CommandDispatcher(Config())

        with patch("less_mcp.dispatcher.run_command", new=AsyncMock()) as mock_run:
            with pytest.raises(ValidationError):
                asyncio.run(dispatcher.dispatch("deploy-project", {}))

        mock_run.assert_not_called()

    def test_unknown_operation(self):
        dispatcher = CommandDispatcher(Config())

        with patch("less_mcp.dispatcher.run_command", new=AsyncMock()) as mock_run:
            with pytest.raises(UnknownOperationError) as exc_info:
                asyncio.run(dispatcher.dispatch("drop-database", {}))

        assert exc_info.value.name == "drop-database"
        mock_run.assert_not_called()

    def test_each_call_runs_its_own_process(self):
        dispatcher = CommandDispatcher(Config(cli_command=["less-cli"]))
        output = CommandOutput(
            args=["less-cli", "list"], stdout="[]", stderr="", exit_code=0
        )

        with patch(
            "less_mcp.dispatcher.run_command", new=AsyncMock(return_value=output)
        ) as mock_run:
            first = asyncio.run(dispatcher.dispatch("list-projects", {}))
            second = asyncio.run(dispatcher.dispatch("list-projects", {}))

        assert mock_run.await_count == 2
        assert mock_run.await_args_list[0] == mock_run.await_args_list[1]
        assert first.content[0].text == second.content[0].text == "[]"

    def test_each_call_spawns_a_process(self, fake_cli, tmp_path):
        """Two identical calls produce two process runs."""
        marker = tmp_path / "calls.log"
        config = fake_cli(
            f"""
            with open({str(marker)!r}, "a") as f:
                f.write("call\\n")
            print("ok")
            """
        )
        dispatcher = CommandDispatcher(config)

        asyncio.run(dispatcher.dispatch("build-project", {"project_name": "store"}))
        asyncio.run(dispatcher.dispatch("build-project", {"project_name": "store"}))

        assert marker.read_text().splitlines() == ["call", "call"]

    def test_launch_failure_propagates(self, tmp_path):
        missing = tmp_path / "no-such-less-cli"
        dispatcher = CommandDispatcher(Config(cli_command=[str(missing)]))

        with pytest.raises(CommandLaunchError) as exc_info:
            asyncio.run(dispatcher.dispatch("list-projects", {}))

        assert exc_info.value.command == [str(missing), "list"]
        assert isinstance(exc_info.value.cause, OSError)
