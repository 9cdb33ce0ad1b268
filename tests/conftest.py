"""Shared fixtures for the Less MCP Server tests."""

import sys
import textwrap

import pytest

from less_mcp import Config


@pytest.fixture
def fake_cli(tmp_path):
    """Create a fake Less CLI from a Python snippet.

    Returns a factory taking the script body and returning a Config whose
    cli_command runs that script with the current interpreter. The script
    sees its arguments in sys.argv[1:].
    """

    def _make(body: str) -> Config:
        script = tmp_path / "fake-less-cli.py"
        script.write_text("import sys\n" + textwrap.dedent(body))
        return Config(cli_command=[sys.executable, str(script)])

    return _make
