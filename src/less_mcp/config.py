"""
Server Configuration

Configuration for the Less MCP Server: which Less CLI to invoke,
where to run it, and whether debug logging is enabled.
"""

import os
import shlex
from dataclasses import dataclass, field
from typing import Optional

from .constants import DEFAULT_CLI_COMMAND


# Environment variable names
ENV_CLI_COMMAND = "LESS_CLI_COMMAND"
ENV_PROJECT_DIR = "LESS_PROJECT_DIR"
ENV_DEBUG = "MCP_SERVER_DEBUG"


def _parse_command(command: str) -> list[str]:
    """Split a command string into argv tokens."""
    tokens = shlex.split(command)
    if not tokens:
        raise ValueError("CLI command must not be empty")
    return tokens


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Configuration for the Less MCP Server.

    Environment Variables:
        LESS_CLI_COMMAND: Command used to invoke the Less CLI (default: npx @chuva.io/less-cli)
        LESS_PROJECT_DIR: Working directory for CLI invocations (default: server cwd)
        MCP_SERVER_DEBUG: Enable debug logging (true/false)
    """

    cli_command: list[str] = field(
        default_factory=lambda: _parse_command(DEFAULT_CLI_COMMAND)
    )
    project_dir: Optional[str] = None
    debug: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            cli_command=_parse_command(
                os.environ.get(ENV_CLI_COMMAND, DEFAULT_CLI_COMMAND)
            ),
            project_dir=os.environ.get(ENV_PROJECT_DIR) or None,
            debug=_parse_bool(os.environ.get(ENV_DEBUG, "false")),
        )

    def with_overrides(
        self,
        cli_command: Optional[str] = None,
        project_dir: Optional[str] = None,
        debug: bool = False,
    ) -> "Config":
        """Return a copy with command line overrides applied."""
        return Config(
            cli_command=_parse_command(cli_command) if cli_command else list(self.cli_command),
            project_dir=project_dir or self.project_dir,
            debug=debug or self.debug,
        )
