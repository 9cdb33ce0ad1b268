"""
Command Dispatcher for the Less MCP Server.

Turns a tool call into exactly one Less CLI invocation:

1. Look up the operation by tool name
2. Validate the arguments against the operation's request model
3. Build the argument list (base CLI command + operation tokens)
4. Run the process and wait for it to exit
5. Wrap stdout (or stderr when stdout is empty) as text content

The dispatcher keeps no state between calls.
"""

import logging
import shlex
from typing import Any, Optional

from fastmcp.tools import ToolResult
from mcp.types import TextContent
from pydantic import BaseModel

from .config import Config
from .exceptions import UnknownOperationError
from .operations import OPERATIONS, OperationDescriptor
from .runner import CommandOutput, run_command

logger = logging.getLogger(__name__)


def render_command(args: list[str]) -> str:
    """Render an argument list as a copy-pasteable shell line."""
    return shlex.join(args)


class CommandDispatcher:
    """Validates tool arguments and forwards them to the Less CLI."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize the dispatcher.

        Args:
            config: Config instance (uses defaults if not provided)
        """
        self.config = config or Config()

    def get_operation(self, name: str) -> OperationDescriptor:
        try:
            return OPERATIONS[name]
        except KeyError:
            raise UnknownOperationError(name) from None

    def validate(self, name: str, arguments: Optional[dict[str, Any]]) -> BaseModel:
        """Validate raw tool arguments.

        Raises:
            UnknownOperationError: If the tool name is not known
            pydantic.ValidationError: On missing, unknown or invalid arguments
        """
        operation = self.get_operation(name)
        return operation.request_model.model_validate(arguments or {})

    def build_command(self, name: str, request: BaseModel) -> list[str]:
        """Build the full argument list for a validated request."""
        operation = self.get_operation(name)
        return [*self.config.cli_command, *operation.build_args(request)]

    async def execute(
        self, name: str, arguments: Optional[dict[str, Any]]
    ) -> CommandOutput:
        """Validate, build and run one CLI invocation."""
        request = self.validate(name, arguments)
        args = self.build_command(name, request)

        logger.info(f"[{name}] {render_command(args)}")
        output = await run_command(args, cwd=self.config.project_dir)

        if output.exit_code != 0:
            logger.warning(f"[{name}] Less CLI exited with code {output.exit_code}")

        return output

    async def dispatch(
        self, name: str, arguments: Optional[dict[str, Any]]
    ) -> ToolResult:
        """Execute a tool call and return its output as text content."""
        output = await self.execute(name, arguments)
        return ToolResult(content=[TextContent(type="text", text=output.text)])
