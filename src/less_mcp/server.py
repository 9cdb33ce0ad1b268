"""
Less MCP Server.

Provides a FastMCP server exposing the Less CLI as MCP tools. Tools are
registered from the operation table: each table entry becomes one
`OperationTool` whose input schema is the entry's request model.

Usage:
    from less_mcp import Config, LessMCPServer

    server = LessMCPServer(Config.from_env())
    server.run()  # stdio
"""

import logging
from typing import Any, Literal, Optional

from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult
from pydantic import PrivateAttr

from .config import Config
from .constants import DEFAULT_HOST, DEFAULT_PORT, SERVER_NAME, SERVER_VERSION
from .dispatcher import CommandDispatcher, render_command
from .operations import OPERATIONS, OperationDescriptor

logger = logging.getLogger(__name__)


INSTRUCTIONS = """Less MCP Server - Manage and scaffold Less projects.

Use this server to:
- List projects and their resources (list-projects, list-project-resources)
- Deploy, delete, build and run projects (deploy-project, delete-project, build-project, run-project)
- View function logs (view-logs)
- Create routes, sockets, topics, subscribers, CRON jobs, shared modules
  and cloud functions (create-*)

Each tool runs the Less CLI once and returns its output.
"""


class OperationTool(Tool):
    """FastMCP tool backed by an operation table entry."""

    _dispatcher: CommandDispatcher = PrivateAttr()

    @classmethod
    def from_operation(
        cls, operation: OperationDescriptor, dispatcher: CommandDispatcher
    ) -> "OperationTool":
        tool = cls(
            name=operation.name,
            description=operation.description,
            parameters=operation.parameters_schema(),
        )
        tool._dispatcher = dispatcher
        return tool

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        return await self._dispatcher.dispatch(self.name, arguments)


class LessMCPServer:
    """
    Less MCP server context.

    Owns the configuration, the dispatcher and the FastMCP instance.
    Created once at startup and passed around explicitly.
    """

    def __init__(self, config: Optional[Config] = None):
        """Initialize LessMCPServer.

        Args:
            config: Config instance (uses defaults if not provided)
        """
        self.config = config or Config()
        self.dispatcher = CommandDispatcher(self.config)
        self.mcp = FastMCP(
            SERVER_NAME,
            instructions=INSTRUCTIONS,
            version=SERVER_VERSION,
        )
        self._register_tools()

    def _register_tools(self) -> None:
        """Register one MCP tool per operation table entry."""
        for operation in OPERATIONS.values():
            self.mcp.add_tool(OperationTool.from_operation(operation, self.dispatcher))
        logger.debug(f"Registered {len(OPERATIONS)} tools")

    def run(
        self,
        transport: Literal["stdio", "streamable-http", "sse"] = "stdio",
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
    ) -> None:
        """Run the MCP server with the specified transport.

        Args:
            transport: Transport type - "stdio", "streamable-http", or "sse"
            host: Host to bind to (for HTTP transports)
            port: Port to bind to (for HTTP transports)
        """
        logger.info(f"Less CLI: {render_command(self.config.cli_command)}")
        if self.config.project_dir:
            logger.info(f"Project directory: {self.config.project_dir}")

        if transport == "stdio":
            logger.info("Less MCP Server running via stdio")
            self.mcp.run(transport="stdio", show_banner=False)
        elif transport == "streamable-http":
            logger.info(f"Less MCP Server running via HTTP at http://{host}:{port}/mcp")
            self.mcp.run(transport="streamable-http", host=host, port=port, show_banner=False)
        elif transport == "sse":
            logger.info(f"Less MCP Server running via SSE at http://{host}:{port}/sse")
            self.mcp.run(transport="sse", host=host, port=port, show_banner=False)
        else:
            raise ValueError(f"Unknown transport: {transport}")
