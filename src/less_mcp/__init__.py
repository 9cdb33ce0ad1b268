"""
Less MCP Server.

Exposes the Less CLI (project management and code generation) as MCP
tools. Each tool call is forwarded to the CLI as one process invocation
and its output is returned as text.
"""

from .config import Config
from .dispatcher import CommandDispatcher
from .exceptions import CommandLaunchError, LessMCPError, UnknownOperationError
from .operations import OPERATIONS, OperationDescriptor
from .runner import CommandOutput
from .server import LessMCPServer

__all__ = [
    "Config",
    "CommandDispatcher",
    "CommandLaunchError",
    "CommandOutput",
    "LessMCPError",
    "LessMCPServer",
    "OPERATIONS",
    "OperationDescriptor",
    "UnknownOperationError",
]
