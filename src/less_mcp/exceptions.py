"""Custom exceptions for the Less MCP Server."""


class LessMCPError(Exception):
    """Base exception for Less MCP Server operations."""

    pass


class UnknownOperationError(LessMCPError):
    """Raised when a tool name is not in the operation table."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown operation: {name}")


class CommandLaunchError(LessMCPError):
    """Raised when the Less CLI process cannot be started."""

    def __init__(self, command: list[str], cause: OSError):
        self.command = command
        self.cause = cause
        super().__init__(f"Failed to launch '{command[0]}': {cause}")
