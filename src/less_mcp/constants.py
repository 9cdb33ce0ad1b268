"""
Constants for the Less MCP Server.

Defines server identity, the Less CLI invocation and transport defaults.
"""

# Server identity reported to MCP clients
SERVER_NAME = "Less"
SERVER_VERSION = "1.0.0"

# Less CLI invocation (split into argv tokens)
DEFAULT_CLI_COMMAND = "npx @chuva.io/less-cli"

# Transport defaults (HTTP/SSE mode only)
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9502
