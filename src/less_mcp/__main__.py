"""
Less MCP Server entry point.

Usage:
    # stdio mode (default, for Claude Desktop/CLI)
    less-mcp

    # HTTP mode (for network access)
    less-mcp --http-mode
    less-mcp --http-mode --host 0.0.0.0 --port 9502

Environment Variables:
    LESS_CLI_COMMAND  - Optional: Command used to invoke the Less CLI (default: npx @chuva.io/less-cli)
    LESS_PROJECT_DIR  - Optional: Working directory for Less CLI invocations
    MCP_SERVER_DEBUG  - Optional: Enable debug logging (true/false)
"""

import argparse
import logging
import sys

from .config import Config
from .constants import DEFAULT_HOST, DEFAULT_PORT
from .server import LessMCPServer

logger = logging.getLogger("less_mcp")


def parse_args(argv=None):
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        description="Less MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run in stdio mode (default, for Claude Desktop/CLI)
  less-mcp

  # Use a globally installed Less CLI inside a project
  less-mcp --cli-command less-cli --project-dir ~/projects/store

  # Run in HTTP mode on a custom port
  less-mcp --http-mode --port 9503
        """,
    )

    parser.add_argument(
        "--http-mode",
        action="store_true",
        help="Run as HTTP server using Streamable HTTP transport",
    )

    parser.add_argument(
        "--sse-mode",
        action="store_true",
        help="Run as HTTP server using SSE transport (legacy)",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        help=f"Host to bind to in HTTP/SSE mode (default: {DEFAULT_HOST})",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to bind to in HTTP/SSE mode (default: {DEFAULT_PORT})",
    )

    parser.add_argument(
        "--cli-command",
        type=str,
        default=None,
        help="Command used to invoke the Less CLI (overrides LESS_CLI_COMMAND)",
    )

    parser.add_argument(
        "--project-dir",
        type=str,
        default=None,
        help="Working directory for Less CLI invocations (overrides LESS_PROJECT_DIR)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def configure_logging(debug: bool) -> None:
    """Log to stderr; stdout carries the stdio transport."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)

    if args.http_mode and args.sse_mode:
        print("Error: Cannot use both --http-mode and --sse-mode", file=sys.stderr)
        sys.exit(1)

    if args.http_mode:
        transport = "streamable-http"
    elif args.sse_mode:
        transport = "sse"
    else:
        transport = "stdio"

    try:
        config = Config.from_env().with_overrides(
            cli_command=args.cli_command,
            project_dir=args.project_dir,
            debug=args.debug,
        )
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(1)

    configure_logging(config.debug)

    try:
        LessMCPServer(config).run(
            transport=transport,
            host=args.host,
            port=args.port,
        )
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
