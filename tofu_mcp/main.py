#!/usr/bin/env python3
"""
Tofu MCP - command line entry point.

Starts the OpenTofu Registry MCP server over STDIO (default) or HTTP.
"""

import logging
import os
import sys

import click

from . import __version__
from .transport import DEFAULT_HOST, DEFAULT_PORT, create_transport_config

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(__version__, prog_name="tofu-mcp")
@click.option(
    "--http",
    is_flag=True,
    help="Use HTTP transport instead of STDIO (default: STDIO)",
)
@click.option(
    "--host",
    default=DEFAULT_HOST,
    help=f"Host to bind HTTP server to (default: {DEFAULT_HOST}, requires --http)",
)
@click.option(
    "--port",
    type=click.IntRange(1, 65535),
    default=DEFAULT_PORT,
    help=f"Port for HTTP server (default: {DEFAULT_PORT}, requires --http)",
)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Set logging level (overrides TOFU_LOG_LEVEL, default: INFO)",
)
def cli(http: bool, host: str, port: int, log_level: str | None) -> None:
    """
    Tofu MCP: OpenTofu Registry MCP Server

    \b
    Transport Modes:
      STDIO (default): Communicates via standard input/output
      HTTP: Runs as a stateless web server at /mcp

    \b
    Examples:
      tofu-mcp                           # STDIO mode (default)
      tofu-mcp --http                    # HTTP mode (127.0.0.1:8000)
      tofu-mcp --http --port 8080        # HTTP mode on port 8080
      tofu-mcp --http --host 0.0.0.0     # HTTP mode on all interfaces
    """
    if not http:
        if host != DEFAULT_HOST:
            raise click.BadParameter("--host can only be used with --http")
        if port != DEFAULT_PORT:
            raise click.BadParameter("--port can only be used with --http")

    # Configuration is read when the server module is imported
    if log_level:
        os.environ["TOFU_LOG_LEVEL"] = log_level.upper()

    try:
        transport_config = create_transport_config(use_http=http, host=host, port=port)

        from .server import main as server_main

        server_main(transport_config)

    except KeyboardInterrupt:
        logger.info("Server interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Error starting Tofu MCP server: {e}")
        sys.exit(1)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for testing and programmatic usage.

    Args:
        args: Command line arguments

    Returns:
        Exit code
    """
    try:
        if args is None:
            cli()
        else:
            cli(args=args, standalone_mode=False)
        return 0
    except SystemExit as e:
        return e.code if e.code is not None else 0
    except Exception:
        return 1


if __name__ == "__main__":
    sys.exit(main())
