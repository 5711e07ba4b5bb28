"""Command-line entry point: run the Wayback Machine MCP server over stdio.

Usage::

    wayback-mcp [--log-level DEBUG]
    python -m wayback_mcp

Exit codes:
    0 — Server stopped (stdin closed or interrupted with Ctrl-C).
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from wayback_mcp import __version__
from wayback_mcp.config.settings import get_settings
from wayback_mcp.core.logging_config import configure_logging
from wayback_mcp.server import WaybackMachineServer

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wayback-mcp",
        description="Serve the Internet Archive Wayback Machine as MCP tools over stdio.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Logging verbosity (default: WAYBACK_MCP_LOG_LEVEL or INFO). Logs go to stderr.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Configure logging and run the server until stdin closes or SIGINT."""
    args = _parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)

    server = WaybackMachineServer()
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Wayback Machine MCP server interrupted; shutting down")


if __name__ == "__main__":
    main()
