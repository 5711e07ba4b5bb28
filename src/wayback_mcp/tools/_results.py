"""Builders for MCP tool results.

Internal module used by the tool implementations in :mod:`wayback_mcp.tools`.
"""

from __future__ import annotations

from mcp.types import CallToolResult, TextContent

from wayback_mcp.archive.models import UpstreamError

UNKNOWN_ERROR_MESSAGE: str = "Unknown error occurred"


def text_result(text: str) -> CallToolResult:
    """Wrap *text* in a successful single-block tool result."""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def error_result(message: str) -> CallToolResult:
    """Wrap *message* in an error-flagged tool result, prefixed with ``Error:``."""
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


def upstream_error_result(error: UpstreamError | None) -> CallToolResult:
    """Render an :class:`UpstreamError` as an error-flagged tool result."""
    message = error.message if error is not None else ""
    return error_result(message or UNKNOWN_ERROR_MESSAGE)
