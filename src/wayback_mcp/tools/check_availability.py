"""``check_availability`` tool: closest archived snapshot of a URL."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mcp.types import CallToolResult

from wayback_mcp.archive.client import WaybackClient
from wayback_mcp.archive.timestamps import format_timestamp
from wayback_mcp.tools._results import error_result, text_result, upstream_error_result

logger = logging.getLogger(__name__)

TOOL_NAME: str = "check_availability"
TOOL_DESCRIPTION: str = (
    "Check whether a URL has been archived in the Wayback Machine and return "
    "the closest available snapshot"
)

INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "description": "URL to check for archived snapshots",
        },
    },
    "required": ["url"],
}


async def check_availability_tool(
    args: Mapping[str, Any] | None,
    client: WaybackClient,
) -> CallToolResult:
    """Run the ``check_availability`` tool.

    Args:
        args: Raw tool arguments (``url``).
        client: Archive client used for the availability lookup.

    Returns:
        A text result naming the closest snapshot, a notice when none is
        available, or an error-flagged result.
    """
    args = args or {}
    url = args.get("url")
    if not url:
        return error_result("URL is required")

    result = await client.check_availability(url)
    if not result.ok:
        logger.info("wayback: check_availability failed for %s: %s", url, result.error)
        return upstream_error_result(result.error)

    closest = _closest_snapshot(result.value)
    if closest is None:
        return text_result(f"No archived snapshots available for URL: {url}")

    timestamp = str(closest.get("timestamp", ""))
    lines = [
        f"Closest snapshot for {url}",
        "",
        f"Date: {format_timestamp(timestamp)}",
        f"Timestamp: {timestamp}",
        f"Status: {closest.get('status', 'unknown')}",
        f"Wayback URL: {closest.get('url', '')}",
    ]
    return text_result("\n".join(lines) + "\n")


def _closest_snapshot(body: Any) -> dict[str, Any] | None:
    """Return ``archived_snapshots.closest`` if present and marked available."""
    if not isinstance(body, dict):
        return None
    snapshots = body.get("archived_snapshots") or {}
    if not isinstance(snapshots, dict):
        return None
    closest = snapshots.get("closest")
    if not isinstance(closest, dict) or not closest.get("available", False):
        return None
    return closest
