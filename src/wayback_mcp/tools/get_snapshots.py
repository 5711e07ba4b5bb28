"""``get_snapshots`` tool: list Wayback Machine captures of a URL.

Queries the CDX API (collapsed to one capture per day) and renders the
captures as a fixed-width text table, in the order the archive returns them.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mcp.types import CallToolResult

from wayback_mcp.archive.client import WaybackClient
from wayback_mcp.archive.models import ArgumentError, SnapshotRecord, parse_search_criteria
from wayback_mcp.tools._results import error_result, text_result, upstream_error_result

logger = logging.getLogger(__name__)

TOOL_NAME: str = "get_snapshots"
TOOL_DESCRIPTION: str = "Get a list of available snapshots for a URL from the Wayback Machine"

INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "description": "URL to check for snapshots",
        },
        "from": {
            "type": "string",
            "description": "Start date in YYYYMMDD format (optional)",
        },
        "to": {
            "type": "string",
            "description": "End date in YYYYMMDD format (optional)",
        },
        "limit": {
            "type": "number",
            "description": "Maximum number of snapshots to return (default: 100)",
        },
        "match_type": {
            "type": "string",
            "enum": ["exact", "prefix", "host", "domain"],
            "description": "Type of URL matching to use (default: exact)",
        },
    },
    "required": ["url"],
}

# Column widths: Date, Status, Type.  The URL column is unbounded.
_DATE_WIDTH = 20
_STATUS_WIDTH = 10
_TYPE_WIDTH = 20
_RULE = "=" * 80


async def get_snapshots_tool(
    args: Mapping[str, Any] | None,
    client: WaybackClient,
) -> CallToolResult:
    """Run the ``get_snapshots`` tool.

    Args:
        args: Raw tool arguments (``url``, ``from``, ``to``, ``limit``,
            ``match_type``).
        client: Archive client used for the CDX query.

    Returns:
        A text result holding the snapshot table, a "no snapshots" notice,
        or an error-flagged result when ``url`` is missing or the archive
        call fails.
    """
    criteria = parse_search_criteria(args)
    if isinstance(criteria, ArgumentError):
        return error_result(criteria.reason)

    result = await client.get_snapshots(criteria)
    if not result.ok:
        logger.info("wayback: get_snapshots failed for %s: %s", criteria.url, result.error)
        return upstream_error_result(result.error)

    snapshots = result.value or []
    if not snapshots:
        return text_result(f"No snapshots found for URL: {criteria.url}")

    return text_result(format_snapshots_table(snapshots))


def format_snapshots_table(snapshots: list[SnapshotRecord]) -> str:
    """Render snapshots as a summary line followed by a fixed-width table."""
    url = snapshots[0].original if snapshots else "Unknown URL"

    lines = [
        f"Found {len(snapshots)} snapshots for {url}",
        "",
        "Date".ljust(_DATE_WIDTH) + "Status".ljust(_STATUS_WIDTH) + "Type".ljust(_TYPE_WIDTH) + "URL",
        _RULE,
    ]
    for snapshot in snapshots:
        date = snapshot.formatted_date or snapshot.timestamp
        lines.append(
            date.ljust(_DATE_WIDTH)
            + snapshot.status_code.ljust(_STATUS_WIDTH)
            + snapshot.mimetype.ljust(_TYPE_WIDTH)
            + snapshot.archive_url
        )
    return "\n".join(lines) + "\n"
