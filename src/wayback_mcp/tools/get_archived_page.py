"""``get_archived_page`` tool: retrieve one archived capture.

HTML captures are summarised (title and size) rather than inlined; any other
body is returned in full, up to :data:`MAX_TEXT_LENGTH` characters.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from mcp.types import CallToolResult

from wayback_mcp.archive.client import WaybackClient
from wayback_mcp.archive.content import extract_title, is_html
from wayback_mcp.archive.models import ArgumentError, PageRequest, parse_page_request
from wayback_mcp.tools._results import error_result, text_result, upstream_error_result

logger = logging.getLogger(__name__)

TOOL_NAME: str = "get_archived_page"
TOOL_DESCRIPTION: str = "Retrieve the content of an archived webpage from the Wayback Machine"

INPUT_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "url": {
            "type": "string",
            "description": "URL of the page to retrieve",
        },
        "timestamp": {
            "type": "string",
            "description": "Timestamp in YYYYMMDDHHMMSS format",
        },
        "original": {
            "type": "boolean",
            "description": (
                "Whether to get the original content without Wayback Machine banner "
                "(default: false)"
            ),
        },
    },
    "required": ["url", "timestamp"],
}

#: Maximum number of body characters inlined for non-HTML captures.
MAX_TEXT_LENGTH: int = 10_000

TRUNCATION_MARKER: str = "...\n[Content truncated]"

_RULE = "=" * 80


async def get_archived_page_tool(
    args: Mapping[str, Any] | None,
    client: WaybackClient,
) -> CallToolResult:
    """Run the ``get_archived_page`` tool.

    Args:
        args: Raw tool arguments (``url``, ``timestamp``, ``original``).
        client: Archive client used for the replay request.

    Returns:
        A text result describing the capture, or an error-flagged result
        when a required argument is missing or the archive call fails.
    """
    request = parse_page_request(args)
    if isinstance(request, ArgumentError):
        return error_result(request.reason)

    result = await client.get_archived_page(request)
    if not result.ok:
        logger.info(
            "wayback: get_archived_page failed for %s: %s", request.replay_url, result.error
        )
        return upstream_error_result(result.error)

    content = result.value or ""
    return text_result(format_archived_page(request, content, is_html(content)))


def format_archived_page(request: PageRequest, content: str, html: bool) -> str:
    """Render a retrieved capture for the tool response.

    Args:
        request: The page request that produced *content*.
        content: Decoded body of the capture.
        html: Whether *content* was classified as HTML.

    Returns:
        Multi-line text: the replay URL, then an HTML summary or the
        (possibly truncated) text body framed by separator lines.
    """
    text = f"Retrieved archived page from {request.timestamp} for {request.url}\n"
    text += f"Wayback URL: {request.replay_url}\n\n"

    if html:
        title = extract_title(content) or "No title found"
        text += f"Title: {title}\n\n"
        text += "Content type: HTML\n"
        text += f"Content length: {len(content)} characters\n\n"
        text += "Note: HTML content is available at the Wayback URL above.\n"
        text += "To view the raw HTML content, use the 'original=true' parameter.\n"
        return text

    text += "Content type: Text\n"
    text += f"Content length: {len(content)} characters\n\n"
    text += f"Content:\n{_RULE}\n"
    text += truncate_text(content)
    text += f"\n{_RULE}\n"
    return text


def truncate_text(content: str, max_length: int = MAX_TEXT_LENGTH) -> str:
    """Cut *content* to *max_length* characters, appending a marker if cut."""
    if len(content) <= max_length:
        return content
    return content[:max_length] + TRUNCATION_MARKER
