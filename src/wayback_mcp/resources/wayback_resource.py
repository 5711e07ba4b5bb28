"""``wayback://{url}/{timestamp}`` resource template.

Reads the raw capture (``id_`` mode, no Wayback banner) and returns the body
untruncated with a sniffed MIME type.  Unlike the tools, this path reports
every failure by raising :class:`~wayback_mcp.core.exceptions.ResourceRetrievalError`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from urllib.parse import unquote

from mcp.types import ResourceTemplate

from wayback_mcp.archive.client import WaybackClient
from wayback_mcp.archive.content import MIME_HTML, classify_mime_type
from wayback_mcp.archive.models import PageRequest
from wayback_mcp.core.exceptions import ResourceRetrievalError

logger = logging.getLogger(__name__)

RESOURCE_SCHEME: str = "wayback://"

WAYBACK_RESOURCE_TEMPLATE = ResourceTemplate(
    uriTemplate="wayback://{url}/{timestamp}",
    name="Wayback Machine Archived Page",
    mimeType=MIME_HTML,
    description="Access archived web pages from the Internet Archive Wayback Machine",
)

_URI_RE = re.compile(r"wayback://([^/]+)/([^/]+)")


@dataclass(frozen=True)
class ResourceContents:
    """Body of a resolved ``wayback://`` resource."""

    uri: str
    mime_type: str
    text: str


def parse_resource_uri(uri: str) -> PageRequest:
    """Parse ``wayback://{percent-encoded url}/{timestamp}`` into a page request.

    The URL segment must be percent-encoded so that it contains no ``/``.

    Raises:
        ValueError: If *uri* does not have exactly two non-empty segments.
    """
    match = _URI_RE.fullmatch(uri)
    if not match:
        raise ValueError(f"Invalid URI format: {uri}")

    url = unquote(match.group(1))
    timestamp = match.group(2)
    if not url:
        raise ValueError("URL is required")
    if not timestamp:
        raise ValueError("Timestamp is required")

    return PageRequest(url=url, timestamp=timestamp, original=True)


async def handle_wayback_resource(uri: str, client: WaybackClient) -> ResourceContents:
    """Resolve a ``wayback://`` resource to the archived body.

    Args:
        uri: Resource address.
        client: Archive client used for the replay request.

    Returns:
        :class:`ResourceContents` with the raw body and its MIME type
        (``text/html``, ``application/json`` or ``text/plain``).

    Raises:
        ResourceRetrievalError: If the address is malformed or the archive
            call fails.
    """
    try:
        request = parse_resource_uri(uri)
    except ValueError as exc:
        raise ResourceRetrievalError(str(exc), uri=uri) from exc

    result = await client.get_archived_page(request)
    if not result.ok:
        error = result.error
        raise ResourceRetrievalError(
            (error.message if error else "") or "Unknown error",
            uri=uri,
            status_code=error.status_code if error else None,
        )

    content = result.value or ""
    mime_type = classify_mime_type(content)
    logger.debug("wayback: resource %s resolved as %s", uri, mime_type)
    return ResourceContents(uri=uri, mime_type=mime_type, text=content)
