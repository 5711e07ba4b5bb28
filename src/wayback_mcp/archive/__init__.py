"""Wayback Machine API access.

Provides CDX snapshot search, availability lookup and archived-page replay
against the Internet Archive.  No credentials are required.  The archive's
infrastructure can be slow or briefly unavailable; failures are reported as
values (see :class:`~wayback_mcp.archive.models.ApiResult`), never retried.
"""

from __future__ import annotations

from wayback_mcp.archive.client import WaybackClient
from wayback_mcp.archive.models import (
    ApiResult,
    ArgumentError,
    PageRequest,
    SearchCriteria,
    SnapshotRecord,
    UpstreamError,
)
from wayback_mcp.archive.timestamps import format_timestamp

__all__ = [
    "ApiResult",
    "ArgumentError",
    "PageRequest",
    "SearchCriteria",
    "SnapshotRecord",
    "UpstreamError",
    "WaybackClient",
    "format_timestamp",
]
