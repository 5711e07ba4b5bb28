"""Endpoints and query defaults for the Wayback Machine APIs.

The hosts are fixed and not configurable.  Query parameters sent to the CDX
API are documented at
https://github.com/internetarchive/wayback/tree/master/wayback-cdx-server
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# API endpoints
# ---------------------------------------------------------------------------

WB_AVAILABILITY_URL: str = "https://archive.org/wayback/available"
"""URL for the Wayback Machine Availability API.

Returns the closest archived snapshot for a URL, if any.
"""

WB_CDX_BASE_URL: str = "https://web.archive.org/cdx/search/cdx"
"""Base URL for the Wayback Machine CDX API."""

WB_REPLAY_BASE_URL: str = "https://web.archive.org/web"
"""Base URL for replaying archived captures.

Replay URLs have the shape ``{base}/{timestamp}/{original}``.
"""

WB_ORIGINAL_CONTENT_PREFIX: str = "id_"
"""Replay path prefix requesting the original bytes without the Wayback banner."""

# ---------------------------------------------------------------------------
# CDX query defaults
# ---------------------------------------------------------------------------

WB_DEFAULT_OUTPUT: str = "json"
"""CDX output format.

``json`` returns a 2D array: first row is field names, subsequent rows are
capture records.
"""

WB_DEFAULT_FIELDS: str = "timestamp,original,mimetype,statuscode,digest,length"
"""Fields requested from the CDX API, in the order rows are unpacked."""

WB_CDX_FIELD_COUNT: int = 6
"""Number of columns in each CDX row for :data:`WB_DEFAULT_FIELDS`."""

WB_DEFAULT_COLLAPSE: str = "timestamp:8"
"""Collapse captures to one per calendar day (first 8 timestamp digits)."""

WB_DEFAULT_LIMIT: int = 100
"""Default maximum number of snapshots returned by a CDX query."""

WB_DEFAULT_MATCH_TYPE: str = "exact"
"""CDX default match type; never sent explicitly."""

WB_MATCH_TYPES: frozenset[str] = frozenset({"exact", "prefix", "host", "domain"})
"""Match types accepted by the ``get_snapshots`` tool."""

# ---------------------------------------------------------------------------
# Error kinds
# ---------------------------------------------------------------------------

API_ERROR: str = "API_ERROR"
"""Kind assigned to every transport-level failure."""
