"""Application-wide exception hierarchy for the Wayback Machine MCP server.

Upstream (transport) failures are *not* exceptions: the archive client
returns them as :class:`~wayback_mcp.archive.models.UpstreamError` values
inside an :class:`~wayback_mcp.archive.models.ApiResult`.  The classes below
cover the paths that still report by raising.

Hierarchy::

    WaybackMcpError
    └── ResourceRetrievalError
"""

from __future__ import annotations


class WaybackMcpError(Exception):
    """Base class for all Wayback MCP exceptions.

    All application-specific exceptions inherit from this class so that
    callers can catch the entire hierarchy with a single ``except`` clause
    when needed.
    """


class ResourceRetrievalError(WaybackMcpError):
    """Raised when a ``wayback://`` resource cannot be read.

    The resource path reports failures by raising, unlike the tool path
    which returns an error-flagged result.

    Args:
        message: Underlying failure description.  Prefixed with
            ``"Failed to retrieve archived page: "``.
        uri: The resource address that was requested.
        status_code: HTTP status from the archive, when one was received.
    """

    def __init__(
        self,
        message: str,
        uri: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(f"Failed to retrieve archived page: {message}")
        self.reason = message
        self.uri = uri
        self.status_code = status_code
