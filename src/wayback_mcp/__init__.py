"""Wayback Machine MCP server.

Exposes the Internet Archive's Wayback Machine (availability lookup, CDX
snapshot listing and archived-page retrieval) as Model Context Protocol tools
and a ``wayback://{url}/{timestamp}`` resource template.

Sub-packages:
- ``archive``    — HTTP client, endpoint constants, timestamp formatting
- ``tools``      — MCP tool implementations (text rendering)
- ``resources``  — ``wayback://`` resource handler
- ``config``     — pydantic-settings configuration
- ``core``       — exception hierarchy and structlog configuration
"""

__version__ = "1.0.0"
