"""Configuration package for the Wayback MCP server.

Re-exports the settings symbols so that callers can write::

    from wayback_mcp.config import get_settings
"""

from __future__ import annotations

from wayback_mcp.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
