"""MCP tool implementations.

Each module defines ``TOOL_NAME``, ``TOOL_DESCRIPTION``, ``INPUT_SCHEMA`` and
an async ``*_tool(args, client)`` function returning a ``CallToolResult``.
Tools never raise for missing arguments or archive failures; they return an
error-flagged result instead.
"""
