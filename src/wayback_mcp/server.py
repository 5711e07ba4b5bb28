"""MCP server exposing the Wayback Machine tools and resource template.

Registers handlers on a low-level :class:`mcp.server.Server`:

- ``tools/list`` and ``tools/call`` — ``get_snapshots``,
  ``get_archived_page`` and ``check_availability``.
- ``resources/templates/list`` — ``wayback://{url}/{timestamp}``.
- ``resources/list`` — always empty; pages are only reachable via the
  template.
- ``resources/read`` — delegates ``wayback://`` URIs to
  :func:`~wayback_mcp.resources.wayback_resource.handle_wayback_resource`.

Run it over stdio with :meth:`WaybackMachineServer.run` (see ``__main__``).
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    CallToolResult,
    ErrorData,
    Resource,
    ResourceTemplate,
    Tool,
)

from wayback_mcp import __version__
from wayback_mcp.archive.client import WaybackClient
from wayback_mcp.resources.wayback_resource import (
    RESOURCE_SCHEME,
    WAYBACK_RESOURCE_TEMPLATE,
    handle_wayback_resource,
)
from wayback_mcp.tools import check_availability, get_archived_page, get_snapshots

logger = logging.getLogger(__name__)

SERVER_NAME: str = "wayback-machine-server"

ToolHandler = Callable[[Mapping[str, Any] | None, WaybackClient], Awaitable[CallToolResult]]


class WaybackMachineServer:
    """Wayback Machine tools and resources served over MCP.

    Args:
        client: Optional injected :class:`WaybackClient`.  When omitted a
            client is built from the process settings.
    """

    def __init__(self, client: WaybackClient | None = None) -> None:
        self.client = client if client is not None else WaybackClient()
        self.server: Server = Server(SERVER_NAME, version=__version__)

        self._tools: dict[str, tuple[Tool, ToolHandler]] = {
            module.TOOL_NAME: (
                Tool(
                    name=module.TOOL_NAME,
                    description=module.TOOL_DESCRIPTION,
                    inputSchema=module.INPUT_SCHEMA,
                ),
                handler,
            )
            for module, handler in (
                (get_snapshots, get_snapshots.get_snapshots_tool),
                (get_archived_page, get_archived_page.get_archived_page_tool),
                (check_availability, check_availability.check_availability_tool),
            )
        }

        self._setup_tool_handlers()
        self._setup_resource_handlers()

    # ------------------------------------------------------------------
    # Handler registration
    # ------------------------------------------------------------------

    def _setup_tool_handlers(self) -> None:
        self.server.list_tools()(self.list_tools)
        # Missing arguments must reach the tool and come back as "Error: ..." text.
        self.server.call_tool(validate_input=False)(self.call_tool)

    def _setup_resource_handlers(self) -> None:
        self.server.list_resource_templates()(self.list_resource_templates)
        self.server.list_resources()(self.list_resources)
        self.server.read_resource()(self.read_resource)

    # ------------------------------------------------------------------
    # Tools
    # ------------------------------------------------------------------

    async def list_tools(self) -> list[Tool]:
        return [tool for tool, _ in self._tools.values()]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """Dispatch a tool invocation by name.

        Raises:
            McpError: ``METHOD_NOT_FOUND`` if *name* is not a known tool.
        """
        entry = self._tools.get(name)
        if entry is None:
            logger.warning("wayback: unknown tool requested: %s", name)
            raise McpError(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        _, handler = entry
        result = await handler(arguments, self.client)
        if result.isError:
            logger.info("wayback: tool %s returned an error result", name)
        return result

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    async def list_resource_templates(self) -> list[ResourceTemplate]:
        return [WAYBACK_RESOURCE_TEMPLATE]

    async def list_resources(self) -> list[Resource]:
        return []

    async def read_resource(self, uri: Any) -> Iterable[ReadResourceContents]:
        """Read a ``wayback://`` resource.

        Raises:
            McpError: ``INVALID_REQUEST`` for URIs with any other scheme.
            ResourceRetrievalError: If the archived page cannot be read.
        """
        uri_str = str(uri)
        if not uri_str.startswith(RESOURCE_SCHEME):
            raise McpError(
                ErrorData(code=INVALID_REQUEST, message=f"Unknown resource URI: {uri_str}")
            )

        resource = await handle_wayback_resource(uri_str, self.client)
        return [ReadResourceContents(content=resource.text, mime_type=resource.mime_type)]

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def run(self) -> None:
        """Serve over stdio until the client disconnects, then release the transport."""
        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("Wayback Machine MCP server running on stdio")
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        finally:
            await self.aclose()

    async def aclose(self) -> None:
        """Release the archive client's HTTP transport."""
        await self.client.aclose()
