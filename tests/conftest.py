"""Shared pytest fixtures for the Wayback MCP tests.

Fixture summary
---------------
wayback_client  — :class:`WaybackClient` over a fresh ``httpx.AsyncClient``;
                  pair with ``respx.mock`` so no request leaves the process.
cdx_rows        — A CDX JSON response (header row + three captures).

No test in this suite touches the network.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, Iterator

import httpx
import pytest
import pytest_asyncio

from wayback_mcp.archive.client import WaybackClient
from wayback_mcp.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Clear the settings cache around every test so env patches take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def wayback_client() -> AsyncGenerator[WaybackClient, None]:
    async with httpx.AsyncClient(follow_redirects=True) as http_client:
        yield WaybackClient(http_client=http_client)


@pytest.fixture
def cdx_rows() -> list[list[str]]:
    return [
        ["timestamp", "original", "mimetype", "statuscode", "digest", "length"],
        [
            "20200101120000",
            "https://example.com/",
            "text/html",
            "200",
            "SHA1:AAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA",
            "1234",
        ],
        [
            "20200315083015",
            "https://example.com/",
            "text/html",
            "301",
            "SHA1:BBBBBBBBBBBBBBBBBBBBBBBBBBBBBBBB",
            "567",
        ],
        [
            "20210704000000",
            "https://example.com/",
            "text/html",
            "200",
            "SHA1:CCCCCCCCCCCCCCCCCCCCCCCCCCCCCCCC",
            "2048",
        ],
    ]
