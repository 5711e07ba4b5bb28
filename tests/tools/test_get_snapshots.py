"""Tests for the ``get_snapshots`` tool.

Covers:
- Missing url → error result with no HTTP call
- Argument mapping (from/to/limit/match_type) into the CDX query
- Empty result → informational text, no error flag
- Table layout: header, separator, fixed-width columns, upstream order
- Upstream failure → error-flagged text with the failure message
"""

from __future__ import annotations

import httpx
import pytest
import respx

from wayback_mcp.archive.client import WaybackClient
from wayback_mcp.archive.config import WB_CDX_BASE_URL
from wayback_mcp.archive.models import SnapshotRecord
from wayback_mcp.tools.get_snapshots import format_snapshots_table, get_snapshots_tool


def _text(result) -> str:  # noqa: ANN001
    return result.content[0].text


def _record(timestamp: str, formatted_date: str | None = None) -> SnapshotRecord:
    return SnapshotRecord(
        timestamp=timestamp,
        original="https://example.com/",
        mimetype="text/html",
        status_code="200",
        digest="SHA1:X",
        length="10",
        archive_url=f"https://web.archive.org/web/{timestamp}/https://example.com/",
        formatted_date=formatted_date if formatted_date is not None else "",
    )


@pytest.mark.asyncio
class TestGetSnapshotsTool:
    async def test_missing_url_makes_no_request(self, wayback_client: WaybackClient) -> None:
        with respx.mock(assert_all_called=False) as mock:
            route = mock.get(WB_CDX_BASE_URL).mock(return_value=httpx.Response(200, json=[]))
            result = await get_snapshots_tool({"limit": 5}, wayback_client)

        assert result.isError is True
        assert _text(result) == "Error: URL is required"
        assert route.call_count == 0
        assert mock.calls.call_count == 0

    async def test_none_arguments_rejected(self, wayback_client: WaybackClient) -> None:
        result = await get_snapshots_tool(None, wayback_client)

        assert result.isError is True

    async def test_arguments_forwarded(
        self, wayback_client: WaybackClient, cdx_rows: list[list[str]]
    ) -> None:
        with respx.mock:
            route = respx.get(WB_CDX_BASE_URL).mock(
                return_value=httpx.Response(200, json=cdx_rows)
            )
            await get_snapshots_tool(
                {
                    "url": "example.com",
                    "from": "20200101",
                    "to": "20211231",
                    "limit": 10,
                    "match_type": "domain",
                },
                wayback_client,
            )

        params = route.calls.last.request.url.params
        assert params["from"] == "20200101"
        assert params["to"] == "20211231"
        assert params["limit"] == "10"
        assert params["matchType"] == "domain"

    async def test_no_snapshots_message(self, wayback_client: WaybackClient) -> None:
        with respx.mock:
            respx.get(WB_CDX_BASE_URL).mock(return_value=httpx.Response(200, json=[]))
            result = await get_snapshots_tool({"url": "never-archived.example"}, wayback_client)

        assert result.isError is False
        assert _text(result) == "No snapshots found for URL: never-archived.example"

    async def test_table_rendered(
        self, wayback_client: WaybackClient, cdx_rows: list[list[str]]
    ) -> None:
        with respx.mock:
            respx.get(WB_CDX_BASE_URL).mock(return_value=httpx.Response(200, json=cdx_rows))
            result = await get_snapshots_tool({"url": "example.com"}, wayback_client)

        assert result.isError is False
        lines = _text(result).splitlines()
        assert lines[0] == "Found 3 snapshots for https://example.com/"
        assert lines[1] == ""
        assert lines[2] == "Date                Status    Type                URL"
        assert lines[3] == "=" * 80
        assert lines[4] == (
            "2020-01-01 12:00:00 200       text/html           "
            "https://web.archive.org/web/20200101120000/https://example.com/"
        )
        # Upstream order, not chronological re-sorting.
        assert [line[:19] for line in lines[4:]] == [
            "2020-01-01 12:00:00",
            "2020-03-15 08:30:15",
            "2021-07-04 00:00:00",
        ]

    async def test_upstream_failure_is_error_result(self, wayback_client: WaybackClient) -> None:
        with respx.mock:
            respx.get(WB_CDX_BASE_URL).mock(side_effect=httpx.ConnectError("dns failure"))
            result = await get_snapshots_tool({"url": "example.com"}, wayback_client)

        assert result.isError is True
        assert _text(result) == "Error: dns failure"


class TestFormatSnapshotsTable:
    def test_falls_back_to_raw_timestamp(self) -> None:
        table = format_snapshots_table([_record("2020")])

        assert table.splitlines()[4].startswith("2020" + " " * 16 + "200")

    def test_wide_values_are_not_truncated(self) -> None:
        record = SnapshotRecord(
            timestamp="20200101000000",
            original="https://example.com/",
            mimetype="application/vnd.openxmlformats-officedocument",
            status_code="200",
            digest="SHA1:X",
            length="1",
            archive_url="https://web.archive.org/web/20200101000000/https://example.com/",
            formatted_date="2020-01-01 00:00:00",
        )

        row = format_snapshots_table([record]).splitlines()[4]
        assert "application/vnd.openxmlformats-officedocument" in row

    def test_ends_with_newline(self) -> None:
        assert format_snapshots_table([_record("20200101000000", "2020-01-01 00:00:00")]).endswith("\n")
