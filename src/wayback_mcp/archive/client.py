"""Async client for the Wayback Machine availability, CDX and replay APIs.

Each public method issues exactly one ``GET`` and returns an
:class:`~wayback_mcp.archive.models.ApiResult`.  Transport failures (network
errors, non-2xx responses and unparseable JSON bodies) come back as an
``UpstreamError`` with ``kind="API_ERROR"``; nothing is retried.  Exceptions
that do not originate in the transport propagate unchanged.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from wayback_mcp.archive.config import (
    API_ERROR,
    WB_AVAILABILITY_URL,
    WB_CDX_BASE_URL,
    WB_CDX_FIELD_COUNT,
    WB_DEFAULT_COLLAPSE,
    WB_DEFAULT_FIELDS,
    WB_DEFAULT_LIMIT,
    WB_DEFAULT_MATCH_TYPE,
    WB_DEFAULT_OUTPUT,
    WB_MATCH_TYPES,
    WB_REPLAY_BASE_URL,
)
from wayback_mcp.archive.models import (
    ApiResult,
    PageRequest,
    SearchCriteria,
    SnapshotRecord,
    UpstreamError,
)
from wayback_mcp.archive.timestamps import format_timestamp
from wayback_mcp.config.settings import get_settings

logger = logging.getLogger(__name__)


def build_cdx_params(criteria: SearchCriteria) -> dict[str, Any]:
    """Translate :class:`SearchCriteria` into CDX API query parameters.

    ``from``/``to`` are only sent when set, and ``matchType`` only when it
    differs from the API's own ``exact`` default.

    Args:
        criteria: Snapshot search criteria.

    Returns:
        Query parameter dict for the CDX endpoint.
    """
    params: dict[str, Any] = {
        "url": criteria.url,
        "output": WB_DEFAULT_OUTPUT,
        "fl": WB_DEFAULT_FIELDS,
        "collapse": WB_DEFAULT_COLLAPSE,
        "limit": criteria.limit if criteria.limit is not None else WB_DEFAULT_LIMIT,
    }
    if criteria.from_date:
        params["from"] = criteria.from_date
    if criteria.to_date:
        params["to"] = criteria.to_date
    if criteria.match_type in WB_MATCH_TYPES and criteria.match_type != WB_DEFAULT_MATCH_TYPE:
        params["matchType"] = criteria.match_type
    return params


def parse_cdx_rows(data: Any) -> list[SnapshotRecord]:
    """Convert a CDX JSON response into snapshot records.

    The first row holds the field names and is discarded.  Remaining rows are
    unpacked positionally in :data:`WB_DEFAULT_FIELDS` order; rows with too
    few columns are skipped.  Upstream row order is preserved.

    Args:
        data: Decoded CDX response (a list of lists), or ``None``.

    Returns:
        List of :class:`SnapshotRecord`; empty when there is no data row.
    """
    if not data or len(data) <= 1:
        return []

    records: list[SnapshotRecord] = []
    for row in data[1:]:
        if len(row) < WB_CDX_FIELD_COUNT:
            logger.debug("wayback: skipping short CDX row %r", row)
            continue
        timestamp, original, mimetype, status_code, digest, length = row[:WB_CDX_FIELD_COUNT]
        records.append(
            SnapshotRecord(
                timestamp=timestamp,
                original=original,
                mimetype=mimetype,
                status_code=status_code,
                digest=digest,
                length=length,
                archive_url=f"{WB_REPLAY_BASE_URL}/{timestamp}/{original}",
                formatted_date=format_timestamp(timestamp),
            )
        )
    return records


def _api_error(exc: Exception, status_code: int | None = None) -> UpstreamError:
    return UpstreamError(
        kind=API_ERROR,
        message=str(exc) or type(exc).__name__,
        status_code=status_code,
    )


class WaybackClient:
    """Thin async wrapper around the three Wayback Machine endpoints.

    Args:
        http_client: Optional injected :class:`httpx.AsyncClient`.  When
            omitted, a client is built from :func:`get_settings` and owned
            (and closed) by this instance.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = http_client is None
        if http_client is None:
            settings = get_settings()
            http_client = httpx.AsyncClient(
                timeout=settings.http_timeout,
                follow_redirects=True,
                headers={"User-Agent": settings.user_agent},
            )
        self._http = http_client

    async def aclose(self) -> None:
        """Close the underlying HTTP transport if this client created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> WaybackClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    async def check_availability(self, url: str) -> ApiResult[dict[str, Any]]:
        """Look up the closest archived snapshot of *url*.

        Returns:
            The availability API's JSON body, unmodified, on success.
        """
        result = await self._get(WB_AVAILABILITY_URL, params={"url": url})
        if not result.ok:
            return ApiResult.failure(result.error)
        return self._decode_json(result.value)

    async def get_snapshots(self, criteria: SearchCriteria) -> ApiResult[list[SnapshotRecord]]:
        """List captures of ``criteria.url`` via the CDX API.

        An empty body, an empty array or a header-only array all yield an
        empty list.
        """
        params = build_cdx_params(criteria)
        result = await self._get(WB_CDX_BASE_URL, params=params)
        if not result.ok:
            return ApiResult.failure(result.error)

        response = result.value
        if not response.text.strip():
            return ApiResult.success([])

        decoded = self._decode_json(response)
        if not decoded.ok:
            return ApiResult.failure(decoded.error)
        if not isinstance(decoded.value, list):
            return ApiResult.failure(
                UpstreamError(
                    kind=API_ERROR,
                    message="Unexpected CDX response: expected a JSON array",
                    status_code=response.status_code,
                )
            )

        records = parse_cdx_rows(decoded.value)
        logger.info("wayback: %d snapshots for url=%s", len(records), criteria.url)
        return ApiResult.success(records)

    async def get_archived_page(self, request: PageRequest) -> ApiResult[str]:
        """Fetch the body of an archived capture as text."""
        result = await self._get(request.replay_url)
        if not result.ok:
            return ApiResult.failure(result.error)
        body = result.value.text
        logger.debug(
            "wayback: fetched %s (%d chars)", request.replay_url, len(body)
        )
        return ApiResult.success(body)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> ApiResult[httpx.Response]:
        """Issue one GET and fold transport failures into an ``UpstreamError``."""
        try:
            response = await self._http.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "wayback: HTTP %d from %s", exc.response.status_code, url
            )
            return ApiResult.failure(_api_error(exc, exc.response.status_code))
        except httpx.RequestError as exc:
            logger.warning("wayback: request error for %s: %s", url, exc)
            return ApiResult.failure(_api_error(exc))
        return ApiResult.success(response)

    @staticmethod
    def _decode_json(response: httpx.Response) -> ApiResult[Any]:
        try:
            return ApiResult.success(response.json())
        except ValueError as exc:
            logger.warning("wayback: JSON parse error for %s: %s", response.url, exc)
            return ApiResult.failure(_api_error(exc, response.status_code))
