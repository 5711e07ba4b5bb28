"""Request, record and result types for the Wayback Machine client.

Every type here lives for a single tool or resource invocation.  Tool
arguments arrive as untyped dicts; :func:`parse_search_criteria` and
:func:`parse_page_request` are the only places those dicts are inspected,
and they yield either a typed request or an :class:`ArgumentError` naming the
missing field.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from wayback_mcp.archive.config import WB_ORIGINAL_CONTENT_PREFIX, WB_REPLAY_BASE_URL

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SnapshotRecord:
    """One capture listed by the CDX API.

    Attributes:
        timestamp: 14-digit capture timestamp (``YYYYMMDDhhmmss``).
        original: The URL as it was captured.
        mimetype: MIME type recorded at capture time.
        status_code: HTTP status recorded at capture time (string, as CDX
            reports it; ``"-"`` for revisits).
        digest: SHA-1 content digest.
        length: Compressed record length in bytes (string).
        archive_url: Replay URL ``{base}/{timestamp}/{original}``.
        formatted_date: ``timestamp`` rendered as ``YYYY-MM-DD hh:mm:ss``.
    """

    timestamp: str
    original: str
    mimetype: str
    status_code: str
    digest: str
    length: str
    archive_url: str
    formatted_date: str


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SearchCriteria:
    """Parameters of a CDX snapshot search.

    Only ``url`` is checked; the other fields are forwarded to the CDX API
    as given.
    """

    url: str
    from_date: str | None = None
    to_date: str | None = None
    limit: Any = None
    match_type: str | None = None


@dataclass(frozen=True)
class PageRequest:
    """Parameters for retrieving one archived page.

    Attributes:
        url: The page URL as captured.
        timestamp: Capture timestamp (``YYYYMMDDhhmmss`` or a prefix of it).
        original: When ``True`` request the raw capture (``id_`` mode)
            without the Wayback Machine banner.
    """

    url: str
    timestamp: str
    original: bool = False

    @property
    def replay_url(self) -> str:
        """Replay URL ``{base}/{prefix}{timestamp}/{url}`` for this request."""
        prefix = WB_ORIGINAL_CONTENT_PREFIX if self.original else ""
        return f"{WB_REPLAY_BASE_URL}/{prefix}{self.timestamp}/{self.url}"


@dataclass(frozen=True)
class ArgumentError:
    """Rejected tool arguments.

    Attributes:
        reason: Human-readable reason, e.g. ``"URL is required"``.
    """

    reason: str


def parse_search_criteria(args: Mapping[str, Any] | None) -> SearchCriteria | ArgumentError:
    """Build :class:`SearchCriteria` from ``get_snapshots`` tool arguments."""
    args = args or {}
    if not args.get("url"):
        return ArgumentError("URL is required")
    return SearchCriteria(
        url=args["url"],
        from_date=args.get("from"),
        to_date=args.get("to"),
        limit=args.get("limit"),
        match_type=args.get("match_type"),
    )


def parse_page_request(args: Mapping[str, Any] | None) -> PageRequest | ArgumentError:
    """Build a :class:`PageRequest` from ``get_archived_page`` tool arguments.

    ``original`` is only honoured when it is exactly the boolean ``True``;
    strings such as ``"true"`` leave it off.
    """
    args = args or {}
    if not args.get("url"):
        return ArgumentError("URL is required")
    if not args.get("timestamp"):
        return ArgumentError("Timestamp is required")
    return PageRequest(
        url=args["url"],
        timestamp=args["timestamp"],
        original=args.get("original") is True,
    )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UpstreamError:
    """A failed call to the Wayback Machine.

    Attributes:
        kind: Error category; ``"API_ERROR"`` for transport failures.
        message: Description of the underlying failure.
        status_code: HTTP status code, or ``None`` if no response arrived.
    """

    kind: str
    message: str
    status_code: int | None = None


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Outcome of one archive client call.

    Exactly one of ``value`` and ``error`` is meaningful: check :attr:`ok`
    before reading ``value``.
    """

    value: T | None = None
    error: UpstreamError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> ApiResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: UpstreamError) -> ApiResult[T]:
        return cls(error=error)
