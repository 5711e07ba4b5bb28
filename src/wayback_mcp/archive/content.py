"""Content-type sniffing for archived page bodies.

The replay API's ``Content-Type`` header is ignored; classification looks at
the body text only.
"""

from __future__ import annotations

import re

MIME_HTML: str = "text/html"
MIME_JSON: str = "application/json"
MIME_TEXT: str = "text/plain"

_TITLE_RE = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE)


def is_html(content: str) -> bool:
    """Return ``True`` if *content* looks like an HTML document.

    The trimmed body must start with a doctype or an ``<html`` tag
    (case-insensitive), or the body must contain ``<body`` (case-sensitive).
    """
    head = content.strip()[:9].lower()
    return (
        head.startswith("<!doctype")
        or head.startswith("<html")
        or "<body" in content
    )


def is_json(content: str) -> bool:
    """Return ``True`` if the untrimmed body starts with ``{`` or ``[``."""
    return content.startswith(("{", "["))


def classify_mime_type(content: str) -> str:
    """Classify a body as HTML, JSON or plain text, in that order of precedence."""
    if is_html(content):
        return MIME_HTML
    if is_json(content):
        return MIME_JSON
    return MIME_TEXT


def extract_title(content: str) -> str | None:
    """Return the text of the first ``<title>`` element on a single line, if any."""
    match = _TITLE_RE.search(content)
    return match.group(1) if match else None
