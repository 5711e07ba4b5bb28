"""Structured JSON logging configuration using structlog.

Call ``configure_logging()`` once at process startup in ``__main__.py``.
All modules can then use either the stdlib logging API or structlog directly:

Stdlib usage::

    import logging
    logger = logging.getLogger(__name__)
    logger.info("wayback: fetched %d snapshots", count)

Structlog usage (richer context binding)::

    import structlog
    logger = structlog.get_logger(__name__)
    logger.info("tool call", tool="get_snapshots")

Every record is written to **stderr**: stdout is owned by the MCP stdio
transport and must carry protocol frames only.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

# ---------------------------------------------------------------------------
# Custom processors
# ---------------------------------------------------------------------------


_SECRET_SUBSTRINGS: frozenset[str] = frozenset({
    "api_key",
    "password",
    "secret",
    "token",
    "authorization",
    "cookie",
})
"""Lower-cased substrings that identify log event-dict keys whose values
must be redacted before the record reaches any renderer."""


def _redact_secrets(
    logger: WrappedLogger,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: EventDict,
) -> EventDict:
    """Replace values of secret-bearing keys with a redaction marker.

    Scans both top-level keys and any nested ``dict`` values one level deep
    (e.g. ``headers={...}``).  Keys are matched case-insensitively against
    :data:`_SECRET_SUBSTRINGS`.

    Args:
        logger: The wrapped logger instance (unused).
        method_name: The log method name (unused).
        event_dict: Mutable event dictionary being assembled.

    Returns:
        The event dict with sensitive values replaced by ``"[REDACTED]"``.
    """
    redacted = "[REDACTED]"
    for key in list(event_dict.keys()):
        if any(secret in key.lower() for secret in _SECRET_SUBSTRINGS):
            event_dict[key] = redacted
            continue
        val = event_dict[key]
        if isinstance(val, dict):
            for nested_key in list(val.keys()):
                if any(secret in str(nested_key).lower() for secret in _SECRET_SUBSTRINGS):
                    val[nested_key] = redacted
    return event_dict


# ---------------------------------------------------------------------------
# Public configuration entry-point
# ---------------------------------------------------------------------------


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog and stdlib logging to emit to stderr.

    Below DEBUG verbosity the output is newline-delimited JSON; at
    ``"DEBUG"`` structlog's ``ConsoleRenderer`` is used instead.

    Standard fields added to every log record: ``timestamp`` (ISO 8601),
    ``level``, ``logger`` and ``event``.

    Calling this more than once is safe: handlers on the root logger are
    replaced and structlog's configuration is overwritten.

    Args:
        log_level: Logging verbosity string.  One of ``"DEBUG"``, ``"INFO"``,
            ``"WARNING"``, ``"ERROR"``, ``"CRITICAL"``.  Case-insensitive.
    """
    level_upper = log_level.upper()
    numeric_level = getattr(logging, level_upper, logging.INFO)
    is_development = level_upper == "DEBUG"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        _redact_secrets,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if is_development:
        final_renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=True,
        )
    else:
        final_renderer = structlog.processors.JSONRenderer()

    # Route ``logging.getLogger(__name__)`` calls through structlog's
    # ProcessorFormatter.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            final_renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    if not is_development:
        for noisy_logger in ("httpx", "httpcore", "mcp"):
            logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
