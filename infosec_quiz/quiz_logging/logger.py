"""
Structured logging for the quiz service, configured from LOG_LEVEL / LOG_FORMAT.

Every record carries event_type, level, logger, service and an ISO-8601 UTC
timestamp. Inside an HTTP request the request_id is merged in from structlog
context vars (see request_context). Submitted answer text is never logged,
only its length.

Imports only config.env from the package so it can be loaded first.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Iterator

import structlog

from infosec_quiz.config.env import get_log_format, get_log_level

SERVICE_NAME = "infosec_quiz"


def level_value(level_name: str) -> int:
    """Numeric logging level for a validated level name."""
    return logging.getLevelName(level_name)


def _stamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def _event_type(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Expose structlog's 'event' as event_type, with a message copy for log viewers."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def _renderer(log_format: str) -> Any:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.processors.JSONRenderer()


def configure_structlog(level_name: str | None = None, log_format: str | None = None) -> None:
    """
    Configure structlog for the process.

    Args:
        level_name: Level to filter at; default from get_log_level() (env or .env).
        log_format: "json" or "console"; default from get_log_format().
    """
    level_name = level_name or get_log_level()
    log_format = log_format or get_log_format()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            _stamp,
            _event_type,
            _renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value(level_name)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("response_analyzed", category="ransomware", score=7)
    """
    return structlog.get_logger(name).bind(logger=name)


@contextmanager
def request_context(request_id: str) -> Iterator[None]:
    """Bind request_id into every log record emitted inside the block."""
    structlog.contextvars.bind_contextvars(request_id=request_id)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars("request_id")
