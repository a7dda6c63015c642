"""
Logging configuration for the EMR service.

Every log line carries the id of the request it was emitted under, so a single
patient write can be followed from the router through the service and the
repository. Two output formats are supported:

- ``json`` (default): one JSON object per line, for log shipping
- ``text``: a readable single-line format for running locally

JSON line:
{
    "timestamp": "2024-01-15T10:30:00.000Z",
    "level": "WARNING",
    "logger": "services.base",
    "message": "Rejected Patient create: Invalid 'email': must be an email address",
    "request_id": "3f9c2a1b",
    "extra": { ... }
}

Usage:
    from core.logging_config import setup_logging

    setup_logging()                          # at startup, see main.py
    logger.info("Patient created", extra={"mrn": 1001})

Patient identifiers appear in log lines (MRNs, record ids); other patient
fields should not be passed as ``extra``.
"""

import json
import logging
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# =============================================================================
# REQUEST ID CONTEXT
# =============================================================================

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    """Get the id of the request being handled, if any."""
    return request_id_var.get()


def set_request_id(request_id: str) -> None:
    request_id_var.set(request_id)


def clear_request_id() -> None:
    request_id_var.set(None)


class RequestIdFilter(logging.Filter):
    """Stamp ``record.request_id`` so both formatters can use it."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = get_request_id() or "-"
        return True


# =============================================================================
# FORMATTERS
# =============================================================================

# Set on every LogRecord by logging itself or by RequestIdFilter
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "request_id"}

TEXT_FORMAT = "%(asctime)s | %(levelname)-8s | %(request_id)s | %(name)s | %(message)s"


class JSONFormatter(logging.Formatter):
    """Single-line JSON formatter; timestamps are UTC with milliseconds."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc)
            .strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z",
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        request_id = getattr(record, "request_id", None) or get_request_id()
        if request_id and request_id != "-":
            entry["request_id"] = request_id

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if extra:
            entry["extra"] = extra

        return json.dumps(entry, default=str, ensure_ascii=False)


# =============================================================================
# SETUP
# =============================================================================

# Top-level packages of this service
APP_LOGGERS = ("core", "api", "services", "repositories", "main")

# Loggers owned by the server that should go through our handler
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handler(json_format: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter())
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logging(level: str = "INFO", json_format: bool = True) -> None:
    """
    Configure the root logger and route application and server loggers to it.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: JSON lines if True, text otherwise.

    Environment Variables:
        LOG_LEVEL: Overrides ``level``.
        LOG_FORMAT: ``json`` or ``text``; overrides ``json_format``.
    """
    level = os.environ.get("LOG_LEVEL", level).upper()
    log_format = os.environ.get("LOG_FORMAT", "json" if json_format else "text").lower()
    json_format = log_format == "json"

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [_build_handler(json_format)]

    for name in APP_LOGGERS:
        app_logger = logging.getLogger(name)
        app_logger.setLevel(level)
        app_logger.handlers = []
        app_logger.propagate = True

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = []
        server_logger.propagate = True

    logging.getLogger(__name__).info(
        "Logging configured",
        extra={"level": level, "format": "json" if json_format else "text"}
    )
