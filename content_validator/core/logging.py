"""
Logging setup for the validator service.

Records carry the request id from the ContextVar set by RequestIDMiddleware.
Per-record review details are attached with
`extra={"extra_fields": {"record_id": ..., "status": ..., ...}}` and rendered
as JSON keys or as a trailing `key=value` list in text mode.
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from content_validator.core.config import settings
from content_validator.core.error_handling import request_id_var

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
NOISY_LOGGERS = ("httpx", "httpcore")


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    fields = getattr(record, "extra_fields", None)
    return fields if isinstance(fields, dict) else {}


class RequestIDFilter(logging.Filter):
    """
    Inject the current request_id (from ContextVar) into log records.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or ""
        return True


class JSONFormatter(logging.Formatter):
    """
    Formatter that renders each LogRecord as a single JSON line, with review
    fields merged in at the top level.
    """

    def __init__(self, include_request_id: Optional[bool] = None):
        super().__init__()
        self.include_request_id = (
            settings.LOG_INCLUDE_REQUEST_ID if include_request_id is None else include_request_id
        )

    def format(self, record: logging.LogRecord) -> str:
        log_obj: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        if self.include_request_id and getattr(record, "request_id", ""):
            log_obj["request_id"] = record.request_id

        for key, value in _extra_fields(record).items():
            log_obj.setdefault(key, value)

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


class TextFormatter(logging.Formatter):
    """Plain text lines; review fields are appended as `key=value` pairs."""

    def __init__(self, include_request_id: Optional[bool] = None):
        self.include_request_id = (
            settings.LOG_INCLUDE_REQUEST_ID if include_request_id is None else include_request_id
        )
        super().__init__(TEXT_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _extra_fields(record)
        if fields:
            line += " [" + " ".join(f"{key}={value}" for key, value in fields.items()) + "]"
        if self.include_request_id and getattr(record, "request_id", ""):
            line += f" - request_id={record.request_id}"
        return line


def build_formatter(log_format: Optional[str] = None) -> logging.Formatter:
    """Formatter for LOG_FORMAT ("json" or "text")."""
    log_format = (log_format or settings.LOG_FORMAT).lower()
    if log_format == "json":
        return JSONFormatter()
    return TextFormatter()


def setup_logging() -> None:
    """
    Configure root logging for the application.
    Uses JSON logging if configured, otherwise standard text logging.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(build_formatter())
    if settings.LOG_INCLUDE_REQUEST_ID:
        handler.addFilter(RequestIDFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)
    root_logger.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(log_level)
    logging.getLogger("uvicorn.error").setLevel(log_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
