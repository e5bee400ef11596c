"""Logging configuration for the upload form.

Provides a JSON formatter for log aggregation and a plain formatter for local
development. Every record carries the ``submission_id`` of the submission
currently in flight (``-`` outside of one), so the diagnostic trail of a
single upload can be followed end to end.
"""

from __future__ import annotations

import contextvars
import json
import logging
import sys
from datetime import datetime, timezone

# Context var to carry the submission id across awaits
_submission_id_ctx: contextvars.ContextVar[str] = contextvars.ContextVar(
    "submission_id", default="-"
)


def get_submission_id() -> str:
    return _submission_id_ctx.get()


def bind_submission_id(submission_id: str) -> contextvars.Token:
    return _submission_id_ctx.set(submission_id)


def unbind_submission_id(token: contextvars.Token) -> None:
    _submission_id_ctx.reset(token)


class SubmissionIdFilter(logging.Filter):
    """Inject submission_id from contextvars into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.submission_id = get_submission_id()
        return True


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Outputs logs as JSON with standard fields plus any known extra context
    provided via the ``extra`` parameter in logger calls.

    Example:
        >>> logger.info("submission_sent", extra={"http_status": 200})
        # Output: {"timestamp": "2026-10-19T10:00:00Z", "level": "INFO",
        #          "message": "submission_sent", "http_status": 200, ...}
    """

    EXTRA_FIELDS = (
        "submission_id",
        "status",
        "http_status",
        "duration_ms",
        "error_code",
        "uploaded_filename",
        "uploaded_content_type",
        "uploaded_size",
        "email",
        "phone",
        "webhook_url",
    )

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat()
            .replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key in self.EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_data, ensure_ascii=False, default=str)


def configure_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure root logging.

    Safe to call repeatedly (Streamlit re-executes the page script on every
    interaction); existing handlers are replaced, never duplicated.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: Use JSON formatter (True) or plain text (False)
    """
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(SubmissionIdFilter())

    if json_format:
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | submission_id=%(submission_id)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level.upper())

    # Suppress noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
