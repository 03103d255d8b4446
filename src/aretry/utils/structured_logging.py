r"""Structured logging for retry progress notifications.

The executor reports every attempt, wait and final outcome through the
standard ``logging`` module, attaching machine-readable fields
(``attempt``, ``max_retries``, ``delay``, ``error_kind``, ``outcome``)
to each record. ``StructuredFormatter`` renders those records as JSON
lines. It is opt-in: aretry never installs a handler by itself.

Example:
    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter, set_correlation_id

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

    set_correlation_id("nightly-backup")
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
from datetime import datetime, timezone
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes every LogRecord has; anything else was passed through ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import clear_correlation_id, get_correlation_id
        >>> clear_correlation_id()
        >>> get_correlation_id()

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID attached to structured records.

    Args:
        correlation_id: Identifier shared by related log entries, for
            example the name of the job that runs the retried work.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID of the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """Render log records as one JSON object per line.

    Output fields: ``timestamp`` (ISO 8601, UTC), ``level``, ``logger``,
    ``message``, ``correlation_id`` when set, ``exception`` when the
    record carries exception info, plus every field passed via ``extra``.

    Example:
        ```pycon
        >>> import json, logging
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord("aretry", logging.WARNING, "", 0, "retrying", None, None)
        >>> record.attempt = 2
        >>> data = json.loads(StructuredFormatter().format(record))
        >>> data["level"], data["message"], data["attempt"]
        ('WARNING', 'retrying', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        return (
            datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z")
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.WARNING).
        message: Human readable message.
        **extra: Structured fields attached to the record.
    """
    logger.log(level, message, extra=extra)
