r"""Logging helpers used by the retry executor."""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
