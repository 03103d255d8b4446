r"""Configuration and validation shared by the retry executor and its
front ends."""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_RETRIES",
    "MAX_DELAY",
    "MAX_MAX_RETRIES",
    "MIN_DELAY",
    "MIN_MAX_RETRIES",
    "RetryConfig",
    "validate_delay",
    "validate_max_retries",
    "validate_retry_params",
    "validate_retryable_errors",
]

from aretry.core.config import (
    DEFAULT_DELAY,
    DEFAULT_MAX_RETRIES,
    MAX_DELAY,
    MAX_MAX_RETRIES,
    MIN_DELAY,
    MIN_MAX_RETRIES,
    RetryConfig,
)
from aretry.core.validation import (
    validate_delay,
    validate_max_retries,
    validate_retry_params,
    validate_retryable_errors,
)
