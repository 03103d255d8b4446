r"""Configuration dataclass and defaults for the retry executor.

This module provides configuration constants and an immutable,
validated configuration object describing one retry invocation.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_RETRIES",
    "MAX_DELAY",
    "MAX_MAX_RETRIES",
    "MIN_DELAY",
    "MIN_MAX_RETRIES",
    "RetryConfig",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from aretry.core.validation import (
    MAX_DELAY,
    MAX_MAX_RETRIES,
    MIN_DELAY,
    MIN_MAX_RETRIES,
    validate_retry_params,
    validate_retryable_errors,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import AttemptInfo, RetryInfo
    from aretry.kinds import ErrorKind

# Default total number of attempts (the first attempt included)
DEFAULT_MAX_RETRIES = 3

# Default wait in seconds between two attempts
DEFAULT_DELAY = 1.0


@dataclass(frozen=True)
class RetryConfig:
    """Configuration of one retry invocation.

    The configuration is validated on creation, so an existing
    ``RetryConfig`` is always usable by the executor.

    Args:
        max_retries: Total attempt budget, first attempt included.
            Must be in ``[1, 100]``. With ``1`` the work runs once.
        delay: Seconds to wait before each retry. Must be in ``[1, 3600]``.
        retryable_errors: ``ErrorKind`` members and/or exception classes
            that are worth retrying. Empty means retry on any failure.
        on_retry: Optional callback invoked before each retry (never
            before the first attempt). Receives a ``RetryInfo``.
        on_finally: Optional hook invoked after every attempt, successful
            or not. Receives an ``AttemptInfo``.

    Example:
        ```pycon
        >>> from aretry.core.config import RetryConfig
        >>> config = RetryConfig()
        >>> config.max_retries, config.delay
        (3, 1.0)
        >>> config = RetryConfig(max_retries=5, retryable_errors=[TimeoutError])
        >>> config.retryable_errors
        frozenset({<class 'TimeoutError'>})
        >>> config.merge(max_retries=10).max_retries
        10
        >>> config.max_retries
        5

        ```
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    delay: float = DEFAULT_DELAY
    retryable_errors: frozenset[ErrorKind | type[BaseException]] = field(
        default_factory=frozenset
    )
    on_retry: Callable[[RetryInfo], Any] | None = None
    on_finally: Callable[[AttemptInfo], Any] | None = None

    def __post_init__(self) -> None:
        validate_retry_params(max_retries=self.max_retries, delay=self.delay)
        # frozen dataclass: normalise through object.__setattr__
        object.__setattr__(
            self, "retryable_errors", validate_retryable_errors(self.retryable_errors)
        )

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied. The new config is
        validated like any other.

        Args:
            **overrides: Keyword arguments for fields to override.

        Returns:
            A new ``RetryConfig`` instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the configuration fields.
        """
        return {
            "max_retries": self.max_retries,
            "delay": self.delay,
            "retryable_errors": self.retryable_errors,
            "on_retry": self.on_retry,
            "on_finally": self.on_finally,
        }
