r"""Callback payloads and invocation helpers.

The retry loop exposes two hooks:
- on_retry: Called before each retry (never before the first attempt)
- on_finally: Called after every attempt, successful or not

Example:
    ```pycon
    >>> from aretry import RetryConfig, RetryExecutor
    >>> from aretry.callbacks import RetryInfo
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"Attempt {info.attempt}/{info.max_retries} in {info.delay}s")
    ...
    >>> executor = RetryExecutor(RetryConfig(on_retry=log_retry))  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = ["AttemptInfo", "RetryInfo", "invoke_on_finally", "invoke_on_retry"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class RetryInfo:
    """Information passed to the on_retry callback.

    Attributes:
        attempt: The attempt about to be made (1-indexed). The first
            retry is attempt 2.
        max_retries: The configured attempt budget.
        delay: Seconds the executor will wait before this attempt.
        error: The failure that triggered the retry.
    """

    attempt: int
    max_retries: int
    delay: float
    error: BaseException


@dataclass(frozen=True)
class AttemptInfo:
    """Information passed to the on_finally hook.

    Attributes:
        attempt: The attempt that just finished (1-indexed).
        max_retries: The configured attempt budget.
        succeeded: Whether the attempt completed without error.
        error: The failure raised by the attempt, ``None`` on success.
    """

    attempt: int
    max_retries: int
    succeeded: bool
    error: BaseException | None = None


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], Any] | None,
    *,
    attempt: int,
    max_retries: int,
    delay: float,
    error: BaseException,
) -> None:
    """Invoke on_retry callback if provided.

    Exceptions raised by the callback propagate to the caller.

    Args:
        on_retry: Optional callback to invoke before a retry.
        attempt: The upcoming attempt number (1-indexed).
        max_retries: The configured attempt budget.
        delay: The wait in seconds before the upcoming attempt.
        error: The failure that triggered the retry.
    """
    if on_retry is not None:
        on_retry(RetryInfo(attempt=attempt, max_retries=max_retries, delay=delay, error=error))


def invoke_on_finally(
    on_finally: Callable[[AttemptInfo], Any] | None,
    *,
    attempt: int,
    max_retries: int,
    error: BaseException | None,
) -> None:
    """Invoke on_finally hook if provided.

    Exceptions raised by the hook propagate to the caller.

    Args:
        on_finally: Optional hook to invoke after an attempt.
        attempt: The attempt that just finished (1-indexed).
        max_retries: The configured attempt budget.
        error: The failure of the attempt, ``None`` on success.
    """
    if on_finally is not None:
        on_finally(
            AttemptInfo(
                attempt=attempt,
                max_retries=max_retries,
                succeeded=error is None,
                error=error,
            )
        )
