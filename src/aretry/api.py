r"""Function and decorator front ends to the retry executor."""

from __future__ import annotations

__all__ = ["execute", "retry"]

import functools
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.core.config import RetryConfig
from aretry.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.callbacks import AttemptInfo, RetryInfo
    from aretry.kinds import ErrorKind
    from aretry.retry.executor import RetryResult

T = TypeVar("T")


def execute(
    work: Callable[[], T],
    config: RetryConfig | None = None,
    **overrides: Any,
) -> RetryResult[T]:
    """Run a unit of work with retries.

    Args:
        work: Zero-argument callable performing the operation.
        config: Retry configuration. Defaults to ``RetryConfig()``.
        **overrides: ``RetryConfig`` fields overriding ``config``.
            ``None`` values are ignored.

    Returns:
        The ``RetryResult`` of the run. Exhaustion is reported in the
        result, not raised.

    Raises:
        ValueError: If the configuration is out of range. Nothing is
            attempted in that case.
        Exception: A non-retryable failure of the work, unchanged.

    Example:
        ```pycon
        >>> from aretry import execute
        >>> result = execute(lambda: "done", max_retries=2)
        >>> result.value
        'done'

        ```
    """
    config = (config or RetryConfig()).merge(**overrides)
    return RetryExecutor(config).execute(work)


def retry(
    max_retries: int | None = None,
    delay: float | None = None,
    retryable_errors: Iterable[ErrorKind | type[BaseException]] | None = None,
    on_retry: Callable[[RetryInfo], Any] | None = None,
    on_finally: Callable[[AttemptInfo], Any] | None = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Decorate a function so each call runs with retries.

    The configuration is validated when the decorator is applied. A
    decorated call returns the function value on success, raises
    ``RetryExhaustedError`` when every attempt failed, and lets a
    non-retryable error through unchanged.

    Args:
        max_retries: Total attempt budget. Defaults to ``DEFAULT_MAX_RETRIES``.
        delay: Seconds between attempts. Defaults to ``DEFAULT_DELAY``.
        retryable_errors: Kinds and/or exception classes worth retrying.
        on_retry: Optional callback invoked before each retry.
        on_finally: Optional hook invoked after every attempt.

    Returns:
        The decorator.

    Example:
        ```pycon
        >>> from aretry import ErrorKind, retry
        >>> @retry(max_retries=5, delay=2, retryable_errors={ErrorKind.CONNECTION})
        ... def fetch(url: str) -> str:
        ...     return f"payload from {url}"
        ...
        >>> fetch("https://example.com")
        'payload from https://example.com'

        ```
    """
    config = RetryConfig().merge(
        max_retries=max_retries,
        delay=delay,
        retryable_errors=retryable_errors,
        on_retry=on_retry,
        on_finally=on_finally,
    )
    executor = RetryExecutor(config)

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return executor.execute(functools.partial(func, *args, **kwargs)).unwrap()

        wrapper.retry_config = config  # type: ignore[attr-defined]
        return wrapper

    return decorator
