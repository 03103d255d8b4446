r"""Parameter validation utilities for the retry loop.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before the first attempt is made.
"""

from __future__ import annotations

__all__ = [
    "validate_delay",
    "validate_max_retries",
    "validate_retry_params",
    "validate_retryable_errors",
]

from collections.abc import Iterable
from numbers import Real
from typing import Any

from aretry.kinds import ErrorKind

MIN_MAX_RETRIES = 1
MAX_MAX_RETRIES = 100
MIN_DELAY = 1.0
MAX_DELAY = 3600.0


def validate_max_retries(max_retries: int) -> None:
    """Validate the retry budget.

    Args:
        max_retries: Total number of attempts allowed, including the first
            one. Must be an integer in ``[1, 100]``.

    Raises:
        TypeError: If ``max_retries`` is not an integer.
        ValueError: If ``max_retries`` is outside ``[1, 100]``.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_max_retries
        >>> validate_max_retries(3)
        >>> validate_max_retries(0)
        Traceback (most recent call last):
        ...
        ValueError: max_retries must be in [1, 100], got 0

        ```
    """
    if isinstance(max_retries, bool) or not isinstance(max_retries, int):
        msg = f"max_retries must be an int, got {type(max_retries).__name__}"
        raise TypeError(msg)
    if not MIN_MAX_RETRIES <= max_retries <= MAX_MAX_RETRIES:
        msg = f"max_retries must be in [{MIN_MAX_RETRIES}, {MAX_MAX_RETRIES}], got {max_retries}"
        raise ValueError(msg)


def validate_delay(delay: float) -> None:
    """Validate the wait between two attempts.

    Args:
        delay: Seconds to wait before each retry. Must be a number in
            ``[1, 3600]``.

    Raises:
        TypeError: If ``delay`` is not a real number.
        ValueError: If ``delay`` is outside ``[1, 3600]``.

    Example:
        ```pycon
        >>> from aretry.core.validation import validate_delay
        >>> validate_delay(5)
        >>> validate_delay(0)
        Traceback (most recent call last):
        ...
        ValueError: delay must be in [1, 3600] seconds, got 0

        ```
    """
    if isinstance(delay, bool) or not isinstance(delay, Real):
        msg = f"delay must be a number, got {type(delay).__name__}"
        raise TypeError(msg)
    if not MIN_DELAY <= delay <= MAX_DELAY:
        msg = f"delay must be in [{MIN_DELAY:g}, {MAX_DELAY:g}] seconds, got {delay}"
        raise ValueError(msg)


def validate_retryable_errors(retryable_errors: Iterable[Any]) -> frozenset[Any]:
    """Validate and normalise the retryable error classifiers.

    A classifier is either an ``ErrorKind`` member or an exception class.

    Args:
        retryable_errors: Iterable of classifiers. Empty means every
            failure is retryable.

    Returns:
        The classifiers as a frozenset.

    Raises:
        TypeError: If an element is not a valid classifier.
    """
    if isinstance(retryable_errors, (str, bytes)):
        msg = "retryable_errors must be an iterable of classifiers, got a string"
        raise TypeError(msg)
    classifiers = frozenset(retryable_errors)
    for classifier in classifiers:
        if isinstance(classifier, ErrorKind):
            continue
        if isinstance(classifier, type) and issubclass(classifier, BaseException):
            continue
        msg = (
            "retryable_errors entries must be ErrorKind members or exception classes, "
            f"got {classifier!r}"
        )
        raise TypeError(msg)
    return classifiers


def validate_retry_params(max_retries: int, delay: float) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Total attempt budget, in ``[1, 100]``.
        delay: Seconds between attempts, in ``[1, 3600]``.

    Raises:
        TypeError: If a parameter has the wrong type.
        ValueError: If a parameter is out of range.

    Example:
        ```pycon
        >>> from aretry.core import validate_retry_params
        >>> validate_retry_params(max_retries=3, delay=1.0)
        >>> validate_retry_params(max_retries=3, delay=-1)  # doctest: +SKIP

        ```
    """
    validate_max_retries(max_retries)
    validate_delay(delay)
