r"""Retry decision logic for failed attempts.

This module provides the RetryDecider class that encapsulates the logic
for deciding what a failed attempt leads to: another attempt, a
non-retryable short-circuit, or exhaustion of the retry budget.
"""

from __future__ import annotations

__all__ = ["Decision", "RetryDecider"]

import logging
from enum import Enum
from typing import TYPE_CHECKING

from aretry.kinds import kind_of, matches_kind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretry.kinds import ErrorKind

logger: logging.Logger = logging.getLogger(__name__)


class Decision(str, Enum):
    """Outcome of the evaluation of a failed attempt."""

    RETRY = "retry"
    NON_RETRYABLE = "non_retryable"
    EXHAUSTED = "exhausted"


class RetryDecider:
    """Decides whether a failed attempt should be retried.

    Args:
        retryable_errors: ``ErrorKind`` members and/or exception classes
            worth retrying. Empty means every failure is retryable.
    """

    def __init__(self, retryable_errors: Iterable[ErrorKind | type[BaseException]] = ()) -> None:
        self.retryable_errors = frozenset(retryable_errors)

    def is_retryable(self, error: BaseException) -> bool:
        """Indicate if a failure is retryable under the configured filter.

        Args:
            error: The failure raised by the work.

        Returns:
            ``True`` if the failure matches the filter, or no filter is set.
        """
        return matches_kind(error, self.retryable_errors)

    def decide(self, error: BaseException, attempt: int, max_retries: int) -> Decision:
        """Determine what a failed attempt leads to.

        The error filter is checked before the budget, so a non-retryable
        failure on the last attempt is still reported as non-retryable.

        Args:
            error: The failure raised by the work.
            attempt: The attempt that failed (1-indexed).
            max_retries: The configured attempt budget.

        Returns:
            The decision for this failure.

        Example:
            ```pycon
            >>> from aretry.kinds import ErrorKind
            >>> from aretry.retry.decider import RetryDecider
            >>> decider = RetryDecider({ErrorKind.TIMEOUT})
            >>> decider.decide(TimeoutError(), attempt=1, max_retries=3).value
            'retry'
            >>> decider.decide(TimeoutError(), attempt=3, max_retries=3).value
            'exhausted'
            >>> decider.decide(KeyError("k"), attempt=1, max_retries=3).value
            'non_retryable'

            ```
        """
        if not self.is_retryable(error):
            logger.debug(
                f"{type(error).__name__} (kind={kind_of(error).value}) is not in the "
                "retryable errors"
            )
            return Decision.NON_RETRYABLE
        if attempt >= max_retries:
            return Decision.EXHAUSTED
        return Decision.RETRY
