r"""Synchronous retry executor.

The executor runs a zero-argument unit of work until it succeeds, the
retry budget is consumed, or a failure outside the configured retryable
errors short-circuits the loop. It blocks the calling thread for the
whole run, delays included, and keeps all of its state call-local, so a
single executor can be shared between threads.
"""

from __future__ import annotations

__all__ = ["AttemptState", "RetryExecutor", "RetryResult"]

import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from aretry.exceptions import RetryExhaustedError
from aretry.kinds import kind_of
from aretry.retry.decider import Decision, RetryDecider
from aretry.retry.manager import CallbackManager
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.core.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class AttemptState:
    """Mutable state of one ``execute`` call.

    Attributes:
        max_retries: The configured attempt budget.
        attempt_number: The current attempt (1-indexed).
        last_error: The failure of the latest failed attempt.
        start_time: Timestamp when the call started.
    """

    max_retries: int
    attempt_number: int = 1
    last_error: Exception | None = None
    start_time: float = field(default_factory=time.time)

    @property
    def is_last(self) -> bool:
        """Indicate if the current attempt consumes the budget."""
        return self.attempt_number >= self.max_retries

    @property
    def elapsed(self) -> float:
        """Seconds spent since the call started."""
        return time.time() - self.start_time

    def advance(self) -> None:
        """Move to the next attempt.

        Raises:
            RuntimeError: If the budget is already consumed.
        """
        if self.is_last:
            msg = f"cannot go past attempt {self.max_retries} of {self.max_retries}"
            raise RuntimeError(msg)
        self.attempt_number += 1


@dataclass(frozen=True)
class RetryResult(Generic[T]):
    """Outcome of an ``execute`` call.

    Attributes:
        attempts: The number of attempts actually made.
        value: The value returned by the work on success.
        error: A ``RetryExhaustedError`` when the budget was consumed,
            ``None`` on success.
        total_time: Seconds spent on all attempts, delays included.
    """

    attempts: int
    value: T | None = None
    error: RetryExhaustedError | None = None
    total_time: float = 0.0

    @property
    def succeeded(self) -> bool:
        """Indicate if one of the attempts succeeded."""
        return self.error is None

    def unwrap(self) -> T | None:
        """Return the work value, or raise the exhaustion error.

        Raises:
            RetryExhaustedError: If no attempt succeeded.
        """
        if self.error is not None:
            raise self.error
        return self.value


class RetryExecutor:
    """Runs a unit of work with a fixed-delay retry policy.

    Args:
        config: The retry configuration.

    Example:
        ```pycon
        >>> from aretry import RetryConfig, RetryExecutor
        >>> executor = RetryExecutor(RetryConfig(max_retries=3, delay=1))
        >>> result = executor.execute(lambda: 42)
        >>> result.succeeded, result.value, result.attempts
        (True, 42, 1)

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config
        self.decider = RetryDecider(config.retryable_errors)
        self.callbacks = CallbackManager(on_retry=config.on_retry, on_finally=config.on_finally)

    def execute(self, work: Callable[[], T]) -> RetryResult[T]:
        """Run the work until success, exhaustion or a non-retryable error.

        Args:
            work: Zero-argument callable performing the operation. A
                failure is signalled by raising an exception.

        Returns:
            A successful ``RetryResult`` carrying the work value, or an
            exhausted one carrying a ``RetryExhaustedError``.

        Raises:
            Exception: The original failure, unchanged, when it is not
                one of the retryable errors. Errors raised by the hooks
                propagate as well.
        """
        max_retries = self.config.max_retries
        state = AttemptState(max_retries=max_retries)

        while True:
            attempt = state.attempt_number
            log_structured(
                logger,
                logging.DEBUG,
                f"Attempt {attempt} of {max_retries}",
                attempt=attempt,
                max_retries=max_retries,
            )
            try:
                value = work()
            except Exception as exc:
                state.last_error = exc
                decision = self.decider.decide(exc, attempt, max_retries)

                if decision is Decision.NON_RETRYABLE:
                    log_structured(
                        logger,
                        logging.ERROR,
                        f"Attempt {attempt} of {max_retries} failed with a non-retryable "
                        f"error: {exc}",
                        attempt=attempt,
                        max_retries=max_retries,
                        error_kind=kind_of(exc).value,
                        outcome=decision.value,
                    )
                    self.callbacks.on_finally(attempt, max_retries, exc)
                    raise

                if decision is Decision.EXHAUSTED:
                    error = RetryExhaustedError(
                        max_retries=max_retries, attempts=attempt, last_error=exc
                    )
                    log_structured(
                        logger,
                        logging.ERROR,
                        str(error),
                        attempt=attempt,
                        max_retries=max_retries,
                        error_kind=kind_of(exc).value,
                        outcome=decision.value,
                    )
                    self.callbacks.on_finally(attempt, max_retries, exc)
                    return RetryResult(attempts=attempt, error=error, total_time=state.elapsed)

                log_structured(
                    logger,
                    logging.WARNING,
                    f"Attempt {attempt} of {max_retries} failed: {exc}. "
                    f"Retrying in {self.config.delay:g} seconds...",
                    attempt=attempt,
                    max_retries=max_retries,
                    delay=self.config.delay,
                    error_kind=kind_of(exc).value,
                    outcome=decision.value,
                )
                self.callbacks.on_finally(attempt, max_retries, exc)
            else:
                self.callbacks.on_finally(attempt, max_retries, None)
                if attempt > 1:
                    log_structured(
                        logger,
                        logging.INFO,
                        f"Succeeded on attempt {attempt} of {max_retries}",
                        attempt=attempt,
                        max_retries=max_retries,
                        outcome="success",
                    )
                return RetryResult(attempts=attempt, value=value, total_time=state.elapsed)

            state.advance()
            self.callbacks.on_retry(
                state.attempt_number, max_retries, self.config.delay, state.last_error
            )
            time.sleep(self.config.delay)

