r"""Callback manager for the retry lifecycle hooks."""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

from aretry.callbacks import invoke_on_finally, invoke_on_retry

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.callbacks import AttemptInfo, RetryInfo


class CallbackManager:
    """Manages hook invocations during the retry lifecycle.

    Hook errors are not caught: a defect in a caller supplied hook
    propagates out of the executor as is.

    Args:
        on_retry: Optional callback invoked before each retry.
        on_finally: Optional hook invoked after every attempt.
    """

    def __init__(
        self,
        on_retry: Callable[[RetryInfo], Any] | None = None,
        on_finally: Callable[[AttemptInfo], Any] | None = None,
    ) -> None:
        self.on_retry_callback = on_retry
        self.on_finally_callback = on_finally

    def on_retry(self, attempt: int, max_retries: int, delay: float, error: BaseException) -> None:
        """Invoke on_retry callback.

        Args:
            attempt: The upcoming attempt number (1-indexed).
            max_retries: The configured attempt budget.
            delay: The wait before the upcoming attempt.
            error: The failure that triggered the retry.
        """
        invoke_on_retry(
            self.on_retry_callback,
            attempt=attempt,
            max_retries=max_retries,
            delay=delay,
            error=error,
        )

    def on_finally(self, attempt: int, max_retries: int, error: BaseException | None) -> None:
        """Invoke on_finally hook.

        Args:
            attempt: The attempt that just finished (1-indexed).
            max_retries: The configured attempt budget.
            error: The failure of the attempt, ``None`` on success.
        """
        invoke_on_finally(
            self.on_finally_callback,
            attempt=attempt,
            max_retries=max_retries,
            error=error,
        )
