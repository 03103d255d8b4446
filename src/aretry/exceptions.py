r"""Exceptions raised or reported by aretry."""

from __future__ import annotations

__all__ = ["CommandFailedError", "RetryError", "RetryExhaustedError"]

from typing import TYPE_CHECKING

from aretry.kinds import ErrorKind

if TYPE_CHECKING:
    from collections.abc import Sequence


class RetryError(Exception):
    """Base class of the errors defined by aretry."""


class RetryExhaustedError(RetryError):
    """Report that the retry budget was consumed without a success.

    The executor returns this error inside a ``RetryResult`` instead of
    raising it. The last failure of the work is available as
    ``last_error`` and as ``__cause__``.

    Args:
        max_retries: The configured attempt budget.
        attempts: The number of attempts actually made.
        last_error: The failure raised by the final attempt.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryExhaustedError
        >>> error = RetryExhaustedError(max_retries=3, attempts=3, last_error=OSError("disk"))
        >>> str(error)
        'Maximum retries (3) reached. Last error: disk'

        ```
    """

    def __init__(self, max_retries: int, attempts: int, last_error: BaseException) -> None:
        super().__init__(f"Maximum retries ({max_retries}) reached. Last error: {last_error}")
        self.max_retries = max_retries
        self.attempts = attempts
        self.last_error = last_error
        self.__cause__ = last_error

    def __reduce__(self) -> tuple[type[RetryExhaustedError], tuple[int, int, BaseException]]:
        return (type(self), (self.max_retries, self.attempts, self.last_error))


class CommandFailedError(RetryError):
    """Raised when an external command exits with a non-zero status.

    Args:
        command: The command and its arguments.
        returncode: The exit status of the command.
    """

    kind = ErrorKind.COMMAND

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        super().__init__(f"command {' '.join(command)!r} exited with status {returncode}")
        self.command = tuple(command)
        self.returncode = returncode

    def __reduce__(self) -> tuple[type[CommandFailedError], tuple[tuple[str, ...], int]]:
        return (type(self), (self.command, self.returncode))
