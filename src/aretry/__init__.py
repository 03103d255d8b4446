r"""aretry - Retry a unit of work with a fixed delay between attempts.

This package re-invokes an unreliable operation (flaky I/O, network
calls, external commands) until it succeeds or a retry budget is
consumed, without a hand-written loop at every call site.

Key Features:
    - Bounded number of attempts with a fixed delay between them
    - Selective retry by error kind or exception class
    - on_retry callback before every retry, on_finally hook after every attempt
    - Exhaustion reported as a result, non-retryable errors raised unchanged
    - Structured (JSON) progress logging through the standard logging module
    - ``aretry`` command line tool to retry shell commands

Example:
    ```pycon
    >>> from aretry import ErrorKind, RetryConfig, execute
    >>> config = RetryConfig(max_retries=3, delay=5, retryable_errors={ErrorKind.TIMEOUT})
    >>> result = execute(lambda: "ok", config)
    >>> result.succeeded, result.attempts
    (True, 1)

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_RETRIES",
    "AttemptInfo",
    "CommandFailedError",
    "ErrorKind",
    "RetryConfig",
    "RetryError",
    "RetryExecutor",
    "RetryExhaustedError",
    "RetryInfo",
    "RetryResult",
    "__version__",
    "execute",
    "kind_of",
    "retry",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.api import execute, retry
from aretry.callbacks import AttemptInfo, RetryInfo
from aretry.core.config import DEFAULT_DELAY, DEFAULT_MAX_RETRIES, RetryConfig
from aretry.exceptions import CommandFailedError, RetryError, RetryExhaustedError
from aretry.kinds import ErrorKind, kind_of
from aretry.retry.executor import RetryExecutor, RetryResult

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
