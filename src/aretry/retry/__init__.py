r"""Retry package implementing the retry loop by composition.

Public API:
    - RetryDecider: Classifies a failed attempt
    - CallbackManager: Runs the on_retry and on_finally hooks
    - RetryExecutor: Synchronous retry executor
    - RetryResult: Outcome of one execution
    - AttemptState: Call-local attempt counter
"""

from __future__ import annotations

__all__ = [
    "AttemptState",
    "CallbackManager",
    "Decision",
    "RetryDecider",
    "RetryExecutor",
    "RetryResult",
]

from aretry.retry.decider import Decision, RetryDecider
from aretry.retry.executor import AttemptState, RetryExecutor, RetryResult
from aretry.retry.manager import CallbackManager
