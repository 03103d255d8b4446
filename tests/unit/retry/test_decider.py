r"""Unit tests for retry decision logic."""

from __future__ import annotations

import httpx
import pytest

from aretry import ErrorKind
from aretry.retry import Decision, RetryDecider


def test_retry_decider_creation() -> None:
    decider = RetryDecider([ErrorKind.TIMEOUT, OSError])
    assert decider.retryable_errors == frozenset({ErrorKind.TIMEOUT, OSError})


def test_retry_decider_default_retries_everything() -> None:
    decider = RetryDecider()
    assert decider.is_retryable(RuntimeError("boom"))
    assert decider.is_retryable(KeyError("k"))


@pytest.mark.parametrize(
    "error",
    [TimeoutError("slow"), httpx.ConnectTimeout("connect timed out"), httpx.PoolTimeout("pool")],
)
def test_retry_decider_kind_filter_matches(error: Exception) -> None:
    assert RetryDecider({ErrorKind.TIMEOUT}).is_retryable(error)


@pytest.mark.parametrize("error", [ValueError("bad"), ConnectionResetError("reset")])
def test_retry_decider_kind_filter_rejects(error: Exception) -> None:
    assert not RetryDecider({ErrorKind.TIMEOUT}).is_retryable(error)


def test_retry_decider_decide_retry() -> None:
    assert RetryDecider().decide(OSError("x"), attempt=1, max_retries=3) is Decision.RETRY


def test_retry_decider_decide_exhausted() -> None:
    assert RetryDecider().decide(OSError("x"), attempt=3, max_retries=3) is Decision.EXHAUSTED


def test_retry_decider_decide_exhausted_single_attempt() -> None:
    assert RetryDecider().decide(OSError("x"), attempt=1, max_retries=1) is Decision.EXHAUSTED


def test_retry_decider_decide_non_retryable_before_budget() -> None:
    decider = RetryDecider({ErrorKind.IO})
    assert decider.decide(KeyError("k"), attempt=1, max_retries=3) is Decision.NON_RETRYABLE
    assert decider.decide(KeyError("k"), attempt=3, max_retries=3) is Decision.NON_RETRYABLE
