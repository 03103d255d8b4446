from __future__ import annotations

import pickle

from aretry import CommandFailedError, ErrorKind, RetryError, RetryExhaustedError


def test_retry_exhausted_error_message() -> None:
    last = ConnectionError("connection reset")
    error = RetryExhaustedError(max_retries=5, attempts=5, last_error=last)

    assert str(error) == "Maximum retries (5) reached. Last error: connection reset"
    assert error.max_retries == 5
    assert error.attempts == 5
    assert error.last_error is last
    assert error.__cause__ is last
    assert isinstance(error, RetryError)


def test_command_failed_error() -> None:
    error = CommandFailedError(["curl", "-f", "https://example.com"], 22)

    assert str(error) == "command 'curl -f https://example.com' exited with status 22"
    assert error.command == ("curl", "-f", "https://example.com")
    assert error.returncode == 22
    assert error.kind is ErrorKind.COMMAND
    assert isinstance(error, RetryError)


def test_retry_exhausted_error_pickle() -> None:
    error = RetryExhaustedError(max_retries=3, attempts=3, last_error=OSError("disk"))
    restored = pickle.loads(pickle.dumps(error))  # noqa: S301

    assert isinstance(restored, RetryExhaustedError)
    assert str(restored) == str(error)
    assert restored.max_retries == 3
    assert restored.attempts == 3
    assert isinstance(restored.last_error, OSError)
    assert str(restored.last_error) == "disk"
    assert restored.__cause__ is restored.last_error


def test_command_failed_error_pickle() -> None:
    error = CommandFailedError(["false"], 1)
    restored = pickle.loads(pickle.dumps(error))  # noqa: S301

    assert isinstance(restored, CommandFailedError)
    assert str(restored) == str(error)
    assert restored.command == ("false",)
    assert restored.returncode == 1
    assert restored.kind is ErrorKind.COMMAND
