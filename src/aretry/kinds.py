r"""Error kinds used for selective retry.

A failure raised by a unit of work is reduced to an ``ErrorKind`` tag.
The executor compares that tag (or the runtime type of the failure)
against the configured retryable classifiers to decide whether the
failure is worth another attempt.
"""

from __future__ import annotations

__all__ = ["ErrorKind", "kind_of", "matches_kind"]

import inspect
from enum import Enum
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Iterable


class ErrorKind(str, Enum):
    """Category of a failure raised by a unit of work."""

    TIMEOUT = "timeout"
    CONNECTION = "connection"
    HTTP_STATUS = "http_status"
    NOT_FOUND = "not_found"
    PERMISSION = "permission"
    IO = "io"
    COMMAND = "command"
    VALUE = "value"
    OTHER = "other"


# Ordered from most to least specific: TimeoutError and ConnectionError
# are OSError subclasses, httpx.TimeoutException is a TransportError.
_TYPE_KINDS: tuple[tuple[tuple[type[BaseException], ...], ErrorKind], ...] = (
    ((httpx.TimeoutException, TimeoutError), ErrorKind.TIMEOUT),
    ((httpx.HTTPStatusError,), ErrorKind.HTTP_STATUS),
    ((httpx.TransportError, ConnectionError), ErrorKind.CONNECTION),
    ((FileNotFoundError,), ErrorKind.NOT_FOUND),
    ((PermissionError,), ErrorKind.PERMISSION),
    ((OSError,), ErrorKind.IO),
    ((ValueError, TypeError), ErrorKind.VALUE),
)


def kind_of(error: BaseException) -> ErrorKind:
    """Return the kind of a failure.

    An exception exposing a plain ``kind`` attribute (class or instance
    level) holding an ``ErrorKind`` is classified by that tag. Computed
    attributes such as properties are not evaluated. Other exceptions
    are classified by their runtime type.

    Args:
        error: The failure to classify.

    Returns:
        The error kind, ``ErrorKind.OTHER`` when nothing matches.

    Example:
        ```pycon
        >>> from aretry.kinds import kind_of
        >>> kind_of(TimeoutError("slow"))
        <ErrorKind.TIMEOUT: 'timeout'>
        >>> kind_of(FileNotFoundError("missing.txt"))
        <ErrorKind.NOT_FOUND: 'not_found'>
        >>> kind_of(RuntimeError("boom"))
        <ErrorKind.OTHER: 'other'>

        ```
    """
    # never evaluates descriptors on the failure
    tag = inspect.getattr_static(error, "kind", None)
    if isinstance(tag, ErrorKind):
        return tag
    for types, kind in _TYPE_KINDS:
        if isinstance(error, types):
            return kind
    return ErrorKind.OTHER


def matches_kind(error: BaseException, classifiers: Iterable[ErrorKind | type]) -> bool:
    """Indicate if a failure matches any of the retryable classifiers.

    Args:
        error: The failure to test.
        classifiers: ``ErrorKind`` members and/or exception classes.
            An empty collection matches every failure.

    Returns:
        ``True`` if the failure is retryable under these classifiers.

    Example:
        ```pycon
        >>> from aretry.kinds import ErrorKind, matches_kind
        >>> matches_kind(TimeoutError(), set())
        True
        >>> matches_kind(TimeoutError(), {ErrorKind.TIMEOUT})
        True
        >>> matches_kind(KeyError("k"), {ErrorKind.TIMEOUT, LookupError})
        True
        >>> matches_kind(ValueError(), {ErrorKind.TIMEOUT})
        False

        ```
    """
    classifiers = tuple(classifiers)
    if not classifiers:
        return True
    kind = kind_of(error)
    for classifier in classifiers:
        if isinstance(classifier, ErrorKind):
            if classifier is kind:
                return True
        elif isinstance(error, classifier):
            return True
    return False
