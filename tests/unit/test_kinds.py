from __future__ import annotations

import httpx
import pytest

from aretry import CommandFailedError, ErrorKind, kind_of
from aretry.kinds import matches_kind

REQUEST = httpx.Request("GET", "https://example.com")


class TaggedError(Exception):
    kind = ErrorKind.CONNECTION


class UntaggedError(Exception):
    kind = "connection"


class InstanceTaggedError(Exception):
    def __init__(self) -> None:
        super().__init__("tagged")
        self.kind = ErrorKind.TIMEOUT


class BrokenKindError(OSError):
    @property
    def kind(self) -> ErrorKind:
        msg = "kind lookup failed"
        raise RuntimeError(msg)


#############################
#     Tests for kind_of     #
#############################


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (TimeoutError("slow"), ErrorKind.TIMEOUT),
        (httpx.ReadTimeout("read", request=REQUEST), ErrorKind.TIMEOUT),
        (httpx.ConnectTimeout("connect"), ErrorKind.TIMEOUT),
        (
            httpx.HTTPStatusError(
                "503", request=REQUEST, response=httpx.Response(503, request=REQUEST)
            ),
            ErrorKind.HTTP_STATUS,
        ),
        (httpx.ConnectError("refused"), ErrorKind.CONNECTION),
        (httpx.RemoteProtocolError("eof"), ErrorKind.CONNECTION),
        (ConnectionRefusedError("refused"), ErrorKind.CONNECTION),
        (FileNotFoundError("missing.txt"), ErrorKind.NOT_FOUND),
        (PermissionError("denied"), ErrorKind.PERMISSION),
        (OSError("disk"), ErrorKind.IO),
        (IsADirectoryError("dir"), ErrorKind.IO),
        (ValueError("bad"), ErrorKind.VALUE),
        (TypeError("bad"), ErrorKind.VALUE),
        (KeyError("k"), ErrorKind.OTHER),
        (RuntimeError("boom"), ErrorKind.OTHER),
    ],
)
def test_kind_of_runtime_type(error: Exception, kind: ErrorKind) -> None:
    assert kind_of(error) is kind


def test_kind_of_uses_kind_tag() -> None:
    assert kind_of(TaggedError()) is ErrorKind.CONNECTION


def test_kind_of_ignores_non_enum_tag() -> None:
    assert kind_of(UntaggedError()) is ErrorKind.OTHER


def test_kind_of_uses_instance_tag() -> None:
    assert kind_of(InstanceTaggedError()) is ErrorKind.TIMEOUT


def test_kind_of_does_not_evaluate_kind_property() -> None:
    assert kind_of(BrokenKindError("disk")) is ErrorKind.IO


def test_kind_of_command_failed_error() -> None:
    assert kind_of(CommandFailedError(["false"], 1)) is ErrorKind.COMMAND


def test_error_kind_values_are_strings() -> None:
    assert ErrorKind("timeout") is ErrorKind.TIMEOUT
    assert ErrorKind.IO == "io"


##################################
#     Tests for matches_kind     #
##################################


def test_matches_kind_empty_matches_everything() -> None:
    assert matches_kind(RuntimeError(), ())
    assert matches_kind(KeyError(), frozenset())


def test_matches_kind_by_kind() -> None:
    assert matches_kind(TimeoutError(), {ErrorKind.TIMEOUT})
    assert not matches_kind(TimeoutError(), {ErrorKind.IO})


def test_matches_kind_by_exception_class() -> None:
    assert matches_kind(ConnectionResetError(), {ConnectionError})
    assert matches_kind(ConnectionResetError(), {OSError})
    assert not matches_kind(ValueError(), {OSError})


def test_matches_kind_mixed_classifiers() -> None:
    classifiers = {ErrorKind.TIMEOUT, KeyError}
    assert matches_kind(KeyError("k"), classifiers)
    assert matches_kind(httpx.WriteTimeout("write"), classifiers)
    assert not matches_kind(ValueError(), classifiers)
