import inspect

import pytest

from zenithengine.exceptions import (
    InitializationError,
    ResourceNotFoundError,
    ZenithError,
)


def test_base_error_message_with_explicit_origin():
    err = ZenithError(line=10, file="a.cpp")
    assert str(err) == "Engine Exception\n[File] a.cpp\n[Line] 10"


def test_origin_string():
    err = ZenithError(line=7, file="x.py")
    assert err.origin_string() == "[File] x.py\n[Line] 7"


def test_origin_captured_from_caller():
    expected_line = inspect.currentframe().f_lineno + 1
    err = ResourceNotFoundError("missing.png")
    assert err.line == expected_line
    assert err.file == __file__


def test_resource_not_found_message():
    err = ResourceNotFoundError("res/a.ogg", line=3, file="f.py")
    assert err.path == "res/a.ogg"
    assert str(err).splitlines() == [
        "Resource Not Found",
        "[Missing File] res/a.ogg",
        "[File] f.py",
        "[Line] 3",
    ]


def test_initialization_error_message():
    err = InitializationError("Failed to load OpenGL functions!", line=1, file="g.py")
    lines = str(err).splitlines()
    assert lines[0] == "Initialization Error"
    assert lines[1] == "[Error Details] Failed to load OpenGL functions!"
    assert err.details == "Failed to load OpenGL functions!"


def test_errors_share_base_and_raise():
    err = InitializationError("boom")
    assert str(err).splitlines()[:2] == ["Initialization Error", "[Error Details] boom"]
    assert err.details == "boom"
    assert err.file == __file__
    assert issubclass(InitializationError, ZenithError)
    assert issubclass(ResourceNotFoundError, ZenithError)
    with pytest.raises(ZenithError, match=r"\[Error Details\] boom"):
        raise err