"""Tests for injected predicates."""

from __future__ import annotations

import logging

import pytest

from stubmatch.exceptions import InjectionError
from stubmatch.predicates import register_injection, registered_injections, run_inject, unregister_injection

from .conftest import RecordingLogger


def test_returns_true_from_injected_function() -> None:
    assert run_inject("request", "lambda: True", {})


def test_returns_false_from_injected_function() -> None:
    assert not run_inject("request", "lambda: False", {})


def test_receives_whole_request() -> None:
    code = "lambda obj: obj['path'] == '/' and obj['method'] == 'GET'"
    assert run_inject("request", code, {"path": "/", "method": "GET"})


def test_receives_resolved_field() -> None:
    assert run_inject("path", "lambda path: path == '/'", {"path": "/"})
    assert run_inject("headers.HOST", "lambda host: host == 'example.com'", {"headers": {"host": "example.com"}})


def test_accepts_a_single_def() -> None:
    code = """
    import re

    def predicate(request):
        return re.match(r"^/users/\\d+$", request["path"]) is not None
    """
    assert run_inject("request", code, {"path": "/users/42"})
    assert not run_inject("request", code, {"path": "/users/me"})


def test_accepts_a_decorated_def() -> None:
    code = "@staticmethod\ndef predicate():\n    return True\n"
    assert run_inject("request", code, {})


def test_return_value_is_used_as_is() -> None:
    assert run_inject("request", "lambda: 'yes'", {}) == "yes"


def test_logs_and_normalizes_exceptions(recording_logger: RecordingLogger) -> None:
    code = "def predicate():\n    raise ValueError('BOOM!!!')\n"
    with pytest.raises(InjectionError) as exc_info:
        run_inject("path", code, {"path": "/"}, "utf8", recording_logger)
    assert str(exc_info.value) == "invalid predicate injection"
    assert exc_info.value.message == "invalid predicate injection"
    assert "injection X=> ValueError: BOOM!!!" in recording_logger.errors


def test_underlying_error_is_not_chained(recording_logger: RecordingLogger) -> None:
    with pytest.raises(InjectionError) as exc_info:
        run_inject("request", "lambda: 1 / 0", {}, None, recording_logger)
    assert exc_info.value.__cause__ is None
    assert exc_info.value.__suppress_context__
    assert recording_logger.errors == ["injection X=> ZeroDivisionError: division by zero"]


@pytest.mark.parametrize(
    "code",
    [
        "lambda request:",
        "x = 1",
        "def a(): return True\ndef b(): return False",
        "42",
    ],
)
def test_code_that_is_not_one_callable_is_an_injection_error(code: str, recording_logger: RecordingLogger) -> None:
    with pytest.raises(InjectionError, match="invalid predicate injection"):
        run_inject("request", code, {}, None, recording_logger)
    assert len(recording_logger.errors) == 1
    assert recording_logger.errors[0].startswith("injection X=> ")


def test_defaults_to_module_logger(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="stubmatch.predicates.operations.injection"):
        with pytest.raises(InjectionError):
            run_inject("request", "lambda: [][1]", {})
    assert "injection X=> IndexError: list index out of range" in caplog.text


def test_registered_callable() -> None:
    register_injection("is_root", lambda path: path == "/")
    assert registered_injections() == ("is_root",)
    assert run_inject("path", "@is_root", {"path": "/"})
    assert not run_inject("path", "@is_root", {"path": "/other"})


def test_unknown_registered_callable(recording_logger: RecordingLogger) -> None:
    with pytest.raises(InjectionError):
        run_inject("request", "@missing", {}, None, recording_logger)
    assert recording_logger.errors == ["injection X=> LookupError: no injection registered as 'missing'"]


def test_unregister_injection() -> None:
    register_injection("always", lambda: True)
    unregister_injection("always")
    unregister_injection("never_registered")
    assert registered_injections() == ()


def test_register_rejects_non_callables() -> None:
    with pytest.raises(TypeError, match="must be callable"):
        register_injection("bad", "lambda: True")  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="non-empty"):
        register_injection("", lambda: True)
    with pytest.raises(ValueError, match="identifier"):
        register_injection("is-root", lambda: True)


def test_system_exit_is_contained(recording_logger: RecordingLogger) -> None:
    code = "def predicate():\n    raise SystemExit(3)\n"
    with pytest.raises(InjectionError, match="invalid predicate injection"):
        run_inject("request", code, {}, None, recording_logger)
    assert recording_logger.errors == ["injection X=> SystemExit: 3"]


def test_keyboard_interrupt_propagates(recording_logger: RecordingLogger) -> None:
    code = "def predicate():\n    raise KeyboardInterrupt\n"
    with pytest.raises(KeyboardInterrupt):
        run_inject("request", code, {}, None, recording_logger)
    assert recording_logger.errors == []
