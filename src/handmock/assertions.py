"""
Assertion helpers for mock objects.

Every function takes a ``MethodHandle`` and checks the calls recorded for
that method. Mismatches are reported to a ``FailureReporter`` (the one passed
as ``reporter``, else the context default) and never raised from here, so one
failed check does not prevent the next from running.

Argument and invocation indices are 1-based, matching the failure text
("Argument #1", "called 2 time(s)"). When ``invocation_index`` is omitted the
most recent call is used.

Example::

    human.wake_up(is_feeling_generous=True)

    assert_call_count(cat.method_reference(CatMethods.GIVE_TREAT), 1)
    assert_argument_equals(cat.method_reference(CatMethods.FEED), 1, 5)
    name = assert_and_get_argument(cat.method_reference(CatMethods.CALL), 1, expected_type=str)
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from handmock.core.errors import InvalidIndexError
from handmock.core.handle import MethodHandle
from handmock.core.mock_object import matches_type, method_name
from handmock.reporting import FailureReporter, SourceLocation, caller_location, get_reporter


class FailureKind(StrEnum):
    """Kinds of assertion failure."""

    NOT_CALLED_ENOUGH_TIMES = "not_called_enough_times"
    NOT_ENOUGH_ARGUMENTS = "not_enough_arguments"
    TYPE_MISMATCH = "type_mismatch"
    COUNT_MISMATCH = "count_mismatch"
    VALUE_MISMATCH = "value_mismatch"
    EXPECTED_NONE_MISMATCH = "expected_none_mismatch"


_DESCRIPTIONS: dict[FailureKind, str] = {
    FailureKind.COUNT_MISMATCH: (
        "Expected {method} to be called {expected} time(s) "
        "but was actually called {actual} time(s)."
    ),
    FailureKind.NOT_CALLED_ENOUGH_TIMES: (
        "{method} was not called {expected} time(s) (was called {actual} time(s))."
    ),
    FailureKind.NOT_ENOUGH_ARGUMENTS: (
        "{method} was not called with at least {expected} argument(s)."
    ),
    FailureKind.TYPE_MISMATCH: "Argument #{arg}: expected type {expected} but got type {actual}",
    FailureKind.VALUE_MISMATCH: "Argument #{arg}: expected {expected!r} but got {actual!r}",
    FailureKind.EXPECTED_NONE_MISMATCH: "Argument #{arg}: expected None but got {actual!r}",
}


def describe_failure(kind: FailureKind, **fields: Any) -> str:
    """Render the failure text for ``kind``."""
    return _DESCRIPTIONS[kind].format(**fields)


def _type_name(expected_type: Any) -> str:
    if isinstance(expected_type, tuple):
        return " | ".join(_type_name(t) for t in expected_type)
    if isinstance(expected_type, type):
        return expected_type.__qualname__
    return str(expected_type)


def _check_index(name: str, value: int) -> None:
    if value < 1:
        raise InvalidIndexError(name, value)


def _get_argument(
    handle: MethodHandle[Any],
    arg_index: int,
    invocation_index: int | None,
    expected_type: Any,
    reporter: FailureReporter,
    location: SourceLocation,
) -> tuple[Any, bool]:
    """Fetch an argument, reporting any failure.

    Returns:
        (value, failed). ``value`` is None whenever ``failed`` is True, and also
        when the recorded argument itself was None.
    """
    _check_index("arg_index", arg_index)
    invocations = handle.mock.record_for(handle.method).invocations
    # Never-called methods resolve to invocation 1 so the failure names "1 time(s)".
    which = invocation_index if invocation_index is not None else max(len(invocations), 1)
    _check_index("invocation_index", which)

    name = method_name(handle.method)
    if len(invocations) < which:
        reporter.report_failure(
            describe_failure(
                FailureKind.NOT_CALLED_ENOUGH_TIMES,
                method=name,
                expected=which,
                actual=len(invocations),
            ),
            location,
        )
        return None, True

    args = invocations[which - 1].args
    if len(args) < arg_index:
        reporter.report_failure(
            describe_failure(FailureKind.NOT_ENOUGH_ARGUMENTS, method=name, expected=arg_index),
            location,
        )
        return None, True

    value = args[arg_index - 1]
    if value is None:
        return None, False

    if not matches_type(value, expected_type):
        reporter.report_failure(
            describe_failure(
                FailureKind.TYPE_MISMATCH,
                arg=arg_index,
                expected=_type_name(expected_type),
                actual=type(value).__qualname__,
            ),
            location,
        )
        return None, True

    return value, False


def assert_call_count(
    handle: MethodHandle[Any],
    expected: int,
    *,
    reporter: FailureReporter | None = None,
) -> None:
    """Assert that the method was called exactly ``expected`` times."""
    if reporter is None:
        reporter = get_reporter()
    actual = handle.mock.record_for(handle.method).times_called
    if actual != expected:
        reporter.report_failure(
            describe_failure(
                FailureKind.COUNT_MISMATCH,
                method=method_name(handle.method),
                expected=expected,
                actual=actual,
            ),
            caller_location(),
        )


def assert_and_get_argument(
    handle: MethodHandle[Any],
    arg_index: int,
    invocation_index: int | None = None,
    *,
    expected_type: Any = object,
    reporter: FailureReporter | None = None,
) -> Any | None:
    """Assert that the method was called and return one of its arguments.

    Args:
        handle: The method to inspect.
        arg_index: Which argument, starting from 1.
        invocation_index: Which call, starting from 1. None uses the most recent.
        expected_type: Anything ``isinstance`` accepts, or a generic such as
            ``list[int]`` (checked by origin). A recorded value of another type is
            reported as a type mismatch.
        reporter: Where failures go. Defaults to the context reporter.

    Returns:
        The argument, or None if it was recorded as None or a failure was reported.

    Example::

        arg = assert_and_get_argument(mock.method_reference(Methods.WITH_COMPLEX_ARG), 1,
                                      expected_type=ComplexArg)
        assert arg.key == "count"
    """
    if reporter is None:
        reporter = get_reporter()
    value, _ = _get_argument(
        handle, arg_index, invocation_index, expected_type, reporter, caller_location()
    )
    return value


def assert_argument_equals(
    handle: MethodHandle[Any],
    arg_index: int,
    expected: Any,
    *,
    invocation_index: int | None = None,
    reporter: FailureReporter | None = None,
) -> None:
    """Assert that an argument equals ``expected``.

    The recorded value must be an instance of ``type(expected)`` before it is
    compared with ``==``; a different type is reported as a type mismatch.
    """
    if reporter is None:
        reporter = get_reporter()
    location = caller_location()
    expected_type = object if expected is None else type(expected)
    value, failed = _get_argument(
        handle, arg_index, invocation_index, expected_type, reporter, location
    )
    if failed:
        return
    if value != expected:
        reporter.report_failure(
            describe_failure(
                FailureKind.VALUE_MISMATCH, arg=arg_index, expected=expected, actual=value
            ),
            location,
        )


def assert_argument_is_none(
    handle: MethodHandle[Any],
    arg_index: int,
    invocation_index: int | None = None,
    *,
    reporter: FailureReporter | None = None,
) -> None:
    """Assert that an argument was recorded as None."""
    if reporter is None:
        reporter = get_reporter()
    location = caller_location()
    value, failed = _get_argument(handle, arg_index, invocation_index, object, reporter, location)
    if failed:
        return
    if value is not None:
        reporter.report_failure(
            describe_failure(FailureKind.EXPECTED_NONE_MISMATCH, arg=arg_index, actual=value),
            location,
        )
