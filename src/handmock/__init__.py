"""
handmock - recording mock objects for hand-written test doubles.

Write an adapter that implements the real interface by forwarding each
method into a ``MockObject``, stub behavior through method handles, and
verify calls with the assertion helpers.
"""

from __future__ import annotations

from importlib.metadata import version as _metadata_version

from .assertions import (
    FailureKind,
    assert_and_get_argument,
    assert_argument_equals,
    assert_argument_is_none,
    assert_call_count,
)
from .core import (
    HandmockError,
    InvalidIndexError,
    MethodHandle,
    MockAssertionError,
    MockObject,
    UnknownMethodError,
)
from .reporting import (
    CollectingReporter,
    FailureReport,
    FailureReporter,
    RaisingReporter,
    SourceLocation,
    get_reporter,
    use_reporter,
)

__version__ = _metadata_version("handmock")

__all__ = [
    "__version__",
    "CollectingReporter",
    "FailureKind",
    "FailureReport",
    "FailureReporter",
    "HandmockError",
    "InvalidIndexError",
    "MethodHandle",
    "MockAssertionError",
    "MockObject",
    "RaisingReporter",
    "SourceLocation",
    "UnknownMethodError",
    "assert_and_get_argument",
    "assert_argument_equals",
    "assert_argument_is_none",
    "assert_call_count",
    "get_reporter",
    "use_reporter",
]
