"""Mock objects, method records and method handles."""

from __future__ import annotations

from handmock.core.errors import (
    HandmockError,
    InvalidIndexError,
    MockAssertionError,
    UnknownMethodError,
)
from handmock.core.handle import MethodHandle
from handmock.core.mock_object import MockObject, method_name
from handmock.core.records import (
    Behavior,
    InvocationRecord,
    MethodRecord,
    ReturningBehavior,
    VoidBehavior,
)

__all__ = [
    "Behavior",
    "HandmockError",
    "InvalidIndexError",
    "InvocationRecord",
    "MethodHandle",
    "MethodRecord",
    "MockAssertionError",
    "MockObject",
    "ReturningBehavior",
    "UnknownMethodError",
    "VoidBehavior",
    "method_name",
]
