"""
Error types for handmock.

These cover misuse of the library by test code. Assertion failures are never
raised from here; they flow through a ``FailureReporter`` instead.
"""

from __future__ import annotations

from typing import Any


class HandmockError(Exception):
    """Base exception for all handmock errors."""


class UnknownMethodError(HandmockError, TypeError):
    """
    Raised when a method key does not belong to the mock's key enum.

    Examples:
    - Dispatching ``DogMethods.BARK`` into a ``MockObject[CatMethods]``
    - Asking for a method reference with a plain string on an enum-keyed mock
    """

    def __init__(self, key: Any, expected: type) -> None:
        self.key = key
        self.expected = expected
        super().__init__(f"{key!r} is not a member of {expected.__name__}")


class InvalidIndexError(HandmockError, IndexError):
    """Raised when an argument or invocation index is below 1 (indices are 1-based)."""

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be 1 or greater, got {value}")


class MockAssertionError(HandmockError, AssertionError):
    """Raised by ``RaisingReporter`` for a reported assertion failure."""
