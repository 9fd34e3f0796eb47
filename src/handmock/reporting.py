"""
Failure reporting for mock assertions.

Assertions never stop a test themselves. Every failure is handed to a
``FailureReporter``, and the reporter decides what a failure means: raise
immediately, collect for the end of the test, or record for inspection by
tests of the framework itself.

Usage:
    from handmock.reporting import CollectingReporter, use_reporter

    reporter = CollectingReporter()
    with use_reporter(reporter):
        assert_call_count(cat.method_reference(CatMethods.FEED), 2)
    assert reporter.failures[0].description.startswith("Expected CatMethods.FEED")
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from handmock.core.errors import MockAssertionError

logger = logging.getLogger(__name__)

_PACKAGE = "handmock"


class SourceLocation(BaseModel):
    """File and line a failure is attributed to."""

    model_config = ConfigDict(frozen=True)

    filename: str
    lineno: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno}"


class FailureReport(BaseModel):
    """One reported assertion failure."""

    model_config = ConfigDict(frozen=True)

    description: str
    location: SourceLocation

    def __str__(self) -> str:
        return f"{self.location}: {self.description}"


def caller_location() -> SourceLocation:
    """Locate the innermost stack frame outside the handmock package.

    Returns:
        The location of the test code that called into handmock, or
        ``<unknown>:0`` if every frame belongs to handmock.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None:
            module = frame.f_globals.get("__name__", "")
            if module != _PACKAGE and not module.startswith(_PACKAGE + "."):
                return SourceLocation(filename=frame.f_code.co_filename, lineno=frame.f_lineno)
            frame = frame.f_back
    finally:
        del frame
    return SourceLocation(filename="<unknown>", lineno=0)


# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class FailureReporter(Protocol):
    """Receives non-fatal assertion failures."""

    def report_failure(self, description: str, location: SourceLocation) -> None:
        """Handle one failure attributed to ``location``."""
        ...


# =============================================================================
# Reporters
# =============================================================================


class RaisingReporter:
    """Raises ``MockAssertionError`` on the first reported failure."""

    def report_failure(self, description: str, location: SourceLocation) -> None:
        logger.debug("Mock assertion failed at %s: %s", location, description)
        raise MockAssertionError(f"{description} ({location})")


class CollectingReporter:
    """Records failures without interrupting the caller.

    Attributes:
        failures: Reported failures, oldest first.
    """

    def __init__(self) -> None:
        self.failures: list[FailureReport] = []

    def report_failure(self, description: str, location: SourceLocation) -> None:
        logger.debug("Mock assertion failed at %s: %s", location, description)
        self.failures.append(FailureReport(description=description, location=location))

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    @property
    def descriptions(self) -> list[str]:
        return [f.description for f in self.failures]

    def clear(self) -> None:
        self.failures.clear()

    def summary(self) -> str:
        """All failures as one block of text, one per line."""
        count = len(self.failures)
        lines = [f"{count} mock assertion failure(s):"]
        lines.extend(f"  {failure}" for failure in self.failures)
        return "\n".join(lines)

    def raise_if_failed(self) -> None:
        """Raise ``MockAssertionError`` summarising all failures, if any."""
        if self.failures:
            raise MockAssertionError(self.summary())


# =============================================================================
# Context-local default
# =============================================================================

_DEFAULT_REPORTER = RaisingReporter()

_current_reporter: ContextVar[FailureReporter | None] = ContextVar(
    "handmock_reporter", default=None
)


def get_reporter() -> FailureReporter:
    """Get the reporter for the current context (raising if none installed)."""
    reporter = _current_reporter.get()
    return _DEFAULT_REPORTER if reporter is None else reporter


@contextmanager
def use_reporter(reporter: FailureReporter) -> Iterator[FailureReporter]:
    """Install ``reporter`` as the default for the duration of the block."""
    token = _current_reporter.set(reporter)
    try:
        yield reporter
    finally:
        _current_reporter.reset(token)
