"""
Per-method bookkeeping for mock objects.

A ``MethodRecord`` holds the ordered invocation history of one method and
its single behavior slot. The slot holds at most one behavior variant, so
installing a returning behavior replaces a void one and vice versa.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

Args = tuple[Any, ...]


@dataclass(frozen=True)
class InvocationRecord:
    """Arguments captured for a single call, in parameter order.

    ``None`` entries are recorded values, distinct from arguments that were
    never supplied (indices past ``len(args)``).
    """

    args: Args = ()

    def __len__(self) -> int:
        return len(self.args)


@dataclass(frozen=True)
class ReturningBehavior:
    """Substitute logic whose result is handed back to the call site."""

    fn: Callable[[Args], Any]

    def __call__(self, args: Args) -> Any:
        return self.fn(args)


@dataclass(frozen=True)
class VoidBehavior:
    """Substitute logic run for its side effects only."""

    fn: Callable[[Args], Any]

    def __call__(self, args: Args) -> None:
        self.fn(args)


Behavior = ReturningBehavior | VoidBehavior


@dataclass
class MethodRecord:
    """Call history and configured behavior for one method key.

    Attributes:
        behavior: The active behavior, or None when unconfigured.
    """

    behavior: Behavior | None = None
    _invocations: list[InvocationRecord] = field(default_factory=list, repr=False)

    @property
    def times_called(self) -> int:
        """Number of recorded calls. Always equal to ``len(self.invocations)``."""
        return len(self._invocations)

    @property
    def invocations(self) -> tuple[InvocationRecord, ...]:
        """Recorded invocations, oldest first."""
        return tuple(self._invocations)

    def record(self, args: Args) -> InvocationRecord:
        """Append an invocation and return it."""
        invocation = InvocationRecord(tuple(args))
        self._invocations.append(invocation)
        return invocation
