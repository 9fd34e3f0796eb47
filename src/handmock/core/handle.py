"""Method handles: stub configuration scoped to one (mock, method) pair."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from handmock.core.mock_object import method_name
from handmock.core.records import Args, ReturningBehavior, VoidBehavior

if TYPE_CHECKING:
    from handmock.core.mock_object import MockObject

logger = logging.getLogger(__name__)

K = TypeVar("K")


@dataclass(frozen=True)
class MethodHandle(Generic[K]):
    """A reference to a method that supports stubbing behaviors and return values.

    Obtain one with ``mock.method_reference(key)``. Handles only configure;
    recorded calls are read through ``handmock.assertions``.
    """

    mock: MockObject[K]
    method: K

    def set_return_value(self, value: Any) -> None:
        """Always return ``value``, ignoring arguments."""
        self.set_custom_behavior(lambda _args: value)

    def set_return_none(self) -> None:
        """Always return None."""
        self.set_return_value(None)

    def set_custom_behavior(self, behavior: Callable[[Args], Any]) -> None:
        """Run ``behavior(args)`` on each call and return its result.

        The arguments arrive as a tuple in parameter order. Replaces any void
        behavior.
        """
        self.mock.record_for(self.method).behavior = ReturningBehavior(behavior)
        logger.debug("Returning behavior set for %s", method_name(self.method))

    def set_custom_void_behavior(self, behavior: Callable[[Args], Any]) -> None:
        """Run ``behavior(args)`` on each call, discarding its result.

        Replaces any returning behavior.
        """
        self.mock.record_for(self.method).behavior = VoidBehavior(behavior)
        logger.debug("Void behavior set for %s", method_name(self.method))
