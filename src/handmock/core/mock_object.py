"""
Base class for hand-written mock objects.

To mock ``CatProtocol``, declare an enum naming its methods and subclass
``MockObject`` parameterised with that enum. Each method body forwards into
``dispatch`` (no return value) or ``dispatch_returning`` (with a default)::

    class CatMethods(Enum):
        FEED = auto()
        GIVE_TOY = auto()
        CALL = auto()


    class MockCat(MockObject[CatMethods], CatProtocol):
        def feed(self, times: int) -> None:
            self.dispatch(CatMethods.FEED, times)

        def give_toy(self) -> bool:
            return self.dispatch_returning(CatMethods.GIVE_TOY, default=False, returns=bool)

        def call(self, name: str, response: Callable[[bool], None]) -> None:
            self.dispatch(CatMethods.CALL, name, response)

Tests then stub behavior through ``mock.method_reference(key)`` and verify
calls with the functions in ``handmock.assertions``.
"""

from __future__ import annotations

import logging
import types
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Generic,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from handmock.core.errors import UnknownMethodError
from handmock.core.records import MethodRecord, ReturningBehavior, VoidBehavior

if TYPE_CHECKING:
    from handmock.core.handle import MethodHandle

logger = logging.getLogger(__name__)

K = TypeVar("K")


def method_name(key: Any) -> str:
    """Render a method key for failure text, e.g. ``CatMethods.FEED``."""
    if isinstance(key, Enum):
        return f"{type(key).__name__}.{key.name}"
    return str(key)


def matches_type(value: Any, expected: Any) -> bool:
    """Check a value against a call-site type without raising.

    Accepts what ``isinstance`` accepts plus parameterised generics such as
    ``list[int]`` or ``dict[str, Any]``, alone or inside unions. Generics are
    checked by their origin only, so element types are not inspected.
    """
    if expected is Any:
        return True
    if isinstance(expected, tuple):
        return any(matches_type(value, option) for option in expected)
    origin = get_origin(expected)
    if origin is Union or origin is types.UnionType:
        return any(matches_type(value, option) for option in get_args(expected))
    if origin is not None:
        expected = origin
    if not isinstance(expected, type):
        # Literal, TypeVar and friends have no runtime class to check against.
        return True
    return isinstance(value, expected)


class MockObject(Generic[K]):
    """Records calls per method key and runs stubbed behavior.

    Attributes:
        method_keys: The enum of valid keys. Inferred from ``MockObject[SomeEnum]``
            in the class bases; None accepts any hashable key.
    """

    method_keys: ClassVar[type[Enum] | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "method_keys" in cls.__dict__:
            return
        for base in getattr(cls, "__orig_bases__", ()):
            if get_origin(base) is MockObject:
                args = get_args(base)
                if args and isinstance(args[0], type) and issubclass(args[0], Enum):
                    cls.method_keys = args[0]
                break

    def __init__(self) -> None:
        self._records: dict[K, MethodRecord] = {}

    def _check_key(self, key: K) -> None:
        if self.method_keys is not None and not isinstance(key, self.method_keys):
            raise UnknownMethodError(key, self.method_keys)

    def record_for(self, key: K) -> MethodRecord:
        """Return the record for a key, creating an empty one on first use."""
        self._check_key(key)
        record = self._records.get(key)
        if record is None:
            record = MethodRecord()
            self._records[key] = record
        return record

    def _invoke(self, key: K, args: tuple[Any, ...]) -> tuple[bool, Any]:
        record = self.record_for(key)
        record.record(args)
        logger.debug("%s called (call #%d)", method_name(key), record.times_called)

        behavior = record.behavior
        if isinstance(behavior, ReturningBehavior):
            return True, behavior(args)
        if isinstance(behavior, VoidBehavior):
            behavior(args)
        return False, None

    def dispatch(self, key: K, *args: Any) -> None:
        """Record a call to a method with no return value.

        A configured returning behavior still runs; its result is discarded.
        """
        self._invoke(key, args)

    def dispatch_returning(
        self,
        key: K,
        *args: Any,
        default: Any,
        returns: Any = None,
    ) -> Any:
        """Record a call and return the stubbed result, or ``default``.

        Args:
            key: The method being called.
            *args: The call's arguments in parameter order.
            default: Returned when no returning behavior is configured, or when
                its result does not satisfy ``returns``.
            returns: The call site's return type: anything ``isinstance`` accepts
                (``bool``, ``(int, float)``, ``str | None``) or a parameterised
                generic such as ``list[int]``. None skips the check.

        Returns:
            The behavior's result or ``default``.
        """
        has_result, result = self._invoke(key, args)
        if not has_result:
            return default
        if returns is not None and not matches_type(result, returns):
            logger.debug(
                "%s stub returned %s, not %r; using default",
                method_name(key),
                type(result).__name__,
                returns,
            )
            return default
        return result

    def reset_mock(self) -> None:
        """Discard every recorded call and configured behavior."""
        self._records = {}
        logger.debug("Reset %s", type(self).__name__)

    def method_reference(self, key: K) -> MethodHandle:
        """Return a handle for stubbing one method's behavior."""
        from handmock.core.handle import MethodHandle

        self._check_key(key)
        return MethodHandle(self, key)
