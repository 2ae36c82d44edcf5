from __future__ import annotations

from typing import Any, Generic, Type, TypeVar

from loguru import logger

from .errors import AbsentValueAccessError
from .narrowing import matches, zero_value
from .values import MISSING, is_missing

T = TypeVar("T")
R = TypeVar("R")

_EMPTY_HASH = 0
_UNHASHABLE_HASH = 1


class Optional(Generic[T]):
    """
    An optional value: either present or missing.

    Unlike ``typing.Optional``, ``None`` is a valid present value, so
    ``Optional(None)`` and ``Optional.empty()`` are different things.

    - ``Optional(value)`` or ``wrap(value)`` for a present value
    - ``Optional()`` or ``Optional.empty()`` for a missing one

    Instances are immutable. The constructor's default is the internal
    ``MISSING`` sentinel, so ``wrap(MISSING)`` is empty; it is not exported.
    """

    __slots__ = ("_has_value", "_value")

    def __init__(self, value: Any = MISSING):
        has_value = not is_missing(value)
        object.__setattr__(self, "_has_value", has_value)
        object.__setattr__(self, "_value", value if has_value else None)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def empty(cls) -> Optional[T]:
        return cls()

    @property
    def has_value(self) -> bool:
        return self._has_value

    @property
    def value(self) -> T:
        if not self._has_value:
            logger.debug("Value read on an empty Optional")
            raise AbsentValueAccessError()
        return self._value

    def value_or_default(self, fallback: T) -> T:
        return self._value if self._has_value else fallback

    def value_or_none(self) -> T | None:
        """Like ``value_or_default(None)``."""
        return self.value_or_default(None)

    def value_or_default_as(self, target: Type[R], fallback: R) -> R:
        """
        Get the value narrowed to ``target``.

        Returns the value if present and an instance of ``target``,
        ``zero_value(target)`` if present but ``None`` or of another type,
        and ``fallback`` only if the value is missing.
        """
        if not self._has_value:
            return fallback
        narrowed = try_narrow(self._value, target)
        if narrowed.has_value:
            return narrowed.value
        logger.debug(
            "Cannot narrow {actual} to {target}, using zero value",
            actual=type(self._value).__name__,
            target=getattr(target, "__name__", target),
        )
        return zero_value(target)

    def value_or_zero_as(self, target: Type[R]) -> R:
        return self.value_or_default_as(target, zero_value(target))

    def to_object(self) -> Optional[Any]:
        return Optional(self._value) if self._has_value else Optional()

    def __eq__(self, other):
        if not isinstance(other, Optional):
            return NotImplemented
        if not self._has_value and not other._has_value:
            return True
        if self._has_value and other._has_value:
            return bool(self._value == other._value)
        return False

    def __hash__(self):
        if not self._has_value:
            return _EMPTY_HASH
        try:
            return hash(self._value)
        except TypeError:
            return _UNHASHABLE_HASH

    def __str__(self):
        if not self._has_value:
            return "(empty)"
        if self._value is None:
            return "(null)"
        return str(self._value)

    def __repr__(self):
        if not self._has_value:
            return f"{type(self).__name__}.empty()"
        return f"{type(self).__name__}({self._value!r})"

    def __reduce__(self):
        if not self._has_value:
            return (type(self), ())
        return (type(self), (self._value,))


def wrap(value: T) -> Optional[T]:
    """Create a present Optional holding ``value`` (``None`` included)."""
    return Optional(value)


def empty() -> Optional[Any]:
    return Optional.empty()


def try_narrow(value: Any, target: Type[R]) -> Optional[R]:
    """Present Optional of ``value`` if it is a non-None ``target`` instance, else empty."""
    if matches(value, target):
        return Optional(value)
    return Optional()


def equals(x: Optional[Any], y: Optional[Any]) -> bool:
    if not isinstance(x, Optional) or not isinstance(y, Optional):
        return False
    return x == y


def not_equals(x: Optional[Any], y: Optional[Any]) -> bool:
    return not equals(x, y)
