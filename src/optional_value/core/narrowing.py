from __future__ import annotations

import numbers
from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, Type

_ZERO_VALUES: Dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    Decimal: Decimal(0),
    Fraction: Fraction(0),
}


def zero_value(target: Type[Any]) -> Any:
    """
    Zero value of ``target``.

    Numeric types have a real zero (``int`` -> 0, ``bool`` -> False, any
    ``numbers.Number`` subclass constructible without arguments -> ``target()``).
    Every other type defaults to ``None``, like a reference type would.
    """
    if target in _ZERO_VALUES:
        return _ZERO_VALUES[target]
    if isinstance(target, type) and issubclass(target, numbers.Number):
        try:
            return target()
        except TypeError:
            return None
    return None


def matches(value: Any, target: Type[Any]) -> bool:
    # None never narrows, even to object.
    return value is not None and isinstance(value, target)
