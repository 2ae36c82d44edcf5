from typing import Any


class MissingType:
    """Type of ``MISSING``: the default of ``Optional.__init__``, distinct from ``None``."""

    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "MISSING"
    def __bool__(self): return False

    def __reduce__(self):
        # Unpickles to the module-level singleton.
        return "MISSING"


MISSING = MissingType()


def is_missing(val: Any) -> bool:
    return val is MISSING
