from loguru import logger

from optional_value.logging_config import configure_logging
from optional_value.core.errors import AbsentValueAccessError
from optional_value.core.narrowing import zero_value
from optional_value.core.optional import (
    Optional,
    empty,
    equals,
    not_equals,
    try_narrow,
    wrap,
)

# Silent inside host applications until they call logger.enable("optional_value")
# or configure_logging().
logger.disable("optional_value")

__all__ = [
    "AbsentValueAccessError",
    "Optional",
    "configure_logging",
    "empty",
    "equals",
    "not_equals",
    "try_narrow",
    "wrap",
    "zero_value",
]
