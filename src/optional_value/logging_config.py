from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

from loguru import logger

_CONFIGURED = False


def _level_filter(level: str) -> Callable[[dict], bool]:
    def _filter(record: dict) -> bool:
        return record["level"].name == level

    return _filter


def _bind_metadata(service: str, version: str, environment: str) -> None:
    logger.configure(
        extra={
            "service": service,
            "version": version,
            "env": environment,
        }
    )


def configure_logging(
    service: str = "optional-value",
    version: str | None = None,
    environment: str | None = None,
) -> None:
    """
    Opt-in Loguru setup for applications. Never called on import.

    Replaces existing sinks with:
      • logs/YYYY-MM-DD/debug.json
      • logs/YYYY-MM-DD/info.json
      • logs/YYYY-MM-DD/error.json
    Set OPTVAL_DISABLE_FILE_LOGS=1 to log to stderr only.
    Also re-enables the records emitted by this package.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    version = version or os.getenv("OPTVAL_VERSION", "0.1.0")
    environment = environment or os.getenv("OPTVAL_ENV", "dev")

    logger.remove()
    logger.enable("optional_value")

    if os.getenv("OPTVAL_DISABLE_FILE_LOGS") == "1":
        logger.add(sys.stderr, level="INFO", colorize=sys.stderr.isatty(), enqueue=False)
        _bind_metadata(service, version, environment)
        _CONFIGURED = True
        return

    day_dir = Path("logs") / datetime.now(timezone.utc).strftime("%Y-%m-%d")
    day_dir.mkdir(parents=True, exist_ok=True)

    common_kwargs = {
        "serialize": True,
        "rotation": "10 MB",
        "retention": "30 days",
        "enqueue": True,
    }

    for level in ("DEBUG", "INFO", "ERROR"):
        logger.add(
            day_dir / f"{level.lower()}.json",
            level=level,
            filter=_level_filter(level),
            **common_kwargs,
        )

    if sys.stderr.isatty():
        logger.add(sys.stderr, level="INFO", colorize=True, enqueue=True)

    _bind_metadata(service, version, environment)
    _CONFIGURED = True
