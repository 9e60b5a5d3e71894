"""Environment-driven defaults."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional


logger = logging.getLogger(__name__)

WINDOW_SIZE_ENV = "BASKETSTAT_WINDOW_SIZE"
BENCHMARKS_ENV = "BASKETSTAT_BENCHMARKS"

DEFAULT_WINDOW_SIZE = 5


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning("%s=%d is below %d; using default %d", name, value, min_value, default)
        return default
    return value


def default_window_size() -> int:
    return _env_int(WINDOW_SIZE_ENV, DEFAULT_WINDOW_SIZE, min_value=1)


def benchmarks_profile_path() -> Optional[Path]:
    raw = os.getenv(BENCHMARKS_ENV)
    if not raw:
        return None
    return Path(raw).expanduser()
