"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and
memorize_defaults(), which reads the default memorize options
(MEMORIZE_TTL_MS, MEMORIZE_MAX_CACHE_SIZE) from the environment on every call.
"""

from __future__ import annotations

import math
import os
from typing import Optional, Tuple


def _env_int(name: str, default: Optional[int], *, minimum: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def _env_float(name: str, default: Optional[float], *, minimum: Optional[float] = None) -> Optional[float]:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    if math.isnan(value) or (minimum is not None and value < minimum):
        return default
    return value


def memorize_defaults() -> Tuple[Optional[float], Optional[int]]:
    # Negative or unparsable values fall back to "unset"
    ttl = _env_float("MEMORIZE_TTL_MS", None, minimum=0.0)
    max_cache_size = _env_int("MEMORIZE_MAX_CACHE_SIZE", None, minimum=0)
    return ttl, max_cache_size

