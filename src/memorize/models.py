"""Immutable dataclasses describing memorize options and cache entries.

Includes MemorizeOptions (ttl / size bound for a wrapper) and
MemorizedResult (one cached value with its absolute expiration).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar

from config import memorize_defaults
from memorize.errors import ValidationError

T = TypeVar("T")

# Expiration used when no ttl is configured (milliseconds since epoch)
NEVER = float("inf")


@dataclass(frozen=True)
class MemorizeOptions:
    """Options for a memorized function.

    Fields:
    - ttl: time-to-live in milliseconds; None or 0 means entries never expire.
    - max_cache_size: stored-entry bound; None or 0 means unbounded.
    """

    ttl: Optional[float] = None
    max_cache_size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.ttl is not None:
            if isinstance(self.ttl, bool) or not isinstance(self.ttl, (int, float)):
                raise ValidationError("ttl must be a number of milliseconds")
            if math.isnan(self.ttl) or self.ttl < 0:
                raise ValidationError("ttl must be >= 0 milliseconds")

        if self.max_cache_size is not None:
            if isinstance(self.max_cache_size, bool) or not isinstance(self.max_cache_size, int):
                raise ValidationError("max_cache_size must be an integer")
            if self.max_cache_size < 0:
                raise ValidationError("max_cache_size must be >= 0")

    @classmethod
    def from_env(cls) -> "MemorizeOptions":
        """Build options from the current MEMORIZE_TTL_MS / MEMORIZE_MAX_CACHE_SIZE env values."""
        ttl, max_cache_size = memorize_defaults()
        return cls(ttl=ttl, max_cache_size=max_cache_size)


@dataclass(slots=True)
class MemorizedResult(Generic[T]):
    # Stores value + wall-clock expiration (ms since epoch, NEVER for no ttl)
    value: T
    expiration: float


Snapshot = Dict[str, MemorizedResult]
