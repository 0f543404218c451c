"""Keyed memorization for async functions with ttl and size-bounded eviction."""

from .errors import MemorizeError, SnapshotDecodeError, ValidationError
from .memorize import Memorized, MemoryControls, with_memorized
from .models import NEVER, MemorizedResult, MemorizeOptions
from .snapshot import dumps_snapshot, loads_snapshot

__all__ = [
    "NEVER",
    "Memorized",
    "MemorizedResult",
    "MemorizeError",
    "MemorizeOptions",
    "MemoryControls",
    "SnapshotDecodeError",
    "ValidationError",
    "dumps_snapshot",
    "loads_snapshot",
    "with_memorized",
]
