"""Keyed result memorization for async functions.

Wrap a function so that each call is cached under a caller-chosen key,
with an optional ttl (milliseconds) and an optional size bound that
evicts entries in the order they were stored.
"""

from __future__ import annotations

import inspect
import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Deque, Dict, Generic, Mapping, Optional, Tuple, TypeVar, Union

from memorize.interfaces import MemorizedFunction, MemoryControl
from memorize.models import NEVER, MemorizedResult, MemorizeOptions, Snapshot

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _now_ms() -> float:
    # Wall clock so exported expirations stay meaningful in another process
    return time.time() * 1000.0


class Memorized(Generic[T]):
    """Cache-aware wrapper around `fn`.

    Calling the instance with `(key, *args, **kwargs)` returns the cached
    value for `key` while it is fresh, otherwise awaits `fn(*args, **kwargs)`
    and stores the result.

    Key behavior:
      - A stored None is never served (treated as a miss).
      - Every store appends the key to the order log, even when the key is
        already present; eviction pops from the front of that log.
      - Concurrent misses for the same key are not coalesced; the last
        completion wins.
    """

    def __init__(
        self,
        fn: Callable[..., Union[Awaitable[T], T]],
        options: Optional[MemorizeOptions] = None,
    ) -> None:
        self._fn = fn
        self._options = options or MemorizeOptions()
        self._memory: Dict[str, MemorizedResult[T]] = {}
        self._cache_order: Deque[str] = deque()

    @property
    def function(self) -> Callable[..., Union[Awaitable[T], T]]:
        return self._fn

    @property
    def options(self) -> MemorizeOptions:
        return self._options

    async def __call__(self, key: str, *args: Any, **kwargs: Any) -> T:
        cached = self._get_cached_result(key)
        if cached is not None:
            return cached

        result = self._fn(*args, **kwargs)
        if inspect.isawaitable(result):
            result = await result

        # Written into whichever memory is current once fn completes
        self._store_in_cache(key, result)
        return result

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._get_cached_result(key) is not None

    def __len__(self) -> int:
        return len(self._memory)

    def _get_cached_result(self, key: str) -> Optional[T]:
        entry = self._memory.get(key)
        if entry is None:
            logger.debug("memorize miss key=%r (absent)", key)
            return None

        if not entry.expiration > _now_ms():
            logger.debug("memorize miss key=%r (expired)", key)
            return None

        if entry.value is None:
            logger.debug("memorize miss key=%r (none)", key)
            return None

        logger.debug("memorize hit key=%r", key)
        return entry.value

    def _store_in_cache(self, key: str, result: T) -> None:
        ttl = self._options.ttl
        expiration = _now_ms() + ttl if ttl else NEVER
        self._memory[key] = MemorizedResult(value=result, expiration=expiration)
        logger.debug("memorize store key=%r expiration=%s", key, expiration)

        self._cache_order.append(key)
        max_size = self._options.max_cache_size
        if max_size and len(self._cache_order) > max_size:
            key_to_remove = self._cache_order.popleft()
            self._memory.pop(key_to_remove, None)
            logger.debug("memorize evict key=%r", key_to_remove)

    def import_memory(self, memory: Mapping[str, MemorizedResult[T]]) -> None:
        # Replaces the cache as-is; the order log is left untouched
        self._memory = memory  # type: ignore[assignment]
        logger.debug("memorize import")

    def export_memory(self) -> Snapshot:
        # Live reference, not a copy
        return self._memory

    def clear_memory(self) -> None:
        self._memory = {}
        self._cache_order = deque()
        logger.debug("memorize clear")


@dataclass(frozen=True)
class MemoryControls:
    """Bound control functions for one memorized wrapper."""

    import_memory: Callable[[Mapping[str, MemorizedResult]], None]
    export_memory: Callable[[], Snapshot]
    clear_memory: Callable[[], None]


def with_memorized(
    fn: Callable[..., Union[Awaitable[T], T]],
    options: Optional[MemorizeOptions] = None,
) -> Tuple[MemorizedFunction, MemoryControl]:
    """Wrap `fn` with a keyed memorization layer.

    Returns a tuple of the memorized callable and its memory controls:

        fetch, controls = with_memorized(fetch_user, MemorizeOptions(ttl=1000))
        user = await fetch("user:42", 42)
        controls.clear_memory()
    """
    memorized = Memorized(fn, options)
    controls = MemoryControls(
        import_memory=memorized.import_memory,
        export_memory=memorized.export_memory,
        clear_memory=memorized.clear_memory,
    )
    return memorized, controls
