"""Core protocol and interface definitions.

Defines the contracts returned by with_memorized: the cache-aware
callable and the memory control surface.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from memorize.models import MemorizedResult, Snapshot


class MemorizedFunction(Protocol):
    """Contract for a memorized callable: key first, then the forwarded args."""
    async def __call__(self, key: str, *args: Any, **kwargs: Any) -> Any:
        ...


@runtime_checkable
class MemoryControl(Protocol):
    """Contract for inspecting and replacing a wrapper's cache."""
    def import_memory(self, memory: Mapping[str, MemorizedResult]) -> None:
        ...

    def export_memory(self) -> Snapshot:
        ...

    def clear_memory(self) -> None:
        ...
