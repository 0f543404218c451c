"""JSON codec for memorize snapshots.

Wire format: a JSON object mapping each key to
{"value": <json value>, "expiration": <ms since epoch>}. Entries without a
ttl carry the NEVER sentinel, written as the JSON literal Infinity.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from memorize.errors import SnapshotDecodeError
from memorize.models import MemorizedResult, Snapshot


def snapshot_to_dict(snapshot: Mapping[str, MemorizedResult]) -> Dict[str, Dict[str, Any]]:
    return {
        key: {"value": entry.value, "expiration": entry.expiration}
        for key, entry in snapshot.items()
    }


def snapshot_from_dict(data: Any) -> Snapshot:
    if not isinstance(data, Mapping):
        raise SnapshotDecodeError("Snapshot must be a JSON object")

    out: Snapshot = {}
    for key, raw in data.items():
        if not isinstance(raw, Mapping) or "value" not in raw or "expiration" not in raw:
            raise SnapshotDecodeError(f"Snapshot entry {key!r} needs 'value' and 'expiration'")

        expiration = raw["expiration"]
        if isinstance(expiration, bool) or not isinstance(expiration, (int, float)):
            raise SnapshotDecodeError(f"Snapshot entry {key!r} has a non-numeric expiration")

        out[str(key)] = MemorizedResult(value=raw["value"], expiration=float(expiration))
    return out


def dumps_snapshot(snapshot: Mapping[str, MemorizedResult]) -> str:
    """Serialize a snapshot (e.g. from export_memory) to JSON text."""
    return json.dumps(snapshot_to_dict(snapshot))


def loads_snapshot(text: str) -> Snapshot:
    """Parse JSON text from dumps_snapshot back into an importable snapshot."""
    try:
        data = json.loads(text)
    except (TypeError, ValueError) as e:
        raise SnapshotDecodeError(f"Invalid snapshot JSON: {e}") from e
    return snapshot_from_dict(data)
