from __future__ import annotations


class MemorizeError(Exception):
    """Base error for the memorize package."""


class ValidationError(MemorizeError):
    """Raised when memorize options are invalid."""


class SnapshotDecodeError(MemorizeError):
    """Raised when a serialized snapshot cannot be decoded."""
