"""
Key-value persistence port.

Protocol-based interface for the durable local store that holds the two
SmartLink documents (profile and stats) as JSON text.
Implementations: in-memory (tests), local JSON files, SQLite.

Invariants:
- Each key is an independent slot; writing one never touches another
- A write either replaces the whole value or leaves the previous value intact
"""

from __future__ import annotations

from typing import Protocol


class KeyValueStorePort(Protocol):
    """
    Durable string-keyed storage of JSON text.

    Adapters raise ``ReadFailedError`` / ``WriteFailedError`` on I/O failure.
    They never interpret the stored text; parsing (and ``CorruptDataError``)
    belongs to the stores that own each document.
    """

    def read(self, key: str) -> str | None:
        """
        Read the value stored under ``key``.

        Returns:
            The stored text, or None if the key has never been written

        Raises:
            ReadFailedError: If the backing store cannot be read
        """
        ...

    def write(self, key: str, value: str) -> None:
        """
        Replace the value stored under ``key``.

        Raises:
            WriteFailedError: If the value could not be durably written
        """
        ...

    def delete(self, key: str) -> bool:
        """
        Remove ``key``.

        Returns:
            True if deleted, False if the key didn't exist
        """
        ...


class PersistenceError(Exception):
    """Base class for persistence errors."""

    code = "persistence_error"

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(message)


def _describe(prefix: str, reason: str) -> str:
    return f"{prefix}: {reason}" if reason else prefix


class ReadFailedError(PersistenceError):
    """Raised when the backing store cannot be read."""

    code = "read_failed"

    def __init__(self, key: str, reason: str = "") -> None:
        super().__init__(key, _describe(f"Read failed for '{key}'", reason))


class WriteFailedError(PersistenceError):
    """Raised when a value cannot be durably written."""

    code = "write_failed"

    def __init__(self, key: str, reason: str = "") -> None:
        super().__init__(key, _describe(f"Write failed for '{key}'", reason))


class CorruptDataError(PersistenceError):
    """Raised when stored text is not a valid document."""

    code = "corrupt_data"

    def __init__(self, key: str, reason: str = "") -> None:
        super().__init__(key, _describe(f"Corrupt data under '{key}'", reason))
