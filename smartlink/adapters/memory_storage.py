"""
In-memory Key-Value Adapter.

For tests and ephemeral runs. Nothing survives the process.
Can be told to fail reads or writes to exercise the degraded paths.
"""

from __future__ import annotations

from smartlink.core.ports.storage import ReadFailedError, WriteFailedError


class InMemoryKeyValueStore:
    """Dict-backed implementation of KeyValueStorePort."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.fail_reads = False
        self.fail_writes = False
        self.write_count = 0

    def read(self, key: str) -> str | None:
        if self.fail_reads:
            raise ReadFailedError(key, "store unavailable")
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise WriteFailedError(key, "store unavailable")
        self._data[key] = value
        self.write_count += 1

    def delete(self, key: str) -> bool:
        if self.fail_writes:
            raise WriteFailedError(key, "store unavailable")
        return self._data.pop(key, None) is not None

    def keys(self) -> list[str]:
        return list(self._data)
