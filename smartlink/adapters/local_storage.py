"""
Local Filesystem Key-Value Adapter.

Implements KeyValueStorePort using one JSON file per key under a data
directory. This is the default durable store for a single local install.

Invariants:
- Writes go to a temporary sibling file and are moved into place with
  os.replace, so a reader never sees a half-written document
- Keys map to flat filenames; path separators are not allowed through
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from smartlink.core.ports.storage import ReadFailedError, WriteFailedError


class LocalFileStore:
    """
    Local filesystem implementation of KeyValueStorePort.

    Directory structure: {base_path}/{key}.json
    """

    def __init__(
        self,
        base_path: str | Path,
        *,
        create_dirs: bool = True,
    ) -> None:
        """
        Initialize local file storage.

        Args:
            base_path: Root directory for storage
            create_dirs: Whether to create the directory if it doesn't exist
        """
        self.base_path = Path(base_path)

        if create_dirs:
            self.base_path.mkdir(parents=True, exist_ok=True)

    def _key_to_path(self, key: str) -> Path:
        """Convert storage key to its file path."""
        # Sanitize key to prevent directory traversal
        safe_key = key.replace("..", "").replace("/", "_").replace("\\", "_")
        return self.base_path / f"{safe_key}.json"

    def read(self, key: str) -> str | None:
        path = self._key_to_path(key)

        if not path.exists():
            return None

        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ReadFailedError(key, str(e)) from e

    def write(self, key: str, value: str) -> None:
        path = self._key_to_path(key)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.stem}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(value)
                    f.flush()
                    os.fsync(f.fileno())
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as e:
            raise WriteFailedError(key, str(e)) from e

    def delete(self, key: str) -> bool:
        path = self._key_to_path(key)

        if not path.exists():
            return False

        try:
            path.unlink()
        except OSError as e:
            raise WriteFailedError(key, str(e)) from e
        return True


def create_local_storage(
    base_path: str | Path | None = None,
    *,
    env_var: str = "SMARTLINK_DATA_DIR",
    default_path: str = "./data",
) -> LocalFileStore:
    """
    Factory function to create LocalFileStore from config.

    Args:
        base_path: Explicit base path (overrides env var)
        env_var: Environment variable name for the data directory
        default_path: Default path if not configured

    Returns:
        Configured LocalFileStore instance
    """
    if base_path is None:
        base_path = os.environ.get(env_var, default_path)

    return LocalFileStore(base_path)
