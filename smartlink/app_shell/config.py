import logging
import os
import sys
from pathlib import Path

from smartlink.adapters.local_storage import LocalFileStore
from smartlink.adapters.memory_storage import InMemoryKeyValueStore
from smartlink.adapters.sqlite_kv import SQLiteKeyValueStore
from smartlink.core.ports.storage import KeyValueStorePort
from smartlink.rules.models import Rules

logger = logging.getLogger(__name__)


def validate_ops_rules(rules: Rules) -> None:
    """
    Validate operational requirements before startup.
    """
    storage = rules.storage

    if storage.profile_key == storage.stats_key:
        logger.critical("storage.profile_key and storage.stats_key must differ")
        sys.exit(1)

    if storage.backend == "memory":
        logger.warning("Memory storage backend: nothing will survive this process")
        return

    data_dir = Path(storage.data_dir)
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.critical("Data directory %s cannot be created: %s", data_dir, e)
        sys.exit(1)

    if not os.access(data_dir, os.W_OK):
        logger.critical("Data directory %s is not writable", data_dir)
        sys.exit(1)

    logger.info("Configuration validated (backend=%s, data_dir=%s)", storage.backend, data_dir)


def create_storage(rules: Rules) -> KeyValueStorePort:
    """Build the key-value adapter selected by storage.backend."""
    storage = rules.storage

    if storage.backend == "memory":
        return InMemoryKeyValueStore()

    data_dir = Path(storage.data_dir)
    if storage.backend == "sqlite":
        data_dir.mkdir(parents=True, exist_ok=True)
        return SQLiteKeyValueStore(str(data_dir / storage.sqlite_filename))

    return LocalFileStore(data_dir)
