"""
Core ports - interfaces the components depend on.
"""

from .storage import (
    CorruptDataError,
    KeyValueStorePort,
    PersistenceError,
    ReadFailedError,
    WriteFailedError,
)
from .time import TimePort

__all__ = [
    "KeyValueStorePort",
    "TimePort",
    "PersistenceError",
    "ReadFailedError",
    "WriteFailedError",
    "CorruptDataError",
]
