"""
Time port.

All timestamps are produced through this port so tests can pin "now".
Storage uses timezone-aware UTC throughout.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class TimePort(Protocol):
    """Time provider interface."""

    def now_utc(self) -> datetime:
        """Get current UTC time (timezone-aware)."""
        ...
