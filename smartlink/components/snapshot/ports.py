"""
Snapshot component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from smartlink.components.profile.ports import ProfileStorePort
from smartlink.core.documents import PersistResult
from smartlink.core.ports.time import TimePort
from smartlink.domain.entities import ClickStats


class StatsDocumentPort(Protocol):
    """Whole-document access to click stats."""

    def snapshot(self) -> ClickStats:
        ...

    def replace(self, stats: ClickStats) -> PersistResult:
        ...


__all__ = ["ProfileStorePort", "StatsDocumentPort", "TimePort"]
