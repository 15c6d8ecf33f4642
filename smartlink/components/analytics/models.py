"""
Analytics component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from smartlink.core.documents import PersistResult
from smartlink.domain.entities import LinkClickStats
from smartlink.domain.errors import ValidationError

# --- Input Models ---


@dataclass(frozen=True)
class RecordClickInput:
    """A click on the link currently displayed at ``index``."""

    index: int


# --- Output Models ---


@dataclass(frozen=True)
class RecordClickOutput:
    """Output from click recording."""

    key: str | None
    entry: LinkClickStats | None
    total_clicks: int
    errors: tuple[ValidationError, ...]
    success: bool
    persist: PersistResult | None = None

    @property
    def saved(self) -> bool:
        return self.persist is not None and self.persist.saved


@dataclass(frozen=True)
class StatsRow:
    """One stats entry as shown in the stats table."""

    key: str
    title: str
    clicks: int
    last_click_timestamp: datetime | None


@dataclass(frozen=True)
class StatsSummary:
    """Aggregates for the stats panel."""

    total_clicks: int
    total_links: int
    average_clicks_per_link: int
    rows: tuple[StatsRow, ...]


@dataclass(frozen=True)
class ResetStatsOutput:
    """Output from a stats reset."""

    persist: PersistResult

    @property
    def saved(self) -> bool:
        return self.persist.saved
