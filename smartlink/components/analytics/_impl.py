"""
StatsTracker - Per-link click counting.

Owns the stats document: a running total and one counter per positional
key ("link_<index>").

Key behaviors:
- An entry is created on the first click at a position, seeded with the
  title of the link there at that moment ("Deleted link" if none)
- Entries are never renamed, renumbered or removed when links change;
  only reset() or an import clears them
- Unparseable stats read as empty; unreadable stats read as empty until
  the store answers again, and nothing is written over them meanwhile
- Persistence failures are reported, not raised
"""

from __future__ import annotations

import logging
import threading

from smartlink.core.documents import DocumentSlot, PersistResult
from smartlink.core.ports.storage import CorruptDataError, PersistenceError, ReadFailedError
from smartlink.domain.entities import (
    DELETED_LINK_TITLE,
    ClickStats,
    LinkClickStats,
    default_stats,
    link_key,
)
from smartlink.domain.errors import ValidationError, index_out_of_range

from .models import StatsRow, StatsSummary
from .ports import KeyValueStorePort, ProfileStorePort, TimePort

logger = logging.getLogger(__name__)

DEFAULT_STATS_KEY = "smartlink_stats"


def average_clicks(total_clicks: int, link_count: int) -> int:
    """Round-half-up average; 0 when there are no links."""
    if link_count <= 0:
        return 0
    return (2 * total_clicks + link_count) // (2 * link_count)


class StatsTracker:
    """
    Click statistics service.

    Provides:
    - record_click for a display position
    - snapshot / clicks_for / averages over the stats document
    - reset and wholesale replace (import)
    """

    def __init__(
        self,
        storage: KeyValueStorePort,
        profiles: ProfileStorePort,
        clock: TimePort,
        key: str = DEFAULT_STATS_KEY,
    ) -> None:
        self._slot = DocumentSlot(storage, key, ClickStats)
        self._profiles = profiles
        self._clock = clock
        self._lock = threading.RLock()
        self._stats: ClickStats | None = None
        self._loaded = False
        self.last_error: PersistenceError | None = None

    @property
    def key(self) -> str:
        return self._slot.key

    def _record(self, result: PersistResult) -> PersistResult:
        if result.error is not None:
            self.last_error = result.error
        return result

    def _current(self) -> ClickStats:
        """Live stats document, reading it until a read succeeds. Caller holds the lock."""
        if not self._loaded:
            try:
                stored = self._slot.read()
            except ReadFailedError as e:
                logger.error("Stats loading error: %s", e)
                self.last_error = e
                if self._stats is None:
                    self._stats = default_stats()
                return self._stats
            except CorruptDataError as e:
                logger.warning("Stored stats are unreadable, starting from zero: %s", e)
                self.last_error = e
                stored = None
            self._stats = stored if stored is not None else default_stats()
            self._loaded = True
        assert self._stats is not None
        return self._stats

    def snapshot(self) -> ClickStats:
        with self._lock:
            return self._current().model_copy(deep=True)

    def record_click(
        self, index: int
    ) -> tuple[LinkClickStats | None, list[ValidationError], PersistResult | None]:
        """
        Count one click on the link displayed at ``index``.

        Returns:
            Tuple of (entry, errors, persist). Negative positions are rejected.
        """
        if index < 0:
            links = self._profiles.get().links
            return None, [index_out_of_range(index, len(links))], None

        with self._lock:
            links = self._profiles.get().links
            stats = self._current().model_copy(deep=True)
            key = link_key(index)

            entry = stats.links.get(key)
            if entry is None:
                title = links[index].title if index < len(links) else DELETED_LINK_TITLE
                entry = LinkClickStats(clicks=0, last_click_timestamp=None, title=title)
                stats.links[key] = entry

            entry.clicks += 1
            entry.last_click_timestamp = self._clock.now_utc()
            stats.total_clicks += 1

            self._stats = stats
            if not self._loaded:
                logger.error("Click on %s kept in memory only: stored stats unreadable", key)
                return entry.model_copy(), [], PersistResult(saved=False, error=self.last_error)
            persist = self._record(self._slot.write(stats))
            return entry.model_copy(), [], persist

    def clicks_for(self, index: int) -> int:
        with self._lock:
            entry = self._current().links.get(link_key(index))
            return entry.clicks if entry else 0

    def average_clicks_per_link(self, link_count: int | None = None) -> int:
        if link_count is None:
            link_count = len(self._profiles.get().links)
        with self._lock:
            return average_clicks(self._current().total_clicks, link_count)

    def summary(self, link_count: int | None = None) -> StatsSummary:
        if link_count is None:
            link_count = len(self._profiles.get().links)
        stats = self.snapshot()
        rows = tuple(
            StatsRow(
                key=key,
                title=entry.title,
                clicks=entry.clicks,
                last_click_timestamp=entry.last_click_timestamp,
            )
            for key, entry in stats.links.items()
        )
        return StatsSummary(
            total_clicks=stats.total_clicks,
            total_links=link_count,
            average_clicks_per_link=average_clicks(stats.total_clicks, link_count),
            rows=rows,
        )

    def replace(self, stats: ClickStats) -> PersistResult:
        with self._lock:
            self._stats = stats.model_copy(deep=True)
            self._loaded = True
            return self._record(self._slot.write(self._stats))

    def reset(self) -> PersistResult:
        result = self.replace(default_stats())
        if result.saved:
            logger.info("Click statistics reset")
        return result
