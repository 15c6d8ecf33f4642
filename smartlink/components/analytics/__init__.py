"""
Analytics component - Per-link click statistics.

Stats are keyed by list position at click time; see StatsTracker.
"""

from ._impl import DEFAULT_STATS_KEY, StatsTracker, average_clicks
from .component import run_record_click, run_reset, run_summary
from .models import (
    RecordClickInput,
    RecordClickOutput,
    ResetStatsOutput,
    StatsRow,
    StatsSummary,
)

__all__ = [
    # Entry points
    "run_record_click",
    "run_summary",
    "run_reset",
    # Models
    "RecordClickInput",
    "RecordClickOutput",
    "ResetStatsOutput",
    "StatsRow",
    "StatsSummary",
    # Service
    "StatsTracker",
    "average_clicks",
    "DEFAULT_STATS_KEY",
]
