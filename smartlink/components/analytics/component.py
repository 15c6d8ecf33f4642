"""
Analytics component - Click tracking and stats summary.

Shell Layer - entry points used by the API and CLI.
"""

from __future__ import annotations

from smartlink.domain.entities import link_key

from ._impl import StatsTracker
from .models import RecordClickInput, RecordClickOutput, ResetStatsOutput, StatsSummary


def run_record_click(input_data: RecordClickInput, tracker: StatsTracker) -> RecordClickOutput:
    """Record a click on the link at a display position."""
    entry, errors, persist = tracker.record_click(input_data.index)

    return RecordClickOutput(
        key=link_key(input_data.index) if entry is not None else None,
        entry=entry,
        total_clicks=tracker.snapshot().total_clicks,
        errors=tuple(errors),
        success=entry is not None,
        persist=persist,
    )


def run_summary(tracker: StatsTracker) -> StatsSummary:
    """Totals, average and per-entry rows for the stats panel."""
    return tracker.summary()


def run_reset(tracker: StatsTracker) -> ResetStatsOutput:
    """Clear all click statistics."""
    return ResetStatsOutput(persist=tracker.reset())
