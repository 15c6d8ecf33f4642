"""Click tracking and statistics routes."""

from fastapi import APIRouter, Depends

from smartlink.api.deps import get_stats_tracker
from smartlink.api.errors import raise_for_errors
from smartlink.api.schemas import (
    ClickResponse,
    SavedResponse,
    StatsResponse,
    StatsRowResponse,
)
from smartlink.components.analytics import (
    RecordClickInput,
    StatsTracker,
    run_record_click,
    run_reset,
    run_summary,
)

router = APIRouter()


@router.post("/links/{index}/click", response_model=ClickResponse)
def record_click(
    index: int,
    tracker: StatsTracker = Depends(get_stats_tracker),
) -> ClickResponse:
    """Record a click on the link currently displayed at ``index``."""
    result = run_record_click(RecordClickInput(index=index), tracker)
    raise_for_errors(result.errors)
    assert result.key is not None and result.entry is not None

    return ClickResponse(
        key=result.key,
        clicks=result.entry.clicks,
        last_click_timestamp=result.entry.last_click_timestamp,
        total_clicks=result.total_clicks,
        saved=result.saved,
    )


@router.get("/stats", response_model=StatsResponse)
def get_stats(tracker: StatsTracker = Depends(get_stats_tracker)) -> StatsResponse:
    summary = run_summary(tracker)
    return StatsResponse(
        total_clicks=summary.total_clicks,
        total_links=summary.total_links,
        average_clicks_per_link=summary.average_clicks_per_link,
        rows=[
            StatsRowResponse(
                key=row.key,
                title=row.title,
                clicks=row.clicks,
                last_click_timestamp=row.last_click_timestamp,
            )
            for row in summary.rows
        ],
    )


@router.delete("/stats", response_model=SavedResponse)
def reset_stats(tracker: StatsTracker = Depends(get_stats_tracker)) -> SavedResponse:
    return SavedResponse(saved=run_reset(tracker).saved)
