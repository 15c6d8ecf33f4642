"""Routes for managing the link list."""

from fastapi import APIRouter, Depends

from smartlink.api.deps import get_link_service, get_stats_tracker
from smartlink.api.errors import raise_for_errors
from smartlink.api.schemas import (
    LinkItemResponse,
    LinkListResponse,
    LinkRequest,
    LinkResponse,
    MoveLinkRequest,
    SavedResponse,
)
from smartlink.components.analytics import StatsTracker
from smartlink.components.links import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkService,
    MoveLinkInput,
    UpdateLinkInput,
    link_css_class,
    run_create,
    run_delete,
    run_get,
    run_list,
    run_move,
    run_update,
)

router = APIRouter()


@router.get("/links", response_model=LinkListResponse)
def list_links(
    service: LinkService = Depends(get_link_service),
    tracker: StatsTracker = Depends(get_stats_tracker),
) -> LinkListResponse:
    """List links in display order with their click counts."""
    result = run_list(service)
    return LinkListResponse(
        items=[
            LinkItemResponse(
                index=index,
                title=link.title,
                url=link.url,
                type=link.type,
                icon=link.icon,
                color=link.color,
                css_class=link_css_class(link),
                clicks=tracker.clicks_for(index),
            )
            for index, link in enumerate(result.links)
        ],
        total=result.total,
        can_add_more=result.can_add_more,
        max_links=result.max_links,
    )


@router.post("/links", response_model=LinkResponse, status_code=201)
def create_link(
    request: LinkRequest,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Append a link to the end of the list."""
    result = run_create(
        CreateLinkInput(
            title=request.title,
            url=request.url,
            type=request.type,
            icon=request.icon,
            color=request.color,
        ),
        service,
    )
    raise_for_errors(result.errors)
    assert result.link is not None and result.index is not None

    return LinkResponse(index=result.index, link=result.link, saved=result.saved)


@router.get("/links/{index}", response_model=LinkResponse)
def get_link(
    index: int,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Get the link at a position."""
    result = run_get(GetLinkInput(index=index), service)
    raise_for_errors(result.errors)
    assert result.link is not None

    return LinkResponse(index=index, link=result.link, saved=True)


@router.put("/links/{index}", response_model=LinkResponse)
def update_link(
    index: int,
    request: LinkRequest,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Replace the link at a position."""
    result = run_update(
        UpdateLinkInput(
            index=index,
            title=request.title,
            url=request.url,
            type=request.type,
            icon=request.icon,
            color=request.color,
        ),
        service,
    )
    raise_for_errors(result.errors)
    assert result.link is not None

    return LinkResponse(index=index, link=result.link, saved=result.saved)


@router.delete("/links/{index}", response_model=SavedResponse)
def delete_link(
    index: int,
    service: LinkService = Depends(get_link_service),
) -> SavedResponse:
    """Delete the link at a position. Click stats are left untouched."""
    result = run_delete(DeleteLinkInput(index=index), service)
    raise_for_errors(result.errors)
    return SavedResponse(saved=result.saved)


@router.post("/links/{index}/move", response_model=LinkResponse)
def move_link(
    index: int,
    request: MoveLinkRequest,
    service: LinkService = Depends(get_link_service),
) -> LinkResponse:
    """Move a link to another position."""
    result = run_move(MoveLinkInput(from_index=index, to_index=request.to_index), service)
    raise_for_errors(result.errors)
    assert result.link is not None and result.index is not None

    return LinkResponse(index=result.index, link=result.link, saved=result.saved)
