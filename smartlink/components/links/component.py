"""
Links component - Link list management.

Handles link CRUD and reordering.

Shell Layer - handles I/O and error conversion.
"""

from __future__ import annotations

from smartlink.domain.errors import index_out_of_range

from ._impl import LinkService
from .models import (
    CreateLinkInput,
    DeleteLinkInput,
    GetLinkInput,
    LinkListOutput,
    LinkOperationOutput,
    MoveLinkInput,
    UpdateLinkInput,
)


def run_create(
    input_data: CreateLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Append a new link."""
    link, errors, persist = service.create(
        title=input_data.title,
        url=input_data.url,
        link_type=input_data.type,
        icon=input_data.icon,
        color=input_data.color,
    )

    return LinkOperationOutput(
        link=link,
        index=len(service.get_all()) - 1 if link is not None else None,
        errors=tuple(errors),
        success=link is not None,
        persist=persist,
    )


def run_update(
    input_data: UpdateLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Replace the link at a position."""
    link, errors, persist = service.update(
        index=input_data.index,
        title=input_data.title,
        url=input_data.url,
        link_type=input_data.type,
        icon=input_data.icon,
        color=input_data.color,
    )

    return LinkOperationOutput(
        link=link,
        index=input_data.index if link is not None else None,
        errors=tuple(errors),
        success=link is not None,
        persist=persist,
    )


def run_delete(
    input_data: DeleteLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Delete a link."""
    success, errors, persist = service.delete(input_data.index)

    return LinkOperationOutput(
        link=None,
        index=None,
        errors=tuple(errors),
        success=success,
        persist=persist,
    )


def run_move(
    input_data: MoveLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Move a link to another position."""
    link, errors, persist = service.move(input_data.from_index, input_data.to_index)

    return LinkOperationOutput(
        link=link,
        index=input_data.to_index if link is not None else None,
        errors=tuple(errors),
        success=link is not None,
        persist=persist,
    )


def run_get(
    input_data: GetLinkInput,
    service: LinkService,
) -> LinkOperationOutput:
    """Get the link at a position."""
    link = service.get(input_data.index)

    if link is None:
        return LinkOperationOutput(
            link=None,
            index=None,
            errors=(index_out_of_range(input_data.index, len(service.get_all())),),
            success=False,
        )

    return LinkOperationOutput(
        link=link,
        index=input_data.index,
        errors=(),
        success=True,
    )


def run_list(service: LinkService) -> LinkListOutput:
    """List all links."""
    links = service.get_all()
    return LinkListOutput(
        links=tuple(links),
        total=len(links),
        can_add_more=len(links) < service.max_links,
        max_links=service.max_links,
    )
