"""
Links component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from smartlink.core.documents import PersistResult
from smartlink.domain.entities import Link
from smartlink.domain.errors import ValidationError

# --- Input Models ---


@dataclass(frozen=True)
class CreateLinkInput:
    """Input for creating a link."""

    title: str
    url: str
    type: str = "default"
    icon: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class UpdateLinkInput:
    """Input for replacing the link at ``index``."""

    index: int
    title: str
    url: str
    type: str = "default"
    icon: str | None = None
    color: str | None = None


@dataclass(frozen=True)
class DeleteLinkInput:
    """Input for deleting a link."""

    index: int


@dataclass(frozen=True)
class MoveLinkInput:
    """Input for moving a link to another position."""

    from_index: int
    to_index: int


@dataclass(frozen=True)
class GetLinkInput:
    """Input for getting a link."""

    index: int


# --- Output Models ---


@dataclass(frozen=True)
class LinkOperationOutput:
    """Output from link operation."""

    link: Link | None
    index: int | None
    errors: tuple[ValidationError, ...]
    success: bool
    persist: PersistResult | None = None

    @property
    def saved(self) -> bool:
        return self.persist is not None and self.persist.saved


@dataclass(frozen=True)
class LinkListOutput:
    """Output from list operation."""

    links: tuple[Link, ...]
    total: int
    can_add_more: bool
    max_links: int
