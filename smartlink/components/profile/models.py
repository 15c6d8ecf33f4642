"""
Profile component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from smartlink.core.documents import PersistResult
from smartlink.domain.entities import Profile

# --- Input Models ---


@dataclass(frozen=True)
class SaveProfileInput:
    """
    Partial identity edit.

    None or "" keeps the stored value, except ``banner_url`` which is
    cleared when left empty.
    """

    username: str | None = None
    display_name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    banner_url: str | None = None


# --- Output Models ---


@dataclass(frozen=True)
class ProfileOutput:
    """Profile plus the outcome of any persistence involved."""

    profile: Profile
    persist: PersistResult

    @property
    def saved(self) -> bool:
        return self.persist.saved
