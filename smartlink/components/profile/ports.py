"""
Profile component - Port interfaces.

Other components reach the profile document only through this port.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from smartlink.core.documents import PersistResult
from smartlink.domain.entities import Profile


class ProfileStorePort(Protocol):
    """Owner of the in-memory profile document."""

    def get(self) -> Profile:
        """Current profile (a copy; loads on first use)."""
        ...

    def update(self, fn: Callable[[Profile], Profile]) -> tuple[Profile, PersistResult]:
        """Apply ``fn`` to a copy, keep and persist the result."""
        ...

    def save(self, profile: Profile) -> PersistResult:
        """Replace the whole profile and persist it."""
        ...
