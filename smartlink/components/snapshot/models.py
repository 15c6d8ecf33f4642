"""
Snapshot component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from smartlink.core.documents import PersistResult
from smartlink.domain.entities import ExportDocument
from smartlink.domain.errors import ValidationError


@dataclass(frozen=True)
class ExportOutput:
    """A ready-to-deliver export file."""

    document: ExportDocument
    filename: str
    content: str


@dataclass(frozen=True)
class ImportSnapshotInput:
    """Serialized export text, as read from a backup file."""

    content: str | bytes


@dataclass(frozen=True)
class ImportOutput:
    """Output from an import."""

    errors: tuple[ValidationError, ...]
    success: bool
    profile_persist: PersistResult | None = None
    stats_persist: PersistResult | None = None

    @property
    def saved(self) -> bool:
        return (
            self.profile_persist is not None
            and self.stats_persist is not None
            and self.profile_persist.saved
            and self.stats_persist.saved
        )


@dataclass(frozen=True)
class ResetAllOutput:
    profile_persist: PersistResult
    stats_persist: PersistResult

    @property
    def saved(self) -> bool:
        return self.profile_persist.saved and self.stats_persist.saved
