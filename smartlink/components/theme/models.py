"""
Theme component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from smartlink.core.documents import PersistResult
from smartlink.domain.entities import Theme
from smartlink.domain.errors import ValidationError


@dataclass(frozen=True)
class SetModeInput:
    mode: str


@dataclass(frozen=True)
class SetPrimaryColorInput:
    color: str


@dataclass(frozen=True)
class ApplyPresetInput:
    name: str


@dataclass(frozen=True)
class ThemeOutput:
    """
    Theme after a transition.

    ``changed`` is False for rejected input and unknown presets.
    """

    theme: Theme
    changed: bool
    errors: tuple[ValidationError, ...] = ()
    persist: PersistResult | None = None

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def saved(self) -> bool:
        return self.persist is not None and self.persist.saved
