"""
ThemeEngine - Light/dark mode and primary color.

State is Profile.theme; every transition persists through the profile store.
Unknown preset names are no-ops and write nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from smartlink.core.documents import PersistResult
from smartlink.domain.entities import Profile, Theme
from smartlink.domain.errors import INVALID_VALUE, ValidationError

from .ports import ProfileStorePort

logger = logging.getLogger(__name__)

THEME_MODES = ("light", "dark")

THEME_PRESETS = {
    "default": "#0d6efd",
    "sunset": "#ff6b6b",
    "ocean": "#74b9ff",
    "forest": "#00b894",
    "purple": "#a29bfe",
}


class ThemeEngine:
    """Theme transitions over the stored profile."""

    def __init__(self, profiles: ProfileStorePort) -> None:
        self._profiles = profiles

    def current(self) -> Theme:
        return self._profiles.get().theme

    def _apply(self, fn: Callable[[Theme], None]) -> tuple[Theme, PersistResult]:
        def mutate(profile: Profile) -> Profile:
            fn(profile.theme)
            return profile

        profile, persist = self._profiles.update(mutate)
        return profile.theme, persist

    def toggle(self) -> tuple[Theme, PersistResult]:
        def flip(theme: Theme) -> None:
            theme.mode = "dark" if theme.mode == "light" else "light"

        return self._apply(flip)

    def set_mode(
        self, mode: str
    ) -> tuple[Theme | None, list[ValidationError], PersistResult | None]:
        if mode not in THEME_MODES:
            return None, [
                ValidationError(
                    code=INVALID_VALUE,
                    message=f"Theme mode must be one of: {', '.join(THEME_MODES)}",
                    field="mode",
                )
            ], None

        def assign(theme: Theme) -> None:
            theme.mode = mode

        theme, persist = self._apply(assign)
        return theme, [], persist

    def set_primary_color(
        self, color: str
    ) -> tuple[Theme | None, list[ValidationError], PersistResult | None]:
        color = color.strip()
        if not color:
            return None, [
                ValidationError(
                    code=INVALID_VALUE,
                    message="Primary color is required",
                    field="primaryColor",
                )
            ], None

        def assign(theme: Theme) -> None:
            theme.primary_color = color

        theme, persist = self._apply(assign)
        return theme, [], persist

    def apply_preset(self, name: str) -> tuple[Theme, PersistResult | None]:
        """
        Switch to a named preset color.

        Returns:
            Tuple of (theme, persist). persist is None for an unknown preset.
        """
        color = THEME_PRESETS.get(name)
        if color is None:
            logger.debug("Ignoring unknown theme preset %r", name)
            return self.current(), None

        def assign(theme: Theme) -> None:
            theme.primary_color = color
            theme.preset = name

        return self._apply(assign)
