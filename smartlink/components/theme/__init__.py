"""
Theme component - Light/dark mode, primary color and presets.
"""

from ._impl import THEME_MODES, THEME_PRESETS, ThemeEngine
from .component import (
    run_apply_preset,
    run_get,
    run_set_mode,
    run_set_primary_color,
    run_toggle,
)
from .models import ApplyPresetInput, SetModeInput, SetPrimaryColorInput, ThemeOutput

__all__ = [
    # Entry points
    "run_get",
    "run_toggle",
    "run_set_mode",
    "run_set_primary_color",
    "run_apply_preset",
    # Models
    "SetModeInput",
    "SetPrimaryColorInput",
    "ApplyPresetInput",
    "ThemeOutput",
    # Engine
    "ThemeEngine",
    "THEME_MODES",
    "THEME_PRESETS",
]
