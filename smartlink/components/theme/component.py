"""
Theme component - Mode and color transitions.

Shell Layer - entry points used by the API and CLI.
"""

from __future__ import annotations

from ._impl import ThemeEngine
from .models import ApplyPresetInput, SetModeInput, SetPrimaryColorInput, ThemeOutput


def run_get(engine: ThemeEngine) -> ThemeOutput:
    return ThemeOutput(theme=engine.current(), changed=False)


def run_toggle(engine: ThemeEngine) -> ThemeOutput:
    theme, persist = engine.toggle()
    return ThemeOutput(theme=theme, changed=True, persist=persist)


def run_set_mode(input_data: SetModeInput, engine: ThemeEngine) -> ThemeOutput:
    theme, errors, persist = engine.set_mode(input_data.mode)
    if theme is None:
        return ThemeOutput(theme=engine.current(), changed=False, errors=tuple(errors))
    return ThemeOutput(theme=theme, changed=True, persist=persist)


def run_set_primary_color(input_data: SetPrimaryColorInput, engine: ThemeEngine) -> ThemeOutput:
    theme, errors, persist = engine.set_primary_color(input_data.color)
    if theme is None:
        return ThemeOutput(theme=engine.current(), changed=False, errors=tuple(errors))
    return ThemeOutput(theme=theme, changed=True, persist=persist)


def run_apply_preset(input_data: ApplyPresetInput, engine: ThemeEngine) -> ThemeOutput:
    theme, persist = engine.apply_preset(input_data.name)
    return ThemeOutput(theme=theme, changed=persist is not None, persist=persist)
