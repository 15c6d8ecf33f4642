"""Theme routes."""

from fastapi import APIRouter, Depends

from smartlink.api.deps import get_theme_engine
from smartlink.api.errors import raise_for_errors
from smartlink.api.schemas import ThemeColorRequest, ThemeModeRequest, ThemeResponse
from smartlink.components.theme import (
    ApplyPresetInput,
    SetModeInput,
    SetPrimaryColorInput,
    ThemeEngine,
    ThemeOutput,
    run_apply_preset,
    run_get,
    run_set_mode,
    run_set_primary_color,
    run_toggle,
)

router = APIRouter()


def _to_response(result: ThemeOutput) -> ThemeResponse:
    raise_for_errors(result.errors)
    # Unchanged themes were never written, so there is nothing unsaved.
    saved = result.saved if result.changed else True
    return ThemeResponse(theme=result.theme, changed=result.changed, saved=saved)


@router.get("/theme", response_model=ThemeResponse)
def get_theme(engine: ThemeEngine = Depends(get_theme_engine)) -> ThemeResponse:
    return _to_response(run_get(engine))


@router.post("/theme/toggle", response_model=ThemeResponse)
def toggle_theme(engine: ThemeEngine = Depends(get_theme_engine)) -> ThemeResponse:
    return _to_response(run_toggle(engine))


@router.put("/theme/mode", response_model=ThemeResponse)
def set_theme_mode(
    request: ThemeModeRequest,
    engine: ThemeEngine = Depends(get_theme_engine),
) -> ThemeResponse:
    return _to_response(run_set_mode(SetModeInput(mode=request.mode), engine))


@router.put("/theme/color", response_model=ThemeResponse)
def set_theme_color(
    request: ThemeColorRequest,
    engine: ThemeEngine = Depends(get_theme_engine),
) -> ThemeResponse:
    """Set a custom primary color. The preset is kept as-is."""
    return _to_response(
        run_set_primary_color(SetPrimaryColorInput(color=request.primary_color), engine)
    )


@router.post("/theme/preset/{name}", response_model=ThemeResponse)
def apply_theme_preset(
    name: str,
    engine: ThemeEngine = Depends(get_theme_engine),
) -> ThemeResponse:
    """Apply a named preset. Unknown names leave the theme unchanged."""
    return _to_response(run_apply_preset(ApplyPresetInput(name=name), engine))
