import json

from smartlink.components.theme import (
    THEME_PRESETS,
    ApplyPresetInput,
    SetModeInput,
    SetPrimaryColorInput,
    run_apply_preset,
    run_get,
    run_set_mode,
    run_set_primary_color,
    run_toggle,
)


def stored_theme(ctx, storage) -> dict:
    return json.loads(storage.read(ctx.profile_store.key))["theme"]


def test_default_theme(test_ctx):
    result = run_get(test_ctx.theme_engine)

    assert result.theme.mode == "light"
    assert result.theme.primary_color == "#0d6efd"
    assert result.changed is False


def test_toggle_flips_and_persists(test_ctx, storage):
    first = run_toggle(test_ctx.theme_engine)
    assert first.theme.mode == "dark"
    assert stored_theme(test_ctx, storage)["mode"] == "dark"

    second = run_toggle(test_ctx.theme_engine)
    assert second.theme.mode == "light"
    assert second.saved is True


def test_set_mode(test_ctx):
    result = run_set_mode(SetModeInput(mode="dark"), test_ctx.theme_engine)

    assert result.success is True
    assert result.theme.mode == "dark"


def test_set_mode_rejects_unknown(test_ctx, storage):
    result = run_set_mode(SetModeInput(mode="sepia"), test_ctx.theme_engine)

    assert result.success is False
    assert result.changed is False
    assert result.errors[0].code == "invalid_value"
    assert result.theme.mode == "light"


def test_custom_color_keeps_preset(test_ctx, storage):
    run_apply_preset(ApplyPresetInput(name="forest"), test_ctx.theme_engine)

    result = run_set_primary_color(SetPrimaryColorInput(color="#123456"), test_ctx.theme_engine)

    assert result.theme.primary_color == "#123456"
    assert result.theme.preset == "forest"
    assert stored_theme(test_ctx, storage)["primaryColor"] == "#123456"


def test_blank_color_rejected(test_ctx, storage):
    run_apply_preset(ApplyPresetInput(name="ocean"), test_ctx.theme_engine)
    writes_before = storage.write_count

    result = run_set_primary_color(SetPrimaryColorInput(color="   "), test_ctx.theme_engine)

    assert result.success is False
    assert result.changed is False
    assert result.errors[0].code == "invalid_value"
    assert result.errors[0].field == "primaryColor"
    assert result.theme.primary_color == "#74b9ff"
    assert storage.write_count == writes_before


def test_color_is_stripped(test_ctx):
    result = run_set_primary_color(SetPrimaryColorInput(color=" #abcdef "), test_ctx.theme_engine)

    assert result.theme.primary_color == "#abcdef"


def test_every_preset_applies(test_ctx):
    for name, color in THEME_PRESETS.items():
        result = run_apply_preset(ApplyPresetInput(name=name), test_ctx.theme_engine)
        assert result.theme.primary_color == color
        assert result.theme.preset == name


def test_unknown_preset_writes_nothing(test_ctx, storage):
    run_get(test_ctx.theme_engine)
    writes = storage.write_count

    result = run_apply_preset(ApplyPresetInput(name="neon"), test_ctx.theme_engine)

    assert result.changed is False
    assert result.persist is None
    assert storage.write_count == writes


def test_theme_change_survives_failed_write(test_ctx, storage):
    run_get(test_ctx.theme_engine)
    storage.fail_writes = True

    result = run_toggle(test_ctx.theme_engine)

    assert result.saved is False
    assert run_get(test_ctx.theme_engine).theme.mode == "dark"
