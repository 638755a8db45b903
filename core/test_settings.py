import math

import pytest

from core import settings
from core.datatypes import (BlendMode, InvalidSettingError, NonFiniteParameterError,
                            Shape, VignetteParams, check_finite)
from presets.vignette_presets import VignettePresetsManager


def test_defaults_build_the_default_snapshot():
    assert settings.to_params() == VignetteParams()
    assert settings.to_params({}) == VignetteParams()


def test_values_are_clamped_to_slider_ranges():
    s = settings.normalize_settings({
        'opacity': 1.7,
        'inner_radius': -1.0,
        'outer_radius': 9.0,
        'shape_strength': 0.1,
        'aspect_ratio': 3.0,
        'vignette_color_g': 2.0,
    })
    assert s['opacity'] == 1.0
    assert s['inner_radius'] == 0.0
    assert s['outer_radius'] == 5.0
    assert s['shape_strength'] == 0.5
    assert s['aspect_ratio'] == 2.0
    assert s['vignette_color_g'] == 1.0


def test_rotation_wraps_instead_of_clamping():
    assert settings.normalize_settings({'rotation': 370})['rotation'] == pytest.approx(10.0)
    assert settings.normalize_settings({'rotation': -30})['rotation'] == pytest.approx(330.0)


def test_rotation_degrees_become_radians():
    params = settings.to_params({'rotation': 45.0})
    assert params.rotation == pytest.approx(math.pi / 4)


def test_shape_and_blend_mode_accept_ints_names_and_enums():
    s = settings.normalize_settings({'shape_type': 'Star', 'blend_mode': BlendMode.SCREEN})
    assert s['shape_type'] == 3
    assert s['blend_mode'] == 2
    params = settings.to_params({'shape_type': 2, 'blend_mode': 'overlay'})
    assert params.shape is Shape.DIAMOND
    assert params.blend_mode is BlendMode.OVERLAY


@pytest.mark.parametrize("bad", [
    {'shape_type': 'hexagon'},
    {'shape_type': 7},
    {'blend_mode': 'dodge'},
    {'opacity': 'lots'},
    {'use_color': 'maybe'},
    {'inner_radius': True},
])
def test_invalid_settings_raise(bad):
    with pytest.raises(InvalidSettingError):
        settings.normalize_settings(bad)


def test_use_color_coercion():
    assert settings.normalize_settings({'use_color': 'yes'})['use_color'] is True
    assert settings.normalize_settings({'use_color': 0})['use_color'] is False


def test_unknown_keys_are_dropped():
    s = settings.normalize_settings({'preset_selection': 'sepia', 'opacity': 0.5})
    assert 'preset_selection' not in s
    assert set(s) == set(settings.DEFAULTS)


def test_snapshot_packs_center_and_color():
    params = settings.to_params({
        'center_x': 0.25, 'center_y': 0.75,
        'vignette_color_r': 0.1, 'vignette_color_g': 0.2, 'vignette_color_b': 0.3,
        'use_color': True,
    })
    assert params.center == (0.25, 0.75)
    assert params.vignette_color == (0.1, 0.2, 0.3)
    assert params.use_color is True


def test_snapshot_is_frozen():
    params = settings.to_params()
    with pytest.raises(AttributeError):
        params.opacity = 0.1


def test_apply_preset_only_overrides_listed_keys():
    current = dict(settings.DEFAULTS, use_color=True, rotation=90.0, center_x=0.2)
    merged = settings.apply_preset(current, 'oval')
    assert merged['aspect_ratio'] == 1.6
    assert merged['inner_radius'] == 0.85
    # 'oval' does not touch these
    assert merged['use_color'] is True
    assert merged['rotation'] == 90.0
    assert merged['center_x'] == 0.2
    # input is not modified
    assert current['aspect_ratio'] == 1.0


def test_apply_preset_unknown_name():
    with pytest.raises(InvalidSettingError):
        settings.apply_preset(dict(settings.DEFAULTS), 'does-not-exist')


def test_apply_preset_with_custom_manager(tmp_path):
    path = tmp_path / 'presets.json'
    path.write_text('{"vignette_presets": [{"name": "soft", "settings": {"opacity": 0.2}}]}')
    manager = VignettePresetsManager(str(path))
    assert settings.resolve(preset='soft', presets=manager)['opacity'] == 0.2


def test_resolve_explicit_settings_win_over_preset():
    s = settings.resolve({'blend_mode': 0}, preset='sepia')
    assert s['blend_mode'] == 0
    assert s['use_color'] is True


def test_check_finite():
    check_finite(VignetteParams())
    with pytest.raises(NonFiniteParameterError):
        check_finite(settings.to_params({'opacity': float('nan')}))
    with pytest.raises(NonFiniteParameterError):
        check_finite(settings.to_params({'rotation': float('inf')}))
    with pytest.raises(NonFiniteParameterError):
        check_finite(VignetteParams(vignette_color=(0.0, float('nan'), 0.0)))
