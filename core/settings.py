"""
settings - the boundary between stored filter settings and the compositor.

Settings are a flat dict with the keys the OBS filter stores
(rotation in degrees, colour as three separate channels, shape and blend
mode as ints). This module fills in defaults, clamps values to the ranges
the property sliders allow, merges presets and builds the frozen
VignetteParams snapshot the compositor works on.
"""

import math
from typing import Any, Dict, Optional

from core.datatypes import (BlendMode, InvalidSettingError, Shape,
                            VignetteParams)
from presets.vignette_presets import get_default_manager

DEFAULTS: Dict[str, Any] = {
    'inner_radius': 0.9,
    'outer_radius': 1.5,
    'opacity': 0.8,
    'vignette_color_r': 0.0,
    'vignette_color_g': 0.0,
    'vignette_color_b': 0.0,
    'use_color': False,
    'center_x': 0.5,
    'center_y': 0.5,
    'aspect_ratio': 1.0,
    'blend_mode': 0,
    'shape_type': 0,
    'shape_strength': 1.0,
    'rotation': 0.0,
}

# (min, max, step) of every slider
PROPERTY_RANGES = {
    'inner_radius': (0.0, 5.0, 0.001),
    'outer_radius': (0.0, 5.0, 0.001),
    'opacity': (0.0, 1.0, 0.001),
    'center_x': (0.0, 1.0, 0.01),
    'center_y': (0.0, 1.0, 0.01),
    'shape_strength': (0.5, 2.0, 0.01),
    'rotation': (0.0, 360.0, 1.0),
    'aspect_ratio': (0.5, 2.0, 0.01),
    'vignette_color_r': (0.0, 1.0, 0.01),
    'vignette_color_g': (0.0, 1.0, 0.01),
    'vignette_color_b': (0.0, 1.0, 0.01),
}


def _to_enum(enum_cls, value, key):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            raise InvalidSettingError(
                f"'{value}' is not a valid {key}. Available: {[e.name.lower() for e in enum_cls]}"
            )
    try:
        return enum_cls(int(value))
    except (TypeError, ValueError):
        raise InvalidSettingError(f"'{value}' is not a valid {key}.")


def _to_float(value, key):
    if isinstance(value, bool):
        raise InvalidSettingError(f"Setting '{key}' must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidSettingError(f"Setting '{key}' must be a number, got {value!r}")


def _to_bool(value, key):
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str) and value.strip().lower() in ('true', 'yes', 'on', '1'):
        return True
    if isinstance(value, str) and value.strip().lower() in ('false', 'no', 'off', '0'):
        return False
    raise InvalidSettingError(f"Setting '{key}' must be a boolean, got {value!r}")


def clamp(key: str, value: float) -> float:
    """Clamp value to the slider range of key (keys without a range pass through)."""
    if key not in PROPERTY_RANGES:
        return value
    lo, hi, _ = PROPERTY_RANGES[key]
    return min(max(value, lo), hi)


def normalize_settings(settings: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge settings onto DEFAULTS, coerce every value to its type and clamp it.

    Keys that are not filter settings are dropped. NaN is left for
    check_finite to report.

    Raises:
        InvalidSettingError: a value cannot be interpreted.
    """
    merged = dict(DEFAULTS)
    for key, value in (settings or {}).items():
        if key in DEFAULTS:
            merged[key] = value

    out = {}
    for key, value in merged.items():
        if key == 'use_color':
            out[key] = _to_bool(value, key)
        elif key == 'shape_type':
            out[key] = int(_to_enum(Shape, value, key))
        elif key == 'blend_mode':
            out[key] = int(_to_enum(BlendMode, value, key))
        elif key == 'rotation':
            # periodic, wrap into the slider range instead of clamping
            out[key] = _to_float(value, key) % 360.0
        else:
            out[key] = clamp(key, _to_float(value, key))
    return out


def apply_preset(settings: Dict[str, Any], name: str, presets=None) -> Dict[str, Any]:
    """
    Return a copy of settings with the preset's values on top.

    Keys the preset does not list keep their current value.

    Raises:
        InvalidSettingError: unknown preset name.
    """
    if presets is None:
        presets = get_default_manager()

    preset = presets.get(name)
    if preset is None:
        raise InvalidSettingError(
            f"'{name}' is not a valid preset. Available presets are: {presets.names()}"
        )
    merged = dict(settings)
    merged.update(preset)
    return merged


def resolve(settings: Optional[Dict[str, Any]] = None, preset: Optional[str] = None,
            presets=None) -> Dict[str, Any]:
    """
    Defaults, then the preset (if any), then the explicit settings;
    normalized.
    """
    base = dict(DEFAULTS)
    if preset:
        base = apply_preset(base, preset, presets)
    base.update(settings or {})
    return normalize_settings(base)


def to_params(settings: Optional[Dict[str, Any]] = None) -> VignetteParams:
    """
    Build the per-frame VignetteParams snapshot from stored settings.
    Rotation is converted from degrees to radians here.
    """
    s = normalize_settings(settings)
    return VignetteParams(
        inner_radius=s['inner_radius'],
        outer_radius=s['outer_radius'],
        opacity=s['opacity'],
        center=(s['center_x'], s['center_y']),
        aspect_ratio=s['aspect_ratio'],
        rotation=math.radians(s['rotation']),
        shape=Shape(s['shape_type']),
        shape_strength=s['shape_strength'],
        use_color=s['use_color'],
        vignette_color=(s['vignette_color_r'], s['vignette_color_g'], s['vignette_color_b']),
        blend_mode=BlendMode(s['blend_mode']),
    )
