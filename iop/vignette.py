"""
vignette.py - the Vignetter effect as an IOP module.

Draws a configurable vignette onto a frame: a distance field for one of four
shapes (oval, rectangle, diamond, star) is turned into a falloff factor, which
either darkens the frame or tints it with a colour through one of four blend
modes (normal, multiply, screen, overlay).

The per-pixel math lives in `evaluate`; `composite` runs exactly the same
formulas over a whole (H, W, C) frame with numpy.
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple

import numpy as np

from core import settings as vignette_settings
from core.datatypes import (BlendMode, Shape, VignetteParams, check_finite,
                            ensure_rgba)

#############################
# 1. constants              #
#############################
DIAMOND_SCALE = 0.7          # diamond size calibrated to oval/rectangle
STAR_POINTS = 5
STAR_BASE = 0.8
STAR_AMPLITUDE = 0.2
MIN_FALLOFF_WIDTH = 0.01     # floor for outer_radius - inner_radius
VERTICAL_DIM_BASE = 0.5
VERTICAL_DIM_GAIN = 0.9


##################################
# 2. distance field and falloff  #
##################################
def transform_uv(u, v, params: VignetteParams):
    """
    Map texture coordinates to the signed, aspect corrected frame the
    distance field is computed in. Returns (x_trans, y_trans).
    """
    cx, cy = params.center
    s = np.sin(params.rotation)
    c = np.cos(params.rotation)

    # rotate around the center (y-down texture space)
    du = u - cx
    dv = v - cy
    rot_x = du * c + dv * s
    rot_y = -du * s + dv * c

    # rot_x/rot_y are already center relative
    x_trans = rot_x * params.aspect_ratio * 2.0
    y_trans = -rot_y * 2.0
    return x_trans, y_trans


def shape_distance(x_trans, y_trans, shape: Shape, shape_strength: float = 1.0):
    """Distance of a point from the vignette center for the given shape."""
    ax = np.abs(x_trans)
    ay = np.abs(y_trans)

    if shape == Shape.OVAL:
        # the oval ignores shape_strength
        return np.sqrt(ax ** 2 + ay ** 2)
    if shape == Shape.RECTANGLE:
        return np.maximum(ax, ay) * shape_strength
    if shape == Shape.DIAMOND:
        return (ax + ay) * DIAMOND_SCALE * shape_strength
    if shape == Shape.STAR:
        a = np.arctan2(ay, ax) * STAR_POINTS
        r = np.hypot(ax, ay)
        return r * (STAR_BASE + STAR_AMPLITUDE * np.sin(a)) * shape_strength
    raise ValueError(f"Unknown vignette shape: {shape}")


def falloff_factor(dist, inner_radius: float, outer_radius: float):
    """
    1 inside inner_radius, 0 beyond outer_radius, linear in between.

    outer_radius <= inner_radius is not an error: the width is floored at
    MIN_FALLOFF_WIDTH, which turns the ramp into a (near) hard step.
    """
    width = max(outer_radius - inner_radius, MIN_FALLOFF_WIDTH)
    sub = np.maximum(0.0, dist - inner_radius) / width
    return np.clip(1.0 - sub, 0.0, 1.0)


def vertical_dim(v):
    """Brightness bias along the vertical axis, peaks at 1.4 mid-frame."""
    return VERTICAL_DIM_BASE + np.sin(v * math.pi) * VERTICAL_DIM_GAIN


#############################
# 3. compositing            #
#############################
def _lerp(a, b, t):
    return a + (b - a) * t


def blend(source_rgb, color, vignette_opacity, mode: BlendMode):
    """
    Blend the vignette colour over source_rgb.

    Args:
        source_rgb: (..., 3) colours.
        color: the RGB vignette colour.
        vignette_opacity: scalar or (...) array, (1 - factor) * opacity.
        mode: one of BlendMode.

    Returns:
        (..., 3) blended colours.
    """
    color = np.asarray(color, dtype=np.float64)
    t = np.asarray(vignette_opacity, dtype=np.float64)[..., np.newaxis]

    if mode == BlendMode.NORMAL:
        return _lerp(source_rgb, color, t)
    if mode == BlendMode.MULTIPLY:
        blend_color = _lerp(1.0, color, t)
        return source_rgb * blend_color
    if mode == BlendMode.SCREEN:
        blend_color = _lerp(0.0, color, t)
        return 1.0 - (1.0 - source_rgb) * (1.0 - blend_color)
    if mode == BlendMode.OVERLAY:
        blend_color = _lerp(0.5, color, t)
        return np.where(source_rgb < 0.5,
                        2.0 * source_rgb * blend_color,
                        1.0 - 2.0 * (1.0 - source_rgb) * (1.0 - blend_color))
    raise ValueError(f"Unknown blend mode: {mode}")


def _shade(u, v, rgb, params: VignetteParams):
    x_trans, y_trans = transform_uv(u, v, params)
    dist = shape_distance(x_trans, y_trans, params.shape, params.shape_strength)
    factor = falloff_factor(dist, params.inner_radius, params.outer_radius)

    if params.use_color:
        vignette_opacity = (1.0 - factor) * params.opacity
        return blend(rgb, params.vignette_color, vignette_opacity, params.blend_mode)

    tinted = rgb * np.asarray(factor * vertical_dim(v))[..., np.newaxis]
    return rgb * (1.0 - params.opacity) + tinted * params.opacity


def evaluate(uv: Sequence[float], source_color: Sequence[float],
             params: VignetteParams) -> Tuple[float, float, float, float]:
    """
    Shade a single pixel.

    Args:
        uv: normalized (u, v) texture coordinate, v pointing down.
        source_color: RGBA colour sampled from the frame.
        params: the frame's VignetteParams.

    Returns:
        RGBA tuple; alpha is source_color's alpha, untouched.
    """
    if __debug__:
        check_finite(params)
    rgba = np.asarray(source_color, dtype=np.float64)
    rgb = _shade(float(uv[0]), float(uv[1]), rgba[:3], params)
    return (float(rgb[0]), float(rgb[1]), float(rgb[2]), float(rgba[3]))


def texel_grid(height: int, width: int):
    """uv of every texel center as two (H, W) arrays."""
    u = (np.arange(width, dtype=np.float64) + 0.5) / width
    v = (np.arange(height, dtype=np.float64) + 0.5) / height
    return np.meshgrid(u, v)


def composite(image: np.ndarray, params: VignetteParams) -> np.ndarray:
    """
    Apply the vignette to every pixel of a float (H, W, 3|4) frame.

    Extra channels beyond RGB (alpha) are copied through unchanged.
    """
    if __debug__:
        check_finite(params)
    h, w = image.shape[:2]
    u, v = texel_grid(h, w)
    out = np.array(image, dtype=np.float64, copy=True)
    out[..., :3] = _shade(u, v, out[..., :3], params)
    return out.astype(image.dtype, copy=False)


#############################
# 4. IOP module             #
#############################
class Vignette:
    """
    The Vignetter IOP module.

    Takes the filter settings as keyword arguments (the same keys the OBS
    filter stores, rotation in degrees) and applies them to whole frames.
    """
    def __init__(self, preset=None, **kwargs):
        """
        Initializes the Vignette module.

        Args:
            preset (str, optional): name of a built-in preset applied before
                the explicit settings.
            **kwargs: settings such as inner_radius, outer_radius, opacity,
                center_x, center_y, aspect_ratio, rotation, shape_type,
                shape_strength, use_color, vignette_color_r/g/b, blend_mode.
                Unknown keys are ignored.
        """
        self.name = 'vignette'  # for logging
        self.settings = vignette_settings.resolve(kwargs, preset=preset)
        self.params = vignette_settings.to_params(self.settings)

    def process(self, image):
        """
        Applies the vignette effect to the input image.

        Args:
            image (np.ndarray): float image (H, W, C) in [0, 1], C = 3 or 4.

        Returns:
            np.ndarray: The image with the vignette effect, same shape.
        """
        rgba, had_alpha = ensure_rgba(image)
        out = composite(rgba, self.params)
        return out if had_alpha else out[..., :3]
