"""
Core data types for the Vignetter effect: shape / blend enums, the per-frame
parameter snapshot, and the error hierarchy.
"""

import math
from dataclasses import dataclass, fields
from enum import IntEnum
from typing import Tuple

import numpy as np


class Shape(IntEnum):
    """Vignette shape, values match the stored `shape_type` setting"""
    OVAL = 0
    RECTANGLE = 1
    DIAMOND = 2
    STAR = 3


class BlendMode(IntEnum):
    """Blend mode, values match the stored `blend_mode` setting"""
    NORMAL = 0
    MULTIPLY = 1
    SCREEN = 2
    OVERLAY = 3


@dataclass(frozen=True)
class VignetteParams:
    """
    Parameter snapshot for one frame.
    Built by core.settings.to_params; rotation is in radians.
    """
    inner_radius: float = 0.9
    outer_radius: float = 1.5
    opacity: float = 0.8
    center: Tuple[float, float] = (0.5, 0.5)
    aspect_ratio: float = 1.0
    rotation: float = 0.0
    shape: Shape = Shape.OVAL
    shape_strength: float = 1.0
    use_color: bool = False
    vignette_color: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    blend_mode: BlendMode = BlendMode.NORMAL


class PipelineError(Exception):
    """管线处理异常"""
    pass


class InvalidDataError(PipelineError, ValueError):
    """Invalid image data"""
    pass


class InvalidSettingError(PipelineError, ValueError):
    """Invalid filter setting"""
    pass


class NonFiniteParameterError(InvalidSettingError):
    """NaN / Inf in a parameter snapshot"""
    pass


def check_finite(params: VignetteParams) -> None:
    """Raise NonFiniteParameterError if any numeric field is NaN or Inf."""
    for f in fields(params):
        value = getattr(params, f.name)
        values = value if isinstance(value, tuple) else (value,)
        for x in values:
            if not math.isfinite(float(x)):
                raise NonFiniteParameterError(
                    f"Parameter '{f.name}' must be finite, got {value}"
                )


def ensure_rgba(image: np.ndarray) -> Tuple[np.ndarray, bool]:
    """
    Validate a float (H, W, 3|4) image and return it as RGBA.

    Returns:
        (rgba, had_alpha): RGB input gets an opaque alpha channel appended.
    """
    if not isinstance(image, np.ndarray):
        raise InvalidDataError(f"Expected a numpy array, got {type(image)}")
    if image.ndim != 3:
        raise InvalidDataError(f"Invalid data shape: {image.shape}, expected (H, W, C)")
    channels = image.shape[2]
    if channels not in (3, 4):
        raise InvalidDataError(f"Expected 3 or 4 channels, got {channels}")
    if not np.issubdtype(image.dtype, np.floating):
        raise InvalidDataError("Input image data must be of float type for processing.")

    if channels == 4:
        return image, True
    alpha = np.ones(image.shape[:2] + (1,), dtype=image.dtype)
    return np.concatenate([image, alpha], axis=-1), False
