import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import RGB
from ..colors.oklch import OKLCH
from ..types.format_type import OKLCH_SCALE, RGB_MAX
from .matrices import (
    LINEAR_RGB_TO_LMS,
    LMS_TO_OKLAB,
    SRGB_DECODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
)
from .numbers import clamp_channel

def _srgb_to_linear(c: float) -> float:
    if c > SRGB_DECODE_THRESHOLD:
        return ((c + 0.055) / 1.055) ** SRGB_GAMMA
    return c / SRGB_LINEAR_SLOPE

def rgb_to_oklch(rgb: RGB) -> OKLCH:
    """
    Convert RGB to OKLCH.

    sRGB -> linear RGB -> LMS -> cube root -> OKLab -> polar. Lightness and
    chroma come back x100, hue in degrees [0, 360).
    """
    linear = np.array([
        _srgb_to_linear(clamp_channel(rgb.r) / RGB_MAX),
        _srgb_to_linear(clamp_channel(rgb.g) / RGB_MAX),
        _srgb_to_linear(clamp_channel(rgb.b) / RGB_MAX),
    ])

    lms = np.cbrt(LINEAR_RGB_TO_LMS @ linear)
    L, a, b = (LMS_TO_OKLAB @ lms).tolist()

    C = (a * a + b * b) ** 0.5
    H = float(np.degrees(np.arctan2(b, a)))
    if H < 0:
        H += 360

    return OKLCH(L * OKLCH_SCALE, C * OKLCH_SCALE, H)

def np_rgb_to_oklch(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to OKLCH.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        oklch: array of shape (..., 3): (lightness x100, chroma x100, hue [0,360))
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)
    rgb = np.clip(rgb, 0, RGB_MAX) / RGB_MAX

    linear = np.where(
        rgb > SRGB_DECODE_THRESHOLD,
        ((rgb + 0.055) / 1.055) ** SRGB_GAMMA,
        rgb / SRGB_LINEAR_SLOPE,
    )
    lms = np.cbrt(linear @ LINEAR_RGB_TO_LMS.T)
    lab = lms @ LMS_TO_OKLAB.T

    L, a, b_ = lab[..., 0], lab[..., 1], lab[..., 2]
    C = np.sqrt(a * a + b_ * b_)
    H = np.degrees(np.arctan2(b_, a))
    H = np.where(H < 0, H + 360, H)

    return np.stack([L * OKLCH_SCALE, C * OKLCH_SCALE, H], axis=-1)
