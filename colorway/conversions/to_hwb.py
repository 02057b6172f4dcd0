import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import RGB
from ..colors.hwb import HWB
from ..types.format_type import PERCENT_MAX, RGB_MAX
from .numbers import clamp_channel
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl

def rgb_to_hwb(rgb: RGB) -> HWB:
    """
    Convert RGB to HWB.

    Hue comes from :func:`rgb_to_hsl`; whiteness is the smallest channel and
    blackness the complement of the largest one.
    """
    r = clamp_channel(rgb.r)
    g = clamp_channel(rgb.g)
    b = clamp_channel(rgb.b)

    hsl = rgb_to_hsl(RGB(r, g, b))
    white = min(r, g, b) / RGB_MAX
    black = 1 - max(r, g, b) / RGB_MAX

    return HWB(hsl.h, white * PERCENT_MAX, black * PERCENT_MAX)

def np_rgb_to_hwb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HWB.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hwb: array of shape (..., 3): (hue [0,360), whiteness [0,100], blackness [0,100])
    """
    r = np.clip(np.asarray(r, dtype=float), 0, RGB_MAX)
    g = np.clip(np.asarray(g, dtype=float), 0, RGB_MAX)
    b = np.clip(np.asarray(b, dtype=float), 0, RGB_MAX)

    hue = np_rgb_to_hsl(r, g, b)[..., 0]
    white = np.minimum.reduce(np.broadcast_arrays(r, g, b)) / RGB_MAX
    black = 1 - np.maximum.reduce(np.broadcast_arrays(r, g, b)) / RGB_MAX

    return np.stack([hue, white * PERCENT_MAX, black * PERCENT_MAX], axis=-1)
