import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import RGB
from ..colors.hsl import HSL
from ..types.format_type import PERCENT_MAX, RGB_MAX
from .numbers import clamp_channel

## RGB to HSL conversions

def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert RGB to HSL.

    Channels are clamped to [0, 255] first. When several channels share the
    maximum the hue is taken from the first of r, g, b. A gray input has hue 0
    and saturation 0.

    Args:
        rgb: color with channels in [0, 255]

    Returns:
        HSL: (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r = clamp_channel(rgb.r) / RGB_MAX
    g = clamp_channel(rgb.g) / RGB_MAX
    b = clamp_channel(rgb.b) / RGB_MAX

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = 0.0
    s = 0.0
    l = (max_c + min_c) / 2

    if delta != 0:
        s = delta / (2 - max_c - min_c) if l > 0.5 else delta / (max_c + min_c)

        if max_c == r:
            h = (g - b) / delta + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h /= 6

    return HSL(h * 360, s * PERCENT_MAX, l * PERCENT_MAX)

def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r = np.clip(np.asarray(r, dtype=float), 0, RGB_MAX) / RGB_MAX
    g = np.clip(np.asarray(g, dtype=float), 0, RGB_MAX) / RGB_MAX
    b = np.clip(np.asarray(b, dtype=float), 0, RGB_MAX) / RGB_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros(out_shape)
    mask = delta != 0
    d, mx, mn = delta[mask], max_c[mask], min_c[mask]
    saturation[mask] = np.where(lightness[mask] > 0.5, d / (2 - mx - mn), d / (mx + mn))

    # Tie-break on the maximum: r, then g, then b
    mask_r = mask & (max_c == r)
    mask_g = mask & ~mask_r & (max_c == g)
    mask_b = mask & ~mask_r & ~mask_g

    hue = np.zeros(out_shape)
    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6, 0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4

    return np.stack([hue / 6 * 360, saturation * PERCENT_MAX, lightness * PERCENT_MAX], axis=-1)
