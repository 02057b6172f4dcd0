import re

import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import RGB
from ..colors.hsl import HSL
from ..colors.hwb import HWB
from ..colors.oklch import OKLCH
from ..types.format_type import HUE_360, OKLCH_SCALE, PERCENT_MAX, RGB_MAX
from .matrices import (
    LMS_TO_LINEAR_RGB,
    OKLAB_TO_LMS,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
)
from .numbers import clamp_channel, clamp_percent, normalize_hue

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")

## Shared hue helper

def hue_to_channel(p: float, q: float, t: float) -> float:
    """
    Piecewise hue interpolation shared by HSL -> RGB and HWB -> RGB.

    Args:
        p: Lower bound of the channel (``2l - q`` for HSL, 0 for a pure hue)
        q: Upper bound of the channel (1 for a pure hue)
        t: Hue fraction offset for this channel, wrapped once into [0, 1]

    Returns:
        float: channel value in [p, q]
    """
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    """Vectorized :func:`hue_to_channel`."""
    t = np.asarray(t, dtype=float)
    t = np.where(t < 0, t + 1, t)
    t = np.where(t > 1, t - 1, t)
    p = np.asarray(p, dtype=float)
    q = np.asarray(q, dtype=float)
    return np.select(
        [t < 1 / 6, t < 1 / 2, t < 2 / 3],
        [p + (q - p) * 6 * t, q + 0 * t, p + (q - p) * (2 / 3 - t) * 6],
        default=p + 0 * t,
    )

## Hex to RGB

def hex_to_rgb(hex_str: str) -> RGB:
    """
    Decode a hex color string.

    Accepts 3, 4, 6 or 8 hex digits with an optional leading ``#``. Short forms
    duplicate each nibble; alpha digits of the 4/8 forms are dropped.

    Raises:
        ValueError: if the string is not a hex color
    """
    cleaned = hex_str.strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]

    if not _HEX_DIGITS.fullmatch(cleaned) or len(cleaned) not in (3, 4, 6, 8):
        raise ValueError(f"Invalid hex color: {hex_str!r}")

    if len(cleaned) in (3, 4):
        return RGB(*(int(c * 2, 16) for c in cleaned[:3]))

    int_val = int(cleaned[:6], 16)
    return RGB((int_val >> 16) & 255, (int_val >> 8) & 255, int_val & 255)

## HSL to RGB

def hsl_to_rgb(hsl: HSL) -> RGB:
    """
    Convert HSL to RGB.

    Saturation and lightness are clamped to [0, 100]; hue wraps modulo 360.
    An achromatic color (``s == 0``) short-circuits to ``l * 255``.
    """
    h = normalize_hue(hsl.h) / HUE_360
    s = clamp_percent(hsl.s) / PERCENT_MAX
    l = clamp_percent(hsl.l) / PERCENT_MAX

    if s == 0:
        gray = l * RGB_MAX
        return RGB(gray, gray, gray)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q

    return RGB(
        hue_to_channel(p, q, h + 1 / 3) * RGB_MAX,
        hue_to_channel(p, q, h) * RGB_MAX,
        hue_to_channel(p, q, h - 1 / 3) * RGB_MAX,
    )

def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h = np.asarray(h, dtype=float) % HUE_360 / HUE_360
    s = np.clip(np.asarray(s, dtype=float), 0, PERCENT_MAX) / PERCENT_MAX
    l = np.clip(np.asarray(l, dtype=float), 0, PERCENT_MAX) / PERCENT_MAX

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1 + s), l + s - l * s)
    p = 2 * l - q

    rgb = np.stack([
        np_hue_to_channel(p, q, h + 1 / 3),
        np_hue_to_channel(p, q, h),
        np_hue_to_channel(p, q, h - 1 / 3),
    ], axis=-1)

    achromatic = (s == 0)[..., None]
    return np.where(achromatic, l[..., None], rgb) * RGB_MAX

## HWB to RGB

def hwb_to_rgb(hwb: HWB) -> RGB:
    """
    Convert HWB to RGB.

    When whiteness and blackness add up to 100% or more the result is the gray
    ``w / (w + b)``. Otherwise the fully saturated color at the hue is mixed
    with white and black: ``channel = pure * (1 - w - b) + w``.
    """
    h = normalize_hue(hwb.h) / HUE_360
    w = clamp_percent(hwb.w) / PERCENT_MAX
    b = clamp_percent(hwb.b) / PERCENT_MAX

    if w + b >= 1:
        gray = (w / (w + b)) * RGB_MAX
        return RGB(gray, gray, gray)

    # S=100%, L=50% gives p=0, q=1
    r_pure = hue_to_channel(0, 1, h + 1 / 3)
    g_pure = hue_to_channel(0, 1, h)
    b_pure = hue_to_channel(0, 1, h - 1 / 3)

    ratio = 1 - w - b

    return RGB(
        (r_pure * ratio + w) * RGB_MAX,
        (g_pure * ratio + w) * RGB_MAX,
        (b_pure * ratio + w) * RGB_MAX,
    )

def np_hwb_to_rgb(h: NDArray, w: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert HWB to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        w: array-like or scalar, whiteness in [0, 100]
        b: array-like or scalar, blackness in [0, 100]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 255]
    """
    h = np.asarray(h, dtype=float) % HUE_360 / HUE_360
    w = np.clip(np.asarray(w, dtype=float), 0, PERCENT_MAX) / PERCENT_MAX
    b = np.clip(np.asarray(b, dtype=float), 0, PERCENT_MAX) / PERCENT_MAX

    out_shape = np.broadcast(h, w, b).shape
    h = np.broadcast_to(h, out_shape)
    w = np.broadcast_to(w, out_shape)
    b = np.broadcast_to(b, out_shape)

    total = w + b
    gray_mask = total >= 1
    gray = np.divide(w, total, out=np.zeros(out_shape), where=gray_mask)

    pure = np.stack([
        np_hue_to_channel(0.0, 1.0, h + 1 / 3),
        np_hue_to_channel(0.0, 1.0, h),
        np_hue_to_channel(0.0, 1.0, h - 1 / 3),
    ], axis=-1)
    mixed = pure * (1 - total)[..., None] + w[..., None]

    return np.where(gray_mask[..., None], gray[..., None], mixed) * RGB_MAX

## OKLCH to RGB

def _linear_to_srgb(c: float) -> float:
    if c <= SRGB_ENCODE_THRESHOLD:
        val = SRGB_LINEAR_SLOPE * c
    else:
        val = 1.055 * c ** (1 / SRGB_GAMMA) - 0.055
    return clamp_channel(val * RGB_MAX)

def oklch_to_rgb(oklch: OKLCH) -> RGB:
    """
    Convert OKLCH (lightness and chroma x100) to RGB.

    OKLCH reaches colors outside the sRGB gamut; the result is clamped to
    [0, 255] per channel. That clamp is the only lossy step of the pipeline.
    """
    L = oklch.l / OKLCH_SCALE
    C = oklch.c / OKLCH_SCALE
    H = np.radians(normalize_hue(oklch.h))

    lab = np.array([L, C * np.cos(H), C * np.sin(H)])
    lms = (OKLAB_TO_LMS @ lab) ** 3
    r, g, b = (LMS_TO_LINEAR_RGB @ lms).tolist()

    return RGB(_linear_to_srgb(r), _linear_to_srgb(g), _linear_to_srgb(b))

def np_oklch_to_rgb(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """
    Vectorized: Convert OKLCH to RGB.

    Args:
        l: array-like or scalar, lightness x100
        c: array-like or scalar, chroma x100
        h: array-like or scalar, hue in degrees

    Returns:
        rgb: array of shape (..., 3): (r, g, b) clamped to [0, 255]
    """
    L = np.asarray(l, dtype=float) / OKLCH_SCALE
    C = np.asarray(c, dtype=float) / OKLCH_SCALE
    H = np.radians(np.asarray(h, dtype=float) % HUE_360)

    L, C, H = np.broadcast_arrays(L, C, H)
    lab = np.stack([L, C * np.cos(H), C * np.sin(H)], axis=-1)
    lms = (lab @ OKLAB_TO_LMS.T) ** 3
    linear = lms @ LMS_TO_LINEAR_RGB.T

    low = linear <= SRGB_ENCODE_THRESHOLD
    # Only raise non-negative values to the fractional power.
    safe = np.where(low, 0.0, linear)
    srgb = np.where(low, SRGB_LINEAR_SLOPE * linear, 1.055 * safe ** (1 / SRGB_GAMMA) - 0.055)
    # Out-of-range OKLab input overflows to inf or NaN; both land on the gamut edge.
    srgb = np.nan_to_num(srgb * RGB_MAX, nan=0.0, posinf=RGB_MAX, neginf=0.0)
    return np.clip(srgb, 0, RGB_MAX)
