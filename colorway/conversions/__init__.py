"""
Colorway Color Space Conversions
================================

Pure numeric transforms between canonical RGB (0-255 floats) and HSL, HWB and
OKLCH, plus hex encoding, with both scalar and vectorized (numpy)
implementations.

Features
--------
- Every conversion goes through canonical RGB
- Scalar functions take and return immutable color values
- Vectorized numpy functions for batch processing
- Out-of-range input is clamped, never rejected

Conversion Functions
-------------------

Hex ↔ RGB:
    hex_to_rgb(hex_str)
        3, 4, 6 or 8 digit hex (alpha digits dropped) to RGB
    rgb_to_hex(rgb)
        RGB to ``#rrggbb``
    np_rgb_to_hex(r, g, b)
        Vectorized RGB to hex strings

RGB ↔ HSL:
    rgb_to_hsl(rgb) / hsl_to_rgb(hsl)
    np_rgb_to_hsl(r, g, b) / np_hsl_to_rgb(h, s, l)

RGB ↔ HWB:
    rgb_to_hwb(rgb) / hwb_to_rgb(hwb)
    np_rgb_to_hwb(r, g, b) / np_hwb_to_rgb(h, w, b)

RGB ↔ OKLCH:
    rgb_to_oklch(rgb) / oklch_to_rgb(oklch)
    np_rgb_to_oklch(r, g, b) / np_oklch_to_rgb(l, c, h)
        Lightness and chroma are scaled x100; the RGB output is clamped to
        the sRGB gamut.

Shared helper:
    hue_to_channel(p, q, t) / np_hue_to_channel(p, q, t)
        Piecewise hue interpolation used by both HSL and HWB

High-Level API
-------------
    convert(color, to_space)
        Any color value to any space
    np_convert(color, from_space, to_space)
        Vectorized converter for arrays of shape (..., 3)

Examples
--------
>>> from colorway.colors import RGB
>>> from colorway.conversions import rgb_to_hsl, hsl_to_rgb
>>>
>>> hsl = rgb_to_hsl(RGB(255, 128, 0))
>>> rgb = hsl_to_rgb(hsl)
>>>
>>> import numpy as np
>>> from colorway.conversions import np_rgb_to_oklch
>>> rgb_array = np.array([[255, 0, 0], [0, 255, 0]])
>>> oklch_array = np_rgb_to_oklch(rgb_array[..., 0], rgb_array[..., 1], rgb_array[..., 2])
"""

# → RGB conversions
from .to_rgb import (
    hex_to_rgb,
    hsl_to_rgb,
    hwb_to_rgb,
    oklch_to_rgb,
    np_hsl_to_rgb,
    np_hwb_to_rgb,
    np_oklch_to_rgb,
    hue_to_channel,
    np_hue_to_channel,
)

# RGB → other conversions
from .to_hex import rgb_to_hex, np_rgb_to_hex
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_hwb import rgb_to_hwb, np_rgb_to_hwb
from .to_oklch import rgb_to_oklch, np_rgb_to_oklch

# High-level API
from .wrapper import convert, np_convert

__all__ = [
    # → RGB
    'hex_to_rgb',
    'hsl_to_rgb',
    'hwb_to_rgb',
    'oklch_to_rgb',
    'np_hsl_to_rgb',
    'np_hwb_to_rgb',
    'np_oklch_to_rgb',

    # RGB →
    'rgb_to_hex',
    'rgb_to_hsl',
    'rgb_to_hwb',
    'rgb_to_oklch',
    'np_rgb_to_hex',
    'np_rgb_to_hsl',
    'np_rgb_to_hwb',
    'np_rgb_to_oklch',

    # Shared helper
    'hue_to_channel',
    'np_hue_to_channel',

    # High-level API
    'convert',
    'np_convert',
]
