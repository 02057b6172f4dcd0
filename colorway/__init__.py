"""
Colorway - CSS Color Conversion Engine
======================================

Converts colors between hex, RGB, HSL, HWB and OKLCH, and parses human-typed
color strings in any of those notations back into canonical RGB.

Key Features
------------
- Canonical floating-point RGB hub (0-255 per channel)
- Immutable color values (RGB, HSL, HWB, OKLCH)
- OKLab/OKLCH through fixed published matrices, clamped to the sRGB gamut
- Tolerant CSS parsing: legacy comma and modern space syntax, optional alpha
- Vectorized numpy twins of every conversion

Quick Start
-----------
>>> from colorway import parse_color, format_color, ColorFormat
>>>
>>> rgb = parse_color("hsl(120, 100%, 50%)")
>>> format_color(rgb, ColorFormat.HEX)
'#00ff00'
>>> format_color(rgb, "oklch")
'oklch(0.866 0.295 142)'
>>> parse_color("not-a-color") is None
True
"""
import logging

# colors must be imported before conversions (see colors/color.py)
from .colors import ColorBase, RGB, HSL, HWB, OKLCH, get_color_class
from .types.format_type import ColorFormat
from .conversions import (
    hex_to_rgb,
    rgb_to_hex,
    hsl_to_rgb,
    rgb_to_hsl,
    hwb_to_rgb,
    rgb_to_hwb,
    oklch_to_rgb,
    rgb_to_oklch,
    np_rgb_to_hex,
    np_hsl_to_rgb,
    np_rgb_to_hsl,
    np_hwb_to_rgb,
    np_rgb_to_hwb,
    np_oklch_to_rgb,
    np_rgb_to_oklch,
    convert,
    np_convert,
)
from .css import (
    parse_color,
    detect_format,
    format_color,
    format_all,
    convert_color_string,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # color values
    "ColorBase",
    "RGB",
    "HSL",
    "HWB",
    "OKLCH",
    "ColorFormat",
    "get_color_class",
    # parsing / formatting
    "parse_color",
    "detect_format",
    "format_color",
    "format_all",
    "convert_color_string",
    # scalar conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "hwb_to_rgb",
    "rgb_to_hwb",
    "oklch_to_rgb",
    "rgb_to_oklch",
    # vectorized conversions
    "np_rgb_to_hex",
    "np_hsl_to_rgb",
    "np_rgb_to_hsl",
    "np_hwb_to_rgb",
    "np_rgb_to_hwb",
    "np_oklch_to_rgb",
    "np_rgb_to_oklch",
    # high-level API
    "convert",
    "np_convert",
]
