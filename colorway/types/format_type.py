# No dependencies
from enum import Enum


class ColorFormat(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    HWB = "hwb"
    OKLCH = "oklch"


HUE_360 = 360.0
RGB_MAX = 255.0
PERCENT_MAX = 100.0

# OKLab lightness and chroma are stored x100 so they sit on the same scale
# as the HSL/HWB percentages.
OKLCH_SCALE = 100.0
OKLCH_DECIMALS = 3
# Parsed chroma is bounded to 0-1 on the native scale, far past the sRGB gamut.
OKLCH_CHROMA_MAX = OKLCH_SCALE

channel_maxima = {
    "rgb": (RGB_MAX, RGB_MAX, RGB_MAX),
    "hsl": (HUE_360, PERCENT_MAX, PERCENT_MAX),
    "hwb": (HUE_360, PERCENT_MAX, PERCENT_MAX),
    "oklch": (PERCENT_MAX, float("inf"), HUE_360),
}

hue_index = {
    "rgb": None,
    "hsl": 0,
    "hwb": 0,
    "oklch": 2,
}
