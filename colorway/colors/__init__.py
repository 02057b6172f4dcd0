"""Immutable color value types shared by the converter and the CSS layer."""

from .color_base import ColorBase
from .rgb import RGB
from .hsl import HSL
from .hwb import HWB
from .oklch import OKLCH
from .color import color_convert, color_classes, get_color_class

__all__ = [
    "ColorBase",
    "RGB",
    "HSL",
    "HWB",
    "OKLCH",
    "color_convert",
    "color_classes",
    "get_color_class",
]
