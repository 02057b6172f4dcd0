from __future__ import annotations
from .color_base import ColorBase, build_registry
from .rgb import RGB
from .hsl import HSL
from .hwb import HWB
from .oklch import OKLCH
from ..conversions.wrapper import convert
from ..types.color_types import ColorSpace

color_classes: dict[str, type[ColorBase]] = build_registry(RGB, HSL, HWB, OKLCH)


def color_convert(self: ColorBase, to_space: ColorSpace | None = None) -> ColorBase:
    """
    Convert this color to a different color space.

    Args:
        to_space: Target color space ("rgb", "hsl", "hwb", "oklch").
            Defaults to the current space.

    Returns:
        New ColorBase instance in the target space
    """
    to_space = (to_space or self.mode).lower()  # type: ignore
    return convert(self, to_space)  # type: ignore[arg-type]


ColorBase.convert = color_convert


def get_color_class(color_space: str) -> type[ColorBase]:
    color_class = color_classes.get(color_space.lower())
    if color_class is None:
        raise ValueError(f"Unsupported color space: {color_space}")
    return color_class
