"""Render canonical RGB as CSS Color 4 strings."""
from __future__ import annotations
from typing import Callable, Dict, Optional, Union

from ..colors.rgb import RGB
from ..conversions.numbers import clamp_channel, round_half_up
from ..conversions.to_hex import rgb_to_hex
from ..conversions.to_hsl import rgb_to_hsl
from ..conversions.to_hwb import rgb_to_hwb
from ..conversions.to_oklch import rgb_to_oklch
from ..types.format_type import ColorFormat, HUE_360, OKLCH_DECIMALS, OKLCH_SCALE
from .parser import parse_color


def _hue(h: float) -> int:
    return round_half_up(h) % int(HUE_360)


def _format_rgb(rgb: RGB) -> str:
    r, g, b = (round_half_up(clamp_channel(v)) for v in rgb)
    return f"rgb({r}, {g}, {b})"


def _format_hsl(rgb: RGB) -> str:
    hsl = rgb_to_hsl(rgb)
    return f"hsl({_hue(hsl.h)}, {round_half_up(hsl.s)}%, {round_half_up(hsl.l)}%)"


def _format_hwb(rgb: RGB) -> str:
    hwb = rgb_to_hwb(rgb)
    return f"hwb({_hue(hwb.h)} {round_half_up(hwb.w)}% {round_half_up(hwb.b)}%)"


def _format_oklch(rgb: RGB) -> str:
    oklch = rgb_to_oklch(rgb)
    l = oklch.l / OKLCH_SCALE
    c = oklch.c / OKLCH_SCALE
    return f"oklch({l:.{OKLCH_DECIMALS}f} {c:.{OKLCH_DECIMALS}f} {_hue(oklch.h)})"


FORMATTERS: Dict[ColorFormat, Callable[[RGB], str]] = {
    ColorFormat.HEX: rgb_to_hex,
    ColorFormat.RGB: _format_rgb,
    ColorFormat.HSL: _format_hsl,
    ColorFormat.HWB: _format_hwb,
    ColorFormat.OKLCH: _format_oklch,
}


def format_color(rgb: RGB, format: Union[ColorFormat, str]) -> str:
    """
    Render ``rgb`` in one of the five notations.

    ========  ===========================
    hex       ``#rrggbb``
    rgb       ``rgb(R, G, B)``
    hsl       ``hsl(H, S%, L%)``
    hwb       ``hwb(H W% B%)``
    oklch     ``oklch(L C H)``, L and C to 3 decimals
    ========  ===========================

    Integers are rounded half up.

    Raises:
        ValueError: if ``format`` is not a known notation
    """
    return FORMATTERS[ColorFormat(format)](rgb)


def format_all(rgb: RGB) -> Dict[ColorFormat, str]:
    """Render ``rgb`` in every notation, in :class:`ColorFormat` order."""
    return {fmt: FORMATTERS[fmt](rgb) for fmt in ColorFormat}


def convert_color_string(text: str, format: Union[ColorFormat, str]) -> Optional[str]:
    """Re-render a color string in another notation, or ``None`` if it does not parse."""
    target = ColorFormat(format)
    rgb = parse_color(text)
    if rgb is None:
        return None
    return format_color(rgb, target)
