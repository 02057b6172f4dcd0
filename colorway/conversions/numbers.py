import math

from ..types.format_type import HUE_360, PERCENT_MAX, RGB_MAX


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` to the inclusive range ``[lower, upper]``; NaN maps to ``lower``."""
    if math.isnan(value):
        return lower
    return min(max(value, lower), upper)



def clamp_channel(value: float) -> float:
    """Clamp an RGB channel to ``[0, 255]``."""
    return clamp(value, 0.0, RGB_MAX)


def clamp_percent(value: float) -> float:
    """Clamp a percentage to ``[0, 100]``."""
    return clamp(value, 0.0, PERCENT_MAX)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return h % HUE_360


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going towards positive infinity.

    Unlike the builtin ``round``, ``127.5`` becomes ``128``.
    """
    return int(math.floor(value + 0.5))
