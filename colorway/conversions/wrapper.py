import numpy as np
from typing import Callable, Dict

from ..colors.color_base import ColorBase
from ..colors.rgb import RGB
from ..types.color_types import COLOR_SPACES, ColorSpace

from .to_rgb import hsl_to_rgb, hwb_to_rgb, oklch_to_rgb
from .to_rgb import np_hsl_to_rgb, np_hwb_to_rgb, np_oklch_to_rgb
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_hwb import rgb_to_hwb, np_rgb_to_hwb
from .to_oklch import rgb_to_oklch, np_rgb_to_oklch

# Every conversion goes through canonical RGB.
TO_RGB: Dict[str, Callable[[ColorBase], RGB]] = {
    "rgb": lambda color: RGB(color.value),
    "hsl": hsl_to_rgb,
    "hwb": hwb_to_rgb,
    "oklch": oklch_to_rgb,
}

FROM_RGB: Dict[str, Callable[[RGB], ColorBase]] = {
    "rgb": lambda rgb: rgb,
    "hsl": rgb_to_hsl,
    "hwb": rgb_to_hwb,
    "oklch": rgb_to_oklch,
}

NP_TO_RGB: Dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "rgb": lambda r, g, b: np.stack(np.broadcast_arrays(r, g, b), axis=-1),
    "hsl": np_hsl_to_rgb,
    "hwb": np_hwb_to_rgb,
    "oklch": np_oklch_to_rgb,
}

NP_FROM_RGB: Dict[str, Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]] = {
    "rgb": lambda r, g, b: np.stack(np.broadcast_arrays(r, g, b), axis=-1),
    "hsl": np_rgb_to_hsl,
    "hwb": np_rgb_to_hwb,
    "oklch": np_rgb_to_oklch,
}

def _check_space(space: str) -> str:
    space = space.lower()
    if space not in COLOR_SPACES:
        raise ValueError(f"Unknown space: {space}")
    return space

def convert(color: ColorBase, to_space: ColorSpace) -> ColorBase:
    """
    Convert a color value to another space through canonical RGB.

    Args:
        color: any color value (RGB, HSL, HWB, OKLCH)
        to_space: "rgb", "hsl", "hwb" or "oklch"

    Returns:
        A new color value in ``to_space``; ``color`` itself when the space is
        unchanged.
    """
    fs, ts = _check_space(color.mode), _check_space(to_space)
    if fs == ts:
        return color  # No conversion needed
    return FROM_RGB[ts](TO_RGB[fs](color))

def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Vectorized :func:`convert` for arrays of shape ``(..., 3)``.
    """
    fs, ts = _check_space(from_space), _check_space(to_space)
    color = np.asarray(color, dtype=float)
    if color.shape[-1:] != (3,):
        raise ValueError(f"{fs} expects last dimension to be 3, got shape {color.shape}")
    if fs == ts:
        return color  # No conversion needed

    rgb = NP_TO_RGB[fs](color[..., 0], color[..., 1], color[..., 2])
    return NP_FROM_RGB[ts](rgb[..., 0], rgb[..., 1], rgb[..., 2])
