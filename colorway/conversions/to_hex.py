import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import RGB
from ..types.format_type import RGB_MAX
from .numbers import clamp_channel, round_half_up

def _channel_to_hex(value: float) -> str:
    return f"{int(clamp_channel(round_half_up(value))):02x}"

def rgb_to_hex(rgb: RGB) -> str:
    """
    Encode RGB as ``#rrggbb``.

    Channels are rounded half up and clamped to [0, 255]; the output is always
    six lowercase digits with no alpha.
    """
    return f"#{_channel_to_hex(rgb.r)}{_channel_to_hex(rgb.g)}{_channel_to_hex(rgb.b)}"

def np_rgb_to_hex(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Encode RGB as ``#rrggbb`` strings.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        array of ``str`` (dtype object) with the broadcast shape of the inputs
    """
    rgb = np.stack(np.broadcast_arrays(
        np.asarray(r, dtype=float),
        np.asarray(g, dtype=float),
        np.asarray(b, dtype=float),
    ), axis=-1)
    ints = np.clip(np.floor(rgb + 0.5), 0, RGB_MAX).astype(int)

    out = np.empty(ints.shape[:-1], dtype=object)
    for index in np.ndindex(out.shape):
        cr, cg, cb = ints[index]
        out[index] = f"#{cr:02x}{cg:02x}{cb:02x}"
    return out
