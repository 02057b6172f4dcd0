from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorTriple = Tuple[float, float, float]
ColorValue = Union[ScalarVector, ndarray]
ColorSpace = Literal["rgb", "hsl", "hwb", "oklch"]
COLOR_SPACES = ("rgb", "hsl", "hwb", "oklch")
HUE_SPACES = {"hsl", "hwb", "oklch"}


def element_to_array(element: Union[ColorValue, Scalar]) -> np.ndarray:
    """
    Convert a color element to a numpy array of floats.

    Args:
        element: Scalar, tuple, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    if isinstance(element, (int, float)):
        return np.array([element], dtype=float)
    return np.array(element, dtype=float)


def is_hue_space(color_space: str) -> bool:
    """
    Check if the given color space carries a hue channel.

    Args:
        color_space: Color space string
    Returns:
        True if hue-based, False otherwise
    """
    return color_space.lower() in HUE_SPACES
