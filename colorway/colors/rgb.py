from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, ColorTriple
from ..types.format_type import channel_maxima, hue_index
from .color_base import ColorBase


class RGB(ColorBase):
    """Canonical sRGB color, channels on the 0-255 scale as floats."""
    __slots__ = ()

    mode:      ClassVar[ColorSpace] = "rgb"
    channels:  ClassVar[Tuple[str, str, str]] = ("r", "g", "b")
    maxima:    ClassVar[ColorTriple] = channel_maxima["rgb"]
    hue_index: ClassVar[Optional[int]] = hue_index["rgb"]

    @property
    def r(self) -> float:
        return self._value[0]

    @property
    def g(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]
