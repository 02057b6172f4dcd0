from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, ColorTriple
from ..types.format_type import channel_maxima, hue_index
from .color_base import ColorBase


class HSL(ColorBase):
    """Hue in degrees, saturation and lightness as percentages."""
    __slots__ = ()

    mode:      ClassVar[ColorSpace] = "hsl"
    channels:  ClassVar[Tuple[str, str, str]] = ("h", "s", "l")
    maxima:    ClassVar[ColorTriple] = channel_maxima["hsl"]
    hue_index: ClassVar[Optional[int]] = hue_index["hsl"]

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def s(self) -> float:
        return self._value[1]

    @property
    def l(self) -> float:
        return self._value[2]
