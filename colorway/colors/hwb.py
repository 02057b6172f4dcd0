from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, ColorTriple
from ..types.format_type import channel_maxima, hue_index
from .color_base import ColorBase


class HWB(ColorBase):
    """
    Hue in degrees, whiteness and blackness as percentages.

    ``w + b`` may exceed 100; such a color renders as the gray
    ``w / (w + b)``.
    """
    __slots__ = ()

    mode:      ClassVar[ColorSpace] = "hwb"
    channels:  ClassVar[Tuple[str, str, str]] = ("h", "w", "b")
    maxima:    ClassVar[ColorTriple] = channel_maxima["hwb"]
    hue_index: ClassVar[Optional[int]] = hue_index["hwb"]

    @property
    def h(self) -> float:
        return self._value[0]

    @property
    def w(self) -> float:
        return self._value[1]

    @property
    def b(self) -> float:
        return self._value[2]
