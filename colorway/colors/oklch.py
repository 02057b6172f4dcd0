from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace, ColorTriple
from ..types.format_type import channel_maxima, hue_index
from .color_base import ColorBase


class OKLCH(ColorBase):
    """
    OKLab in polar form.

    Lightness and chroma are stored x100 (lightness 0-100, chroma roughly
    0-40 for displayable colors); hue is in degrees.
    """
    __slots__ = ()

    mode:      ClassVar[ColorSpace] = "oklch"
    channels:  ClassVar[Tuple[str, str, str]] = ("l", "c", "h")
    maxima:    ClassVar[ColorTriple] = channel_maxima["oklch"]
    hue_index: ClassVar[Optional[int]] = hue_index["oklch"]

    @property
    def l(self) -> float:
        return self._value[0]

    @property
    def c(self) -> float:
        return self._value[1]

    @property
    def h(self) -> float:
        return self._value[2]
