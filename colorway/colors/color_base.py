from __future__ import annotations
from typing import Any, Callable, ClassVar, Dict, Iterator, Optional, Tuple
from numpy import ndarray

from ..types.color_types import ColorSpace, ColorTriple, element_to_array, is_hue_space
from ..types.format_type import HUE_360


class ColorBase:
    """
    Immutable three-channel color value.

    Subclasses pin the color space through class attributes; instances only
    hold a tuple of floats. Channels are stored as given, no clamping happens
    on construction (use :meth:`clamped` for that). An RGB value may sit
    outside ``[0, 255]`` until it is rendered.
    """
    __slots__ = ('_value',)

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorSpace]
    channels:   ClassVar[Tuple[str, str, str]]
    maxima:     ClassVar[ColorTriple]
    hue_index:  ClassVar[Optional[int]] = None
    # Attached by colors/color.py once the conversion layer is importable.
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __init__(self, *value: Any) -> None:
        if len(value) == 1:
            (value,) = value
            if isinstance(value, ColorBase):
                if value.mode != self.mode:
                    value = value.convert(self.mode)
                value = value.value
            elif isinstance(value, ndarray):
                if value.ndim != 1:
                    raise ValueError(f"{self.mode} expects a 1-dimensional array, got shape {value.shape}")
                value = tuple(value.tolist())
            else:
                value = tuple(value)

        if len(value) != self.num_channels:
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels {self.channels}, got {len(value)}"
            )

        object.__setattr__(self, '_value', tuple(float(v) for v in value))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorTriple:
        return self._value

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={v!r}" for name, v in zip(self.channels, self._value))
        return f"{self.__class__.__name__}({fields})"

    # ------------------ HELPERS ------------------
    def clamped(self) -> ColorBase:
        """
        Return a copy with every channel forced into its legal range.

        Hue channels wrap modulo 360; every other channel is clipped to
        ``[0, maximum]``.
        """
        values = []
        for i, (v, m) in enumerate(zip(self._value, self.maxima)):
            if i == self.hue_index:
                values.append(v % HUE_360)
            else:
                values.append(max(0.0, min(v, m)))
        return self.__class__(*values)

    def to_array(self) -> ndarray:
        return element_to_array(self._value)

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.channels, self._value))


def build_registry(*classes: type[ColorBase]) -> Dict[str, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
