import numpy as np
import pytest

from colorway.types.color_types import element_to_array, is_hue_space
from colorway.types.format_type import ColorFormat, channel_maxima, hue_index


@pytest.mark.parametrize("space,expected", [
    ("rgb", False),
    ("hsl", True),
    ("HWB", True),
    ("oklch", True),
])
def test_is_hue_space(space, expected):
    assert is_hue_space(space) is expected


def test_element_to_array():
    assert element_to_array(5).tolist() == [5.0]
    assert element_to_array((1, 2, 3)).dtype == float
    arr = np.array([1, 2, 3], dtype=int)
    assert element_to_array(arr).tolist() == [1.0, 2.0, 3.0]


def test_format_enum_is_str():
    assert ColorFormat("oklch") is ColorFormat.OKLCH
    assert ColorFormat.HEX == "hex"
    with pytest.raises(ValueError):
        ColorFormat("cmyk")


def test_tables_cover_every_space():
    for space in ("rgb", "hsl", "hwb", "oklch"):
        assert len(channel_maxima[space]) == 3
        assert space in hue_index
    assert hue_index["rgb"] is None
    assert hue_index["oklch"] == 2
