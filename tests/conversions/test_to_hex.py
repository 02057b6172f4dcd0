from colorway.colors import RGB
from colorway.conversions.to_hex import rgb_to_hex, np_rgb_to_hex
import numpy as np

def test_rgb_to_hex():
    assert rgb_to_hex(RGB(255, 0, 0)) == '#ff0000'
    assert rgb_to_hex(RGB(51, 102, 153)) == '#336699'
    assert rgb_to_hex(RGB(0, 0, 0)) == '#000000'
    assert rgb_to_hex(RGB(1, 2, 3)) == '#010203'

def test_rgb_to_hex_clamps():
    assert rgb_to_hex(RGB(-10, 300, 128)) == '#00ff80'

def test_rgb_to_hex_rounds_half_up():
    assert rgb_to_hex(RGB(127.5, 0.49, 254.5)) == '#8000ff'

def test_rgb_to_hex_is_lowercase_six_digits():
    out = rgb_to_hex(RGB(171, 205, 239))
    assert out == '#abcdef'
    assert len(out) == 7

def test_rgb_to_hex_numpy():
    r = np.array([255, -10, 127.5])
    g = np.array([0, 300, 0.49])
    b = np.array([0, 128, 254.5])
    result = np_rgb_to_hex(r, g, b)
    assert result.shape == (3,)
    assert list(result) == ['#ff0000', '#00ff80', '#8000ff']

def test_rgb_to_hex_numpy_scalar():
    result = np_rgb_to_hex(51, 102, 153)
    assert result.shape == ()
    assert result[()] == '#336699'
