from colorway.colors import RGB, HSL, HWB, OKLCH
from colorway.conversions.to_rgb import (
    hex_to_rgb,
    hsl_to_rgb,
    hwb_to_rgb,
    oklch_to_rgb,
    hue_to_channel,
    np_hue_to_channel,
    np_hsl_to_rgb,
    np_hwb_to_rgb,
    np_oklch_to_rgb,
)
from ..samples import samples_rgb_hsl, samples_rgb_hwb, samples_rgb_oklch
import numpy as np
import pytest

rgb_tolerance = 0.5

## Hex

def test_hex_to_rgb_six_digits():
    assert hex_to_rgb('#ff8000') == RGB(255, 128, 0)
    assert hex_to_rgb('ff8000') == RGB(255, 128, 0)
    assert hex_to_rgb('#FF8000') == RGB(255, 128, 0)
    assert hex_to_rgb('#336699') == RGB(51, 102, 153)

def test_hex_to_rgb_three_digits_duplicates_nibbles():
    assert hex_to_rgb('#fff') == RGB(255, 255, 255)
    assert hex_to_rgb('fff') == RGB(255, 255, 255)
    assert hex_to_rgb('#369') == RGB(51, 102, 153)
    assert hex_to_rgb('#000') == RGB(0, 0, 0)
    assert hex_to_rgb(hex_str='#000') == RGB(0, 0, 0)

def test_hex_to_rgb_drops_alpha_digits():
    assert hex_to_rgb('#f008') == RGB(255, 0, 0)
    assert hex_to_rgb('#ff000080') == RGB(255, 0, 0)

def test_hex_to_rgb_output_is_integer_valued():
    for channel in hex_to_rgb('#7f3a09'):
        assert channel == int(channel)

@pytest.mark.parametrize('bad', ['', '#', '#ff', '#fffff', '#fffffffff', 'zzzzzz', '#12 456'])
def test_hex_to_rgb_rejects_malformed(bad):
    with pytest.raises(ValueError):
        hex_to_rgb(bad)

## Hue helper

def test_hue_to_channel_segments():
    p, q = 0.2, 0.8
    assert hue_to_channel(p, q, 0.0) == pytest.approx(p)
    assert hue_to_channel(p, q, 1 / 12) == pytest.approx(0.5)
    assert hue_to_channel(p, q, 1 / 3) == pytest.approx(q)
    assert hue_to_channel(p, q, 7 / 12) == pytest.approx(0.5)
    assert hue_to_channel(p, q, 0.9) == pytest.approx(p)

def test_hue_to_channel_wraps_once():
    assert hue_to_channel(0, 1, -1 / 3) == pytest.approx(hue_to_channel(0, 1, 2 / 3))
    assert hue_to_channel(0, 1, 4 / 3) == pytest.approx(hue_to_channel(0, 1, 1 / 3))

def test_hue_to_channel_numpy_matches_scalar():
    t = np.linspace(-0.5, 1.5, 81)
    expected = np.array([hue_to_channel(0.1, 0.7, float(x)) for x in t])
    assert np.allclose(np_hue_to_channel(0.1, 0.7, t), expected)

## HSL

def test_hsl_to_rgb():
    for (r, g, b), (h, s, l) in samples_rgb_hsl.items():
        r_out, g_out, b_out = hsl_to_rgb(HSL(h, s, l))

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance

def test_hsl_to_rgb_achromatic_short_circuit():
    rgb = hsl_to_rgb(HSL(200, 0, 40))
    assert rgb.r == rgb.g == rgb.b
    assert rgb.r == pytest.approx(0.4 * 255)

def test_hsl_to_rgb_clamps_percentages():
    assert hsl_to_rgb(HSL(120, 150, 50)) == hsl_to_rgb(HSL(120, 100, 50))
    assert hsl_to_rgb(HSL(120, -20, 50)) == hsl_to_rgb(HSL(120, 0, 50))
    assert hsl_to_rgb(HSL(0, 50, 130)) == RGB(255, 255, 255)

def test_hsl_to_rgb_wraps_hue():
    green = hsl_to_rgb(HSL(120, 100, 50))
    for hue in (480, -240, 840):
        r, g, b = hsl_to_rgb(HSL(hue, 100, 50))
        assert abs(r - green.r) < 1e-9
        assert abs(g - green.g) < 1e-9
        assert abs(b - green.b) < 1e-9

def test_hsl_to_rgb_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.values()))
    expected = np.array(list(samples_rgb_hsl.keys()), dtype=float)
    result = np_hsl_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == expected.shape
    assert np.allclose(result, expected, atol=rgb_tolerance)

## HWB

def test_hwb_to_rgb():
    for (r, g, b), (h, w, bl) in samples_rgb_hwb.items():
        r_out, g_out, b_out = hwb_to_rgb(HWB(h, w, bl))

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance

def test_hwb_to_rgb_exact_mix():
    r, g, b = hwb_to_rgb(HWB(210, 20, 40))
    assert r == pytest.approx(51)
    assert g == pytest.approx(102)
    assert b == pytest.approx(153)

def test_hwb_to_rgb_proportional_gray():
    # w + b >= 100% is gray at w / (w + b), whatever the hue
    for hue in (0, 90, 200):
        rgb = hwb_to_rgb(HWB(hue, 60, 60))
        assert rgb.r == rgb.g == rgb.b == pytest.approx(127.5)

    rgb = hwb_to_rgb(HWB(0, 80, 40))
    assert rgb.r == pytest.approx(80 / 120 * 255)

    assert hwb_to_rgb(HWB(0, 100, 0)) == RGB(255, 255, 255)
    assert hwb_to_rgb(HWB(0, 0, 100)) == RGB(0, 0, 0)

def test_hwb_to_rgb_clamps_percentages():
    assert hwb_to_rgb(HWB(0, 150, -10)) == RGB(255, 255, 255)

def test_hwb_to_rgb_numpy():
    the_matrix = np.array(list(samples_rgb_hwb.values()))
    expected = np.array(list(samples_rgb_hwb.keys()), dtype=float)
    result = np_hwb_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=rgb_tolerance)

def test_hwb_to_rgb_numpy_gray_branch():
    result = np_hwb_to_rgb(np.array([0.0, 90.0]), np.array([60.0, 80.0]), np.array([60.0, 40.0]))
    assert np.allclose(result[0], 127.5)
    assert np.allclose(result[1], 80 / 120 * 255)

## OKLCH

def test_oklch_to_rgb():
    for (r, g, b), (l, c, h) in samples_rgb_oklch.items():
        r_out, g_out, b_out = oklch_to_rgb(OKLCH(l, c, h or 0.0))

        assert abs(r - r_out) < 1
        assert abs(g - g_out) < 1
        assert abs(b - b_out) < 1

def test_oklch_to_rgb_clamps_out_of_gamut():
    # chroma 0.4 at this lightness is far outside sRGB
    rgb = oklch_to_rgb(OKLCH(70, 40, 150))
    for channel in rgb:
        assert 0 <= channel <= 255
    assert min(rgb) == 0 or max(rgb) == 255

@pytest.mark.filterwarnings('ignore::RuntimeWarning')
@pytest.mark.parametrize('l, c, h', [
    (50, 1e120, 30),
    (50, 10, float('inf')),
    (1e200, 10, 30),
])
def test_oklch_to_rgb_overflow_stays_in_gamut(l, c, h):
    for channel in oklch_to_rgb(OKLCH(l, c, h)):
        assert 0 <= channel <= 255
    result = np_oklch_to_rgb(l, c, h)
    assert not np.isnan(result).any()
    assert result.min() >= 0
    assert result.max() <= 255

def test_oklch_to_rgb_numpy():
    values = [(l, c, h or 0.0) for (l, c, h) in samples_rgb_oklch.values()]
    the_matrix = np.array(values)
    expected = np.array(list(samples_rgb_oklch.keys()), dtype=float)
    result = np_oklch_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1)
    assert result.min() >= 0
    assert result.max() <= 255
