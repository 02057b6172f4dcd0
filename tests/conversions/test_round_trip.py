from colorway.colors import RGB, HSL, HWB, OKLCH
from colorway.conversions import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hwb,
    hwb_to_rgb,
    rgb_to_oklch,
    oklch_to_rgb,
    np_rgb_to_hsl,
    np_hsl_to_rgb,
    np_rgb_to_hwb,
    np_hwb_to_rgb,
    np_rgb_to_oklch,
    np_oklch_to_rgb,
)
import numpy as np
import pytest

rgb_tolerance = 1

# 0, 17, ..., 255 on every axis
GRID = [(r, g, b) for r in range(0, 256, 17) for g in range(0, 256, 17) for b in range(0, 256, 17)]

def _grid_arrays(step=15):
    axis = np.append(np.arange(0, 256, step), 255).astype(float)
    r, g, b = np.meshgrid(axis, axis, axis, indexing='ij')
    return r.ravel(), g.ravel(), b.ravel()

def test_round_trip_hex():
    rng = np.random.default_rng(42)
    for r, g, b in rng.uniform(0, 255, size=(500, 3)):
        r_out, g_out, b_out = hex_to_rgb(rgb_to_hex(RGB(r, g, b)))

        assert r_out == np.floor(r + 0.5)
        assert g_out == np.floor(g + 0.5)
        assert b_out == np.floor(b + 0.5)

@pytest.mark.parametrize('forward, backward', [
    (rgb_to_hsl, hsl_to_rgb),
    (rgb_to_hwb, hwb_to_rgb),
    (rgb_to_oklch, oklch_to_rgb),
])
def test_round_trip_rgb(forward, backward):
    for r, g, b in GRID:
        r_out, g_out, b_out = backward(forward(RGB(r, g, b)))

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance

@pytest.mark.parametrize('forward, backward', [
    (np_rgb_to_hsl, np_hsl_to_rgb),
    (np_rgb_to_hwb, np_hwb_to_rgb),
    (np_rgb_to_oklch, np_oklch_to_rgb),
])
def test_round_trip_rgb_numpy(forward, backward):
    r, g, b = _grid_arrays()
    converted = forward(r, g, b)
    rgb = backward(converted[..., 0], converted[..., 1], converted[..., 2])

    assert np.allclose(rgb[..., 0], r, atol=rgb_tolerance)
    assert np.allclose(rgb[..., 1], g, atol=rgb_tolerance)
    assert np.allclose(rgb[..., 2], b, atol=rgb_tolerance)

@pytest.mark.parametrize('scalar, vectorized', [
    (rgb_to_hsl, np_rgb_to_hsl),
    (rgb_to_hwb, np_rgb_to_hwb),
])
def test_numpy_matches_scalar_from_rgb(scalar, vectorized):
    r, g, b = _grid_arrays(step=35)
    result = vectorized(r, g, b)
    expected = np.array([scalar(RGB(*rgb)).value for rgb in zip(r, g, b)])
    assert np.allclose(result, expected, atol=1e-9)

def test_numpy_matches_scalar_oklch():
    r, g, b = _grid_arrays(step=35)
    result = np_rgb_to_oklch(r, g, b)
    expected = np.array([rgb_to_oklch(RGB(*rgb)).value for rgb in zip(r, g, b)])
    assert np.allclose(result[..., :2], expected[..., :2], atol=1e-6)
    # hue is only meaningful where there is chroma
    chromatic = expected[..., 1] > 0.01
    assert np.allclose(result[chromatic, 2], expected[chromatic, 2], atol=1e-6)

@pytest.mark.parametrize("cls, scalar_to_rgb, vectorized", [
    (HSL, hsl_to_rgb, np_hsl_to_rgb),
    (HWB, hwb_to_rgb, np_hwb_to_rgb),
    (OKLCH, oklch_to_rgb, np_oklch_to_rgb),
])
def test_numpy_matches_scalar_to_rgb(cls, scalar_to_rgb, vectorized):
    rng = np.random.default_rng(42)
    samples = rng.uniform([0, 0, 0], [360, 100, 100], size=(300, 3))
    if cls is OKLCH:
        samples = samples[..., [1, 2, 0]] * [1, 0.4, 1]
    result = vectorized(samples[..., 0], samples[..., 1], samples[..., 2])
    expected = np.array([scalar_to_rgb(cls(*row)).value for row in samples])
    assert np.allclose(result, expected, atol=1e-6)
