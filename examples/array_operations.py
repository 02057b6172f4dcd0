"""Array-friendly color utilities in Colorway.

Run with:
    python examples/array_operations.py
"""
import numpy as np

from colorway import np_convert, np_rgb_to_hex, np_rgb_to_oklch


def demonstrate_arrays() -> None:
    # A hue wheel as an (H, 3) array of HSL values.
    hues = np.linspace(0, 360, 12, endpoint=False)
    wheel = np.stack([hues, np.full_like(hues, 100), np.full_like(hues, 50)], axis=-1)

    rgb = np_convert(wheel, "hsl", "rgb")
    print("Wheel as RGB:", rgb.shape)
    print("Wheel as hex:", list(np_rgb_to_hex(rgb[..., 0], rgb[..., 1], rgb[..., 2])))

    # Perceptual lightness of every wheel entry.
    oklch = np_rgb_to_oklch(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    print("OKLCH lightness min/max:", float(oklch[..., 0].min()), float(oklch[..., 0].max()))

    # Convert a small image between spaces in one call.
    image = np.random.default_rng(0).uniform(0, 255, size=(4, 4, 3))
    hwb = np_convert(image, "rgb", "hwb")
    back = np_convert(hwb, "hwb", "rgb")
    print("Max HWB round-trip error:", float(np.abs(back - image).max()))


def main() -> None:
    demonstrate_arrays()


if __name__ == "__main__":
    main()
