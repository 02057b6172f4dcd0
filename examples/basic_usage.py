"""Basic Colorway usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from colorway import (
    HSL,
    RGB,
    ColorFormat,
    convert_color_string,
    format_all,
    format_color,
    parse_color,
)


def demonstrate_colors() -> None:
    # Construct typed colors and convert between spaces.
    accent = RGB(255, 128, 64)
    print("RGB channels:", accent.as_dict())

    hsl = accent.convert("hsl")
    print("RGB -> HSL:", hsl)

    # Out-of-range values are kept until clamped.
    wild = HSL(400, 120, 50)
    print("Clamped HSL:", wild.clamped())
    print("OKLCH of the same:", wild.convert("oklch"))


def demonstrate_strings() -> None:
    for text in ("#ff8040", "rgb(10 20 30 / 50%)", "hwb(200 10% 30%)", "nope"):
        rgb = parse_color(text)
        if rgb is None:
            print(f"{text!r}: not a color")
            continue
        print(f"{text!r} -> {format_color(rgb, ColorFormat.OKLCH)}")

    print("Every notation:", format_all(RGB(0, 128, 255)))
    print("hsl -> hex:", convert_color_string("hsl(120, 100%, 25%)", "hex"))


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_strings()
