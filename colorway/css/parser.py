"""
Parse human-typed CSS color strings into canonical RGB.

Recognition walks ``SYNTAXES`` top to bottom and the first pattern that
matches wins: hex, rgb()/rgba(), hsl()/hsla(), hwb(), oklch(). Text that
matches none of them is not an error; :func:`parse_color` returns ``None``.
"""
from __future__ import annotations
import logging
import math
import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..colors.rgb import RGB
from ..colors.hsl import HSL
from ..colors.hwb import HWB
from ..colors.oklch import OKLCH
from ..conversions.numbers import clamp, clamp_channel, clamp_percent, normalize_hue
from ..conversions.to_rgb import hex_to_rgb, hsl_to_rgb, hwb_to_rgb, oklch_to_rgb
from ..types.format_type import ColorFormat, OKLCH_CHROMA_MAX, OKLCH_SCALE, PERCENT_MAX, RGB_MAX
from .patterns import HEX_RE, HSL_RE, HWB_RE, OKLCH_RE, RGB_RE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorSyntax:
    """One recognisable notation: the pattern and how to turn a match into RGB."""
    format: ColorFormat
    pattern: re.Pattern
    extract: Callable[[re.Match], RGB]


def _number(token: str) -> float:
    # float() turns an overlong digit run into inf
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Color component is not a finite number: {token[:20]}...")
    return value


def _rgb_channel(token: str) -> float:
    if token.endswith("%"):
        return clamp_percent(_number(token[:-1])) / PERCENT_MAX * RGB_MAX
    return clamp_channel(_number(token))


def _hue(token: str) -> float:
    return normalize_hue(_number(token))


def _percent(token: str) -> float:
    return clamp_percent(_number(token))


def _extract_hex(match: re.Match) -> RGB:
    return hex_to_rgb(match.group(0))


def _extract_rgb(match: re.Match) -> RGB:
    return RGB(*(_rgb_channel(token) for token in match.groups()))


def _extract_hsl(match: re.Match) -> RGB:
    h, s, l = match.groups()
    return hsl_to_rgb(HSL(_hue(h), _percent(s), _percent(l)))


def _extract_hwb(match: re.Match) -> RGB:
    h, w, b = match.groups()
    return hwb_to_rgb(HWB(_hue(h), _percent(w), _percent(b)))


def _extract_oklch(match: re.Match) -> RGB:
    l, c, h = match.groups()
    if l.endswith("%"):
        lightness = _number(l[:-1])
    else:
        lightness = _number(l) * OKLCH_SCALE  # 0-1 fraction
    # chroma is written on the native ~0-0.4 scale
    chroma = clamp(_number(c) * OKLCH_SCALE, 0.0, OKLCH_CHROMA_MAX)
    return oklch_to_rgb(OKLCH(clamp_percent(lightness), chroma, _hue(h)))


SYNTAXES: Tuple[ColorSyntax, ...] = (
    ColorSyntax(ColorFormat.HEX, HEX_RE, _extract_hex),
    ColorSyntax(ColorFormat.RGB, RGB_RE, _extract_rgb),
    ColorSyntax(ColorFormat.HSL, HSL_RE, _extract_hsl),
    ColorSyntax(ColorFormat.HWB, HWB_RE, _extract_hwb),
    ColorSyntax(ColorFormat.OKLCH, OKLCH_RE, _extract_oklch),
)


def _match(text: str):
    cleaned = text.strip().lower()
    for syntax in SYNTAXES:
        match = syntax.pattern.fullmatch(cleaned)
        if match:
            logger.debug("%r matched %s syntax", text, syntax.format.value)
            return syntax, match
    logger.debug("No color syntax matched %r", text)
    return None


def parse_color(text: str) -> Optional[RGB]:
    """
    Parse a color string in any supported notation.

    Args:
        text: user input, e.g. ``"#fff"``, ``"rgb(255 0 0 / 50%)"``,
            ``"hsl(120, 100%, 50%)"``, ``"hwb(120 0% 0%)"``,
            ``"oklch(0.866 0.295 142)"``

    Returns:
        The color as canonical RGB, or ``None`` when no notation matches or
        a component is not a finite number.
        Alpha components are accepted and dropped.
    """
    found = _match(text)
    if found is None:
        return None
    syntax, match = found
    try:
        return syntax.extract(match)
    except ValueError:
        logger.debug("Rejected %s components in %r", syntax.format.value, text)
        return None


def detect_format(text: str) -> Optional[ColorFormat]:
    """Return the notation ``text`` is written in, or ``None``."""
    found = _match(text)
    return None if found is None else found[0].format
