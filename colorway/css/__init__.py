"""CSS color notation parsing and formatting."""

from .parser import ColorSyntax, SYNTAXES, detect_format, parse_color
from .formatter import FORMATTERS, convert_color_string, format_all, format_color

__all__ = [
    "ColorSyntax",
    "SYNTAXES",
    "detect_format",
    "parse_color",
    "FORMATTERS",
    "convert_color_string",
    "format_all",
    "format_color",
]
