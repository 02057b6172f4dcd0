"""
Compiled patterns for the CSS color notations.

Each pattern is matched with ``fullmatch`` against trimmed, lower-cased input.
All functional notations accept comma- or space-separated arguments and an
optional trailing alpha (``/ A`` or ``, A``) that is not captured. The closing
parenthesis is optional so that half-typed input still parses.
"""
import re

_NUM = r"(?:\d+(?:\.\d+)?|\.\d+)"
_SEP = r"(?:\s*,\s*|\s+)"
_ALPHA = rf"(?:\s*/\s*{_NUM}%?|\s*,\s*{_NUM}%?)?"
_CLOSE = r"\s*\)?"
_HUE = rf"(-?{_NUM})(?:deg)?"

# #rgb | #rrggbb, '#' optional; #rgba | #rrggbbaa need the '#'
HEX_RE = re.compile(
    r"#?(?:[0-9a-f]{3}|[0-9a-f]{6})|#(?:[0-9a-f]{4}|[0-9a-f]{8})",
    re.IGNORECASE,
)

# rgb(r, g, b) | rgb(r g b) | rgba(r, g, b, a) | rgb(r g b / a), channels 0-255 or %
RGB_RE = re.compile(
    rf"rgba?\s*(?:\(\s*)?({_NUM}%?){_SEP}({_NUM}%?){_SEP}({_NUM}%?){_ALPHA}{_CLOSE}",
    re.IGNORECASE,
)

# hsl(h, s, l) | hsl(h s l) | hsla(h, s%, l%, a)
HSL_RE = re.compile(
    rf"hsla?\s*\(\s*{_HUE}{_SEP}({_NUM})%?{_SEP}({_NUM})%?{_ALPHA}{_CLOSE}",
    re.IGNORECASE,
)

# hwb(h w b) | hwb(h, w%, b%)
HWB_RE = re.compile(
    rf"hwb\s*\(\s*{_HUE}{_SEP}({_NUM})%?{_SEP}({_NUM})%?{_ALPHA}{_CLOSE}",
    re.IGNORECASE,
)

# oklch(l c h), l as a 0-1 fraction or a percentage
OKLCH_RE = re.compile(
    rf"oklch\s*\(\s*({_NUM}%?){_SEP}({_NUM}){_SEP}{_HUE}{_ALPHA}{_CLOSE}",
    re.IGNORECASE,
)
