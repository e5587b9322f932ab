"""
Color conversion between HSL, RGB and HEX.
Pure functions; HSL is the canonical representation, RGB and HEX are derived from it.
All rounding is half-up, which is exact for the non-negative values used here.
"""
import math
import re
import uuid
from numbers import Real

from .errors import InvalidColorValue, InvalidFormat
from .schema import HSL, RGB, Color

_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")

# WCAG luminance above which black text reads better than white
CONTRAST_THRESHOLD = 0.179
BLACK = "#000000"
WHITE = "#FFFFFF"


def _round(x: float) -> int:
    return int(math.floor(x + 0.5))


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _strip_hash(hex_code: str) -> str:
    return hex_code[1:] if hex_code.startswith("#") else hex_code


def _is_number(x) -> bool:
    return isinstance(x, Real) and not isinstance(x, bool)


# -----------------------------------------------------------------------------
# Conversions
# -----------------------------------------------------------------------------
def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """
    HSL (hue in degrees, saturation/lightness in percent) to 8-bit RGB.
    Any hue is accepted and wrapped into [0, 360); s and l are clamped to [0, 100].
    """
    h = ((h % 360) + 360) % 360
    s = _clamp(s, 0, 100) / 100
    l = _clamp(l, 0, 100) / 100

    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs(((h / 60) % 2) - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        _round((r + m) * 255),
        _round((g + m) * 255),
        _round((b + m) * 255),
    )


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """
    8-bit RGB to integer HSL. Achromatic input gives hue 0 and saturation 0.
    A hue that rounds up to 360 is reported as 0.
    """
    r = _clamp(r, 0, 255) / 255
    g = _clamp(g, 0, 255) / 255
    b = _clamp(b, 0, 255) / 255

    hi = max(r, g, b)
    lo = min(r, g, b)
    diff = hi - lo
    l = (hi + lo) / 2

    h = 0.0
    s = 0.0
    if diff != 0:
        s = diff / (2 - hi - lo) if l > 0.5 else diff / (hi + lo)
        if hi == r:
            h = ((g - b) / diff + (6 if g < b else 0)) / 6
        elif hi == g:
            h = ((b - r) / diff + 2) / 6
        else:
            h = ((r - g) / diff + 4) / 6

    return (_round(h * 360) % 360, _round(s * 100), _round(l * 100))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """8-bit RGB to "#RRGGBB" (upper-case). Channels are clamped and rounded."""
    return "#" + "".join(f"{_round(_clamp(c, 0, 255)):02X}" for c in (r, g, b))


def hex_to_rgb(hex_code: str) -> RGB:
    """Parse "#RRGGBB" or "RRGGBB". Raises InvalidFormat for anything else."""
    if not isinstance(hex_code, str):
        raise InvalidFormat(f"Invalid HEX color format: {hex_code!r}", value=hex_code)
    digits = _strip_hash(hex_code)
    if not _HEX_RE.fullmatch(digits):
        raise InvalidFormat(f"Invalid HEX color format: {hex_code}", value=hex_code)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def hex_to_hsl(hex_code: str) -> HSL:
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


# -----------------------------------------------------------------------------
# Contrast
# -----------------------------------------------------------------------------
def _channel_luminance(c: int) -> float:
    v = c / 255
    return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(hex_code: str) -> float:
    """WCAG relative luminance of a HEX color, in [0, 1]."""
    r, g, b = hex_to_rgb(hex_code)
    return (
        0.2126 * _channel_luminance(r)
        + 0.7152 * _channel_luminance(g)
        + 0.0722 * _channel_luminance(b)
    )


def contrast_ratio(hex_a: str, hex_b: str) -> float:
    """WCAG contrast ratio between two HEX colors (1.0 to 21.0)."""
    la = relative_luminance(hex_a)
    lb = relative_luminance(hex_b)
    lighter, darker = max(la, lb), min(la, lb)
    return (lighter + 0.05) / (darker + 0.05)


def get_contrast_color(hex_code: str) -> str:
    """Black or white text color for a background. Favors white below luminance 0.179."""
    return BLACK if relative_luminance(hex_code) > CONTRAST_THRESHOLD else WHITE


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------
def is_valid_hex(hex_code) -> bool:
    if not isinstance(hex_code, str):
        return False
    return _HEX_RE.fullmatch(_strip_hash(hex_code)) is not None


def is_valid_hsl(h, s, l) -> bool:
    return (
        _is_number(h) and 0 <= h <= 360
        and _is_number(s) and 0 <= s <= 100
        and _is_number(l) and 0 <= l <= 100
    )


def is_valid_rgb(r, g, b) -> bool:
    return all(_is_number(c) and 0 <= c <= 255 for c in (r, g, b))


# -----------------------------------------------------------------------------
# Factories
# -----------------------------------------------------------------------------
def _new_id() -> str:
    return uuid.uuid4().hex


def create_color_from_hsl(h: float, s: float, l: float, is_locked: bool = False) -> Color:
    """Build a Color from HSL. Hue 360 is stored as 0; fractional values are rounded."""
    if not is_valid_hsl(h, s, l):
        raise InvalidColorValue(f"Invalid HSL values: h={h}, s={s}, l={l}", value=(h, s, l))
    hsl = (_round(h) % 360, _round(s), _round(l))
    rgb = hsl_to_rgb(*hsl)
    return Color(id=_new_id(), hex=rgb_to_hex(*rgb), rgb=rgb, hsl=hsl, is_locked=is_locked)


def create_color_from_rgb(r: float, g: float, b: float, is_locked: bool = False) -> Color:
    """Build a Color from 8-bit RGB."""
    if not is_valid_rgb(r, g, b):
        raise InvalidColorValue(f"Invalid RGB values: r={r}, g={g}, b={b}", value=(r, g, b))
    rgb = (_round(r), _round(g), _round(b))
    return Color(id=_new_id(), hex=rgb_to_hex(*rgb), rgb=rgb, hsl=rgb_to_hsl(*rgb), is_locked=is_locked)


def create_color_from_hex(hex_code: str, is_locked: bool = False) -> Color:
    """Build a Color from "#RRGGBB" / "RRGGBB"; the stored hex is canonical upper-case with '#'."""
    if not is_valid_hex(hex_code):
        raise InvalidColorValue(f"Invalid HEX color: {hex_code}", value=hex_code)
    rgb = hex_to_rgb(hex_code)
    return Color(id=_new_id(), hex=rgb_to_hex(*rgb), rgb=rgb, hsl=rgb_to_hsl(*rgb), is_locked=is_locked)
