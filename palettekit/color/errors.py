"""
Color errors. Raised at the point of invalid input and never caught inside the
converter or tone code; the caller decides how to report them.
"""
from typing import Any


class ColorError(ValueError):
    """Base for every invalid-input error raised by the color core."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidFormat(ColorError):
    """Malformed HEX string (wrong length or non-hex characters)."""


class InvalidColorValue(ColorError):
    """HSL or RGB values outside their valid ranges, or an unusable color input."""


class InvalidLightness(ColorError):
    """Lightness outside [0, 100] given to a tone function."""
