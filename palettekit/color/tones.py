"""
Tone ladders: lightness variants of a base color with its hue and saturation held fixed.
Labels follow the usual design-system steps, 50 (lightest) to 900 (darkest).
"""
from typing import Iterable

from .converter import _is_number, create_color_from_hsl, hex_to_hsl, hsl_to_hex
from .errors import ColorError, InvalidLightness
from .palette import hue_distance
from .schema import Color, ColorTone

# (label, lightness), lightest first
TONE_STEPS: tuple[tuple[str, int], ...] = (
    ("50", 95),
    ("100", 90),
    ("200", 80),
    ("300", 70),
    ("400", 60),
    ("500", 50),
    ("600", 40),
    ("700", 30),
    ("800", 20),
    ("900", 10),
)

# Re-derived hue/saturation/lightness may drift this much through 8-bit rounding
TONE_TOLERANCE = 4


def _check_lightness(lightness: float) -> None:
    if not _is_number(lightness) or not 0 <= lightness <= 100:
        raise InvalidLightness(
            f"Invalid lightness value: {lightness}. Must be between 0 and 100.", value=lightness
        )


def _tone(base: Color, label: str, lightness: int) -> ColorTone:
    h, s, _ = base.hsl
    return ColorTone(label=label, lightness=lightness, hex=hsl_to_hex(h, s, lightness))


def generate_all_tones(base: Color) -> list[ColorTone]:
    """All ten standard tones of base, 50 through 900."""
    return [_tone(base, label, lightness) for label, lightness in TONE_STEPS]


def generate_tones(base: Color) -> list[ColorTone]:
    """The seven middle tones, 100 through 700."""
    return [_tone(base, label, lightness) for label, lightness in TONE_STEPS[1:8]]


def generate_specific_tone(base: Color, lightness: int, label: str | None = None) -> ColorTone:
    _check_lightness(lightness)
    return _tone(base, label or str(lightness), lightness)


def find_closest_tone(lightness: float) -> ColorTone:
    """
    Standard step nearest to lightness. Ties go to the lighter step. The returned
    tone carries no color, so its hex is empty.
    """
    _check_lightness(lightness)
    best_label, best_lightness = TONE_STEPS[0]
    best_diff = abs(lightness - best_lightness)
    for label, step_lightness in TONE_STEPS:
        diff = abs(lightness - step_lightness)
        if diff < best_diff:
            best_label, best_lightness, best_diff = label, step_lightness, diff
    return ColorTone(label=best_label, lightness=best_lightness, hex="")


def tone_to_color(tone: ColorTone, base: Color, is_locked: bool = False) -> Color:
    """Full Color with base's hue/saturation at the tone's lightness (new id)."""
    h, s, _ = base.hsl
    return create_color_from_hsl(h, s, tone.lightness, is_locked)


def validate_tone_consistency(base: Color, tones: Iterable[ColorTone]) -> bool:
    """True when every tone's hex still carries base's hue and saturation and its own lightness."""
    base_h, base_s, _ = base.hsl
    for tone in tones:
        try:
            h, s, l = hex_to_hsl(tone.hex)
        except ColorError:
            return False
        if hue_distance(h, base_h) > TONE_TOLERANCE:
            return False
        if abs(s - base_s) > TONE_TOLERANCE:
            return False
        if abs(l - tone.lightness) > TONE_TOLERANCE:
            return False
    return True


def get_standard_labels() -> list[str]:
    return [label for label, _ in TONE_STEPS]


def get_standard_lightness() -> list[int]:
    return [lightness for _, lightness in TONE_STEPS]
