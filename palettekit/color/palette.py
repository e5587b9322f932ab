"""
Palette generation: five colors with bounded saturation/lightness and at least
30 degrees of hue separation, keeping any locked colors from the previous palette.

Locked colors are never rejected or adjusted, even when two of them sit closer
than MIN_HUE_DIFFERENCE; only newly drawn colors have to keep their distance.
"""
import dataclasses
import logging
from typing import Any, Iterable

from ..random_utils import default_rng, random_in_range
from .converter import create_color_from_hsl
from .schema import Color, ColorTone, GenerationOptions, Palette

logger = logging.getLogger(__name__)

SATURATION_MIN = 60
SATURATION_MAX = 100
LIGHTNESS_MIN = 40
LIGHTNESS_MAX = 70
MIN_HUE_DIFFERENCE = 30
PALETTE_SIZE = 5
DEFAULT_MAX_ATTEMPTS = 50


def hue_distance(a: float, b: float) -> float:
    """Circular distance between two hues, in [0, 180]."""
    diff = abs(a - b) % 360
    return min(diff, 360 - diff)


def min_hue_difference(hue: float, existing_hues: Iterable[float]) -> float:
    """Smallest circular distance from hue to any existing hue (360 when there are none)."""
    return min((hue_distance(hue, h) for h in existing_hues), default=360)


def _random_saturation_lightness(rng: Any) -> tuple[int, int]:
    return (
        random_in_range(rng, SATURATION_MIN, SATURATION_MAX),
        random_in_range(rng, LIGHTNESS_MIN, LIGHTNESS_MAX),
    )


def generate_random_color(rng: Any = None) -> Color:
    """Unlocked color with any hue and saturation/lightness inside the generator bounds."""
    if rng is None:
        rng = default_rng()
    hue = random_in_range(rng, 0, 359)
    s, l = _random_saturation_lightness(rng)
    return create_color_from_hsl(hue, s, l)


def generate_distinct_color(
    existing_colors: Iterable[Color],
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: Any = None,
) -> Color:
    """
    Draw hues until one is at least MIN_HUE_DIFFERENCE away from every existing hue.
    After max_attempts misses, return an unconstrained random color instead.
    """
    if rng is None:
        rng = default_rng()
    existing_hues = [c.hsl[0] for c in existing_colors]

    for _ in range(max_attempts):
        hue = random_in_range(rng, 0, 359)
        if min_hue_difference(hue, existing_hues) >= MIN_HUE_DIFFERENCE:
            s, l = _random_saturation_lightness(rng)
            return create_color_from_hsl(hue, s, l)

    logger.debug(
        "No hue %s+ degrees from %s after %s attempts; using an unconstrained color",
        MIN_HUE_DIFFERENCE, existing_hues, max_attempts,
    )
    return generate_random_color(rng)


def generate_harmonious_palette(
    existing_colors: Iterable[Color] = (),
    options: GenerationOptions | None = None,
    rng: Any = None,
) -> Palette:
    """
    Palette of exactly PALETTE_SIZE colors. With preserve_locked, the locked entries
    of existing_colors come first (same order, same id); the rest are drawn one at a
    time, each distinct from everything accepted before it.
    """
    options = options or GenerationOptions()
    if rng is None:
        rng = default_rng()

    colors: list[Color] = []
    if options.preserve_locked:
        colors.extend(c for c in existing_colors if c.is_locked)

    while len(colors) < PALETTE_SIZE:
        colors.append(generate_distinct_color(colors, options.max_attempts, rng))

    return Palette(colors=tuple(colors[:PALETTE_SIZE]))


def generate_fresh_palette(rng: Any = None, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> Palette:
    """New palette ignoring any previous colors."""
    options = GenerationOptions(preserve_locked=False, max_attempts=max_attempts)
    return generate_harmonious_palette((), options, rng)


def regenerate_palette(
    current: Palette,
    rng: Any = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Palette:
    """Next palette, keeping every locked color of current."""
    options = GenerationOptions(preserve_locked=True, max_attempts=max_attempts)
    return generate_harmonious_palette(current.colors, options, rng)


def validate_palette(palette: Palette) -> bool:
    """
    Diagnostic check for fully generated palettes: size, value bounds and pairwise
    hue separation. Palettes carrying locked colors may legitimately fail it.
    """
    if len(palette.colors) != PALETTE_SIZE:
        return False

    for color in palette.colors:
        h, s, l = color.hsl
        if not SATURATION_MIN <= s <= SATURATION_MAX:
            return False
        if not LIGHTNESS_MIN <= l <= LIGHTNESS_MAX:
            return False
        if not 0 <= h < 360:
            return False

    hues = [c.hsl[0] for c in palette.colors]
    for i in range(len(hues)):
        for j in range(i + 1, len(hues)):
            if hue_distance(hues[i], hues[j]) < MIN_HUE_DIFFERENCE:
                return False
    return True


# =============================================================================
# Edits on an existing palette (unknown ids are no-ops)
# =============================================================================
def find_color(palette: Palette, color_id: str) -> Color | None:
    return next((c for c in palette.colors if c.id == color_id), None)


def _replace_color(palette: Palette, color_id: str, make) -> Palette:
    if find_color(palette, color_id) is None:
        return palette
    colors = tuple(make(c) if c.id == color_id else c for c in palette.colors)
    return dataclasses.replace(palette, colors=colors)


def toggle_color_lock(palette: Palette, color_id: str) -> Palette:
    """Flip is_locked on the matching color; everything else is untouched."""
    return _replace_color(
        palette, color_id, lambda c: dataclasses.replace(c, is_locked=not c.is_locked)
    )


def update_color(palette: Palette, color_id: str, new_color: Color) -> Palette:
    """Put new_color in place of the matching color, keeping the old id."""
    return _replace_color(palette, color_id, lambda c: dataclasses.replace(new_color, id=c.id))


def apply_tone(palette: Palette, color_id: str, tone: ColorTone) -> Palette:
    """Swap the matching color for the given tone of itself; id and lock flag are kept."""
    from .tones import tone_to_color

    return _replace_color(
        palette,
        color_id,
        lambda c: dataclasses.replace(tone_to_color(tone, c, c.is_locked), id=c.id),
    )
