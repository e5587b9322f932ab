# Color core: conversion, palette generation, tone ladders

from .errors import ColorError, InvalidColorValue, InvalidFormat, InvalidLightness
from .schema import Color, ColorTone, GenerationOptions, Palette
from .converter import (
    contrast_ratio,
    create_color_from_hex,
    create_color_from_hsl,
    create_color_from_rgb,
    get_contrast_color,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    is_valid_hex,
    is_valid_hsl,
    is_valid_rgb,
    relative_luminance,
    rgb_to_hex,
    rgb_to_hsl,
)
from .palette import (
    LIGHTNESS_MAX,
    LIGHTNESS_MIN,
    MIN_HUE_DIFFERENCE,
    PALETTE_SIZE,
    SATURATION_MAX,
    SATURATION_MIN,
    apply_tone,
    find_color,
    generate_distinct_color,
    generate_fresh_palette,
    generate_harmonious_palette,
    generate_random_color,
    hue_distance,
    regenerate_palette,
    toggle_color_lock,
    update_color,
    validate_palette,
)
from .tones import (
    TONE_STEPS,
    find_closest_tone,
    generate_all_tones,
    generate_specific_tone,
    generate_tones,
    get_standard_labels,
    get_standard_lightness,
    tone_to_color,
    validate_tone_consistency,
)
from .session import PaletteSession

__all__ = [
    "ColorError",
    "InvalidColorValue",
    "InvalidFormat",
    "InvalidLightness",
    "Color",
    "ColorTone",
    "GenerationOptions",
    "Palette",
    "contrast_ratio",
    "create_color_from_hex",
    "create_color_from_hsl",
    "create_color_from_rgb",
    "get_contrast_color",
    "hex_to_hsl",
    "hex_to_rgb",
    "hsl_to_hex",
    "hsl_to_rgb",
    "is_valid_hex",
    "is_valid_hsl",
    "is_valid_rgb",
    "relative_luminance",
    "rgb_to_hex",
    "rgb_to_hsl",
    "LIGHTNESS_MAX",
    "LIGHTNESS_MIN",
    "MIN_HUE_DIFFERENCE",
    "PALETTE_SIZE",
    "SATURATION_MAX",
    "SATURATION_MIN",
    "apply_tone",
    "find_color",
    "generate_distinct_color",
    "generate_fresh_palette",
    "generate_harmonious_palette",
    "generate_random_color",
    "hue_distance",
    "regenerate_palette",
    "toggle_color_lock",
    "update_color",
    "validate_palette",
    "TONE_STEPS",
    "find_closest_tone",
    "generate_all_tones",
    "generate_specific_tone",
    "generate_tones",
    "get_standard_labels",
    "get_standard_lightness",
    "tone_to_color",
    "validate_tone_consistency",
    "PaletteSession",
]
