"""
Colors component - hex, RGB and HSL conversion and derived adjustments.

Every other component builds on these primitives.
"""

from ._impl import (
    HEX_COLOR_PATTERN,
    adjust_hue,
    adjust_lightness,
    adjust_saturation,
    complementary,
    darken,
    desaturate,
    generate_palette,
    grayscale,
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    invert,
    is_dark,
    is_hex_color,
    is_light,
    lighten,
    mix,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
    saturate,
)
from .models import HSL, RGB, PaletteShade

__all__ = [
    # Models
    "RGB",
    "HSL",
    "PaletteShade",
    # Conversions
    "HEX_COLOR_PATTERN",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "normalize_hex",
    "is_hex_color",
    "round_half_up",
    # Adjustments
    "adjust_lightness",
    "adjust_saturation",
    "adjust_hue",
    "lighten",
    "darken",
    "saturate",
    "desaturate",
    "grayscale",
    "invert",
    "is_light",
    "is_dark",
    "mix",
    "complementary",
    "generate_palette",
]
