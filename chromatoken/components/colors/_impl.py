"""
Color space conversion - Functional Core.

Pure conversions among hex, RGB and HSL plus the derived adjustments built on
them. HSL components stay floats and only hex encoding rounds (half up), so
hex -> HSL -> hex returns the input color.
"""

from __future__ import annotations

import math
import re

from chromatoken.domain.errors import InvalidColorFormat

from .models import HSL, RGB, PaletteShade

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def round_half_up(value: float) -> int:
    """Round .5 away from zero on the positive side (never banker's rounding)."""
    return math.floor(value + 0.5)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _clamp_channel(value: float) -> int:
    return int(_clamp(round_half_up(value), 0, 255))


# ═══════════════════════════════════════════════════════════════════════════
# CONVERSIONS
# ═══════════════════════════════════════════════════════════════════════════


def is_hex_color(value: object) -> bool:
    """True if ``value`` is a 6-digit hex color, with or without ``#``."""
    return isinstance(value, str) and HEX_COLOR_PATTERN.match(value) is not None


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert a hex color to RGB.

    Args:
        hex_color: Color as ``#rrggbb`` (leading ``#`` optional)

    Returns:
        RGB channels

    Raises:
        InvalidColorFormat: If the input is not six hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(hex_color)

    match = HEX_COLOR_PATTERN.match(hex_color)
    if match is None:
        raise InvalidColorFormat(hex_color)

    return RGB(
        int(match.group(1), 16),
        int(match.group(2), 16),
        int(match.group(3), 16),
    )


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB channels to lower-case ``#rrggbb``, clamping to [0, 255]."""
    return f"#{_clamp_channel(r):02x}{_clamp_channel(g):02x}{_clamp_channel(b):02x}"


def normalize_hex(hex_color: str) -> str:
    """Canonical lower-case form with a leading ``#``."""
    return rgb_to_hex(*hex_to_rgb(hex_color))


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert RGB to HSL without rounding."""
    r_norm = r / 255
    g_norm = g / 255
    b_norm = b / 255

    max_c = max(r_norm, g_norm, b_norm)
    min_c = min(r_norm, g_norm, b_norm)
    delta = max_c - min_c

    h = 0.0
    s = 0.0
    lightness = (max_c + min_c) / 2

    if delta != 0:
        if lightness > 0.5:
            s = delta / (2 - max_c - min_c)
        else:
            s = delta / (max_c + min_c)

        if max_c == r_norm:
            h = ((g_norm - b_norm) / delta + (6 if g_norm < b_norm else 0)) / 6
        elif max_c == g_norm:
            h = ((b_norm - r_norm) / delta + 2) / 6
        else:
            h = ((r_norm - g_norm) / delta + 4) / 6

    return HSL((h * 360) % 360, s * 100, lightness * 100)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL to RGB. Channels are clamped against float overshoot."""
    h_norm = (h % 360) / 360
    s_norm = _clamp(s, 0, 100) / 100
    l_norm = _clamp(l, 0, 100) / 100

    if s_norm == 0:
        r = g = b = l_norm
    else:
        if l_norm < 0.5:
            q = l_norm * (1 + s_norm)
        else:
            q = l_norm + s_norm - l_norm * s_norm
        p = 2 * l_norm - q

        r = _hue_to_channel(p, q, h_norm + 1 / 3)
        g = _hue_to_channel(p, q, h_norm)
        b = _hue_to_channel(p, q, h_norm - 1 / 3)

    return RGB(_clamp_channel(r * 255), _clamp_channel(g * 255), _clamp_channel(b * 255))


def hex_to_hsl(hex_color: str) -> HSL:
    return rgb_to_hsl(*hex_to_rgb(hex_color))


def hsl_to_hex(h: float, s: float, l: float) -> str:  # noqa: E741
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


# ═══════════════════════════════════════════════════════════════════════════
# ADJUSTMENTS
# Lightness and saturation clamp to [0, 100]; hue wraps modulo 360.
# ═══════════════════════════════════════════════════════════════════════════


def adjust_lightness(hex_color: str, amount: float) -> str:
    hsl = hex_to_hsl(hex_color)
    return hsl_to_hex(hsl.h, hsl.s, _clamp(hsl.l + amount, 0, 100))


def adjust_saturation(hex_color: str, amount: float) -> str:
    hsl = hex_to_hsl(hex_color)
    return hsl_to_hex(hsl.h, _clamp(hsl.s + amount, 0, 100), hsl.l)


def adjust_hue(hex_color: str, amount: float) -> str:
    hsl = hex_to_hsl(hex_color)
    return hsl_to_hex((hsl.h + amount) % 360, hsl.s, hsl.l)


def lighten(hex_color: str, percent: float) -> str:
    return adjust_lightness(hex_color, percent)


def darken(hex_color: str, percent: float) -> str:
    return adjust_lightness(hex_color, -percent)


def saturate(hex_color: str, percent: float) -> str:
    return adjust_saturation(hex_color, percent)


def desaturate(hex_color: str, percent: float) -> str:
    return adjust_saturation(hex_color, -percent)


def grayscale(hex_color: str) -> str:
    hsl = hex_to_hsl(hex_color)
    return hsl_to_hex(hsl.h, 0, hsl.l)


def invert(hex_color: str) -> str:
    rgb = hex_to_rgb(hex_color)
    return rgb_to_hex(255 - rgb.r, 255 - rgb.g, 255 - rgb.b)


def is_light(hex_color: str) -> bool:
    """True when HSL lightness is above 50%."""
    return hex_to_hsl(hex_color).l > 50


def is_dark(hex_color: str) -> bool:
    return not is_light(hex_color)


def mix(color1: str, color2: str, weight: float = 50) -> str:
    """
    Linearly interpolate two colors per RGB channel.

    Args:
        color1: First color
        color2: Second color
        weight: Share of ``color1`` from 0 to 100 (100 returns ``color1``)
    """
    rgb1 = hex_to_rgb(color1)
    rgb2 = hex_to_rgb(color2)
    w = _clamp(weight, 0, 100) / 100

    return rgb_to_hex(
        rgb1.r * w + rgb2.r * (1 - w),
        rgb1.g * w + rgb2.g * (1 - w),
        rgb1.b * w + rgb2.b * (1 - w),
    )


def complementary(hex_color: str) -> str:
    return adjust_hue(hex_color, 180)


def generate_palette(hex_color: str, steps: int = 10) -> tuple[PaletteShade, ...]:
    """
    Build a shade ramp from ~95% down to ~5% lightness.

    Hue and saturation of the base color are kept; only lightness varies,
    evenly spaced across ``steps`` entries.
    """
    if steps < 2:
        raise ValueError(f"Palette needs at least 2 steps, got {steps}")

    hsl = hex_to_hsl(hex_color)
    shades: list[PaletteShade] = []

    for i in range(steps):
        shade = (i + 1) * (100 / (steps + 1))
        lightness = 95 - i * (90 / (steps - 1))
        shades.append(
            PaletteShade(
                shade=round_half_up(shade * 10),
                color=hsl_to_hex(hsl.h, hsl.s, lightness),
            )
        )

    return tuple(shades)
