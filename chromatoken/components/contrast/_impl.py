"""
WCAG contrast - Functional Core.

Relative luminance and contrast ratio per WCAG 2.1, and classification of a
color pair against the AA/AAA thresholds for normal and large text.

WCAG 2.1 thresholds: 4.5:1 normal / 3:1 large text for AA,
7:1 normal / 4.5:1 large text for AAA.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from chromatoken.components.colors import RGB, hex_to_rgb, round_half_up
from chromatoken.domain.entities import WCAGLevel
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

from .models import ColorCombination, CombinationResult, ContrastLevel, ContrastResult

# sRGB linearization breakpoint as published in WCAG 2.1.
LINEAR_THRESHOLD = 0.03928


def _linearize(channel: int) -> float:
    c_srgb = channel / 255
    if c_srgb <= LINEAR_THRESHOLD:
        return c_srgb / 12.92
    return float(((c_srgb + 0.055) / 1.055) ** 2.4)


def relative_luminance(rgb: RGB) -> float:
    """
    Calculate relative luminance per WCAG 2.1.

    Formula: L = 0.2126 * R + 0.7152 * G + 0.0722 * B
    Where R, G, B are sRGB values normalized and linearized.
    """
    r, g, b = rgb
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(color1: str, color2: str) -> float:
    """
    Calculate the WCAG contrast ratio between two colors.

    Symmetric in its arguments; ranges from 1.0 (identical) to 21.0
    (black on white).

    Raises:
        InvalidColorFormat: If either color is not ``#rrggbb``
    """
    lum1 = relative_luminance(hex_to_rgb(color1))
    lum2 = relative_luminance(hex_to_rgb(color2))

    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)

    return (lighter + 0.05) / (darker + 0.05)


def target_ratios(level: WCAGLevel, rules: EngineRules = DEFAULT_RULES) -> tuple[float, float]:
    """
    Return the ``(text_ratio, ui_ratio)`` minimums for a WCAG level.

    UI components and large text share the lower threshold.
    """
    wcag = rules.wcag
    if level == "AAA":
        return wcag.normal_aaa, wcag.large_aaa
    return wcag.normal_aa, wcag.large_aa


def _classify(ratio: float, is_large_text: bool, rules: EngineRules) -> ContrastLevel:
    wcag = rules.wcag
    aaa = wcag.large_aaa if is_large_text else wcag.normal_aaa
    aa = wcag.large_aa if is_large_text else wcag.normal_aa

    if ratio >= aaa:
        return ContrastLevel.AAA
    if ratio >= aa:
        return ContrastLevel.AA
    if ratio >= wcag.large_aa:
        return ContrastLevel.AA_LARGE
    return ContrastLevel.FAIL


def check_contrast(
    foreground: str,
    background: str,
    is_large_text: bool = False,
    rules: EngineRules = DEFAULT_RULES,
) -> ContrastResult:
    """
    Classify a color pair against WCAG AA/AAA.

    Args:
        foreground: Text or element color
        background: Color behind it
        is_large_text: True if text is >= 18pt or >= 14pt bold
        rules: Engine rules carrying the thresholds

    Returns:
        ContrastResult with all four pass flags, the highest satisfied
        level and a 0-100 score
    """
    wcag = rules.wcag
    ratio = contrast_ratio(foreground, background)

    return ContrastResult(
        ratio=round_half_up(ratio * 100) / 100,
        aa=ratio >= wcag.normal_aa,
        aaa=ratio >= wcag.normal_aaa,
        aa_large=ratio >= wcag.large_aa,
        aaa_large=ratio >= wcag.large_aaa,
        level=_classify(ratio, is_large_text, rules),
        score=min(100.0, ratio / wcag.max_ratio * 100),
    )


def meets_minimum_contrast(
    foreground: str,
    background: str,
    level: ContrastLevel,
    is_large_text: bool = False,
    rules: EngineRules = DEFAULT_RULES,
) -> bool:
    """Check a pair against one level. ``FAIL`` is not a target and never matches."""
    wcag = rules.wcag
    ratio = contrast_ratio(foreground, background)

    if level is ContrastLevel.ENHANCED:
        return ratio >= wcag.enhanced
    if level is ContrastLevel.AAA:
        return ratio >= (wcag.large_aaa if is_large_text else wcag.normal_aaa)
    if level is ContrastLevel.AA:
        return ratio >= (wcag.large_aa if is_large_text else wcag.normal_aa)
    if level is ContrastLevel.AA_LARGE:
        return ratio >= wcag.large_aa
    return False


def get_contrast_description(ratio: float) -> str:
    """Human-readable band for a contrast ratio."""
    if ratio >= 15:
        return "Excellent contrast - exceptional accessibility"
    if ratio >= 7:
        return "Good contrast - WCAG AAA compliant"
    if ratio >= 4.5:
        return "Acceptable contrast - WCAG AA compliant"
    if ratio >= 3:
        return "Poor contrast - only suitable for large text"
    return "Fails WCAG standards - insufficient contrast"


def suggest_contrast_fix(
    foreground: str,
    background: str,
    target_ratio: float = 4.5,
) -> str | None:
    """Advice for a failing pair, or None when it already meets the target."""
    if contrast_ratio(foreground, background) >= target_ratio:
        return None

    if relative_luminance(hex_to_rgb(background)) < 0.5:
        return "Lighten the foreground color or use white for better contrast"
    return "Darken the foreground color or use black for better contrast"


def check_multiple_contrasts(
    combinations: Iterable[ColorCombination],
    rules: EngineRules = DEFAULT_RULES,
) -> tuple[CombinationResult, ...]:
    return tuple(
        CombinationResult(
            combination=combo,
            result=check_contrast(combo.foreground, combo.background, rules=rules),
        )
        for combo in combinations
    )


def generate_contrast_matrix(
    colors: Sequence[str],
    rules: EngineRules = DEFAULT_RULES,
) -> dict[str, dict[str, ContrastResult]]:
    """Every color against every other color, keyed foreground -> background."""
    return {
        fg: {bg: check_contrast(fg, bg, rules=rules) for bg in colors} for fg in colors
    }


def get_accessible_text_color(
    background: str,
    dark_text: str = "#000000",
    light_text: str = "#ffffff",
    min_ratio: float = 4.5,
) -> str:
    """
    Pick a readable text color for ``background``.

    The dark option wins if it meets ``min_ratio``, then the light one;
    if neither does, the higher-contrast option is returned.
    """
    dark_contrast = contrast_ratio(dark_text, background)
    light_contrast = contrast_ratio(light_text, background)

    if dark_contrast >= min_ratio:
        return dark_text
    if light_contrast >= min_ratio:
        return light_text

    return light_text if light_contrast > dark_contrast else dark_text
