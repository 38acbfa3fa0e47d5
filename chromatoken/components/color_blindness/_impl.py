"""
Color vision deficiency simulation - Functional Core.

Approximates how colors appear under eight forms of color vision deficiency
using fixed 3x3 channel matrices applied directly to sRGB values, then
checks that semantically distinct theme colors stay distinguishable.

The matrices are common published approximations (Brettel/Viénot/Mollon
derived), good enough for design review but not a clinical model. The
grayscale transforms use the perceptual 0.299/0.587/0.114 weights, which
are deliberately not the WCAG luminance weights used for contrast.

Validation flags a critical pair on either of two heuristics:

- luminance collapse: WCAG ratio above 2.0 before, below 1.5 after;
- chromatic collapse: CIE76 delta-E of at least 20 before, with less than
  60% of it left after.

Hue-only pairs such as red/green keep most of their luminance difference
under simulation, so the first check alone never flags them. All
thresholds come from ``ColorBlindnessRules``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from chromatoken.components.colors import (
    RGB,
    hex_to_rgb,
    is_hex_color,
    rgb_to_hex,
    round_half_up,
)
from chromatoken.components.contrast import contrast_ratio
from chromatoken.components.tokens import resolve_colors
from chromatoken.domain.entities import (
    COLOR_BLINDNESS_TYPES,
    ColorBlindnessType,
    ThemeColors,
    ThemeConfig,
)
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

from .models import CollapseReason, ColorBlindnessIssue, ColorBlindnessReport, Lab

logger = logging.getLogger(__name__)

Matrix = tuple[tuple[float, float, float], ...]

# Rows produce R, G, B; columns weight the input R, G, B.
_MATRICES: dict[str, Matrix] = {
    # Red-blind
    "protanopia": (
        (0.567, 0.433, 0.0),
        (0.558, 0.442, 0.0),
        (0.0, 0.242, 0.758),
    ),
    # Green-blind
    "deuteranopia": (
        (0.625, 0.375, 0.0),
        (0.7, 0.3, 0.0),
        (0.0, 0.3, 0.7),
    ),
    # Blue-blind
    "tritanopia": (
        (0.95, 0.05, 0.0),
        (0.0, 0.433, 0.567),
        (0.0, 0.475, 0.525),
    ),
    # Red-weak
    "protanomaly": (
        (0.817, 0.183, 0.0),
        (0.333, 0.667, 0.0),
        (0.0, 0.125, 0.875),
    ),
    # Green-weak
    "deuteranomaly": (
        (0.8, 0.2, 0.0),
        (0.258, 0.742, 0.0),
        (0.0, 0.142, 0.858),
    ),
    # Blue-weak
    "tritanomaly": (
        (0.967, 0.033, 0.0),
        (0.0, 0.733, 0.267),
        (0.0, 0.183, 0.817),
    ),
}

GRAY_WEIGHTS = (0.299, 0.587, 0.114)

# Achromatomaly keeps 40% of the original color over the gray.
ACHROMATOMALY_RETAINED = 0.4


def _gray(rgb: RGB) -> int:
    return round_half_up(sum(w * c for w, c in zip(GRAY_WEIGHTS, rgb, strict=True)))


def simulate_color_blindness(color: str, cvd_type: ColorBlindnessType) -> str:
    """
    Simulate how ``color`` appears with a color vision deficiency.

    Args:
        color: Color as ``#rrggbb``
        cvd_type: One of the eight supported deficiency types

    Returns:
        The simulated color as lower-case ``#rrggbb``

    Raises:
        InvalidColorFormat: If ``color`` is not a hex color
        ValueError: If ``cvd_type`` is not a supported type
    """
    rgb = hex_to_rgb(color)

    if cvd_type == "achromatopsia":
        gray = _gray(rgb)
        return rgb_to_hex(gray, gray, gray)

    if cvd_type == "achromatomaly":
        gray = _gray(rgb)
        kept = ACHROMATOMALY_RETAINED
        return rgb_to_hex(*(round_half_up(c * kept + gray * (1 - kept)) for c in rgb))

    matrix = _MATRICES.get(cvd_type)
    if matrix is None:
        raise ValueError(f"Unknown color blindness type: {cvd_type!r}")

    return rgb_to_hex(
        *(round_half_up(sum(w * c for w, c in zip(row, rgb, strict=True))) for row in matrix)
    )


def get_all_simulations(color: str) -> dict[ColorBlindnessType, str]:
    """Simulate ``color`` under every supported type."""
    return {
        cvd_type: simulate_color_blindness(color, cvd_type) for cvd_type in COLOR_BLINDNESS_TYPES
    }


def simulate_theme_color_blindness(
    theme: ThemeConfig,
    cvd_type: ColorBlindnessType,
) -> ThemeConfig:
    """
    Return a copy of ``theme`` as perceived with ``cvd_type``.

    Hex colors are simulated; references and other values are kept, so
    they resolve to the simulated colors they point at.
    """
    simulated = {
        key: simulate_color_blindness(value, cvd_type) if is_hex_color(value) else value
        for key, value in theme.colors.as_mapping().items()
    }
    return theme.model_copy(update={"colors": ThemeColors(**simulated)})


# ═══════════════════════════════════════════════════════════════════════════
# PERCEPTUAL DIFFERENCE
# ═══════════════════════════════════════════════════════════════════════════

# D65 reference white
_XN, _YN, _ZN = 0.95047, 1.0, 1.08883


def _srgb_to_linear(channel: int) -> float:
    # IEC 61966-2-1 breakpoint; WCAG publishes 0.03928 for the same curve.
    c = channel / 255
    return c / 12.92 if c <= 0.04045 else float(((c + 0.055) / 1.055) ** 2.4)


def _lab_f(t: float) -> float:
    return float(t ** (1 / 3)) if t > 0.008856 else 7.787 * t + 16 / 116


def hex_to_lab(color: str) -> Lab:
    """Convert a hex color to CIE L*a*b* via linear sRGB and XYZ (D65)."""
    r, g, b = (_srgb_to_linear(c) for c in hex_to_rgb(color))

    x = r * 0.4124 + g * 0.3576 + b * 0.1805
    y = r * 0.2126 + g * 0.7152 + b * 0.0722
    z = r * 0.0193 + g * 0.1192 + b * 0.9505

    fx = _lab_f(x / _XN)
    fy = _lab_f(y / _YN)
    fz = _lab_f(z / _ZN)

    return Lab(116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz))


def delta_e(color1: str, color2: str) -> float:
    """CIE76 color difference (Euclidean distance in L*a*b*)."""
    return math.dist(hex_to_lab(color1), hex_to_lab(color2))


# ═══════════════════════════════════════════════════════════════════════════
# VALIDATION
# ═══════════════════════════════════════════════════════════════════════════


def _color_set(theme_or_colors: ThemeConfig | ThemeColors | Mapping[str, Any]) -> dict[str, str]:
    """Resolved hex colors by slot name. Non-hex values are dropped."""
    if isinstance(theme_or_colors, ThemeConfig):
        tree = theme_or_colors.to_tree()
    elif isinstance(theme_or_colors, ThemeColors):
        tree = {"colors": theme_or_colors.as_mapping()}
    else:
        tree = {"colors": dict(theme_or_colors)}

    palette: dict[str, str] = {}
    for key, resolved in resolve_colors(tree).items():
        if is_hex_color(resolved):
            palette[key] = resolved
        else:
            logger.debug("Skipping colors.%s: %r is not a hex color", key, resolved)

    return palette


def _collapse_reason(
    original_ratio: float,
    simulated_ratio: float,
    original_delta_e: float,
    simulated_delta_e: float,
    rules: EngineRules,
) -> CollapseReason | None:
    cb = rules.color_blindness

    if original_ratio > cb.original_min_ratio and simulated_ratio < cb.simulated_max_ratio:
        return "luminance"

    if (
        original_delta_e >= cb.original_min_delta_e
        and simulated_delta_e < original_delta_e * cb.min_delta_e_retention
    ):
        return "chromatic"

    return None


def validate_color_blindness_safety(
    theme_or_colors: ThemeConfig | ThemeColors | Mapping[str, Any],
    types: Iterable[ColorBlindnessType] | None = None,
    rules: EngineRules = DEFAULT_RULES,
) -> ColorBlindnessReport:
    """
    Check that critical color pairs stay distinguishable under simulation.

    Args:
        theme_or_colors: Theme, color set, or plain slot -> color mapping.
            References are resolved against the colors before checking.
        types: Deficiency types to simulate. Defaults to the three
            dichromacies configured in rules.
        rules: Engine rules carrying the pairs and thresholds

    Returns:
        ColorBlindnessReport; ``safe`` is True when nothing was flagged
    """
    cb = rules.color_blindness
    palette = _color_set(theme_or_colors)
    check_types = tuple(cb.default_types if types is None else types)

    issues: list[ColorBlindnessIssue] = []

    for cvd_type in check_types:
        for first, second in cb.critical_pairs:
            color1 = palette.get(first)
            color2 = palette.get(second)
            if color1 is None or color2 is None:
                continue

            sim1 = simulate_color_blindness(color1, cvd_type)
            sim2 = simulate_color_blindness(color2, cvd_type)

            original_ratio = contrast_ratio(color1, color2)
            simulated_ratio = contrast_ratio(sim1, sim2)
            original_delta_e = delta_e(color1, color2)
            simulated_delta_e = delta_e(sim1, sim2)

            reason = _collapse_reason(
                original_ratio, simulated_ratio, original_delta_e, simulated_delta_e, rules
            )
            if reason is None:
                continue

            issues.append(
                ColorBlindnessIssue(
                    type=cvd_type,
                    issue=f"{first} and {second} become indistinguishable",
                    colors=(first, second),
                    reason=reason,
                    original_ratio=original_ratio,
                    simulated_ratio=simulated_ratio,
                    original_delta_e=original_delta_e,
                    simulated_delta_e=simulated_delta_e,
                )
            )

    return ColorBlindnessReport(safe=not issues, issues=tuple(issues))


def is_color_blind_friendly(
    theme_or_colors: ThemeConfig | ThemeColors | Mapping[str, Any],
    rules: EngineRules = DEFAULT_RULES,
) -> bool:
    return validate_color_blindness_safety(theme_or_colors, rules=rules).safe


def recommendations_for(report: ColorBlindnessReport) -> list[str]:
    """Human-readable advice for a validation report."""
    if report.safe:
        return [
            "Theme appears safe for common color blindness types",
            "Consider adding icons or labels for critical actions anyway",
        ]

    recommendations = ["Theme may be difficult for color-blind users to use"]
    for issue in report.issues:
        recommendations.append(
            f"  - For {issue.type}: {issue.issue}. "
            "Add non-color indicators such as icons or text labels."
        )
    recommendations.append("Never rely on color alone to convey information")

    return recommendations


def get_color_blind_recommendations(
    theme_or_colors: ThemeConfig | ThemeColors | Mapping[str, Any],
    rules: EngineRules = DEFAULT_RULES,
) -> list[str]:
    return recommendations_for(validate_color_blindness_safety(theme_or_colors, rules=rules))
