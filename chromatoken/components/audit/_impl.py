"""
Theme accessibility audit - Functional Core.

Runs the WCAG checks a theme can fail on its own: text and UI element
contrast against the surface color, minimum base font size and, on request,
color blindness safety of the critical color pairs.

Text slots are held to success criterion 1.4.3 (1.4.6 at AAA); primary,
border and status colors to 1.4.11 non-text contrast.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from chromatoken.components.color_blindness import validate_color_blindness_safety
from chromatoken.components.colors import is_hex_color, round_half_up
from chromatoken.components.contrast import check_contrast, contrast_ratio, target_ratios
from chromatoken.components.tokens import resolve_colors
from chromatoken.domain.entities import ThemeColors, ThemeConfig, WCAGLevel
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

from .models import (
    AccessibilityAuditResult,
    AccessibilityIssue,
    AuditSummary,
    IssueSeverity,
)

logger = logging.getLogger(__name__)

MIN_BASE_FONT_SIZE = 14

TEXT_CONTRAST_AA = "1.4.3 Contrast (Minimum)"
TEXT_CONTRAST_AAA = "1.4.6 Contrast (Enhanced)"
NON_TEXT_CONTRAST = "1.4.11 Non-text Contrast"
USE_OF_COLOR = "1.4.1 Use of Color"
TEXT_SPACING = "1.4.12 Text Spacing"


@dataclass(frozen=True)
class _ContrastCheck:
    slot: str
    label: str
    is_text: bool
    severity: IssueSeverity
    recommendation: str
    # Only checked when the theme defines the slot
    optional: bool = False
    aaa_severity: IssueSeverity | None = None


_CONTRAST_CHECKS = (
    _ContrastCheck(
        "text",
        "Text",
        is_text=True,
        severity="error",
        recommendation="Increase contrast between text and surface",
    ),
    _ContrastCheck(
        "text_secondary",
        "Secondary text",
        is_text=True,
        severity="warning",
        aaa_severity="error",
        recommendation="Darken secondary text color or lighten surface",
    ),
    _ContrastCheck(
        "text_muted",
        "Muted text",
        is_text=True,
        severity="warning",
        recommendation="Consider darkening muted text for better accessibility",
    ),
    _ContrastCheck(
        "primary",
        "Primary color",
        is_text=False,
        severity="error",
        recommendation="Adjust primary color lightness to meet minimum UI contrast",
    ),
    _ContrastCheck(
        "border",
        "Border",
        is_text=False,
        severity="warning",
        recommendation="Increase border visibility for better UI element definition",
    ),
    _ContrastCheck(
        "success",
        "Success color",
        is_text=False,
        severity="warning",
        optional=True,
        recommendation="Ensure success indicators are clearly visible",
    ),
    _ContrastCheck(
        "error",
        "Error color",
        is_text=False,
        severity="error",
        optional=True,
        recommendation="Error indicators must be clearly visible for accessibility",
    ),
    _ContrastCheck(
        "warning",
        "Warning color",
        is_text=False,
        severity="warning",
        optional=True,
        recommendation="Warning indicators should be clearly visible",
    ),
)


def _audit_contrast(
    colors: Mapping[str, Any],
    level: WCAGLevel,
    rules: EngineRules,
) -> tuple[int, int, list[AccessibilityIssue]]:
    surface = colors.get("surface")
    if not is_hex_color(surface):
        logger.debug("No hex surface color (%r); contrast checks skipped", surface)
        return 0, 0, []

    text_ratio, ui_ratio = target_ratios(level, rules)
    total = passed = 0
    issues: list[AccessibilityIssue] = []

    for check in _CONTRAST_CHECKS:
        value = colors.get(check.slot)
        if not is_hex_color(value):
            if not check.optional:
                logger.debug("Skipping colors.%s: %r is not a hex color", check.slot, value)
            continue

        total += 1
        ratio = check_contrast(value, surface, rules=rules).ratio
        min_ratio = text_ratio if check.is_text else ui_ratio

        if ratio >= min_ratio:
            passed += 1
            continue

        severity = check.severity
        if level == "AAA" and check.aaa_severity is not None:
            severity = check.aaa_severity

        if check.is_text:
            criterion = TEXT_CONTRAST_AAA if level == "AAA" else TEXT_CONTRAST_AA
            need = f"need {min_ratio:g}:1"
        else:
            criterion = NON_TEXT_CONTRAST
            need = f"need {min_ratio:g}:1 for UI elements"

        issues.append(
            AccessibilityIssue(
                category="contrast",
                severity=severity,
                message=f"{check.label} contrast on surface is {ratio:.2f}:1 ({need})",
                field=f"colors.{check.slot} / colors.surface",
                current_value=ratio,
                recommendation=f"{check.recommendation} (at least {min_ratio:g}:1)",
                wcag_criterion=criterion,
            )
        )

    return total, passed, issues


def audit_theme_accessibility(
    theme: ThemeConfig,
    level: WCAGLevel = "AA",
    include_color_blindness: bool = False,
    rules: EngineRules = DEFAULT_RULES,
) -> AccessibilityAuditResult:
    """
    Audit a theme against WCAG 2.1 at ``level``.

    Args:
        theme: Theme to audit. Color references are resolved first.
        level: ``"AA"`` or ``"AAA"``
        include_color_blindness: Also check critical color pairs under
            the default color blindness simulations
        rules: Engine rules carrying the thresholds

    Returns:
        AccessibilityAuditResult with every issue found and the pass rate

    Raises:
        CircularReferenceError: If a color reference chain loops
    """
    colors = resolve_colors(theme)
    total, passed, issues = _audit_contrast(colors, level, rules)

    # --- Typography ---
    total += 1
    base_size = theme.typography.base_size
    if base_size < MIN_BASE_FONT_SIZE:
        issues.append(
            AccessibilityIssue(
                category="structure",
                severity="warning",
                message=f"Base font size is {base_size:g}px (recommended: 14-16px)",
                field="typography.base_size",
                current_value=base_size,
                recommendation="Increase base font size for better readability",
                wcag_criterion=TEXT_SPACING,
            )
        )
    else:
        passed += 1

    # --- Color blindness ---
    if include_color_blindness:
        total += 1
        report = validate_color_blindness_safety(theme, rules=rules)
        if report.safe:
            passed += 1
        for cb_issue in report.issues:
            first, second = cb_issue.colors
            issues.append(
                AccessibilityIssue(
                    category="color-blindness",
                    severity="warning",
                    message=f"{cb_issue.issue} with {cb_issue.type}",
                    field=f"colors.{first} / colors.{second}",
                    recommendation="Add non-color indicators such as icons or text labels",
                    wcag_criterion=USE_OF_COLOR,
                )
            )

    warnings = sum(1 for issue in issues if issue.severity == "warning")

    return AccessibilityAuditResult(
        passed=not any(issue.severity == "error" for issue in issues),
        level=level,
        issues=tuple(issues),
        pass_rate=round_half_up(passed / total * 100),
        summary=AuditSummary(
            total_checks=total,
            passed=passed,
            failed=total - passed,
            warnings=warnings,
        ),
    )


def get_accessibility_score(theme: ThemeConfig, rules: EngineRules = DEFAULT_RULES) -> int:
    """
    Score a theme from 0 to 100.

    The AA pass rate forms the base; the AAA pass rate adds up to 20 bonus
    points, capped at 100.
    """
    aa = audit_theme_accessibility(theme, "AA", rules=rules)
    aaa = audit_theme_accessibility(theme, "AAA", rules=rules)

    return round_half_up(min(100.0, aa.pass_rate + aaa.pass_rate / 100 * 20))


def is_accessible(
    colors: ThemeConfig | ThemeColors | Mapping[str, Any],
    rules: EngineRules = DEFAULT_RULES,
) -> bool:
    """Quick check: body text meets AA and primary meets the UI minimum."""
    if isinstance(colors, ThemeConfig):
        resolved = resolve_colors(colors)
    elif isinstance(colors, ThemeColors):
        resolved = resolve_colors({"colors": colors.as_mapping()})
    else:
        resolved = resolve_colors({"colors": colors})

    text = resolved.get("text")
    primary = resolved.get("primary")
    surface = resolved.get("surface")

    if not all(is_hex_color(value) for value in (text, primary, surface)):
        return False

    return (
        contrast_ratio(text, surface) >= rules.wcag.normal_aa
        and contrast_ratio(primary, surface) >= rules.wcag.large_aa
    )


def get_accessibility_recommendations(
    theme: ThemeConfig,
    rules: EngineRules = DEFAULT_RULES,
) -> list[str]:
    """Actionable advice from an AA audit, most severe first."""
    audit = audit_theme_accessibility(theme, "AA", rules=rules)
    errors = audit.errors
    warnings = audit.warnings
    recommendations: list[str] = []

    if errors:
        recommendations.append(f"Fix {len(errors)} critical accessibility errors")
        for issue in errors[:3]:
            if issue.recommendation:
                recommendations.append(f"  - {issue.recommendation}")
    elif warnings:
        recommendations.append(
            f"Address {len(warnings)} accessibility warnings for enhanced compliance"
        )

    if audit.passed and not audit_theme_accessibility(theme, "AAA", rules=rules).passed:
        recommendations.append(
            "Consider improving to WCAG AAA standards for enhanced accessibility"
        )

    return recommendations
