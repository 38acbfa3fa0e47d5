"""
Automatic contrast correction - Functional Core.

Repairs a failing foreground by binary-searching its HSL lightness against a
fixed background. The search is bounded by an iteration cap rather than a
convergence guarantee: some hue/background combinations have no compliant
lightness, and the search still terminates.
"""

from __future__ import annotations

import logging

from chromatoken.components.colors import (
    hex_to_hsl,
    hsl_to_hex,
    is_dark,
    is_hex_color,
    round_half_up,
)
from chromatoken.components.contrast import contrast_ratio, target_ratios
from chromatoken.components.tokens import resolve_token
from chromatoken.domain.entities import ThemeConfig
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

from .models import ContrastFixOptions, ContrastFixPreview, FixResult, SlotFix

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = ContrastFixOptions()

# Body text is held to the normal-text ratio, UI elements to the large-text one.
TEXT_SLOTS = ("text", "text_secondary", "text_muted")
UI_SLOTS = ("primary", "border")
# Only fixed when the theme defines them.
SEMANTIC_SLOTS = ("success", "warning", "error")


def fix_contrast(
    foreground: str,
    background: str,
    target_ratio: float = 4.5,
    options: ContrastFixOptions = DEFAULT_OPTIONS,
    rules: EngineRules = DEFAULT_RULES,
) -> FixResult:
    """
    Find a foreground with enough contrast against ``background``.

    Args:
        foreground: Color to adjust
        background: Color held fixed
        target_ratio: Contrast ratio to reach
        options: Hue preservation and adjustment cap
        rules: Engine rules carrying the search bounds

    Returns:
        FixResult. A pair that already passes comes back unchanged with
        zero adjustment.

    Raises:
        InvalidColorFormat: If either color is not ``#rrggbb``
    """
    current_ratio = contrast_ratio(foreground, background)

    if current_ratio >= target_ratio:
        return FixResult(
            original=foreground,
            fixed=foreground,
            success=True,
            adjustment=0.0,
            final_ratio=current_ratio,
        )

    fixer = rules.fixer
    max_adjustment = (
        fixer.max_adjustment if options.max_adjustment is None else options.max_adjustment
    )

    fg = hex_to_hsl(foreground)
    should_lighten = is_dark(background)
    saturation = fg.s if options.preserve_hue else max(0, fg.s - fixer.saturation_step)

    adjusted = foreground
    adjustment = 0.0

    low, high = 0, 100
    iterations = 0

    while iterations < fixer.max_iterations and high - low > fixer.tolerance:
        mid = round_half_up((low + high) / 2)
        candidate = hsl_to_hex(fg.h, saturation, mid)

        if contrast_ratio(candidate, background) >= target_ratio:
            adjusted = candidate
            adjustment = abs(mid - fg.l)
            # Passing: move back toward the original lightness
            if should_lighten:
                high = mid
            else:
                low = mid
        elif should_lighten:
            low = mid
        else:
            high = mid

        iterations += 1

    final_ratio = contrast_ratio(adjusted, background)
    success = final_ratio >= target_ratio and adjustment <= max_adjustment

    logger.debug(
        "Contrast search %s on %s: %s after %d iterations (ratio %.2f, adjustment %.1f)",
        foreground,
        background,
        adjusted,
        iterations,
        final_ratio,
        adjustment,
    )

    return FixResult(
        original=foreground,
        fixed=adjusted,
        success=success,
        adjustment=adjustment,
        final_ratio=final_ratio,
    )


# ═══════════════════════════════════════════════════════════════════════════
# THEME-WIDE FIXES
# ═══════════════════════════════════════════════════════════════════════════


def plan_theme_fixes(
    theme: ThemeConfig,
    options: ContrastFixOptions = DEFAULT_OPTIONS,
    rules: EngineRules = DEFAULT_RULES,
) -> tuple[SlotFix, ...]:
    """
    Compute the fix for every contrast-relevant slot without applying it.

    Slot values are resolved through the theme's token tree first. Slots
    that are unset, or that do not resolve to a hex color, are skipped.

    Raises:
        CircularReferenceError: If a slot's reference chain loops
    """
    tree = theme.to_tree()
    surface = resolve_token(theme.colors.surface, tree)

    if not is_hex_color(surface):
        logger.debug("No hex surface color (%r); nothing to fix against", surface)
        return ()

    text_ratio, ui_ratio = target_ratios(options.target_level, rules)
    targets = [(slot, text_ratio) for slot in TEXT_SLOTS]
    targets += [(slot, ui_ratio) for slot in (*UI_SLOTS, *SEMANTIC_SLOTS)]

    plan: list[SlotFix] = []

    for slot, ratio in targets:
        raw = getattr(theme.colors, slot)
        if raw is None:
            continue

        value = resolve_token(raw, tree)
        if not is_hex_color(value):
            logger.debug("Skipping colors.%s: %r is not a hex color", slot, value)
            continue

        plan.append(
            SlotFix(
                slot=slot,
                background=surface,
                target_ratio=ratio,
                result=fix_contrast(value, surface, ratio, options, rules),
            )
        )

    return tuple(plan)


def apply_theme_fixes(theme: ThemeConfig, plan: tuple[SlotFix, ...]) -> ThemeConfig:
    """
    Return a copy of ``theme`` with every successful, changed slot replaced.

    Failed slots keep their original value. Slots that already passed keep
    their original value too, references included.
    """
    updates = {fix.slot: fix.result.fixed for fix in plan if fix.applies}

    if not updates:
        return theme

    return theme.model_copy(update={"colors": theme.colors.model_copy(update=updates)})


def fix_theme_contrast(
    theme: ThemeConfig,
    options: ContrastFixOptions = DEFAULT_OPTIONS,
    rules: EngineRules = DEFAULT_RULES,
) -> ThemeConfig:
    """
    Fix every contrast-relevant slot of a theme against its surface color.

    Text slots target the normal-text ratio for ``options.target_level``;
    primary, border and the semantic status colors target the large-text
    (UI component) ratio. The source theme is never modified.
    """
    return apply_theme_fixes(theme, plan_theme_fixes(theme, options, rules))


def preview_contrast_fixes(
    theme: ThemeConfig,
    options: ContrastFixOptions = DEFAULT_OPTIONS,
    rules: EngineRules = DEFAULT_RULES,
) -> tuple[ContrastFixPreview, ...]:
    """List the fixes ``fix_theme_contrast`` would apply, with the ratio gained."""
    previews = []

    for fix in plan_theme_fixes(theme, options, rules):
        if not fix.applies:
            continue

        result = fix.result
        previews.append(
            ContrastFixPreview(
                field=fix.field,
                original=result.original,
                suggested=result.fixed,
                improvement=result.final_ratio - contrast_ratio(result.original, fix.background),
            )
        )

    return tuple(previews)
