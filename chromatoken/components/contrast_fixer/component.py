"""
Contrast fixer component - Automatic contrast correction.

Shell Layer - logs the outcome of every slot and converts malformed colors
and reference cycles into ``FixError`` entries.
"""

from __future__ import annotations

import logging

from chromatoken.domain.errors import CircularReferenceError, InvalidColorFormat
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

from ._impl import apply_theme_fixes, fix_contrast, plan_theme_fixes
from .models import (
    FixContrastInput,
    FixContrastOutput,
    FixError,
    FixThemeInput,
    FixThemeOutput,
)

logger = logging.getLogger(__name__)


def run_fix(
    input_data: FixContrastInput,
    rules: EngineRules = DEFAULT_RULES,
) -> FixContrastOutput:
    """Fix a single foreground/background pair."""
    try:
        result = fix_contrast(
            input_data.foreground,
            input_data.background,
            input_data.target_ratio,
            input_data.options,
            rules,
        )
    except InvalidColorFormat as e:
        logger.warning("Contrast fix rejected: %s", e)
        return FixContrastOutput(
            result=None,
            errors=(FixError(code="invalid_color", message=str(e), field=str(e.value)),),
            success=False,
        )

    if result.success:
        logger.info(
            "Fixed %s -> %s on %s (%.2f:1)",
            result.original,
            result.fixed,
            input_data.background,
            result.final_ratio,
        )
    else:
        logger.info(
            "No compliant color for %s on %s (best %.2f:1, adjustment %.1f)",
            result.original,
            input_data.background,
            result.final_ratio,
            result.adjustment,
        )

    return FixContrastOutput(result=result, errors=(), success=True)


def run_fix_theme(
    input_data: FixThemeInput,
    rules: EngineRules = DEFAULT_RULES,
) -> FixThemeOutput:
    """Fix every contrast-relevant slot of a theme."""
    theme = input_data.theme

    try:
        plan = plan_theme_fixes(theme, input_data.options, rules)
    except (InvalidColorFormat, CircularReferenceError) as e:
        code = "circular_reference" if isinstance(e, CircularReferenceError) else "invalid_color"
        logger.warning("Theme contrast fix for %s aborted: %s", theme.meta.name, e)
        return FixThemeOutput(
            theme=theme,
            fixed_fields=(),
            failed_fields=(),
            errors=(FixError(code=code, message=str(e)),),
            success=False,
        )

    fixed_fields: list[str] = []
    failed_fields: list[str] = []

    for fix in plan:
        result = fix.result
        if not result.success:
            logger.info(
                "%s left at %s: no fix reaches %.1f:1",
                fix.field,
                result.original,
                fix.target_ratio,
            )
            failed_fields.append(fix.field)
        elif fix.applies:
            logger.info(
                "%s: %s -> %s (%.2f:1)",
                fix.field,
                result.original,
                result.fixed,
                result.final_ratio,
            )
            fixed_fields.append(fix.field)

    logger.info(
        "Theme %s: %d slot(s) fixed, %d unfixable",
        theme.meta.name,
        len(fixed_fields),
        len(failed_fields),
    )

    return FixThemeOutput(
        theme=apply_theme_fixes(theme, plan),
        fixed_fields=tuple(fixed_fields),
        failed_fields=tuple(failed_fields),
        errors=(),
        success=True,
    )
