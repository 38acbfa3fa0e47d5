"""
Audit component - Theme accessibility audit.

Shell Layer - logs the audit outcome and converts reference cycles into
``AuditError`` entries.
"""

from __future__ import annotations

import logging

from chromatoken.domain.errors import CircularReferenceError
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

from ._impl import (
    audit_theme_accessibility,
    get_accessibility_recommendations,
    get_accessibility_score,
)
from .models import AuditError, AuditThemeInput, AuditThemeOutput

logger = logging.getLogger(__name__)


def run_audit(
    input_data: AuditThemeInput,
    rules: EngineRules = DEFAULT_RULES,
) -> AuditThemeOutput:
    """Audit a theme, score it and collect recommendations."""
    theme = input_data.theme

    try:
        result = audit_theme_accessibility(
            theme,
            input_data.level,
            include_color_blindness=input_data.include_color_blindness,
            rules=rules,
        )
        score = get_accessibility_score(theme, rules)
        recommendations = get_accessibility_recommendations(theme, rules)
    except CircularReferenceError as e:
        logger.warning("Audit of %s aborted: %s", theme.meta.name, e)
        return AuditThemeOutput(
            result=None,
            score=None,
            recommendations=(),
            errors=(AuditError(code="circular_reference", message=str(e)),),
            success=False,
        )

    for issue in result.issues:
        logger.info("[%s] %s: %s", issue.severity, issue.field, issue.message)

    logger.info(
        "Audit %s (WCAG %s): %s, %d%% of %d checks passed, score %d",
        theme.meta.name,
        result.level,
        "passed" if result.passed else "failed",
        result.pass_rate,
        result.summary.total_checks,
        score,
    )

    return AuditThemeOutput(
        result=result,
        score=score,
        recommendations=tuple(recommendations),
        errors=(),
        success=True,
    )
