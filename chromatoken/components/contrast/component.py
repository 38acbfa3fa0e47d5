"""
Contrast component - WCAG contrast checks.

Shell Layer - logs outcomes and converts malformed colors into
``ContrastError`` entries.
"""

from __future__ import annotations

import logging

from chromatoken.domain.errors import InvalidColorFormat
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

from ._impl import check_contrast
from .models import CheckContrastInput, CheckContrastOutput, ContrastError

logger = logging.getLogger(__name__)


def run_check(
    input_data: CheckContrastInput,
    rules: EngineRules = DEFAULT_RULES,
) -> CheckContrastOutput:
    """Check a foreground/background pair."""
    try:
        result = check_contrast(
            input_data.foreground,
            input_data.background,
            is_large_text=input_data.is_large_text,
            rules=rules,
        )
    except InvalidColorFormat as e:
        logger.warning("Contrast check rejected: %s", e)
        return CheckContrastOutput(
            result=None,
            errors=(
                ContrastError(
                    code="invalid_color",
                    message=str(e),
                    field=str(e.value),
                ),
            ),
            success=False,
        )

    logger.info(
        "Contrast %s on %s: %.2f:1 (%s)",
        input_data.foreground,
        input_data.background,
        result.ratio,
        result.level.value,
    )
    return CheckContrastOutput(result=result, errors=(), success=True)
