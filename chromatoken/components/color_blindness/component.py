"""
Color blindness component - Simulation and safety validation.

Shell Layer - logs flagged pairs and converts malformed input into
``ColorBlindnessError`` entries.
"""

from __future__ import annotations

import logging

from chromatoken.domain.errors import CircularReferenceError, InvalidColorFormat
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

from ._impl import recommendations_for, simulate_color_blindness, validate_color_blindness_safety
from .models import (
    ColorBlindnessError,
    SimulateInput,
    SimulateOutput,
    ValidateInput,
    ValidateOutput,
)

logger = logging.getLogger(__name__)


def run_simulate(input_data: SimulateInput) -> SimulateOutput:
    """Simulate one color under one deficiency type."""
    try:
        simulated = simulate_color_blindness(input_data.color, input_data.type)
    except InvalidColorFormat as e:
        logger.warning("Simulation rejected: %s", e)
        return SimulateOutput(
            simulated=None,
            errors=(ColorBlindnessError(code="invalid_color", message=str(e), field="color"),),
            success=False,
        )
    except ValueError as e:
        logger.warning("Simulation rejected: %s", e)
        return SimulateOutput(
            simulated=None,
            errors=(ColorBlindnessError(code="unknown_type", message=str(e), field="type"),),
            success=False,
        )

    return SimulateOutput(simulated=simulated, errors=(), success=True)


def run_validate(
    input_data: ValidateInput,
    rules: EngineRules = DEFAULT_RULES,
) -> ValidateOutput:
    """Validate a color set and produce recommendations."""
    try:
        report = validate_color_blindness_safety(input_data.colors, input_data.types, rules)
    except CircularReferenceError as e:
        logger.warning("Color blindness check aborted: %s", e)
        return ValidateOutput(
            report=None,
            recommendations=(),
            errors=(ColorBlindnessError(code="circular_reference", message=str(e)),),
            success=False,
        )
    except ValueError as e:
        logger.warning("Color blindness check rejected: %s", e)
        return ValidateOutput(
            report=None,
            recommendations=(),
            errors=(ColorBlindnessError(code="unknown_type", message=str(e), field="types"),),
            success=False,
        )

    for issue in report.issues:
        logger.info("%s: %s (%s collapse)", issue.type, issue.issue, issue.reason)

    if report.safe:
        logger.info("Color set is safe for the checked deficiency types")

    return ValidateOutput(
        report=report,
        recommendations=tuple(recommendations_for(report)),
        errors=(),
        success=True,
    )
