"""
Tokens component - Token reference resolution.

Shell Layer - logs outcomes and converts resolution errors into
``TokenError`` entries.
"""

from __future__ import annotations

import logging

from chromatoken.domain.errors import CircularReferenceError
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

from ._impl import find_token_for_value, is_token_reference, resolve_token
from .models import (
    FindTokenInput,
    FindTokenOutput,
    ResolveTokenInput,
    ResolveTokenOutput,
    TokenError,
)

logger = logging.getLogger(__name__)


def run_resolve(input_data: ResolveTokenInput) -> ResolveTokenOutput:
    """Resolve a reference, reporting cycles as errors instead of raising."""
    try:
        value = resolve_token(input_data.reference, input_data.tree)
    except CircularReferenceError as e:
        logger.warning("Circular token reference: %s", " → ".join(e.chain))
        return ResolveTokenOutput(
            value=input_data.reference,
            resolved=False,
            errors=(
                TokenError(
                    code="circular_reference",
                    message=str(e),
                    field=str(input_data.reference),
                ),
            ),
            success=False,
        )

    # A reference that comes back as a reference could not be followed.
    resolved = not is_token_reference(value)
    if not resolved:
        logger.info("Token %s left unresolved as %s", input_data.reference, value)

    return ResolveTokenOutput(
        value=value,
        resolved=resolved,
        errors=(),
        success=True,
    )


def run_find(
    input_data: FindTokenInput,
    rules: EngineRules = DEFAULT_RULES,
) -> FindTokenOutput:
    """Find the token path for a concrete value."""
    try:
        path = find_token_for_value(input_data.value, input_data.tree, rules)
    except CircularReferenceError as e:
        logger.warning("Circular token reference during lookup: %s", " → ".join(e.chain))
        return FindTokenOutput(
            path=None,
            errors=(TokenError(code="circular_reference", message=str(e)),),
            success=False,
        )

    return FindTokenOutput(path=path, errors=(), success=True)
