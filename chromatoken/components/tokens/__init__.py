"""
Tokens component - Resolve dotted design-token references.

Follows reference chains through a theme tree, detects cycles, and performs
the reverse value -> token lookup.
"""

from ._impl import (
    REFERENCE_PATTERN,
    find_token_for_value,
    is_token_reference,
    resolve_all_tokens,
    resolve_colors,
    resolve_component_tokens,
    resolve_token,
)
from .component import run_find, run_resolve
from .models import (
    FindTokenInput,
    FindTokenOutput,
    ResolveTokenInput,
    ResolveTokenOutput,
    TokenError,
)

__all__ = [
    # Entry points
    "run_resolve",
    "run_find",
    # Functional core
    "REFERENCE_PATTERN",
    "is_token_reference",
    "resolve_token",
    "find_token_for_value",
    "resolve_component_tokens",
    "resolve_all_tokens",
    "resolve_colors",
    # Models
    "ResolveTokenInput",
    "ResolveTokenOutput",
    "FindTokenInput",
    "FindTokenOutput",
    "TokenError",
]
