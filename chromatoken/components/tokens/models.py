"""
Tokens component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

# --- Validation Errors ---


@dataclass(frozen=True)
class TokenError:
    """Token resolution error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ResolveTokenInput:
    """Input for resolving a token reference."""

    reference: str | int | float
    tree: Mapping[str, Any]


@dataclass(frozen=True)
class FindTokenInput:
    """Input for a reverse lookup (value -> token path)."""

    value: str | int | float
    tree: Mapping[str, Any]


# --- Output Models ---


@dataclass(frozen=True)
class ResolveTokenOutput:
    """Output from token resolution."""

    value: Any
    resolved: bool
    errors: tuple[TokenError, ...]
    success: bool


@dataclass(frozen=True)
class FindTokenOutput:
    """Output from a reverse lookup."""

    path: str | None
    errors: tuple[TokenError, ...]
    success: bool
