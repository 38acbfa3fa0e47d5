"""
Exception taxonomy for the engine.

Only malformed input and broken configuration raise. An unresolved token
reference is returned as-is, and a contrast fix that cannot reach its target
is reported through ``FixResult.success``.
"""

from __future__ import annotations

from collections.abc import Sequence


class ChromatokenError(Exception):
    """Base class for all engine errors."""


class InvalidColorFormat(ChromatokenError, ValueError):
    """Raised when a color string is not ``#rrggbb``."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}. Expected #RRGGBB")


class CircularReferenceError(ChromatokenError):
    """Raised when token resolution revisits a path in the current chain."""

    def __init__(self, chain: Sequence[str]) -> None:
        self.chain = tuple(chain)
        super().__init__(
            "Circular reference detected in theme configuration: "
            f"{' → '.join(self.chain)}. "
            "Tokens in this chain reference each other in a loop; "
            "replace one of them with a literal value."
        )


class RulesValidationError(ChromatokenError):
    """Raised when the rules file fails schema validation."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Rules validation failed: {'; '.join(errors)}")
