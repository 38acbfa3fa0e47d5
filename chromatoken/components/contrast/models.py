"""
Contrast component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ContrastLevel(str, Enum):
    """WCAG contrast levels, strongest first."""

    ENHANCED = "ENHANCED"  # 10:1 or higher
    AAA = "AAA"  # 7:1 normal text, 4.5:1 large text
    AA = "AA"  # 4.5:1 normal text, 3:1 large text
    AA_LARGE = "AA_LARGE"  # 3:1, large text only
    FAIL = "FAIL"


@dataclass(frozen=True)
class ContrastResult:
    """
    WCAG classification of one foreground/background pair.

    ``ratio`` is rounded to two decimals; the pass flags are computed from
    the unrounded value.
    """

    ratio: float
    aa: bool
    aaa: bool
    aa_large: bool
    aaa_large: bool
    level: ContrastLevel
    score: float


@dataclass(frozen=True)
class ColorCombination:
    foreground: str
    background: str


@dataclass(frozen=True)
class CombinationResult:
    combination: ColorCombination
    result: ContrastResult


# --- Validation Errors ---


@dataclass(frozen=True)
class ContrastError:
    """Contrast check error."""

    code: str
    message: str
    field: str | None = None


# --- Input / Output Models ---


@dataclass(frozen=True)
class CheckContrastInput:
    """Input for a contrast check."""

    foreground: str
    background: str
    is_large_text: bool = False


@dataclass(frozen=True)
class CheckContrastOutput:
    """Output from a contrast check."""

    result: ContrastResult | None
    errors: tuple[ContrastError, ...]
    success: bool
