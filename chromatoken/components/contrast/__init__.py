"""
Contrast component - WCAG 2.1 luminance, contrast ratio and level checks.
"""

from ._impl import (
    check_contrast,
    check_multiple_contrasts,
    contrast_ratio,
    generate_contrast_matrix,
    get_accessible_text_color,
    get_contrast_description,
    meets_minimum_contrast,
    relative_luminance,
    suggest_contrast_fix,
    target_ratios,
)
from .component import run_check
from .models import (
    CheckContrastInput,
    CheckContrastOutput,
    ColorCombination,
    CombinationResult,
    ContrastError,
    ContrastLevel,
    ContrastResult,
)

__all__ = [
    # Entry points
    "run_check",
    # Functional core
    "relative_luminance",
    "contrast_ratio",
    "check_contrast",
    "meets_minimum_contrast",
    "get_contrast_description",
    "suggest_contrast_fix",
    "check_multiple_contrasts",
    "generate_contrast_matrix",
    "get_accessible_text_color",
    "target_ratios",
    # Models
    "ContrastLevel",
    "ContrastResult",
    "ColorCombination",
    "CombinationResult",
    "CheckContrastInput",
    "CheckContrastOutput",
    "ContrastError",
]
