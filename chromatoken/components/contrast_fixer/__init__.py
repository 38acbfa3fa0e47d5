"""
Contrast fixer component - Lightness search for WCAG-compliant colors.
"""

from ._impl import (
    apply_theme_fixes,
    fix_contrast,
    fix_theme_contrast,
    plan_theme_fixes,
    preview_contrast_fixes,
)
from .component import run_fix, run_fix_theme
from .models import (
    ContrastFixOptions,
    ContrastFixPreview,
    FixContrastInput,
    FixContrastOutput,
    FixError,
    FixResult,
    FixThemeInput,
    FixThemeOutput,
    SlotFix,
)

__all__ = [
    # Entry points
    "run_fix",
    "run_fix_theme",
    # Functional core
    "fix_contrast",
    "fix_theme_contrast",
    "preview_contrast_fixes",
    "plan_theme_fixes",
    "apply_theme_fixes",
    # Models
    "ContrastFixOptions",
    "ContrastFixPreview",
    "FixResult",
    "SlotFix",
    "FixContrastInput",
    "FixContrastOutput",
    "FixThemeInput",
    "FixThemeOutput",
    "FixError",
]
