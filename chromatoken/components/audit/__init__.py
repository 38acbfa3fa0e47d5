"""
Audit component - WCAG accessibility audit and scoring for whole themes.
"""

from ._impl import (
    audit_theme_accessibility,
    get_accessibility_recommendations,
    get_accessibility_score,
    is_accessible,
)
from .component import run_audit
from .models import (
    AccessibilityAuditResult,
    AccessibilityIssue,
    AuditError,
    AuditSummary,
    AuditThemeInput,
    AuditThemeOutput,
)

__all__ = [
    # Entry points
    "run_audit",
    # Functional core
    "audit_theme_accessibility",
    "get_accessibility_score",
    "get_accessibility_recommendations",
    "is_accessible",
    # Models
    "AccessibilityAuditResult",
    "AccessibilityIssue",
    "AuditSummary",
    "AuditThemeInput",
    "AuditThemeOutput",
    "AuditError",
]
