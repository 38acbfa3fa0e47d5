"""
Audit component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chromatoken.domain.entities import ThemeConfig, WCAGLevel

IssueSeverity = Literal["error", "warning", "info"]
IssueCategory = Literal["contrast", "color-blindness", "structure"]


@dataclass(frozen=True)
class AccessibilityIssue:
    """One failed accessibility check."""

    category: IssueCategory
    severity: IssueSeverity
    message: str
    field: str
    current_value: str | float | None = None
    recommendation: str | None = None
    wcag_criterion: str | None = None


@dataclass(frozen=True)
class AuditSummary:
    total_checks: int
    passed: int
    failed: int
    warnings: int


@dataclass(frozen=True)
class AccessibilityAuditResult:
    """
    Outcome of auditing a theme at one WCAG level.

    ``passed`` is True when no issue has error severity; warnings alone do
    not fail an audit. ``pass_rate`` is the percentage of checks passed.
    """

    passed: bool
    level: WCAGLevel
    issues: tuple[AccessibilityIssue, ...]
    pass_rate: int
    summary: AuditSummary

    @property
    def errors(self) -> tuple[AccessibilityIssue, ...]:
        return tuple(issue for issue in self.issues if issue.severity == "error")

    @property
    def warnings(self) -> tuple[AccessibilityIssue, ...]:
        return tuple(issue for issue in self.issues if issue.severity == "warning")


# --- Validation Errors ---


@dataclass(frozen=True)
class AuditError:
    """Audit error."""

    code: str
    message: str
    field: str | None = None


# --- Input / Output Models ---


@dataclass(frozen=True)
class AuditThemeInput:
    """Input for auditing a theme."""

    theme: ThemeConfig
    level: WCAGLevel = "AA"
    include_color_blindness: bool = False


@dataclass(frozen=True)
class AuditThemeOutput:
    """Output from a theme audit."""

    result: AccessibilityAuditResult | None
    score: int | None
    recommendations: tuple[str, ...]
    errors: tuple[AuditError, ...]
    success: bool
