"""
Contrast fixer component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from chromatoken.domain.entities import ThemeConfig, WCAGLevel


@dataclass(frozen=True)
class ContrastFixOptions:
    """
    Options for contrast correction.

    ``max_adjustment`` falls back to the rules default (50 lightness points)
    when left as None.
    """

    target_level: WCAGLevel = "AA"
    max_adjustment: float | None = None
    preserve_hue: bool = True


@dataclass(frozen=True)
class FixResult:
    """
    Outcome of fixing one foreground against a background.

    ``success`` is False when no compliant lightness was found, or when the
    one found sits further than ``max_adjustment`` from the original.
    ``adjustment`` is that distance in HSL lightness points.
    """

    original: str
    fixed: str
    success: bool
    adjustment: float
    final_ratio: float


@dataclass(frozen=True)
class SlotFix:
    """Fix computed for one semantic color slot of a theme."""

    slot: str
    background: str
    target_ratio: float
    result: FixResult

    @property
    def field(self) -> str:
        return f"colors.{self.slot}"

    @property
    def applies(self) -> bool:
        """True when applying the fix would replace the slot value."""
        return self.result.success and self.result.fixed != self.result.original


@dataclass(frozen=True)
class ContrastFixPreview:
    field: str
    original: str
    suggested: str
    improvement: float


# --- Validation Errors ---


@dataclass(frozen=True)
class FixError:
    """Contrast fix error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class FixContrastInput:
    """Input for fixing a single pair."""

    foreground: str
    background: str
    target_ratio: float = 4.5
    options: ContrastFixOptions = field(default_factory=ContrastFixOptions)


@dataclass(frozen=True)
class FixThemeInput:
    """Input for fixing every contrast-relevant slot of a theme."""

    theme: ThemeConfig
    options: ContrastFixOptions = field(default_factory=ContrastFixOptions)


# --- Output Models ---


@dataclass(frozen=True)
class FixContrastOutput:
    """
    Output from a single-pair fix.

    ``success`` reports whether the fix ran; whether a compliant color was
    found is ``result.success``.
    """

    result: FixResult | None
    errors: tuple[FixError, ...]
    success: bool


@dataclass(frozen=True)
class FixThemeOutput:
    """Output from a whole-theme fix."""

    theme: ThemeConfig
    fixed_fields: tuple[str, ...]
    failed_fields: tuple[str, ...]
    errors: tuple[FixError, ...]
    success: bool
