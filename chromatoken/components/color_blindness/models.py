"""
Color blindness component - Data models.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal, NamedTuple

from chromatoken.domain.entities import ColorBlindnessType, ThemeColors, ThemeConfig

CollapseReason = Literal["luminance", "chromatic"]


class Lab(NamedTuple):
    """CIE L*a*b* coordinates under a D65 white point."""

    l: float  # noqa: E741
    a: float
    b: float


@dataclass(frozen=True)
class ColorBlindnessIssue:
    """
    A critical color pair that stops being distinguishable under simulation.

    ``reason`` says which check flagged it: ``luminance`` when the WCAG
    ratio between the pair collapses, ``chromatic`` when most of their
    perceptual (delta-E) difference is lost.
    """

    type: ColorBlindnessType
    issue: str
    colors: tuple[str, str]
    reason: CollapseReason
    original_ratio: float
    simulated_ratio: float
    original_delta_e: float
    simulated_delta_e: float


@dataclass(frozen=True)
class ColorBlindnessReport:
    safe: bool
    issues: tuple[ColorBlindnessIssue, ...]


# --- Validation Errors ---


@dataclass(frozen=True)
class ColorBlindnessError:
    """Simulation or validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class SimulateInput:
    """Input for simulating one color."""

    color: str
    type: ColorBlindnessType


@dataclass(frozen=True)
class ValidateInput:
    """Input for a color blindness safety check."""

    colors: ThemeConfig | ThemeColors | Mapping[str, str]
    types: Sequence[ColorBlindnessType] | None = None


# --- Output Models ---


@dataclass(frozen=True)
class SimulateOutput:
    """Output from a simulation."""

    simulated: str | None
    errors: tuple[ColorBlindnessError, ...]
    success: bool


@dataclass(frozen=True)
class ValidateOutput:
    """Output from a safety check."""

    report: ColorBlindnessReport | None
    recommendations: tuple[str, ...]
    errors: tuple[ColorBlindnessError, ...]
    success: bool
