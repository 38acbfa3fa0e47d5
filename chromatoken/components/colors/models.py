"""
Colors component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class RGB(NamedTuple):
    """Three 8-bit channels."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """
    Hue in [0, 360), saturation and lightness in [0, 100].

    Components keep full float precision; only hex encoding rounds.
    """

    h: float
    s: float
    l: float  # noqa: E741


@dataclass(frozen=True)
class PaletteShade:
    """One step of a generated shade ramp."""

    shade: int
    color: str
