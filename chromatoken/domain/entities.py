from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# --- Enums / Literals ---
WCAGLevel = Literal["AA", "AAA"]
ColorBlindnessType = Literal[
    "protanopia",
    "deuteranopia",
    "tritanopia",
    "protanomaly",
    "deuteranomaly",
    "tritanomaly",
    "achromatopsia",
    "achromatomaly",
]

COLOR_BLINDNESS_TYPES: tuple[ColorBlindnessType, ...] = (
    "protanopia",
    "deuteranopia",
    "tritanopia",
    "protanomaly",
    "deuteranomaly",
    "tritanomaly",
    "achromatopsia",
    "achromatomaly",
)

# A token value is a literal (hex, css keyword, number) or a dotted reference.
TokenValue = str | int | float

# --- Theme ---


class ThemeMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Untitled Theme"
    version: str = "1.0.0"


class ThemeColors(BaseModel):
    """Semantic color set. Unknown keys are kept as extra named colors."""

    model_config = ConfigDict(frozen=True, extra="allow")

    primary: str | None = None
    secondary: str | None = None
    accent: str | None = None
    surface: str | None = None
    surface_secondary: str | None = None
    surface_hover: str | None = None
    text: str | None = None
    text_secondary: str | None = None
    text_muted: str | None = None
    border: str | None = None
    border_strong: str | None = None
    border_subtle: str | None = None
    success: str | None = None
    warning: str | None = None
    error: str | None = None
    info: str | None = None

    def as_mapping(self) -> dict[str, str]:
        """Return the set slots as a plain mapping, skipping unset ones."""
        return {
            key: value
            for key, value in self.model_dump().items()
            if isinstance(value, str)
        }


class ThemeTypography(BaseModel):
    model_config = ConfigDict(frozen=True)

    font_family: str = "Inter, sans-serif"
    base_size: float = 16
    scale: float = 1.25
    weights: dict[str, int] = Field(default_factory=dict)
    line_heights: dict[str, float] = Field(default_factory=dict)


class ThemeSpacing(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_unit: int = 4
    values: dict[str, TokenValue] = Field(default_factory=dict)


class ThemeConfig(BaseModel):
    """
    Complete theme configuration.

    Color, button and border entries may hold dotted references into the
    same tree; ``to_tree`` exposes the plain nested mapping the token
    resolver walks.
    """

    model_config = ConfigDict(frozen=True)

    meta: ThemeMeta = Field(default_factory=ThemeMeta)
    colors: ThemeColors = Field(default_factory=ThemeColors)
    typography: ThemeTypography = Field(default_factory=ThemeTypography)
    spacing: ThemeSpacing = Field(default_factory=ThemeSpacing)
    borders: dict[str, TokenValue] = Field(default_factory=dict)
    buttons: dict[str, dict[str, TokenValue]] = Field(default_factory=dict)

    def to_tree(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
