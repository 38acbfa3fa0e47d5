from pydantic import BaseModel, ConfigDict, Field, model_validator

from chromatoken.domain.entities import ColorBlindnessType


class WcagRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    normal_aa: float = 4.5
    normal_aaa: float = 7.0
    large_aa: float = 3.0
    large_aaa: float = 4.5
    enhanced: float = 10.0
    max_ratio: float = 21.0

    @model_validator(mode="after")
    def _ordered(self) -> "WcagRules":
        if not 1.0 <= self.large_aa <= self.normal_aa <= self.normal_aaa <= self.max_ratio:
            raise ValueError(
                "WCAG thresholds must satisfy 1 <= large_aa <= normal_aa <= normal_aaa <= 21"
            )
        if self.large_aaa < self.large_aa:
            raise ValueError("large_aaa must not be below large_aa")
        return self

class FixerRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_iterations: int = Field(default=20, ge=1)
    # Search stops once the lightness interval is this narrow.
    tolerance: int = Field(default=1, ge=1)
    saturation_step: int = Field(default=10, ge=0, le=100)
    max_adjustment: float = Field(default=50, ge=0, le=100)

class ColorBlindnessRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    critical_pairs: tuple[tuple[str, str], ...] = (
        ("primary", "secondary"),
        ("success", "error"),
        ("success", "warning"),
        ("error", "warning"),
    )
    default_types: tuple[ColorBlindnessType, ...] = ("protanopia", "deuteranopia", "tritanopia")
    # Luminance collapse: distinct before, nearly identical after.
    original_min_ratio: float = 2.0
    simulated_max_ratio: float = 1.5
    # Chromatic collapse: CIE76 delta-E retained after simulation.
    original_min_delta_e: float = 20.0
    min_delta_e_retention: float = Field(default=0.6, ge=0.0, le=1.0)

class TokenRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    non_aliasable_literals: tuple[str, ...] = ("transparent", "#ffffff")

class EngineRules(BaseModel):
    model_config = ConfigDict(frozen=True)

    rules_version: str = "1"
    wcag: WcagRules = Field(default_factory=WcagRules)
    fixer: FixerRules = Field(default_factory=FixerRules)
    color_blindness: ColorBlindnessRules = Field(default_factory=ColorBlindnessRules)
    tokens: TokenRules = Field(default_factory=TokenRules)


DEFAULT_RULES = EngineRules()
