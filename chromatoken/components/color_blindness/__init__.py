"""
Color blindness component - Deficiency simulation and pair safety checks.
"""

from ._impl import (
    delta_e,
    get_all_simulations,
    get_color_blind_recommendations,
    hex_to_lab,
    is_color_blind_friendly,
    recommendations_for,
    simulate_color_blindness,
    simulate_theme_color_blindness,
    validate_color_blindness_safety,
)
from .component import run_simulate, run_validate
from .models import (
    ColorBlindnessError,
    ColorBlindnessIssue,
    ColorBlindnessReport,
    Lab,
    SimulateInput,
    SimulateOutput,
    ValidateInput,
    ValidateOutput,
)

__all__ = [
    # Entry points
    "run_simulate",
    "run_validate",
    # Functional core
    "simulate_color_blindness",
    "simulate_theme_color_blindness",
    "get_all_simulations",
    "validate_color_blindness_safety",
    "is_color_blind_friendly",
    "get_color_blind_recommendations",
    "recommendations_for",
    "hex_to_lab",
    "delta_e",
    # Models
    "ColorBlindnessIssue",
    "ColorBlindnessReport",
    "Lab",
    "SimulateInput",
    "SimulateOutput",
    "ValidateInput",
    "ValidateOutput",
    "ColorBlindnessError",
]
