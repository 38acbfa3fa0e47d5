from pathlib import Path
from typing import Any

import pytest
import yaml

from chromatoken.domain.entities import (
    ThemeColors,
    ThemeConfig,
    ThemeMeta,
    ThemeSpacing,
    ThemeTypography,
)
from chromatoken.rules.loader import RULES_PATH_ENV

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def no_rules_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's CHROMATOKEN_RULES_PATH out of the test run."""
    monkeypatch.delenv(RULES_PATH_ENV, raising=False)


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def brand_theme() -> ThemeConfig:
    """
    A realistic light theme that passes WCAG AA.

    Text and button colors go through references so that every consumer
    exercises token resolution.
    """
    return ThemeConfig(
        meta=ThemeMeta(name="Brand Light", version="2.1.0"),
        colors=ThemeColors(
            primary="#1d4ed8",
            secondary="#7c3aed",
            surface="#ffffff",
            surface_secondary="#f3f4f6",
            text="colors.ink",
            text_secondary="#374151",
            text_muted="#4b5563",
            border="#6b7280",
            ink="#111827",
        ),
        typography=ThemeTypography(base_size=16),
        spacing=ThemeSpacing(values={"sm": 8, "md": 16, "gutter": "spacing.values.md"}),
        borders={"radius": "0.5rem", "color": "colors.border"},
        buttons={
            "primary": {"background": "colors.primary", "text": "colors.surface"},
            "ghost": {"background": "transparent", "text": "colors.text"},
        },
    )


@pytest.fixture
def washed_out_theme() -> ThemeConfig:
    """Pastel theme where every contrast-relevant slot fails AA."""
    return ThemeConfig(
        meta=ThemeMeta(name="Washed Out"),
        colors=ThemeColors(
            primary="#93c5fd",
            surface="#ffffff",
            text="#999999",
            border="#e5e7eb",
            error="#fca5a5",
        ),
        typography=ThemeTypography(base_size=12),
    )


@pytest.fixture
def write_rules(tmp_path: Path):
    """Write a rules mapping (or raw text) to a YAML file and return its path."""

    def _write(content: dict[str, Any] | str, name: str = "rules.yaml") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content)
        else:
            path.write_text(yaml.safe_dump(content))
        return path

    return _write
