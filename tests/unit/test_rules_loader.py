"""
Engine rules loading and validation tests.

Verifies that the YAML rules file is validated into ``EngineRules``, that
the shipped file matches the built-in defaults and that the path lookup
honours the explicit path, the environment and the project root in turn.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from chromatoken.components.audit import audit_theme_accessibility
from chromatoken.components.contrast import target_ratios
from chromatoken.domain.entities import ThemeColors, ThemeConfig
from chromatoken.domain.errors import ChromatokenError, RulesValidationError
from chromatoken.rules.loader import (
    DEFAULT_RULES_PATH,
    RULES_PATH_ENV,
    load_rules,
    load_rules_or_default,
    resolve_rules_path,
)
from chromatoken.rules.models import DEFAULT_RULES, EngineRules


class TestLoadRules:
    """Test rules file loading."""

    def test_shipped_rules_match_defaults(self, project_root: Path) -> None:
        rules = load_rules(project_root / DEFAULT_RULES_PATH)
        assert rules == DEFAULT_RULES

    def test_partial_file_keeps_defaults(self, write_rules) -> None:
        rules = load_rules(write_rules({"fixer": {"max_iterations": 8}}))

        assert rules.fixer.max_iterations == 8
        assert rules.fixer.tolerance == 1
        assert rules.wcag == DEFAULT_RULES.wcag

    def test_empty_file_is_defaults(self, write_rules) -> None:
        assert load_rules(write_rules("")) == DEFAULT_RULES

    def test_markdown_wrapped_yaml(self, write_rules) -> None:
        content = "# Rules\n\n```yaml\nwcag:\n  enhanced: 12.0\n```\n\nNotes after.\n"
        rules = load_rules(write_rules(content, "rules.md"))

        assert rules.wcag.enhanced == 12.0

    def test_critical_pairs_become_tuples(self, write_rules) -> None:
        rules = load_rules(
            write_rules({"color_blindness": {"critical_pairs": [["primary", "accent"]]}})
        )
        assert rules.color_blindness.critical_pairs == (("primary", "accent"),)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "absent.yaml")

    def test_default_sequences_are_immutable(self) -> None:
        cb = DEFAULT_RULES.color_blindness

        assert isinstance(cb.critical_pairs, tuple)
        assert isinstance(cb.default_types, tuple)
        assert isinstance(DEFAULT_RULES.tokens.non_aliasable_literals, tuple)
        with pytest.raises(AttributeError):
            literals = DEFAULT_RULES.tokens.non_aliasable_literals
            literals.append("#000000")  # type: ignore[attr-defined]

    def test_loaded_sequences_are_tuples(self, write_rules) -> None:
        rules = load_rules(write_rules({"tokens": {"non_aliasable_literals": ["none"]}}))
        assert rules.tokens.non_aliasable_literals == ("none",)


class TestRulesValidation:
    """Test schema enforcement."""

    def test_invalid_yaml(self, write_rules) -> None:
        with pytest.raises(RulesValidationError) as exc_info:
            load_rules(write_rules("wcag: [unclosed"))
        assert exc_info.value.errors[0].startswith("Invalid YAML syntax")

    def test_top_level_must_be_mapping(self, write_rules) -> None:
        with pytest.raises(RulesValidationError, match="mapping"):
            load_rules(write_rules("- just\n- a list\n"))

    def test_field_constraint(self, write_rules) -> None:
        with pytest.raises(RulesValidationError) as exc_info:
            load_rules(write_rules({"fixer": {"max_iterations": 0}}))
        assert exc_info.value.errors[0].startswith("fixer.max_iterations")

    def test_threshold_ordering(self, write_rules) -> None:
        with pytest.raises(RulesValidationError) as exc_info:
            load_rules(write_rules({"wcag": {"normal_aa": 2.0}}))
        assert exc_info.value.errors[0].startswith("wcag")

    def test_unknown_color_blindness_type(self, write_rules) -> None:
        with pytest.raises(RulesValidationError) as exc_info:
            load_rules(write_rules({"color_blindness": {"default_types": ["bluish"]}}))
        assert "color_blindness.default_types" in exc_info.value.errors[0]

    def test_error_is_chromatoken_error(self, write_rules) -> None:
        with pytest.raises(ChromatokenError):
            load_rules(write_rules({"fixer": {"tolerance": -1}}))


class TestRulesPath:
    """Test rules path resolution."""

    def test_explicit_path_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(RULES_PATH_ENV, "/from/env.yaml")
        assert resolve_rules_path("/explicit.yaml") == Path("/explicit.yaml")

    def test_environment_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(RULES_PATH_ENV, "/from/env.yaml")
        assert resolve_rules_path() == Path("/from/env.yaml")

    def test_project_root_default(self) -> None:
        path = resolve_rules_path()
        assert path.name == DEFAULT_RULES_PATH

    def test_defaults_when_no_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_rules_or_default() is DEFAULT_RULES

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules_or_default(tmp_path / "absent.yaml")

    def test_environment_missing_path_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(RULES_PATH_ENV, str(tmp_path / "absent.yaml"))
        with pytest.raises(FileNotFoundError):
            load_rules_or_default()

    def test_environment_file_is_loaded(
        self, write_rules, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(RULES_PATH_ENV, str(write_rules({"rules_version": "7"})))
        assert load_rules_or_default().rules_version == "7"


class TestRulesDriveEngine:
    """Loaded rules change engine decisions."""

    @pytest.fixture
    def strict_rules(self, write_rules) -> EngineRules:
        return load_rules(write_rules({"wcag": {"normal_aa": 7.0}}))

    def test_target_ratios(self, strict_rules: EngineRules) -> None:
        assert target_ratios("AA", strict_rules) == (7.0, 3.0)

    def test_audit_uses_loaded_thresholds(self, strict_rules: EngineRules) -> None:
        theme = ThemeConfig(colors=ThemeColors(surface="#ffffff", text="#767676"))

        assert audit_theme_accessibility(theme).passed is True
        assert audit_theme_accessibility(theme, rules=strict_rules).passed is False
