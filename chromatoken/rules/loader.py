"""
Engine rules loader.

Reads the YAML rules file that tunes WCAG thresholds, the contrast fixer
search and the color-blindness heuristics, and validates it into
``EngineRules``. Every field has a default, so a missing file is not an
error unless a path was asked for explicitly.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from chromatoken.domain.errors import RulesValidationError
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

logger = logging.getLogger(__name__)

# Default rules file path (relative to project root)
DEFAULT_RULES_PATH = "chromatoken_rules.yaml"
RULES_PATH_ENV = "CHROMATOKEN_RULES_PATH"


def _find_project_root() -> Path:
    """Find project root by looking for marker files."""
    current = Path.cwd()

    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists() or (parent / ".git").exists():
            return parent

    return current


def _strip_markdown_fences(content: str) -> str:
    """Return the first ```yaml block if the file is markdown-wrapped."""
    yaml_lines: list[str] = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break
        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def resolve_rules_path(rules_path: Path | str | None = None) -> Path:
    """Explicit path, then $CHROMATOKEN_RULES_PATH, then the project root default."""
    if rules_path is not None:
        return Path(rules_path)

    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)

    return _find_project_root() / DEFAULT_RULES_PATH


def load_rules(path: Path | str) -> EngineRules:
    """
    Load and validate a rules file.

    Raises:
        FileNotFoundError: If the file is missing.
        RulesValidationError: If the YAML is malformed or fails the schema.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")

    content = _strip_markdown_fences(path.read_text())

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise RulesValidationError([f"Invalid YAML syntax: {e}"]) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RulesValidationError(["Rules file must contain a mapping at the top level"])

    try:
        rules = EngineRules.model_validate(data)
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise RulesValidationError(errors) from e

    logger.info("Loaded engine rules v%s from %s", rules.rules_version, path)
    return rules


def load_rules_or_default(rules_path: Path | str | None = None) -> EngineRules:
    """
    Load rules from the resolved path, falling back to built-in defaults.

    Only the implicit project-root location may be absent; an explicit or
    environment-provided path that does not exist still raises.
    """
    explicit = rules_path is not None or bool(os.environ.get(RULES_PATH_ENV))
    path = resolve_rules_path(rules_path)

    if not path.exists() and not explicit:
        logger.debug("No rules file at %s, using defaults", path)
        return DEFAULT_RULES

    return load_rules(path)
