"""
Token resolution - Functional Core.

A token value is either a literal (hex/rgb/hsl color, css keyword, number,
length) or a dotted reference into the same configuration tree, such as
``colors.primary`` or ``spacing.values.4``. References may chain to any
depth. A path that revisits itself raises; a path that does not exist is
returned unchanged so partial themes still resolve.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from chromatoken.domain.errors import CircularReferenceError
from chromatoken.rules.models import DEFAULT_RULES, EngineRules

logger = logging.getLogger(__name__)

LITERAL_PREFIXES = ("#", "rgb", "hsl")

# First segment must start with a letter, so lengths like "1.5rem" stay literal.
REFERENCE_PATTERN = re.compile(r"^[A-Za-z_][\w-]*(\.[\w-]+)+$")

_MISSING = object()


def is_token_reference(value: object) -> bool:
    """Check whether ``value`` is a dotted token reference."""
    if not isinstance(value, str):
        return False

    if value.startswith(LITERAL_PREFIXES):
        return False

    return REFERENCE_PATTERN.match(value) is not None


def as_tree(tree: Mapping[str, Any] | BaseModel) -> Mapping[str, Any]:
    """Accept a plain nested mapping or a pydantic theme model."""
    if isinstance(tree, BaseModel):
        return tree.model_dump(exclude_none=True)
    return tree


def _lookup(path: str, tree: Mapping[str, Any]) -> Any:
    node: Any = tree

    for part in path.split("."):
        if isinstance(node, Mapping):
            if part in node:
                node = node[part]
            elif part.isdigit() and int(part) in node:
                node = node[int(part)]
            else:
                return _MISSING
        elif isinstance(node, Sequence) and not isinstance(node, str) and part.isdigit():
            index = int(part)
            if index >= len(node):
                return _MISSING
            node = node[index]
        else:
            return _MISSING

    return node


def resolve_token(
    reference: Any,
    tree: Mapping[str, Any] | BaseModel,
    visited: Sequence[str] | None = None,
) -> Any:
    """
    Resolve a token reference to its concrete value.

    Args:
        reference: Token reference (e.g. ``"colors.primary"``) or a literal
        tree: Theme configuration tree
        visited: Paths already on the current chain, in order

    Returns:
        The resolved value. Literals come back unchanged, and so does any
        reference whose path is missing from the tree.

    Raises:
        CircularReferenceError: If a path reappears in the chain. The error
            carries the full chain, e.g. ``a → b → c → a``.
    """
    if not is_token_reference(reference):
        return reference

    tree = as_tree(tree)
    chain: list[str] = list(visited) if visited else []
    current: str = reference

    while True:
        if current in chain:
            raise CircularReferenceError([*chain, current])
        chain.append(current)

        value = _lookup(current, tree)
        if value is _MISSING or value is None:
            logger.debug("Unresolved token reference %s (chain: %s)", current, chain)
            return current

        if not is_token_reference(value):
            return value

        current = value


def _values_match(candidate: Any, value: Any) -> bool:
    if isinstance(candidate, str) and isinstance(value, str):
        return candidate.lower() == value.lower()
    return bool(candidate == value)


def find_token_for_value(
    value: Any,
    tree: Mapping[str, Any] | BaseModel,
    rules: EngineRules = DEFAULT_RULES,
) -> str | None:
    """
    Reverse lookup: find the first token whose resolved value equals ``value``.

    Colors are searched first, then numeric spacing values. Common literals
    such as ``transparent`` and pure white are never worth aliasing and
    return None.
    """
    if isinstance(value, str):
        skipped = {literal.lower() for literal in rules.tokens.non_aliasable_literals}
        if value.lower() in skipped:
            return None

    tree = as_tree(tree)

    colors = tree.get("colors")
    if isinstance(colors, Mapping):
        for key, color_value in colors.items():
            if color_value is None:
                continue
            if _values_match(resolve_token(color_value, tree), value):
                return f"colors.{key}"

    if isinstance(value, int | float) and not isinstance(value, bool):
        spacing_values = _lookup("spacing.values", tree)
        if isinstance(spacing_values, Mapping):
            for key, spacing_value in spacing_values.items():
                if resolve_token(spacing_value, tree) == value:
                    return f"spacing.values.{key}"

    return None


def resolve_component_tokens(
    section: Mapping[str, Mapping[str, Any]] | None,
    tree: Mapping[str, Any] | BaseModel,
) -> dict[str, dict[str, Any]]:
    """
    Resolve every property of a variant -> property mapping.

    Used for component sections such as ``buttons`` where each variant's
    styles may point at theme tokens.
    """
    if not section:
        return {}

    tree = as_tree(tree)
    resolved: dict[str, dict[str, Any]] = {}

    for variant, styles in section.items():
        if not styles:
            continue
        resolved[variant] = {
            prop: resolve_token(value, tree) for prop, value in styles.items()
        }

    return resolved


def resolve_all_tokens(tree: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """Return a copy of the whole tree with every reference resolved."""
    root = as_tree(tree)

    def _walk(node: Any) -> Any:
        if isinstance(node, Mapping):
            return {key: _walk(child) for key, child in node.items()}
        if isinstance(node, list | tuple):
            return [_walk(child) for child in node]
        return resolve_token(node, root)

    result: dict[str, Any] = _walk(root)
    return result


def resolve_colors(tree: Mapping[str, Any] | BaseModel) -> dict[str, Any]:
    """Every set entry of the ``colors`` section, resolved."""
    root = as_tree(tree)
    colors = root.get("colors")
    if not isinstance(colors, Mapping):
        return {}

    return {
        key: resolve_token(value, root) for key, value in colors.items() if value is not None
    }
