"""Public API functions for json-line-diff.

This module provides the four user-facing functions: compare, compare_text,
is_identical, and render_json.  Each call creates a fresh JsonDiffer to
guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from json_line_diff.algorithm.config import DiffConfig
from json_line_diff.comparator import JsonDiffer
from json_line_diff.result import DiffResult, Rendering
from json_line_diff.types import JsonValue

__all__ = ["compare", "compare_text", "is_identical", "render_json"]


def compare(
    left: JsonValue,
    right: JsonValue,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Compare two JSON values and return a DiffResult.

    Args:
        left:   First JSON value (dict, list, str, int, float, bool, None).
        right:  Second JSON value.
        config: Rendering parameters.  Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``DiffResult`` holding both renderings and every difference, each
        anchored to a line on both sides.
    """
    return JsonDiffer(config=config).compare(left, right)


def compare_text(
    left_text: str,
    right_text: str,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Parse two JSON texts and compare them.

    Raises:
        JsonParseError: If either text is not valid JSON.
    """
    return JsonDiffer(config=config).compare_text(left_text, right_text)


def is_identical(
    left: JsonValue,
    right: JsonValue,
    config: DiffConfig | None = None,
) -> bool:
    """Return True if the two JSON values have no differences."""
    return compare(left, right, config=config).is_identical


def render_json(value: JsonValue, config: DiffConfig | None = None) -> Rendering:
    """Render a JSON value in canonical form with its path-to-line table."""
    return JsonDiffer(config=config).render(value)
