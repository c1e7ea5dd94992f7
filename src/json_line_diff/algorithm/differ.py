"""Differ: lock-step walk of two JSON values producing DiffRecords.

Dispatch is on the joint shape of the pair at the current path:

- array / array:     reconcile by index (extra right, then left by index)
- array / other:     type-mismatch "Both types should be arrays"
- object / object:   reconcile keys (right-only, left-only, recurse on shared)
- object / other:    type-mismatch "Both types should be objects"
- string, number:    type-mismatch on kind change, value-inequality on ``!=``
- boolean:           type-mismatch on kind change; value-inequality naming
                     which side is true
- null / non-null:   type-mismatch "Both types should be nulls"

Every record is anchored on both sides through the side's ``Rendering``.
Lookups use the normalized path string; a path that was never rendered gets a
fallback location at the rendering's final line.  Fallbacks are kept in a
per-comparison overlay so renderings stay immutable and a second lookup of
the same path resolves to the same line.

The differ never raises for valid JSON values.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from json_line_diff.render.paths import ROOT, StructuralPath, normalize_path
from json_line_diff.result import Category, DiffRecord, Location, Rendering
from json_line_diff.types import JsonKind, JsonValue, json_kind

__all__ = ["compare_values"]

logger = logging.getLogger(__name__)

_SCALAR_NOUNS = {
    JsonKind.STRING: "strings",
    JsonKind.NUMBER: "numbers",
}


@dataclass
class _Locator:
    """Resolves paths to lines for one side of a comparison."""

    rendering: Rendering
    side: str
    fallbacks: dict[str, int] = field(default_factory=dict)

    def locate(self, path: StructuralPath) -> Location:
        key = normalize_path(str(path))
        line = self.rendering.line_table.get(key)
        if line is None:
            line = self.fallbacks.get(key)
        if line is None:
            line = self.rendering.line_count
            self.fallbacks[key] = line
            logger.debug(
                "Path %s not in %s rendering; anchoring at line %d",
                key,
                self.side,
                line,
            )
        return Location(path=key, line=line)


# A pending comparison: (left value, left path, right value, right path)
_Pair = tuple[Any, StructuralPath, Any, StructuralPath]


@dataclass
class _DiffWalk:
    """Depth-first walk over both values.

    The walk keeps an explicit stack of pending work instead of recursing, so
    nesting depth is limited by memory only.  Container handlers return their
    children in report order: ``DiffRecord`` items are reported as they are
    popped, pairs are compared.
    """

    left: _Locator
    right: _Locator
    diffs: list[DiffRecord] = field(default_factory=list)

    def record(
        self,
        left_path: StructuralPath,
        right_path: StructuralPath,
        category: Category,
        message: str,
    ) -> DiffRecord:
        return DiffRecord(
            left=self.left.locate(left_path),
            right=self.right.locate(right_path),
            category=category,
            message=message,
        )

    def run(self, left: Any, right: Any) -> list[DiffRecord]:
        stack: list[DiffRecord | _Pair] = [(left, ROOT, right, ROOT)]
        while stack:
            item = stack.pop()
            if isinstance(item, DiffRecord):
                self.diffs.append(item)
            else:
                stack.extend(reversed(self.diff_value(*item)))
        return self.diffs

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def diff_value(
        self,
        left: Any,
        left_path: StructuralPath,
        right: Any,
        right_path: StructuralPath,
    ) -> list[DiffRecord | _Pair]:
        left_kind = json_kind(left)
        right_kind = json_kind(right)

        if left_kind is JsonKind.ARRAY:
            if right_kind is JsonKind.ARRAY:
                return self.diff_array(left, left_path, right, right_path)
            return [
                self.record(
                    left_path,
                    right_path,
                    Category.TYPE_MISMATCH,
                    "Both types should be arrays",
                )
            ]
        if left_kind is JsonKind.OBJECT:
            if right_kind is JsonKind.OBJECT:
                return self.diff_object(left, left_path, right, right_path)
            return [
                self.record(
                    left_path,
                    right_path,
                    Category.TYPE_MISMATCH,
                    "Both types should be objects",
                )
            ]
        if left_kind is JsonKind.BOOLEAN:
            return self.diff_bool(left, left_path, right, right_kind, right_path)
        if left_kind is JsonKind.NULL:
            if right_kind is JsonKind.NULL:
                return []
            return [
                self.record(
                    left_path,
                    right_path,
                    Category.TYPE_MISMATCH,
                    "Both types should be nulls",
                )
            ]

        noun = _SCALAR_NOUNS[left_kind]
        if right_kind is not left_kind:
            return [
                self.record(
                    left_path,
                    right_path,
                    Category.TYPE_MISMATCH,
                    f"Both types should be {noun}",
                )
            ]
        if left != right:
            return [
                self.record(
                    left_path,
                    right_path,
                    Category.VALUE_INEQUALITY,
                    f"Both sides should be equal {noun}",
                )
            ]
        return []

    # ------------------------------------------------------------------
    # Shape handlers
    # ------------------------------------------------------------------

    def diff_array(
        self,
        left: list[Any],
        left_path: StructuralPath,
        right: list[Any],
        right_path: StructuralPath,
    ) -> list[DiffRecord | _Pair]:
        work: list[DiffRecord | _Pair] = []
        for index in range(len(left), len(right)):
            work.append(
                self.record(
                    left_path,
                    right_path.child_index(index),
                    Category.MISSING_PROPERTY,
                    f"Missing element <code>{index}</code> from the array on the left side",
                )
            )

        for index, item in enumerate(left):
            if index >= len(right):
                work.append(
                    self.record(
                        left_path.child_index(index),
                        right_path,
                        Category.MISSING_PROPERTY,
                        f"Missing element <code>{index}</code> from the array on the right side",
                    )
                )
            else:
                work.append(
                    (
                        item,
                        left_path.child_index(index),
                        right[index],
                        right_path.child_index(index),
                    )
                )
        return work

    def diff_object(
        self,
        left: dict[str, Any],
        left_path: StructuralPath,
        right: dict[str, Any],
        right_path: StructuralPath,
    ) -> list[DiffRecord | _Pair]:
        work: list[DiffRecord | _Pair] = []
        right_only = [key for key in right if key not in left]
        # Right-only keys are reported exactly once: up front when the right
        # side has more keys, otherwise after the left-side pass.
        front_loaded = len(left) < len(right)

        if front_loaded:
            for key in right_only:
                work.append(
                    self.record(
                        left_path,
                        right_path.child_key(key),
                        Category.MISSING_PROPERTY,
                        "The right side of this object has more items than the left side",
                    )
                )

        for key, value in left.items():
            if key not in right:
                work.append(
                    self.record(
                        left_path.child_key(key),
                        right_path,
                        Category.MISSING_PROPERTY,
                        f"Missing property <code>{key}</code> from the object on the right side",
                    )
                )
            else:
                work.append(
                    (
                        value,
                        left_path.child_key(key),
                        right[key],
                        right_path.child_key(key),
                    )
                )

        if not front_loaded:
            for key in right_only:
                work.append(
                    self.record(
                        left_path,
                        right_path.child_key(key),
                        Category.MISSING_PROPERTY,
                        f"Missing property <code>{key}</code> from the object on the left side",
                    )
                )
        return work

    def diff_bool(
        self,
        left: bool,
        left_path: StructuralPath,
        right: Any,
        right_kind: JsonKind,
        right_path: StructuralPath,
    ) -> list[DiffRecord | _Pair]:
        if right_kind is not JsonKind.BOOLEAN:
            return [
                self.record(
                    left_path,
                    right_path,
                    Category.TYPE_MISMATCH,
                    "Both types should be booleans",
                )
            ]
        if left == right:
            return []
        left_text, right_text = ("true", "false") if left else ("false", "true")
        return [
            self.record(
                left_path,
                right_path,
                Category.VALUE_INEQUALITY,
                f"The left side is <code>{left_text}</code> and "
                f"the right side is <code>{right_text}</code>",
            )
        ]


def compare_values(
    left: JsonValue,
    left_rendering: Rendering,
    right: JsonValue,
    right_rendering: Rendering,
) -> list[DiffRecord]:
    """Compare two parsed JSON values.

    Args:
        left: The left (baseline) value.
        left_rendering: ``render(left)``; supplies line numbers for the left side.
        right: The right value.
        right_rendering: ``render(right)``; supplies line numbers for the right side.

    Returns:
        Diff records in generation order.  An empty list means the values are
        semantically identical.
    """
    walk = _DiffWalk(
        left=_Locator(left_rendering, "left"),
        right=_Locator(right_rendering, "right"),
    )
    diffs = walk.run(left, right)

    logger.debug("Compared documents: %d differences", len(diffs))
    return diffs
