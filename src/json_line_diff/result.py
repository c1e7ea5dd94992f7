"""Record types produced by a comparison.

- ``Rendering``: the frozen output of one printing pass (text + line table).
- ``DiffRecord``: one discrepancy, anchored to a ``Location`` on each side.
- ``DiffResult``: both renderings plus the ordered diff records.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

__all__ = ["Category", "DiffRecord", "DiffResult", "Location", "Rendering"]


class Category(StrEnum):
    """Kinds of discrepancy between two JSON documents."""

    TYPE_MISMATCH = "type-mismatch"
    MISSING_PROPERTY = "missing-property"
    VALUE_INEQUALITY = "value-inequality"


@dataclass(frozen=True, slots=True)
class Location:
    """A normalized structural path and the 1-based line where it starts."""

    path: str
    line: int

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "line": self.line}


@dataclass(frozen=True, slots=True)
class DiffRecord:
    """One reported difference.

    Attributes:
        left: Location of the difference in the left rendering.
        right: Location of the difference in the right rendering.
        category: Which kind of difference this is.
        message: Human readable description.  Key names, indices and booleans
            are wrapped in ``<code>...</code>``; see ``report.plain_message``.
    """

    left: Location
    right: Location
    category: Category
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
            "category": str(self.category),
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class Rendering:
    """Canonical text of one JSON value and where each path starts in it.

    Attributes:
        text: Pretty-printed JSON.  Object keys are sorted, arrays keep
            their order, and the text ends with a single newline.
        line_table: Read-only mapping from normalized path (``"/a/[0]"``) to
            the 1-based line on which that path's value begins.
        line_count: Final value of the printer's line counter.  Always equals
            ``text.count("\\n") + 1``.
    """

    text: str
    line_table: Mapping[str, int]
    line_count: int

    @property
    def lines(self) -> list[str]:
        """Text split so that ``lines[i - 1]`` is line ``i``."""
        return self.text.split("\n")

    def line(self, number: int) -> str:
        """Return the text of 1-based line ``number``."""
        if not 1 <= number <= self.line_count:
            msg = f"line must be in [1, {self.line_count}], got {number}"
            raise IndexError(msg)
        return self.lines[number - 1]


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Rich result of a compare() call.

    Attributes:
        left: Rendering of the left document.
        right: Rendering of the right document.
        diffs: Difference records in the order the differ produced them.  An
            empty tuple means the documents are semantically identical.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds (rendering included).
    """

    left: Rendering
    right: Rendering
    diffs: tuple[DiffRecord, ...]
    computation_time_ms: float

    @property
    def is_identical(self) -> bool:
        return not self.diffs

    def counts(self) -> dict[Category, int]:
        """Number of diffs per category; every category is present."""
        totals = dict.fromkeys(Category, 0)
        for diff in self.diffs:
            totals[diff.category] += 1
        return totals

    def sorted_diffs(self) -> list[DiffRecord]:
        """Diffs ordered by left-side line (stable for equal lines)."""
        return sorted(self.diffs, key=lambda diff: diff.left.line)

    def to_dict(self) -> dict[str, Any]:
        return {
            "identical": self.is_identical,
            "counts": {str(k): v for k, v in self.counts().items()},
            "diffs": [diff.to_dict() for diff in self.diffs],
            "left": {"text": self.left.text, "line_count": self.left.line_count},
            "right": {"text": self.right.text, "line_count": self.right.line_count},
            "computation_time_ms": self.computation_time_ms,
        }
