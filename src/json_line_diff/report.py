"""Report helpers for presenting a diff list.

These are the data halves of what a diff viewer does with the records:
summarizing counts, filtering by category, correlating a line with the diffs
anchored on it, and stepping through diffs in left-line order.  Painting,
scrolling and event handling belong to whatever hosts the viewer.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto

from json_line_diff.result import Category, DiffRecord

__all__ = [
    "IDENTICAL_TITLE",
    "DiffNavigator",
    "ReportSummary",
    "Side",
    "diffs_at_line",
    "filter_diffs",
    "plain_message",
    "summarize",
]

_CODE_TAG = re.compile(r"<code>(.*?)</code>", re.DOTALL)

# (singular, plural) in display order
_LABELS: dict[Category, tuple[str, str]] = {
    Category.MISSING_PROPERTY: ("missing property", "missing properties"),
    Category.TYPE_MISMATCH: ("incorrect type", "incorrect types"),
    Category.VALUE_INEQUALITY: ("unequal value", "unequal values"),
}

IDENTICAL_TITLE = "The two files were semantically identical."


class Side(StrEnum):
    """Which rendering a line number refers to."""

    LEFT = auto()
    RIGHT = auto()
    BOTH = auto()


@dataclass(frozen=True, slots=True)
class ReportSummary:
    """Totals for a diff list.

    Attributes:
        total: Number of diffs.
        counts: Diffs per category; every category is present.
        title: "Found N differences", or ``IDENTICAL_TITLE`` when empty.
        labels: One label per non-empty category, e.g. "2 missing properties".
    """

    total: int
    counts: dict[Category, int]
    title: str
    labels: tuple[str, ...]


def summarize(diffs: Iterable[DiffRecord]) -> ReportSummary:
    counts = dict.fromkeys(Category, 0)
    for diff in diffs:
        counts[diff.category] += 1
    total = sum(counts.values())

    if total == 0:
        title = IDENTICAL_TITLE
    else:
        title = f"Found {total} difference{'s' if total > 1 else ''}"

    labels = []
    for category, (singular, plural) in _LABELS.items():
        count = counts[category]
        if count:
            labels.append(f"{count} {singular if count == 1 else plural}")

    return ReportSummary(total=total, counts=counts, title=title, labels=tuple(labels))


def filter_diffs(
    diffs: Iterable[DiffRecord], categories: Collection[Category | str]
) -> list[DiffRecord]:
    """Keep only the diffs whose category is in ``categories``."""
    shown = {Category(category) for category in categories}
    return [diff for diff in diffs if diff.category in shown]


def diffs_at_line(
    diffs: Iterable[DiffRecord], line: int, side: Side | str
) -> list[DiffRecord]:
    """Return the diffs anchored on ``line`` of the given side."""
    side = Side(side)
    if side is Side.LEFT:
        return [diff for diff in diffs if diff.left.line == line]
    if side is Side.RIGHT:
        return [diff for diff in diffs if diff.right.line == line]
    return [diff for diff in diffs if line in (diff.left.line, diff.right.line)]


def plain_message(message: str) -> str:
    """Replace ``<code>x</code>`` markup with backticks."""
    return _CODE_TAG.sub(r"`\1`", message)


class DiffNavigator:
    """Cursor over diffs in left-line order.

    ``current`` is the index of the selected diff, or None when there is
    nothing to select.  Moving past either end leaves the cursor in place.
    """

    def __init__(self, diffs: Sequence[DiffRecord]) -> None:
        self._diffs: list[DiffRecord] = sorted(diffs, key=lambda d: d.left.line)
        self.current: int | None = 0 if self._diffs else None

    @property
    def diffs(self) -> list[DiffRecord]:
        return list(self._diffs)

    @property
    def current_diff(self) -> DiffRecord | None:
        if self.current is None:
            return None
        return self._diffs[self.current]

    def next(self) -> DiffRecord | None:
        if self.current is not None and self.current < len(self._diffs) - 1:
            self.current += 1
        return self.current_diff

    def previous(self) -> DiffRecord | None:
        if self.current is not None and self.current > 0:
            self.current -= 1
        return self.current_diff

    def select_line(self, line: int, side: Side | str) -> list[DiffRecord]:
        """Select the diffs on ``line`` and move the cursor to the first one."""
        selected = diffs_at_line(self._diffs, line, side)
        if selected:
            first = selected[0]
            self.current = next(
                index for index, diff in enumerate(self._diffs) if diff is first
            )
        return selected
