"""StructuralPath: the address of a value inside a JSON document.

A path is a sequence of segments: object keys (``str``) and array indices
(``int``).  It serializes by concatenation behind a root separator::

    ()                 -> "/"
    ("a",)             -> "/a"
    ("a", 0)           -> "/a/[0]"
    (2, "name")        -> "/[2]/name"

Keys are escaped so that a literal ``/`` inside a key can never be confused
with the separator: ``/`` becomes ``#``.  ``~`` and ``#`` are escaped first
(``~0`` and ``~1``) which keeps the encoding injective.

The serialized form is the lookup key of a rendering's line table, always
after ``normalize_path`` has trimmed trailing separators.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ROOT", "SEPARATOR", "StructuralPath", "escape_key", "normalize_path"]

SEPARATOR = "/"


def escape_key(key: str) -> str:
    """Escape an object key for use as a single path segment."""
    return key.replace("~", "~0").replace("#", "~1").replace(SEPARATOR, "#")


def normalize_path(path: str) -> str:
    """Trim trailing separators; the root path ``/`` is left as is."""
    trimmed = path.rstrip(SEPARATOR)
    return trimmed if trimmed else SEPARATOR


@dataclass(frozen=True, slots=True)
class StructuralPath:
    """Immutable sequence of key/index segments.

    Attributes:
        segments: Object keys (``str``, unescaped) and array indices (``int``),
            outermost first.
    """

    segments: tuple[str | int, ...] = ()

    def child_key(self, key: str) -> StructuralPath:
        return StructuralPath((*self.segments, key))

    def child_index(self, index: int) -> StructuralPath:
        return StructuralPath((*self.segments, index))

    @property
    def parent(self) -> StructuralPath:
        return StructuralPath(self.segments[:-1])

    @property
    def is_root(self) -> bool:
        return not self.segments

    def __str__(self) -> str:
        parts = [
            f"[{segment}]" if isinstance(segment, int) else escape_key(segment)
            for segment in self.segments
        ]
        return SEPARATOR + SEPARATOR.join(parts)


ROOT = StructuralPath()
