"""DiffConfig and KeySortMode for rendering and comparison settings.

DiffConfig is a frozen (immutable) dataclass holding the parameters that
shape the rendered text.  The differ itself has no tunables: its output is
fully determined by the two values and their renderings.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["DiffConfig", "KeySortMode"]


class KeySortMode(StrEnum):
    """How object keys are ordered in rendered text.

    - LOCALE:    Case-insensitive first, lowercase before uppercase on ties
                 ("apple" < "banana" < "Banana").
                 Independent of the process locale.
    - CODEPOINT: Plain code point order ("Banana" < "apple").
    """

    LOCALE = auto()
    CODEPOINT = auto()

    def sort(self, keys: Iterable[str]) -> list[str]:
        if self is KeySortMode.CODEPOINT:
            return sorted(keys)
        return sorted(keys, key=_collation_key)


def _collation_key(key: str) -> tuple[str, str, str]:
    # swapcase puts lowercase ahead of uppercase when the casefolded forms tie;
    # the raw key orders keys that still tie ("ss" and "ß")
    return (key.casefold(), key.swapcase(), key)


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for rendering JSON documents.

    Attributes:
        indent: Number of spaces per nesting level (>= 0).  Default 4.
        key_sort: Ordering applied to object keys.  Default ``LOCALE``.
    """

    indent: int = 4
    key_sort: KeySortMode = KeySortMode.LOCALE

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            msg = f"indent must be an int, got {type(self.indent).__name__}"
            raise ValueError(msg)
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if not isinstance(self.key_sort, KeySortMode):
            # Plain strings ("locale", "codepoint") are accepted; anything
            # else raises ValueError from the enum lookup.
            object.__setattr__(self, "key_sort", KeySortMode(self.key_sort))
