"""Printer: deterministic pretty-printing with per-path line tracking.

Serializes one JSON value into canonical text and records, in the same pass,
the 1-based output line on which every structural path begins.

Layout (default indent of four spaces)::

    {                       line 1   "/"
        "a": 1,             line 2   "/a"
        "b": [              line 3   "/b"
            true,           line 4   "/b/[0]"
            null            line 5   "/b/[1]"
        ]                   line 6
    }                       line 7
                            line 8   (text ends with a newline)

- Object keys are sorted (``DiffConfig.key_sort``); array order is kept.
- The trailing comma after the last child is removed before the closer.
- A closer is followed by ``,`` when the container is nested.
- The root path ``/`` is always recorded at line 1, whatever the root shape.
- Strings get their escape sequences back (they were consumed by the parser),
  so the output is valid JSON and contains no raw newline inside a string:
  the line counter and ``text.count("\\n")`` never disagree.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from json_line_diff.algorithm.config import DiffConfig
from json_line_diff.render.paths import ROOT, StructuralPath, normalize_path
from json_line_diff.result import Rendering
from json_line_diff.types import JsonKind, JsonValue, json_kind

__all__ = ["escape_string", "render"]

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\b": "\\b",
    "\f": "\\f",
    "\r": "\\r",
    "\t": "\\t",
}
# Remaining C0 controls are not allowed raw inside a JSON string
_ESCAPES.update(
    {chr(code): f"\\u{code:04x}" for code in range(0x20) if chr(code) not in _ESCAPES}
)
_ESCAPE_TABLE = str.maketrans(_ESCAPES)


def escape_string(value: str) -> str:
    """Reinsert JSON escape sequences into a parsed string."""
    return value.translate(_ESCAPE_TABLE)


@dataclass
class _RenderState:
    """Mutable state of one printing pass.  Never shared between passes."""

    indent_unit: str
    parts: list[str] = field(default_factory=list)
    line: int = 1
    table: dict[str, int] = field(default_factory=dict)

    def write(self, text: str) -> None:
        self.parts.append(text)

    def newline(self, depth: int) -> None:
        self.line += 1
        self.parts.append("\n" + self.indent_unit * depth)

    def record(self, path: StructuralPath) -> None:
        # First recording wins: a path starts where it was first rendered
        self.table.setdefault(normalize_path(str(path)), self.line)

    def remove_trailing_comma(self) -> None:
        if self.parts and self.parts[-1].endswith(","):
            self.parts[-1] = self.parts[-1][:-1]


def render(value: JsonValue, config: DiffConfig | None = None) -> Rendering:
    """Render a JSON value and build its path-to-line table.

    Args:
        value: A parsed JSON value (dict, list, str, int, float, bool, None).
        config: Rendering parameters.  Defaults to ``DiffConfig()``.

    Returns:
        An immutable ``Rendering``.

    Raises:
        TypeError: If ``value`` contains a non-JSON Python value.
        ValueError: If ``value`` contains a NaN or infinite float.
    """
    config = config if config is not None else DiffConfig()
    state = _RenderState(indent_unit=" " * config.indent)

    state.record(ROOT)
    _write_document(state, value, config)
    state.remove_trailing_comma()
    state.newline(0)

    return Rendering(
        text="".join(state.parts),
        line_table=MappingProxyType(state.table),
        line_count=state.line,
    )


# Work items, processed last in first out:
#   (_VALUE, value, path, depth)  write a value followed by a separator comma
#   (_KEY, key, path, depth)      start an object member on a new line
#   (_ITEM, None, path, depth)    start an array element on a new line
#   (_CLOSE, closer, path, depth) close a container
_VALUE, _KEY, _ITEM, _CLOSE = range(4)
_Task = tuple[int, Any, StructuralPath, int]


def _write_document(state: _RenderState, value: Any, config: DiffConfig) -> None:
    stack: list[_Task] = [(_VALUE, value, ROOT, 0)]
    while stack:
        action, payload, path, depth = stack.pop()
        if action == _VALUE:
            stack.extend(reversed(_write_value(state, payload, path, depth, config)))
        elif action == _KEY:
            state.newline(depth)
            state.write(f'"{escape_string(payload)}": ')
            state.record(path)
        elif action == _ITEM:
            state.newline(depth)
            state.record(path)
        else:
            _close(state, payload, depth)


def _write_value(
    state: _RenderState,
    value: Any,
    path: StructuralPath,
    depth: int,
    config: DiffConfig,
) -> list[_Task]:
    """Write a scalar, or open a container and return the work for its children."""
    kind = json_kind(value)

    if kind is JsonKind.OBJECT:
        state.write("{")
        tasks: list[_Task] = []
        for key in config.key_sort.sort(value):
            child = path.child_key(key)
            tasks.append((_KEY, key, child, depth + 1))
            tasks.append((_VALUE, value[key], child, depth + 1))
        tasks.append((_CLOSE, "}", path, depth))
        return tasks
    if kind is JsonKind.ARRAY:
        state.write("[")
        tasks = []
        for index, item in enumerate(value):
            child = path.child_index(index)
            tasks.append((_ITEM, None, child, depth + 1))
            tasks.append((_VALUE, item, child, depth + 1))
        tasks.append((_CLOSE, "]", path, depth))
        return tasks

    state.write(_scalar_text(kind, value) + ",")
    return []


def _close(state: _RenderState, closer: str, depth: int) -> None:
    state.remove_trailing_comma()
    state.newline(depth)
    state.write(closer + ",")


def _scalar_text(kind: JsonKind, value: Any) -> str:
    if kind is JsonKind.STRING:
        return f'"{escape_string(value)}"'
    if kind is JsonKind.BOOLEAN:
        return "true" if value else "false"
    if kind is JsonKind.NULL:
        return "null"
    # NaN and Infinity have no JSON spelling
    return json.dumps(value, allow_nan=False)
