"""Render subpackage: structural paths and the line-tracking printer.

Re-exports the public API for the render module:
- StructuralPath: immutable key/index path with its serialized form
- escape_key / normalize_path: path string helpers
- render: pretty-prints a JSON value and records where each path starts
"""

from json_line_diff.render.paths import (
    ROOT,
    StructuralPath,
    escape_key,
    normalize_path,
)
from json_line_diff.render.printer import escape_string, render

__all__ = [
    "ROOT",
    "StructuralPath",
    "escape_key",
    "escape_string",
    "normalize_path",
    "render",
]
