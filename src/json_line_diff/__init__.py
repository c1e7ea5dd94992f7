"""JSON line diff - structural diff of JSON documents anchored to rendered lines."""

from __future__ import annotations

from json_line_diff.algorithm.config import DiffConfig, KeySortMode
from json_line_diff.api import compare, compare_text, is_identical, render_json
from json_line_diff.comparator import JsonDiffer
from json_line_diff.parsing import JsonParseError, parse_json, validate_input
from json_line_diff.result import (
    Category,
    DiffRecord,
    DiffResult,
    Location,
    Rendering,
)

__version__: str = "0.1.0"
__all__: list[str] = [
    "Category",
    "DiffConfig",
    "DiffRecord",
    "DiffResult",
    "JsonDiffer",
    "JsonParseError",
    "KeySortMode",
    "Location",
    "Rendering",
    "compare",
    "compare_text",
    "is_identical",
    "parse_json",
    "render_json",
    "validate_input",
]
