"""algorithm subpackage: public API for the differ.

Provides the lock-step diff walk and its configuration.  Import from this
module (not from sub-modules directly) to stay on the stable public interface.

Example::

    from json_line_diff.algorithm import compare_values
    from json_line_diff.render import render

    left, right = {"a": 1}, {"a": 2}
    diffs = compare_values(left, render(left), right, render(right))
    # diffs[0].left.path == "/a"
"""

from __future__ import annotations

from json_line_diff.algorithm.config import DiffConfig, KeySortMode
from json_line_diff.algorithm.differ import compare_values

__all__ = ["DiffConfig", "KeySortMode", "compare_values"]
