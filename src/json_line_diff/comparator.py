"""JsonDiffer: orchestrator that wires parsing + Printer + Differ.

This is the central wiring layer between the raw algorithm and the public
API.  Each comparison renders both documents, walks them with the differ and
returns a ``DiffResult`` with both renderings, the diff records and timing.

Architecture:
- compare() renders both values with fresh printer state, then hands the two
  renderings to ``compare_values``.  Nothing mutable is shared between
  calls: renderings are frozen and the differ keeps its fallback locations
  per call.
- compare_text() parses each text once.  Parsed values and their renderings
  are cached per instance in an LRU keyed by source text, so comparing many
  candidates against the same baseline renders the baseline once.
"""

from __future__ import annotations

import logging
import time

from cachetools import LRUCache

from json_line_diff.algorithm.config import DiffConfig
from json_line_diff.algorithm.differ import compare_values
from json_line_diff.parsing import parse_json
from json_line_diff.render.printer import render
from json_line_diff.result import DiffResult, Rendering
from json_line_diff.types import JsonValue

__all__ = ["JsonDiffer"]

logger = logging.getLogger(__name__)


class JsonDiffer:
    """Line-anchored structural diff of two JSON documents.

    Two separate ``JsonDiffer`` instances never share cache state; each
    instance maintains its own ``LRUCache`` of parsed documents.

    Example::

        from json_line_diff.comparator import JsonDiffer

        differ = JsonDiffer()
        result = differ.compare({"a": 1}, {"a": 2})
        result.diffs[0].left.line      # 2
        result.diffs[0].category       # Category.VALUE_INEQUALITY
    """

    def __init__(
        self,
        config: DiffConfig | None = None,
        max_cache_size: int = 128,
    ) -> None:
        """Initialise the differ.

        Args:
            config: Rendering parameters.  Defaults to ``DiffConfig()``.
            max_cache_size: Maximum number of source texts whose parsed value
                and rendering are kept by ``compare_text``.  The
                least-recently-used entry is silently evicted.  Defaults to 128.
        """
        self._config: DiffConfig = config if config is not None else DiffConfig()
        self._documents: LRUCache[str, tuple[JsonValue, Rendering]] = LRUCache(
            maxsize=max_cache_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> DiffConfig:
        return self._config

    @property
    def cache_size(self) -> int:
        """The number of source texts currently cached."""
        return int(self._documents.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, value: JsonValue) -> Rendering:
        """Render a single value with this differ's config."""
        return render(value, self._config)

    def compare(self, left: JsonValue, right: JsonValue) -> DiffResult:
        """Compare two parsed JSON values.

        Args:
            left:  First JSON value (dict, list, str, int, float, bool, None).
            right: Second JSON value.

        Returns:
            A ``DiffResult`` with both renderings and the diff records.
        """
        t0 = time.perf_counter()
        left_rendering = self.render(left)
        right_rendering = self.render(right)
        return self._diff(left, left_rendering, right, right_rendering, t0)

    def compare_text(self, left_text: str, right_text: str) -> DiffResult:
        """Parse and compare two JSON texts.

        Raises:
            JsonParseError: If either text is not valid JSON.
        """
        t0 = time.perf_counter()
        left, left_rendering = self._load(left_text)
        right, right_rendering = self._load(right_text)
        return self._diff(left, left_rendering, right, right_rendering, t0)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load(self, text: str) -> tuple[JsonValue, Rendering]:
        cached = self._documents.get(text)
        if cached is not None:
            logger.debug("Document cache hit (%d chars)", len(text))
            return cached

        value = parse_json(text)
        entry = (value, self.render(value))
        self._documents[text] = entry
        return entry

    def _diff(
        self,
        left: JsonValue,
        left_rendering: Rendering,
        right: JsonValue,
        right_rendering: Rendering,
        t0: float,
    ) -> DiffResult:
        diffs = compare_values(left, left_rendering, right, right_rendering)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "Comparison finished: %d differences, %d/%d lines, %.2f ms",
            len(diffs),
            left_rendering.line_count,
            right_rendering.line_count,
            elapsed_ms,
        )
        return DiffResult(
            left=left_rendering,
            right=right_rendering,
            diffs=tuple(diffs),
            computation_time_ms=elapsed_ms,
        )
