"""Performance benchmark suite for json-line-diff.

Every comparison renders both documents and walks them once, so runtime is
linear in document size:
- 10-key flat objects: <10ms
- 100-key mixed nested objects: <100ms
- 500-key deeply nested objects: <1s

Run with: pytest tests/benchmarks/ --benchmark-only -v
Skip during normal test runs: pytest --benchmark-disable
"""

from __future__ import annotations

import json

import pytest

pytest.importorskip("pytest_benchmark")

from json_line_diff import JsonDiffer, compare  # noqa: E402


class TestPerformance10Key:
    """Benchmark suite for 10-key flat objects. Target: <10ms."""

    def test_10key_identical(self, benchmark, pair_10key_identical):  # type: ignore[no-untyped-def]
        left, right = pair_10key_identical
        result = benchmark(compare, left, right)
        # Verify the result is valid (not just timing)
        assert result.is_identical

    def test_10key_changed(self, benchmark, pair_10key_changed):  # type: ignore[no-untyped-def]
        left, right = pair_10key_changed
        result = benchmark(compare, left, right)
        assert not result.is_identical


class TestPerformance100Key:
    """Benchmark suite for 100-key mixed nested objects. Target: <100ms."""

    def test_100key_identical(self, benchmark, pair_100key_identical):  # type: ignore[no-untyped-def]
        left, right = pair_100key_identical
        result = benchmark(compare, left, right)
        assert result.is_identical

    def test_100key_changed(self, benchmark, pair_100key_changed):  # type: ignore[no-untyped-def]
        left, right = pair_100key_changed
        result = benchmark(compare, left, right)
        assert not result.is_identical
        for diff in result.diffs:
            assert diff.left.line <= result.left.line_count


class TestPerformance500Key:
    """Benchmark suite for 500-key deeply nested objects. Target: <1s."""

    def test_500key_identical(self, benchmark, pair_500key_identical):  # type: ignore[no-untyped-def]
        left, right = pair_500key_identical
        result = benchmark(compare, left, right)
        assert result.is_identical

    def test_500key_changed(self, benchmark, pair_500key_changed):  # type: ignore[no-untyped-def]
        left, right = pair_500key_changed
        result = benchmark(compare, left, right)
        assert not result.is_identical

    def test_500key_cached_baseline(self, benchmark, pair_500key_changed):  # type: ignore[no-untyped-def]
        """compare_text against a cached baseline skips re-rendering it."""
        left, right = pair_500key_changed
        left_text, right_text = json.dumps(left), json.dumps(right)
        differ = JsonDiffer()
        differ.compare_text(left_text, right_text)
        result = benchmark(differ.compare_text, left_text, right_text)
        assert not result.is_identical
