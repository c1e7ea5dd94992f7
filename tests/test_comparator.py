"""Tests for JsonDiffer, the orchestrator behind the public API.

Covers:
- compare() on parsed values: renderings, diffs, timing
- compare_text() parsing, caching and LRU eviction
- Config propagation into both renderings
- Statelessness between calls and instance isolation
"""

from __future__ import annotations

import pytest

from json_line_diff import comparator as comparator_module
from json_line_diff.algorithm.config import DiffConfig, KeySortMode
from json_line_diff.comparator import JsonDiffer
from json_line_diff.parsing import JsonParseError
from json_line_diff.result import Category, Location

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


@pytest.fixture
def parse_log(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Record every text JsonDiffer hands to the parser."""
    calls: list[str] = []
    original = comparator_module.parse_json

    def spy(text: str) -> object:
        calls.append(text)
        return original(text)

    monkeypatch.setattr(comparator_module, "parse_json", spy)
    return calls


# ---------------------------------------------------------------------------
# compare()
# ---------------------------------------------------------------------------


class TestCompare:
    def test_identical(self) -> None:
        result = JsonDiffer().compare({"a": [1, 2]}, {"a": [1, 2]})
        assert result.is_identical
        assert result.diffs == ()

    def test_renderings_attached(self) -> None:
        result = JsonDiffer().compare({"b": 1, "a": 2}, [])
        assert result.left.text == '{\n    "a": 2,\n    "b": 1\n}\n'
        assert result.right.text == "[\n]\n"

    def test_diff_anchoring(self) -> None:
        result = JsonDiffer().compare({"a": 1}, {"a": 2})
        (diff,) = result.diffs
        assert diff.category is Category.VALUE_INEQUALITY
        assert diff.left == Location("/a", 2)
        assert diff.right == Location("/a", 2)

    def test_computation_time_non_negative(self) -> None:
        result = JsonDiffer().compare({"a": 1}, {"b": 1})
        assert isinstance(result.computation_time_ms, float)
        assert result.computation_time_ms >= 0.0

    def test_repeated_calls_identical(self) -> None:
        differ = JsonDiffer()
        first = differ.compare({"a": {"b": 1}}, {"a": {"c": 1}})
        second = differ.compare({"a": {"b": 1}}, {"a": {"c": 1}})
        assert first.diffs == second.diffs
        assert first.left == second.left

    def test_does_not_use_cache(self) -> None:
        differ = JsonDiffer()
        differ.compare({"a": 1}, {"a": 1})
        assert differ.cache_size == 0

    def test_render(self) -> None:
        rendering = JsonDiffer(config=DiffConfig(indent=1)).render({"a": 1})
        assert rendering.text == '{\n "a": 1\n}\n'


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


class TestConfig:
    def test_default_config(self) -> None:
        assert JsonDiffer().config == DiffConfig()

    def test_indent_applies_to_both_sides(self) -> None:
        result = JsonDiffer(config=DiffConfig(indent=2)).compare([1], [2])
        assert result.left.text == "[\n  1\n]\n"
        assert result.right.text == "[\n  2\n]\n"

    def test_key_sort_changes_lines(self) -> None:
        left = {"a": 1, "B": 2}
        right = {"a": 1, "B": 3}
        locale = JsonDiffer().compare(left, right)
        codepoint = JsonDiffer(
            config=DiffConfig(key_sort=KeySortMode.CODEPOINT)
        ).compare(left, right)
        assert locale.diffs[0].left == Location("/B", 3)
        assert codepoint.diffs[0].left == Location("/B", 2)


# ---------------------------------------------------------------------------
# compare_text() and caching
# ---------------------------------------------------------------------------


class TestCompareText:
    def test_parses_and_compares(self) -> None:
        result = JsonDiffer().compare_text('{"a": 1}', '{"a": "1"}')
        (diff,) = result.diffs
        assert diff.category is Category.TYPE_MISMATCH
        assert diff.message == "Both types should be numbers"

    def test_formatting_of_source_is_irrelevant(self) -> None:
        result = JsonDiffer().compare_text('{"b":1,"a":2}', '{\n "a": 2,\n "b": 1\n}')
        assert result.is_identical

    def test_invalid_left(self) -> None:
        with pytest.raises(JsonParseError):
            JsonDiffer().compare_text("{", "{}")

    def test_invalid_right(self) -> None:
        with pytest.raises(JsonParseError):
            JsonDiffer().compare_text("{}", "[1,]")

    def test_invalid_text_not_cached(self) -> None:
        differ = JsonDiffer()
        with pytest.raises(JsonParseError):
            differ.compare_text("{}", "nope")
        assert differ.cache_size == 1


class TestDocumentCache:
    def test_baseline_parsed_once(self, parse_log: list[str]) -> None:
        differ = JsonDiffer()
        baseline = '{"a": 1}'
        for candidate in ('{"a": 1}', '{"a": 2}', '{"a": 3}'):
            differ.compare_text(baseline, candidate)
        assert parse_log.count(baseline) == 1
        assert differ.cache_size == 3

    def test_same_text_both_sides(self, parse_log: list[str]) -> None:
        differ = JsonDiffer()
        result = differ.compare_text("[1]", "[1]")
        assert result.is_identical
        assert parse_log == ["[1]"]
        assert differ.cache_size == 1

    def test_lru_eviction(self, parse_log: list[str]) -> None:
        differ = JsonDiffer(max_cache_size=2)
        differ.compare_text("1", "2")
        differ.compare_text("1", "1")
        differ.compare_text("3", "1")
        assert differ.cache_size == 2
        assert parse_log == ["1", "2", "3"]
        # "2" was least recently used and has been evicted
        differ.compare_text("2", "3")
        assert parse_log == ["1", "2", "3", "2"]

    def test_instances_do_not_share_cache(self, parse_log: list[str]) -> None:
        JsonDiffer().compare_text("[]", "{}")
        other = JsonDiffer()
        assert other.cache_size == 0
        other.compare_text("[]", "{}")
        assert parse_log == ["[]", "{}", "[]", "{}"]

    def test_cached_result_matches_fresh(self) -> None:
        differ = JsonDiffer()
        first = differ.compare_text('{"x": [true]}', '{"x": [false]}')
        second = differ.compare_text('{"x": [true]}', '{"x": [false]}')
        assert first.diffs == second.diffs


class TestDeepDocuments:
    def test_deeply_nested_text(self) -> None:
        left = "[" * 600 + "1" + "]" * 600
        right = "[" * 600 + "2" + "]" * 600
        result = JsonDiffer().compare_text(left, right)
        (diff,) = result.diffs
        assert diff.category is Category.VALUE_INEQUALITY
        assert diff.left == Location("/" + "/".join(["[0]"] * 600), 601)
        assert result.left.line_count == 1202
