"""pytest plugin for json-line-diff.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_line_diff import DiffConfig, compare
from json_line_diff.report import plain_message, summarize


@pytest.fixture(scope="session")
def assert_json_identical() -> Any:
    """Fixture that returns a callable JSON identity asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh JsonDiffer per call).

    Usage in tests::

        def test_payload(assert_json_identical):
            assert_json_identical({"b": 1, "a": 2}, {"a": 2, "b": 1})

        def test_changed_payload(assert_json_identical):
            with pytest.raises(AssertionError, match=r"value-inequality"):
                assert_json_identical({"a": 1}, {"a": 2})

    Returns:
        A callable ``_assert(actual, expected, config=None) -> None`` that
        raises ``AssertionError`` when the documents differ.
    """

    def _assert(
        actual: Any,
        expected: Any,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert that two JSON documents have no structural differences.

        Args:
            actual:   The actual JSON value produced by the code under test.
            expected: The expected/reference JSON value.
            config:   Optional DiffConfig for the renderings.

        Raises:
            AssertionError: When any difference is found, with one line per
                difference giving its category, both locations and message.
        """
        result = compare(actual, expected, config=config)
        if result.is_identical:
            return

        summary = summarize(result.diffs)
        details = "\n".join(
            f"  [{diff.category}] actual {diff.left.path} (line {diff.left.line}) / "
            f"expected {diff.right.path} (line {diff.right.line}): "
            f"{plain_message(diff.message)}"
            for diff in result.sorted_diffs()
        )
        raise AssertionError(
            f"JSON documents differ: {summary.title} ({', '.join(summary.labels)})\n"
            f"{details}"
        )

    return _assert
