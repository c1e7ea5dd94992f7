"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key flat, 100-key nested, 500-key deeply nested.
Each tier provides both an "identical" pair (every path walked, nothing
reported) and a "changed" pair (roughly one value in three differs, with
keys added and removed).
"""

from __future__ import annotations

from typing import Any

import pytest


def _leaf(i: int, j: int, k: int) -> Any:
    # Cycle through every scalar kind
    choice = (i + j + k) % 5
    if choice == 0:
        return f"value_{i}_{j}_{k}"
    if choice == 1:
        return i * 100 + j * 10 + k
    if choice == 2:
        return (i + j + k) / 4
    if choice == 3:
        return bool(k % 2)
    return None


def _make_flat(num_keys: int) -> dict[str, Any]:
    return {f"field_{i}": _leaf(i, 0, 0) for i in range(num_keys)}


def _make_nested_100() -> dict[str, Any]:
    """10 sections x (8 leaf keys + 1 array) = 100 keys."""
    doc: dict[str, Any] = {}
    for i in range(10):
        section = {f"field_{i}_{j}": _leaf(i, j, 0) for j in range(8)}
        section[f"items_{i}"] = [_leaf(i, 9, k) for k in range(3)]
        doc[f"section_{i}"] = section
    return doc


def _make_nested_500() -> dict[str, Any]:
    """5 sections x 5 groups x (14 leaves + 1 record list) + structural keys."""
    doc: dict[str, Any] = {}
    for i in range(5):
        groups: dict[str, Any] = {}
        for j in range(5):
            leaves: dict[str, Any] = {
                f"field_{i}_{j}_{k}": _leaf(i, j, k) for k in range(14)
            }
            leaves[f"records_{i}_{j}"] = [
                {"id": k, "name": f"record_{k}", "tags": [f"t{k}", f"u{k}"]}
                for k in range(4)
            ]
            groups[f"group_{j}"] = leaves
        doc[f"section_{i}"] = groups
    return doc


def _perturb(value: Any, counter: list[int]) -> Any:
    """Return a copy of ``value`` where every third scalar is changed.

    Every fifth object also loses its first key and gains a new one.
    """
    if isinstance(value, dict):
        counter[0] += 1
        out = {k: _perturb(v, counter) for k, v in value.items()}
        if counter[0] % 5 == 0 and out:
            out.pop(next(iter(out)))
            out[f"added_{counter[0]}"] = counter[0]
        return out
    if isinstance(value, list):
        return [_perturb(item, counter) for item in value]
    counter[0] += 1
    if counter[0] % 3:
        return value
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value + 1
    if isinstance(value, str):
        return value.upper()
    return 0


def _changed_pair(doc: dict[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    return doc, _perturb(doc, [0])


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_10key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    return _make_flat(10), _make_flat(10)


@pytest.fixture
def pair_10key_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    return _changed_pair(_make_flat(10))


@pytest.fixture
def pair_100key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    """100-key nested pair (10 sections x 9 keys)."""
    return _make_nested_100(), _make_nested_100()


@pytest.fixture
def pair_100key_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    return _changed_pair(_make_nested_100())


@pytest.fixture
def pair_500key_identical() -> tuple[dict[str, Any], dict[str, Any]]:
    """500-key deeply nested pair (5 sections x 5 groups x 15 keys)."""
    return _make_nested_500(), _make_nested_500()


@pytest.fixture
def pair_500key_changed() -> tuple[dict[str, Any], dict[str, Any]]:
    return _changed_pair(_make_nested_500())
