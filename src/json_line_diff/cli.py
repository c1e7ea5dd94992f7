"""json-line-diff CLI.

Entry point for the ``json-line-diff`` command-line tool.

Usage:
    json-line-diff LEFT RIGHT [--format text|json] [--indent N]
                   [--key-sort locale|codepoint] [--show CATEGORY ...]
                   [--render] [-v]

Exit status: 0 when the documents are identical, 1 when they differ,
2 when an input cannot be read or is not valid JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

from .algorithm.config import DiffConfig, KeySortMode
from .comparator import JsonDiffer
from .parsing import JsonParseError
from .report import filter_diffs, plain_message, summarize
from .result import Category, DiffRecord, DiffResult, Rendering

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Text formatter
# ---------------------------------------------------------------------------


def _format_rendering(title: str, rendering: Rendering) -> list[str]:
    width = len(str(rendering.line_count))
    lines = [f"--- {title} ---"]
    for number, text in enumerate(rendering.lines, start=1):
        lines.append(f"{number:>{width}} | {text}")
    return lines


def _format_text(
    result: DiffResult, diffs: list[DiffRecord], show_renderings: bool
) -> str:
    lines: list[str] = []

    if show_renderings:
        lines.extend(_format_rendering("left", result.left))
        lines.extend(_format_rendering("right", result.right))
        lines.append("")

    summary = summarize(result.diffs)
    lines.append(summary.title)
    if summary.labels:
        lines.append("  " + ", ".join(summary.labels))

    for diff in sorted(diffs, key=lambda d: d.left.line):
        lines.append("")
        lines.append(f"  [{diff.category}]")
        lines.append(f"    left:  line {diff.left.line:<5} {diff.left.path}")
        lines.append(f"    right: line {diff.right.line:<5} {diff.right.path}")
        lines.append(f"    {plain_message(diff.message)}")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(2)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-line-diff",
        description="Structural diff of two JSON documents, anchored to lines",
    )
    parser.add_argument("left", help="Left (baseline) JSON file, or - for stdin")
    parser.add_argument("right", help="Right JSON file, or - for stdin")
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=4,
        help="Spaces per nesting level in the rendering (default: 4)",
    )
    parser.add_argument(
        "--key-sort",
        choices=[mode.value for mode in KeySortMode],
        default=KeySortMode.LOCALE.value,
        help="Object key order in the rendering (default: locale)",
    )
    parser.add_argument(
        "--show",
        nargs="+",
        choices=[category.value for category in Category],
        default=[category.value for category in Category],
        metavar="CATEGORY",
        help="Diff categories to list (default: all)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print both numbered renderings before the diffs",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.left == "-" and args.right == "-":
        _fail("only one input can be read from stdin")

    try:
        config = DiffConfig(indent=args.indent, key_sort=KeySortMode(args.key_sort))
    except ValueError as exc:
        _fail(str(exc))

    texts = []
    for side, path in (("left", args.left), ("right", args.right)):
        try:
            texts.append(_read(path))
        except OSError as exc:
            _fail(f"cannot read {side} input {path!r}: {exc.strerror or exc}")

    try:
        result = JsonDiffer(config=config).compare_text(texts[0], texts[1])
    except JsonParseError as exc:
        _fail(f"invalid JSON: {exc}")

    logger.debug("Listing categories: %s", ", ".join(args.show))
    diffs = filter_diffs(result.diffs, args.show)

    if args.format == "json":
        payload = result.to_dict()
        payload["diffs"] = [diff.to_dict() for diff in diffs]
        print(json.dumps(payload, indent=2))
    else:
        print(_format_text(result, diffs, args.render))

    if not result.is_identical:
        sys.exit(1)


if __name__ == "__main__":
    main()
