"""Parsing boundary: JSON text in, JsonValue out.

The printer and differ only ever see parsed values.  Malformed text is
reported here, either as a ``JsonParseError`` or as a plain boolean from
``validate_input``.
"""

from __future__ import annotations

import json
import logging
import math

from json_line_diff.types import JsonValue

__all__ = ["JsonParseError", "parse_json", "validate_input"]

logger = logging.getLogger(__name__)


class JsonParseError(ValueError):
    """Raised when a text is not a valid JSON document.

    Attributes:
        msg: The parser's description of the problem.
        lineno: 1-based line of the problem in the source text.
        colno: 1-based column of the problem in the source text.
    """

    def __init__(self, msg: str, lineno: int = 1, colno: int = 1) -> None:
        super().__init__(f"{msg}: line {lineno} column {colno}")
        self.msg = msg
        self.lineno = lineno
        self.colno = colno


def _reject_constant(name: str) -> None:
    # NaN, Infinity and -Infinity are Python extensions, not JSON
    raise ValueError(f"{name} is not a valid JSON value")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


def parse_json(text: str) -> JsonValue:
    """Parse a JSON document.

    Args:
        text: The JSON source text.

    Returns:
        The parsed value.  Every float in it is finite.

    Raises:
        JsonParseError: If ``text`` is not valid JSON, holds a number too
            large for a float, or is nested deeper than the parser allows.
    """
    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_float=_parse_finite_float,
        )
    except json.JSONDecodeError as exc:
        raise JsonParseError(exc.msg, exc.lineno, exc.colno) from exc
    except ValueError as exc:
        raise JsonParseError(str(exc)) from exc
    except RecursionError as exc:
        raise JsonParseError("document nested too deeply") from exc


def validate_input(text: str) -> bool:
    """Return True if ``text`` is a valid JSON document."""
    try:
        parse_json(text)
    except JsonParseError as exc:
        logger.debug("Rejected JSON input: %s", exc)
        return False
    return True
