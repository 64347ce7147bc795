# src/json_shape/parsing/direct.py

import json
import logging
import math
from typing import Any

from json_shape.models import ParseFailure, ParsedValue, RawInput, Segment

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def _finite_float(text: str) -> float:
    # 1e400 is valid syntax but would load as inf
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def load_json(text: str, *, allow_nan: bool = False) -> Any:
    """``json.loads`` restricted to standard JSON.

    Raises:
        json.JSONDecodeError: On syntax errors (carries a position).
        ValueError: On ``NaN``/``Infinity`` or numbers that overflow to
            infinity when ``allow_nan`` is False.
        RecursionError: On pathologically deep nesting.
    """
    if allow_nan:
        return json.loads(text)
    return json.loads(
        text, parse_constant=_reject_constant, parse_float=_finite_float
    )


def is_valid_json(text: str, *, allow_nan: bool = False) -> bool:
    try:
        load_json(text, allow_nan=allow_nan)
    except (ValueError, RecursionError):
        return False
    return True


def parse_direct(
    raw: RawInput, *, allow_nan: bool = False
) -> ParsedValue | ParseFailure:
    """Parse the whole trimmed input as one JSON document.

    Returns the parsed value spanning the trimmed input, or the parser's
    diagnostic translated into RawInput coordinates. Never raises for bad
    input.
    """
    lead = raw.leading_whitespace
    trimmed = raw.trimmed
    try:
        value = load_json(trimmed, allow_nan=allow_nan)
    except json.JSONDecodeError as exc:
        offset = lead + exc.pos
        line, column = raw.position(offset)
        logger.debug("Direct parse failed at char %d: %s", offset, exc.msg)
        return ParseFailure(
            message=f"{exc.msg}: line {line} column {column} (char {offset})",
            offset=offset,
            line=line,
            column=column,
        )
    except ValueError as exc:
        logger.debug("Direct parse rejected input: %s", exc)
        return ParseFailure(message=str(exc))
    except RecursionError:
        logger.debug("Direct parse exceeded nesting depth")
        return ParseFailure(message="Maximum nesting depth exceeded")

    segment = Segment(start=lead, end=lead + len(trimmed), text=trimmed)
    return ParsedValue(value=value, segment=segment)
