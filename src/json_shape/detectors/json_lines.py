# src/json_shape/detectors/json_lines.py

import logging
import math
import re
from collections.abc import Iterator

from json_shape.config import (
    DEFAULT_CONFIG,
    MIN_JSON_LINES,
    MIN_JSON_LINES_RATIO,
    DetectionConfig,
)
from json_shape.models import Detection, Format, ParsedValue, RawInput, Segment
from json_shape.parsing.direct import load_json

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def required_valid_lines(total: int) -> int:
    """Minimum valid lines for ``total`` non-blank lines to count as JSON Lines."""
    # round() absorbs float noise such as 0.7 * 10 -> 7.000000000000001
    return max(MIN_JSON_LINES, math.ceil(round(MIN_JSON_LINES_RATIO * total, 9)))


def iter_lines(text: str) -> Iterator[Segment]:
    """Non-blank lines as segments covering their stripped content.

    ``\\n``, ``\\r\\n`` and a lone ``\\r`` all end a line; none of them can
    occur unescaped inside a JSON string.
    """
    offset = 0
    for line_break in _LINE_BREAK.finditer(text + "\n"):
        line = text[offset : line_break.start()]
        stripped = line.strip()
        if stripped:
            start = offset + len(line) - len(line.lstrip())
            yield Segment(start=start, end=start + len(stripped), text=stripped)
        offset = line_break.end()


def _parse_line(segment: Segment, config: DetectionConfig) -> ParsedValue | None:
    try:
        value = load_json(segment.text, allow_nan=config.allow_nan)
    except (ValueError, RecursionError):
        return None
    if config.line_must_be_object and not isinstance(value, dict):
        return None
    return ParsedValue(value=value, segment=segment)


def detect_json_lines(
    raw: RawInput, *, config: DetectionConfig = DEFAULT_CONFIG
) -> Detection | None:
    lines = list(iter_lines(raw.text))
    total = len(lines)
    if total < MIN_JSON_LINES:
        logger.debug("JSON Lines: %d non-blank line(s), need %d", total, MIN_JSON_LINES)
        return None

    parsed = [_parse_line(line, config) for line in lines]
    values = [p for p in parsed if p is not None]

    if config.strict_lines and len(values) != total:
        logger.debug("JSON Lines (strict): %d of %d lines valid", len(values), total)
        return None

    window = parsed[: config.sample_lines] if config.sample_lines else parsed
    window_valid = sum(1 for p in window if p is not None)
    needed = required_valid_lines(len(window))
    if window_valid < needed:
        logger.debug(
            "JSON Lines: %d of %d lines valid, need %d",
            window_valid,
            len(window),
            needed,
        )
        return None

    skipped = [line.start for line, p in zip(lines, parsed) if p is None]
    if skipped:
        logger.debug("JSON Lines: skipping %d invalid line(s)", len(skipped))
    return Detection(
        format=Format.JSON_LINES,
        values=values,
        details={"total_lines": total, "skipped_offsets": skipped},
    )
