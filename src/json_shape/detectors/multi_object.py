# src/json_shape/detectors/multi_object.py

import logging
from collections.abc import Iterable

from json_shape.config import (
    DEFAULT_CONFIG,
    MIN_MULTI_OBJECT_SEGMENTS,
    DetectionConfig,
)
from json_shape.models import Detection, Format, ParsedValue, RawInput, Segment
from json_shape.parsing.direct import load_json
from json_shape.scanning.scanner import scan_segments

logger = logging.getLogger(__name__)


def is_object_shaped(text: str) -> bool:
    trimmed = text.strip()
    return trimmed.startswith("{") and trimmed.endswith("}")


def detect_multi_object(
    raw: RawInput,
    *,
    config: DetectionConfig = DEFAULT_CONFIG,
    segments: Iterable[Segment] | None = None,
) -> Detection | None:
    """Split concatenated top-level objects.

    A segment that does not parse on its own is merged into the next one
    and the merged text is retried from the same start.

    Args:
        raw: Input text.
        config: Detection settings.
        segments: Precomputed scanner output for ``raw``; scanned here when
            omitted.

    Returns:
        A ``MULTI_OBJECT`` detection, or ``None`` when the input is not
        object-shaped or fewer than ``MIN_MULTI_OBJECT_SEGMENTS`` segments
        parse.
    """
    if not is_object_shaped(raw.text):
        logger.debug("Multi-object: input is not object-shaped")
        return None

    if segments is None:
        segments = scan_segments(raw.text, quote_aware=config.quote_aware)

    values: list[ParsedValue] = []
    pending_start: int | None = None
    merged = 0

    for segment in segments:
        start = segment.start if pending_start is None else pending_start
        candidate = raw.text[start : segment.end]
        try:
            value = load_json(candidate, allow_nan=config.allow_nan)
        except (ValueError, RecursionError):
            pending_start = start
            merged += 1
            continue

        values.append(
            ParsedValue(
                value=value,
                segment=Segment(
                    start=start,
                    end=segment.end,
                    text=candidate,
                    balanced=segment.balanced,
                ),
            )
        )
        pending_start = None

    if len(values) < MIN_MULTI_OBJECT_SEGMENTS:
        logger.debug("Multi-object: only %d segment(s) parsed", len(values))
        return None

    logger.debug("Multi-object: %d values, %d merged segment(s)", len(values), merged)
    return Detection(
        format=Format.MULTI_OBJECT,
        values=values,
        details={
            "merged_segments": merged,
            "unparsed_tail": pending_start is not None,
        },
    )
