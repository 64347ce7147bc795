# src/json_shape/orchestrator.py

import logging
from time import monotonic

from .config import DEFAULT_CONFIG, DetectionConfig
from .detectors.json_lines import detect_json_lines
from .detectors.multi_object import detect_multi_object, is_object_shaped
from .errors import ClassificationExhausted
from .models import Detection, ParsedDocument, ParseFailure, RawInput
from .normalizer import format_for_value, normalize
from .observability import names
from .observability.base import MetricsHook, NoOpMetricsHook
from .parsing.direct import parse_direct
from .scanning.scanner import scan_segments

logger = logging.getLogger(__name__)


def _run_stages(
    raw: RawInput, config: DetectionConfig, metrics_hook: MetricsHook
) -> Detection | ParseFailure:
    direct = parse_direct(raw, allow_nan=config.allow_nan)
    if not isinstance(direct, ParseFailure):
        logger.debug("Classified by direct parse")
        return Detection(format=format_for_value(direct.value), values=[direct])

    if is_object_shaped(raw.text):
        segments = list(scan_segments(raw.text, quote_aware=config.quote_aware))
        metrics_hook.increment(names.SCANNER_SEGMENTS_CREATED, len(segments))
        detection = detect_multi_object(raw, config=config, segments=segments)
        if detection is not None:
            logger.debug("Classified as concatenated objects")
            return detection

    detection = detect_json_lines(raw, config=config)
    if detection is not None:
        logger.debug("Classified as JSON Lines")
        return detection

    return direct


def try_classify(
    text: str,
    *,
    config: DetectionConfig = DEFAULT_CONFIG,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedDocument | ParseFailure:
    """Classify ``text`` without raising on malformed input.

    Stages run in order of decreasing confidence: direct parse, concatenated
    objects, JSON Lines. The first stage that applies wins. When none does,
    the direct parse diagnostic is returned.

    Raises:
        TypeError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    start = monotonic()
    raw = RawInput(text)
    metrics_hook.increment(names.CLASSIFY_REQUESTS_TOTAL)
    metrics_hook.record_gauge(names.CLASSIFY_INPUT_CHARS, len(raw))

    outcome = _run_stages(raw, config, metrics_hook)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.CLASSIFY_DURATION, elapsed_ms)

    if isinstance(outcome, ParseFailure):
        logger.info("Could not classify input: %s", outcome.message)
        metrics_hook.increment(names.CLASSIFY_FAILURES_TOTAL)
        return outcome

    document = normalize(outcome, raw)
    metrics_hook.increment(
        names.CLASSIFY_RESULTS_TOTAL, labels={"format": document.format.value}
    )
    metrics_hook.record_gauge(names.CLASSIFY_VALUES, len(document.values))
    return document


def classify(
    text: str,
    *,
    config: DetectionConfig = DEFAULT_CONFIG,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedDocument:
    """Classify ``text`` and split it into independently valid JSON values.

    Args:
        text: Pasted or uploaded text, no format hint.
        config: Detection settings.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        The normalized document.

    Raises:
        ClassificationExhausted: If no stage applies. ``.failure`` holds the
            direct parse diagnostic.
        TypeError: If ``text`` is not a string.

    Example:
        >>> classify('{"a": 1}\\n{"b": 2}').items()
        [{'a': 1}, {'b': 2}]
    """
    result = try_classify(text, config=config, metrics_hook=metrics_hook)
    if isinstance(result, ParseFailure):
        raise ClassificationExhausted(result)
    return result
