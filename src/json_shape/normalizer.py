# src/json_shape/normalizer.py

from typing import Any

from .models import Detection, Format, ParsedDocument, ParsedValue, RawInput


def format_for_value(value: Any) -> Format:
    return Format.ARRAY if isinstance(value, list) else Format.SINGLE_VALUE


def normalize(detection: Detection, raw: RawInput) -> ParsedDocument:
    """Package a stage result as the public document shape.

    Values are ordered by source offset; detectors already emit them that
    way, so this only guards the ordering guarantee.
    """
    if not detection.values:
        raise ValueError("cannot normalize a detection without values")
    if not detection.format.is_multi_value and len(detection.values) != 1:
        raise ValueError(f"{detection.format.value} expects exactly one value")
    if detection.format.is_multi_value and len(detection.values) < 2:
        raise ValueError(f"{detection.format.value} expects at least two values")

    values = tuple(sorted(detection.values, key=lambda v: v.segment.start))
    metadata = {"input_length": len(raw), **detection.details}
    return ParsedDocument(format=detection.format, values=values, metadata=metadata)


def find_single_key_array(value: Any) -> tuple[str, list] | None:
    """``(key, array)`` when ``value`` is ``{key: [non-empty array]}``."""
    if not isinstance(value, dict) or len(value) != 1:
        return None
    key, inner = next(iter(value.items()))
    if isinstance(inner, list) and inner:
        return key, inner
    return None


def extract_single_key_array(document: ParsedDocument) -> ParsedDocument | None:
    """Unwrap ``{"data": [...]}`` style documents into their array.

    The result keeps the source segment of the wrapping object.
    """
    if document.format is not Format.SINGLE_VALUE:
        return None
    found = find_single_key_array(document.value)
    if found is None:
        return None
    key, array = found
    source = document.values[0]
    return ParsedDocument(
        format=Format.ARRAY,
        values=(ParsedValue(value=array, segment=source.segment),),
        metadata={**document.metadata, "extracted_key": key},
    )
