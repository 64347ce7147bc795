# src/json_shape/evaluator_output.py

import logging
from typing import Any

from .parsing.direct import load_json

logger = logging.getLogger(__name__)


def _is_container_text(text: str) -> bool:
    return (text.startswith("{") and text.endswith("}")) or (
        text.startswith("[") and text.endswith("]")
    )


def parse_evaluator_output(result: Any) -> Any:
    """Turn evaluator result text back into JSON values where possible.

    - One object or array: parsed
    - Otherwise object/array lines (jq's default output): all must
      parse; one line gives its value, more give a list
    - Anything else, including non-strings: returned unchanged
    """
    if not isinstance(result, str):
        return result

    trimmed = result.strip()
    if _is_container_text(trimmed):
        try:
            return load_json(trimmed)
        except (ValueError, RecursionError):
            logger.debug("Evaluator output is not one document, trying lines")

    if "\n" not in trimmed or not ("{" in trimmed or "[" in trimmed):
        return result

    parsed = []
    for line in trimmed.split("\n"):
        line = line.strip()
        if not line:
            continue
        if not _is_container_text(line):
            return result
        try:
            parsed.append(load_json(line))
        except (ValueError, RecursionError):
            return result

    if not parsed:
        return result
    return parsed[0] if len(parsed) == 1 else parsed
