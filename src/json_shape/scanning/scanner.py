# src/json_shape/scanning/scanner.py

from collections.abc import Iterator
from enum import Enum

from json_shape.models import Segment

OPENERS = "{["
CLOSERS = "}]"


class ScanMode(Enum):
    NORMAL = "normal"
    IN_STRING = "in_string"
    IN_STRING_ESCAPE = "in_string_escape"


class SegmentScanner:
    """
    Splits text into brace/bracket-balanced segments.
    - A segment closes when nesting depth returns to zero
    - A segment starts at the first non-whitespace character after the
      previous one, so stray text is carried into the next segment
    - Whitespace between segments is dropped
    - Text left open at the end becomes a final unbalanced segment

    With ``quote_aware=False`` depth is counted purely lexically and
    braces inside string literals shift the boundaries.

    Iterating again rescans from the start.
    """

    def __init__(self, text: str, *, quote_aware: bool = True) -> None:
        self.text = text
        self.quote_aware = quote_aware

    def __iter__(self) -> Iterator[Segment]:
        text = self.text
        depth = 0
        start: int | None = None
        mode = ScanMode.NORMAL

        for i, ch in enumerate(text):
            if start is None:
                if ch.isspace():
                    continue
                start = i

            if mode is ScanMode.IN_STRING_ESCAPE:
                mode = ScanMode.IN_STRING
                continue
            if mode is ScanMode.IN_STRING:
                if ch == "\\":
                    mode = ScanMode.IN_STRING_ESCAPE
                elif ch == '"':
                    mode = ScanMode.NORMAL
                continue

            if ch == '"' and self.quote_aware:
                mode = ScanMode.IN_STRING
            elif ch in OPENERS:
                depth += 1
            elif ch in CLOSERS and depth > 0:
                depth -= 1
                if depth == 0:
                    yield Segment(start=start, end=i + 1, text=text[start : i + 1])
                    start = None

        if start is not None:
            tail = text[start:].rstrip()
            yield Segment(
                start=start, end=start + len(tail), text=tail, balanced=False
            )


def scan_segments(text: str, *, quote_aware: bool = True) -> Iterator[Segment]:
    return iter(SegmentScanner(text, quote_aware=quote_aware))
