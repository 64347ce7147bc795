# src/json_shape/models.py

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

LARGE_ARRAY_THRESHOLD = 10
VERY_LARGE_ARRAY_THRESHOLD = 100


class Format(str, Enum):
    """Shape the input text was classified as."""

    SINGLE_VALUE = "single_value"
    ARRAY = "array"
    JSON_LINES = "json_lines"
    MULTI_OBJECT = "multi_object"

    @property
    def is_multi_value(self) -> bool:
        return self in (Format.JSON_LINES, Format.MULTI_OBJECT)


@dataclass(frozen=True)
class RawInput:
    """The text handed to the classifier. Never mutated."""

    text: str

    def __len__(self) -> int:
        return len(self.text)

    @property
    def leading_whitespace(self) -> int:
        return len(self.text) - len(self.text.lstrip())

    @property
    def trimmed(self) -> str:
        return self.text.strip()

    def position(self, offset: int) -> tuple[int, int]:
        """1-based (line, column) of a character offset, as ``json`` reports them."""
        line = self.text.count("\n", 0, offset) + 1
        column = offset - self.text.rfind("\n", 0, offset)
        return line, column


@dataclass(frozen=True)
class Segment:
    """Contiguous slice ``text[start:end]`` of a RawInput."""

    start: int
    end: int
    text: str
    balanced: bool = True

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"invalid segment bounds: {self.start}..{self.end}")


@dataclass(frozen=True)
class ParsedValue:
    value: Any = field(hash=False)  # JSON containers are unhashable
    segment: Segment


@dataclass(frozen=True)
class ParseFailure:
    """Diagnostic of the direct parse attempt.

    ``offset``, ``line`` and ``column`` are in RawInput coordinates and are
    ``None`` when the parser could not point at a character.
    """

    message: str
    offset: int | None = None
    line: int | None = None
    column: int | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ParsedDocument:
    """Normalized engine output: a format tag plus values in textual order."""

    format: Format
    values: tuple[ParsedValue, ...]
    metadata: dict = field(default_factory=dict, hash=False)

    @property
    def value(self) -> Any:
        """The value an evaluator should receive as a single input.

        Multi-value documents are presented as an array of their values.
        """
        if self.format.is_multi_value:
            return [v.value for v in self.values]
        return self.values[0].value

    def items(self) -> list[Any]:
        return [v.value for v in self.values]

    def segments(self) -> list[Segment]:
        return [v.segment for v in self.values]

    def to_json_text(self, indent: int | None = 2) -> str:
        return json.dumps(self.value, indent=indent, ensure_ascii=False)

    @property
    def row_count(self) -> int:
        value = self.value
        if isinstance(value, list):
            return len(value)
        return 1

    def row(self, index: int, indent: int | None = 2) -> str:
        """Pretty-printed item at ``index``, clamped into range.

        Non-array documents have a single row: the value itself.
        """
        value = self.value
        if not isinstance(value, list) or not value:
            return json.dumps(value, indent=indent, ensure_ascii=False)
        safe_index = max(0, min(index, len(value) - 1))
        return json.dumps(value[safe_index], indent=indent, ensure_ascii=False)

    @property
    def is_large(self) -> bool:
        return isinstance(self.value, list) and self.row_count > LARGE_ARRAY_THRESHOLD

    def size_warning(self) -> str | None:
        if not isinstance(self.value, list):
            return None
        if self.row_count <= VERY_LARGE_ARRAY_THRESHOLD:
            return None
        return (
            f"Warning: This array contains {self.row_count:,} items. "
            "Consider using Row Mode for better performance."
        )


@dataclass(frozen=True)
class Detection:
    """A stage's local result before normalization."""

    format: Format
    values: list[ParsedValue]
    details: dict = field(default_factory=dict)
