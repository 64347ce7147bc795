# src/json_shape/config.py

from dataclasses import dataclass

# Classification contract. Changing any of these changes outcomes.
MIN_JSON_LINES = 2
MIN_JSON_LINES_RATIO = 0.7
MIN_MULTI_OBJECT_SEGMENTS = 2


@dataclass(frozen=True)
class DetectionConfig:
    """Knobs for the classifier.

    Immutable. Explicit. No magic defaults from environment.
    """

    quote_aware: bool = True  # False = count braces inside strings too
    strict_lines: bool = False  # JSON Lines: every non-blank line must parse
    line_must_be_object: bool = True
    sample_lines: int | None = None  # threshold over the first N lines only
    allow_nan: bool = False

    def __post_init__(self) -> None:
        if self.sample_lines is not None and self.sample_lines < MIN_JSON_LINES:
            raise ValueError(f"sample_lines must be >= {MIN_JSON_LINES}")


DEFAULT_CONFIG = DetectionConfig()
