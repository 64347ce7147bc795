# Classification
from .orchestrator import classify, try_classify

# Configuration
from .config import (
    MIN_JSON_LINES,
    MIN_JSON_LINES_RATIO,
    MIN_MULTI_OBJECT_SEGMENTS,
    DetectionConfig,
)

# Errors
from .errors import ClassificationExhausted

# Models
from .models import (
    Format,
    ParsedDocument,
    ParsedValue,
    ParseFailure,
    RawInput,
    Segment,
)

# Normalization and views
from .normalizer import extract_single_key_array, find_single_key_array

# Boundary
from .evaluator_output import parse_evaluator_output
from .payloads import DocumentPayload, FailurePayload, to_payload

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    # Classification
    "classify",
    "try_classify",
    # Configuration
    "MIN_JSON_LINES",
    "MIN_JSON_LINES_RATIO",
    "MIN_MULTI_OBJECT_SEGMENTS",
    "DetectionConfig",
    # Errors
    "ClassificationExhausted",
    # Models
    "Format",
    "ParsedDocument",
    "ParsedValue",
    "ParseFailure",
    "RawInput",
    "Segment",
    # Normalization and views
    "extract_single_key_array",
    "find_single_key_array",
    # Boundary
    "parse_evaluator_output",
    "DocumentPayload",
    "FailurePayload",
    "to_payload",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
]
