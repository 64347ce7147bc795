# src/json_shape/observability/names.py

"""Standard metric names for json-shape observability.

Use these constants instead of hardcoded strings.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Classification Metrics
# ============================================================================

# Duration
CLASSIFY_DURATION = "classify_duration"

# Counters
CLASSIFY_REQUESTS_TOTAL = "classify_requests_total"
CLASSIFY_RESULTS_TOTAL = "classify_results_total"  # labelled by format
CLASSIFY_FAILURES_TOTAL = "classify_failures_total"

# Gauges
CLASSIFY_INPUT_CHARS = "classify_input_chars"
CLASSIFY_VALUES = "classify_values"


# ============================================================================
# Scanner Metrics
# ============================================================================

# Counters
SCANNER_SEGMENTS_CREATED = "scanner_segments_created"
