from .json_lines import detect_json_lines, iter_lines, required_valid_lines
from .multi_object import detect_multi_object, is_object_shaped

__all__ = [
    "detect_json_lines",
    "detect_multi_object",
    "is_object_shaped",
    "iter_lines",
    "required_valid_lines",
]
