from .direct import is_valid_json, load_json, parse_direct

__all__ = [
    "is_valid_json",
    "load_json",
    "parse_direct",
]
