from .scanner import ScanMode, SegmentScanner, scan_segments

__all__ = [
    "ScanMode",
    "SegmentScanner",
    "scan_segments",
]
