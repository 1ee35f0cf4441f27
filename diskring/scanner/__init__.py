"""Scanner module for filesystem traversal."""

from .filesystem import CancelToken, ScanOutcome, canonical_path, scan_directory
from .progress import ScanReporter, ScanStats, format_bytes, format_duration

__all__ = [
    "scan_directory",
    "canonical_path",
    "CancelToken",
    "ScanOutcome",
    "ScanReporter",
    "format_bytes",
    "format_duration",
    "ScanStats",
]
