"""Background scanning and snapshot publication."""

from .messages import ScanChannel, ScanFailed, ScanFinished, ScanMessage, ScanProgress
from .worker import ScanHandle, ScanJob, ScanWorker

__all__ = [
    "ScanWorker",
    "ScanHandle",
    "ScanJob",
    "ScanChannel",
    "ScanMessage",
    "ScanProgress",
    "ScanFinished",
    "ScanFailed",
]
