"""diskring - Disk usage scanner with a sunburst chart model."""

__version__ = "0.1.0"

from diskring.chart import NavigationStack, Segment, hit_test, layout_sunburst
from diskring.scanner import scan_directory
from diskring.session import ChartSession
from diskring.snapshot import Entry, materialize
from diskring.worker import ScanWorker

__all__ = [
    "ChartSession",
    "Entry",
    "NavigationStack",
    "ScanWorker",
    "Segment",
    "hit_test",
    "layout_sunburst",
    "materialize",
    "scan_directory",
]
