"""Chart geometry: sunburst layout, hit testing and navigation."""

from .hit_test import Hover, HoverKind, Point, hit_test
from .layout import FULL_CIRCLE, MIN_SWEEP, Segment, layout_sunburst, ring_depth
from .navigation import NavigationStack

__all__ = [
    "Segment",
    "layout_sunburst",
    "ring_depth",
    "FULL_CIRCLE",
    "MIN_SWEEP",
    "Hover",
    "HoverKind",
    "Point",
    "hit_test",
    "NavigationStack",
]
