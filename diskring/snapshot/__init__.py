"""Snapshot trees materialized from scan caches."""

from .cache import CachedChild, ScanCache
from .materializer import MAX_CHILDREN, MAX_DEPTH, materialize
from .models import Entry

__all__ = [
    "Entry",
    "ScanCache",
    "CachedChild",
    "materialize",
    "MAX_CHILDREN",
    "MAX_DEPTH",
]
