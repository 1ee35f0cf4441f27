"""Build a bounded snapshot tree from a scan cache."""

from diskring.snapshot.cache import CachedChild, ScanCache
from diskring.snapshot.models import Entry

MAX_CHILDREN = 20
MAX_DEPTH = 10


def materialize(
    cache: ScanCache,
    root_path: str,
    max_children: int = MAX_CHILDREN,
    max_depth: int = MAX_DEPTH,
    root_size: int | None = None,
) -> Entry:
    """Materialize the tree under ``root_path`` from the current cache state.

    Each directory keeps only its ``max_children`` largest children (ties keep
    discovery order) and nesting stops ``max_depth`` levels below the root.
    Paths the cache has not seen yet come out with no children.

    Args:
        cache: Cache filled by a running or finished scan.
        root_path: Canonical path of the scan root.
        max_children: Fan-out cap per directory.
        max_depth: Deepest level (root's children are level 1) to include.
        root_size: Size to report for the root. Defaults to the sum of the
            root's cached children.

    Returns:
        The root entry. Nothing in the returned tree references the cache.
    """
    if root_size is None:
        root_size = sum(child.size_bytes for child in cache.children(root_path))

    children = _collect(cache, root_path, max_children, max_depth, depth=1)
    return Entry(path=root_path, size_bytes=root_size, is_directory=True, children=children)


def _collect(
    cache: ScanCache,
    path: str,
    max_children: int,
    max_depth: int,
    depth: int,
) -> tuple[Entry, ...]:
    if depth > max_depth:
        return ()

    cached = [child for child in cache.children(path) if child.path != path]
    ranked = sorted(cached, key=lambda c: c.size_bytes, reverse=True)[:max_children]

    return tuple(_build_entry(cache, child, max_children, max_depth, depth) for child in ranked)


def _build_entry(
    cache: ScanCache,
    child: CachedChild,
    max_children: int,
    max_depth: int,
    depth: int,
) -> Entry:
    children: tuple[Entry, ...] = ()
    if child.is_directory:
        children = _collect(cache, child.path, max_children, max_depth, depth + 1)

    return Entry(
        path=child.path,
        size_bytes=child.size_bytes,
        is_directory=child.is_directory,
        children=children,
    )
