"""Per-directory child listing accumulated from scan events."""

from collections.abc import Sequence
from typing import NamedTuple


class CachedChild(NamedTuple):
    path: str
    size_bytes: int
    is_directory: bool


class ScanCache:
    """Maps a directory path to its children in discovery order.

    Owned by a single scan thread. Nothing is ever removed; a new scan gets a
    new cache.
    """

    def __init__(self) -> None:
        self._children: dict[str, list[CachedChild]] = {}
        self._entry_count = 0

    def record(self, parent_path: str, path: str, size_bytes: int, is_directory: bool) -> None:
        self._children.setdefault(parent_path, []).append(
            CachedChild(path, size_bytes, is_directory)
        )
        self._entry_count += 1

    def children(self, path: str) -> Sequence[CachedChild]:
        return self._children.get(path, ())

    @property
    def entry_count(self) -> int:
        return self._entry_count

    def __contains__(self, path: object) -> bool:
        return path in self._children

    def __len__(self) -> int:
        return len(self._children)
