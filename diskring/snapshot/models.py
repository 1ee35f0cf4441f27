"""Immutable snapshot tree produced from a scan."""

import os
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Entry:
    """A file or directory in a materialized snapshot.

    For directories ``size_bytes`` is the aggregate of every descendant,
    including ones that were cut from ``children`` by the fan-out cap, so it
    can exceed the sum of the listed children.
    """

    path: str
    size_bytes: int
    is_directory: bool = False
    children: tuple["Entry", ...] = ()

    @property
    def name(self) -> str:
        return os.path.basename(self.path) or self.path

    def iter_all(self) -> Iterator["Entry"]:
        """Yield this entry and all of its descendants, depth-first."""
        yield self
        for child in self.children:
            yield from child.iter_all()

    def find(self, path: str) -> "Entry | None":
        if self.path == path:
            return self
        for child in self.children:
            if path == child.path or path.startswith(child.path + os.sep):
                return child.find(path)
        return None
