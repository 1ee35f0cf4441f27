"""Drill-down history over a snapshot tree."""

from collections import deque
from collections.abc import Iterator

from diskring.snapshot.models import Entry


class NavigationStack:
    """Entries the user expanded into; the front is the displayed root."""

    def __init__(self) -> None:
        self._entries: deque[Entry] = deque()

    def expand(self, entry: Entry) -> None:
        self._entries.appendleft(entry)

    def collapse(self) -> Entry | None:
        if not self._entries:
            return None
        return self._entries.popleft()

    def current_root(self, scan_root: Entry) -> Entry:
        if self._entries:
            return self._entries[0]
        return scan_root

    def clear(self) -> None:
        self._entries.clear()

    @property
    def depth(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)
