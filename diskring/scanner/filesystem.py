"""Filesystem traversal that reports the size of every entry under a root."""

import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from typing import NamedTuple

from diskring.errors import ScanError

logger = logging.getLogger(__name__)

# (parent_path, entry_path, is_directory, size_bytes) -> keep going?
EntryCallback = Callable[[str, str, bool, int], bool]


class ScanOutcome(NamedTuple):
    total_bytes: int
    completed: bool


class CancelToken:
    """Cooperative cancellation flag shared between a scan and its owner."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


def canonical_path(path: str | Path) -> str:
    return os.path.abspath(os.fspath(path))


def scan_directory(
    root: str | Path,
    on_entry: EntryCallback,
    cancel: CancelToken | None = None,
) -> ScanOutcome:
    """Walk ``root`` depth-first and report every entry to ``on_entry``.

    A directory is reported after all of its descendants, with the sum of
    their sizes. The walk stops as soon as ``cancel`` is set or ``on_entry``
    returns False; the returned total then covers only the accepted entries.

    Raises:
        ScanError: If a directory cannot be listed or an entry cannot be
            stat'ed. The scan is not resumed after an error.
    """
    root_path = canonical_path(root)
    logger.debug("Scanning %s", root_path)
    return _scan_recursive(root_path, on_entry, cancel)


def _scan_recursive(
    directory: str,
    on_entry: EntryCallback,
    cancel: CancelToken | None,
) -> ScanOutcome:
    total = 0

    for entry in _list_entries(directory):
        if cancel is not None and cancel.cancelled:
            return ScanOutcome(total, False)

        is_directory = _is_directory(entry)
        if is_directory:
            subtree = _scan_recursive(entry.path, on_entry, cancel)
            if not subtree.completed:
                return ScanOutcome(total + subtree.total_bytes, False)
            size = subtree.total_bytes
        else:
            size = _entry_size(entry)

        if not on_entry(directory, entry.path, is_directory, size):
            if is_directory:
                # Every descendant event was already accepted.
                total += size
            return ScanOutcome(total, False)
        total += size

    return ScanOutcome(total, True)


def _list_entries(directory: str) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda e: e.name)
    except OSError as e:
        raise ScanError(directory, e) from e


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError as e:
        raise ScanError(entry.path, e) from e


def _entry_size(entry: os.DirEntry) -> int:
    try:
        return entry.stat(follow_symlinks=False).st_size
    except OSError as e:
        raise ScanError(entry.path, e) from e
