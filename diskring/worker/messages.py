"""Messages published by the scan worker and the channel that carries them."""

import logging
import queue
import threading
import time
from dataclasses import dataclass

from diskring.scanner.progress import ScanStats
from diskring.snapshot.models import Entry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScanProgress:
    """Intermediate snapshot taken while the scan is still running."""

    generation: int
    snapshot: Entry
    scanning_path: str
    stats: ScanStats


@dataclass(frozen=True)
class ScanFinished:
    """Final snapshot. ``completed`` is False when the scan was canceled."""

    generation: int
    snapshot: Entry
    completed: bool
    stats: ScanStats


@dataclass(frozen=True)
class ScanFailed:
    """The scan aborted on an I/O error."""

    generation: int
    message: str


ScanMessage = ScanProgress | ScanFinished | ScanFailed


class ScanChannel:
    """Delivers worker messages to a single consumer thread.

    Sends never block the scan thread. At most one progress message is in
    flight at a time; further progress is dropped until the consumer takes
    it. Finished and failed messages are always queued. Messages from any
    generation other than the current one are discarded on receipt.
    """

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[ScanMessage] = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._generation = 0
        self._progress_pending = False

    @property
    def generation(self) -> int:
        return self._generation

    def begin(self) -> int:
        """Start a new generation and return its id."""
        with self._lock:
            self._generation += 1
            self._progress_pending = False
            return self._generation

    def offer_progress(self, message: ScanProgress) -> bool:
        with self._lock:
            if self._progress_pending:
                logger.debug("Dropping progress for %s", message.scanning_path)
                return False
            self._progress_pending = True
        self._queue.put(message)
        return True

    def send(self, message: ScanFinished | ScanFailed) -> None:
        self._queue.put(message)

    def receive(self, timeout: float | None = None) -> ScanMessage | None:
        """Return the next current-generation message, or None on timeout.

        ``timeout=None`` polls without waiting. Discarded stale messages count
        against the same timeout.
        """
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            try:
                if deadline is None:
                    message = self._queue.get_nowait()
                else:
                    message = self._queue.get(timeout=max(deadline - time.monotonic(), 0.0))
            except queue.Empty:
                return None

            with self._lock:
                if message.generation != self._generation:
                    logger.debug("Discarding stale %s from scan %d", type(message).__name__, message.generation)
                    continue
                if isinstance(message, ScanProgress):
                    self._progress_pending = False
            return message

    def drain(self) -> list[ScanMessage]:
        messages = []
        while (message := self.receive()) is not None:
            messages.append(message)
        return messages
