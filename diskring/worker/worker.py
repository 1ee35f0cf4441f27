"""Background scan worker that publishes snapshot trees."""

import dataclasses
import logging
import threading
import time
from pathlib import Path

from diskring.config import WorkerConfig
from diskring.errors import ScanError
from diskring.scanner.filesystem import CancelToken, canonical_path, scan_directory
from diskring.scanner.progress import ScanStats
from diskring.snapshot.cache import ScanCache
from diskring.snapshot.materializer import materialize
from diskring.snapshot.models import Entry
from diskring.worker.messages import ScanChannel, ScanFailed, ScanFinished, ScanProgress

logger = logging.getLogger(__name__)


class ScanJob:
    """One scan pass: folds scanner events into a cache and publishes snapshots.

    ``run`` is executed on the worker thread; everything here belongs to that
    thread except the snapshots it sends.
    """

    def __init__(
        self,
        root: str,
        generation: int,
        cancel: CancelToken,
        channel: ScanChannel,
        config: WorkerConfig,
    ) -> None:
        self.root = root
        self.generation = generation
        self.cancel = cancel
        self.channel = channel
        self.config = config
        self.cache = ScanCache()
        self.stats = ScanStats()

    def on_entry(self, parent_path: str, path: str, is_directory: bool, size_bytes: int) -> bool:
        if self.cancel.cancelled:
            return False

        self.cache.record(parent_path, path, size_bytes, is_directory)

        if is_directory:
            self.stats.directories_scanned += 1
            if self.stats.directories_scanned % self.config.notify_interval == 0:
                self._publish_progress(path)
        else:
            self.stats.files_scanned += 1
            self.stats.total_bytes += size_bytes

        return True

    def snapshot(self) -> Entry:
        return materialize(
            self.cache,
            self.root,
            max_children=self.config.max_children,
            max_depth=self.config.max_depth,
            root_size=self.stats.total_bytes,
        )

    def run(self) -> None:
        logger.info("Scan %d started: %s", self.generation, self.root)
        started = time.perf_counter()

        try:
            outcome = scan_directory(self.root, self.on_entry, self.cancel)
        except ScanError as e:
            logger.error("Scan of %s failed: %s", self.root, e)
            self.channel.send(ScanFailed(self.generation, f"Error: {e}"))
            return
        except Exception as e:
            logger.exception("Scan of %s crashed", self.root)
            self.channel.send(ScanFailed(self.generation, f"Unexpected error: {e}"))
            return

        logger.debug("Walk of %s took %.0f ms", self.root, (time.perf_counter() - started) * 1000)

        started = time.perf_counter()
        snapshot = self.snapshot()
        logger.debug("Final snapshot built in %.0f ms", (time.perf_counter() - started) * 1000)

        self.channel.send(
            ScanFinished(
                self.generation,
                snapshot,
                completed=outcome.completed,
                stats=dataclasses.replace(self.stats),
            )
        )
        logger.info(
            "Scan %d %s: %d files, %d bytes",
            self.generation,
            "finished" if outcome.completed else "canceled",
            self.stats.files_scanned,
            self.stats.total_bytes,
        )

    def _publish_progress(self, scanning_path: str) -> None:
        self.channel.offer_progress(
            ScanProgress(
                self.generation,
                self.snapshot(),
                scanning_path=scanning_path,
                stats=dataclasses.replace(self.stats),
            )
        )


class ScanHandle:
    """Handle to a running scan."""

    def __init__(self, root: str, generation: int, thread: threading.Thread, cancel: CancelToken):
        self.root = root
        self.generation = generation
        self._thread = thread
        self._cancel = cancel

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def cancel(self) -> None:
        """Stop the scan and block until its thread has exited."""
        self._cancel.cancel()
        self._thread.join()

    def wait(self, timeout: float | None = None) -> bool:
        """Join the scan thread without canceling. Returns True once it exited."""
        self._thread.join(timeout)
        return not self._thread.is_alive()


class ScanWorker:
    """Runs at most one scan at a time and publishes its results on a channel."""

    def __init__(self, channel: ScanChannel | None = None, config: WorkerConfig | None = None) -> None:
        self.channel = channel or ScanChannel()
        self.config = config or WorkerConfig()
        self._handle: ScanHandle | None = None

    @property
    def handle(self) -> ScanHandle | None:
        return self._handle

    def start(self, root: str | Path) -> ScanHandle:
        """Start scanning ``root``, canceling and joining any running scan first."""
        self.cancel()

        root_path = canonical_path(root)
        generation = self.channel.begin()
        token = CancelToken()
        job = ScanJob(root_path, generation, token, self.channel, self.config)

        thread = threading.Thread(target=job.run, name=f"diskring-scan-{generation}", daemon=True)
        self._handle = ScanHandle(root_path, generation, thread, token)
        thread.start()
        return self._handle

    def cancel(self) -> None:
        if self._handle is not None:
            logger.debug("Canceling scan %d", self._handle.generation)
            self._handle.cancel()
            self._handle = None
