"""Consumer-side chart state driven by typed commands and worker messages.

A renderer owns one ``ChartSession`` on its event thread. It forwards user
input as commands through ``handle`` and calls ``pump`` regularly to take in
worker messages; afterwards ``segments``, ``hover``, ``displayed_root`` and the
status fields describe what to draw.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from diskring.chart.hit_test import Hover, HoverKind, Point, hit_test
from diskring.chart.layout import Segment, layout_sunburst
from diskring.chart.navigation import NavigationStack
from diskring.config import Config
from diskring.scanner.filesystem import canonical_path
from diskring.snapshot.models import Entry
from diskring.worker.messages import ScanFailed, ScanFinished, ScanMessage, ScanProgress
from diskring.worker.worker import ScanWorker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestScan:
    path: str | Path


@dataclass(frozen=True)
class RequestRefresh:
    pass


@dataclass(frozen=True)
class RequestCancel:
    pass


@dataclass(frozen=True)
class CursorMoved:
    x: float
    y: float


@dataclass(frozen=True)
class ExpandHovered:
    pass


@dataclass(frozen=True)
class CollapseToParent:
    pass


Command = RequestScan | RequestRefresh | RequestCancel | CursorMoved | ExpandHovered | CollapseToParent


class ChartSession:
    """Chart state for one window: current scan, navigation, segments and hover."""

    def __init__(
        self,
        worker: ScanWorker | None = None,
        config: Config | None = None,
        center: Point = (0.0, 0.0),
    ) -> None:
        self.config = config or Config()
        self.worker = worker or ScanWorker(config=self.config.worker)
        self.center = center
        self.navigation = NavigationStack()

        self.root_path: str | None = None
        self.snapshot: Entry | None = None
        self.segments: list[Segment] = []
        self.cursor: Point = center
        self.hover = Hover.nothing()
        self.scanning_path: str | None = None
        self.error: str | None = None
        self.scanning = False
        self.completed = False
        # Navigation is accepted only once a scan has ended.
        self.interactive = False

    @property
    def displayed_root(self) -> Entry | None:
        if self.snapshot is None:
            return None
        return self.navigation.current_root(self.snapshot)

    @property
    def hovered_entry(self) -> Entry | None:
        if self.hover.kind is HoverKind.CENTER:
            return self.displayed_root
        if self.hover.segment is not None:
            return self.hover.segment.entry
        return None

    def handle(self, command: Command) -> None:
        if isinstance(command, RequestScan):
            self._start_scan(canonical_path(command.path), keep_snapshot=False)
        elif isinstance(command, RequestRefresh):
            if self.root_path is not None:
                self._start_scan(self.root_path, keep_snapshot=True)
        elif isinstance(command, RequestCancel):
            self.worker.cancel()
        elif isinstance(command, CursorMoved):
            self.cursor = (command.x, command.y)
            self._update_hover()
        elif isinstance(command, ExpandHovered):
            self._expand_hovered()
        elif isinstance(command, CollapseToParent):
            self._collapse()
        else:
            raise TypeError(f"Unknown command: {command!r}")

    def pump(self) -> int:
        """Apply every pending worker message. Returns how many were applied."""
        messages = self.worker.channel.drain()
        for message in messages:
            self._apply(message)
        return len(messages)

    def close(self) -> None:
        self.worker.cancel()

    def _start_scan(self, root_path: str, keep_snapshot: bool) -> None:
        """Start a scan. A refresh keeps the old chart up until new data arrives."""
        logger.info("Scanning %s", root_path)
        self.navigation.clear()
        if keep_snapshot:
            self._refresh_segments()
        else:
            self.snapshot = None
            self.segments = []
            self.hover = Hover.nothing()
        self.error = None
        self.completed = False
        self.interactive = False
        self.root_path = root_path
        self.scanning_path = root_path
        self.scanning = True
        self.worker.start(root_path)

    def _apply(self, message: ScanMessage) -> None:
        if isinstance(message, ScanProgress):
            self.snapshot = message.snapshot
            self.scanning_path = message.scanning_path
            self._refresh_segments()
        elif isinstance(message, ScanFinished):
            self.snapshot = message.snapshot
            self.scanning_path = None
            self.scanning = False
            self.completed = message.completed
            self.interactive = True
            self._refresh_segments()
        elif isinstance(message, ScanFailed):
            self.error = message.message
            self.scanning_path = None
            self.scanning = False
            self.interactive = self.snapshot is not None
            logger.warning("Scan failed: %s", message.message)

    def _refresh_segments(self) -> None:
        root = self.displayed_root
        if root is None:
            self.segments = []
        else:
            chart = self.config.chart
            self.segments = layout_sunburst(
                root,
                chart.outer_radius,
                chart.inner_radius,
                chart.ring_thickness,
                min_sweep=chart.min_sweep,
            )
        self._update_hover()

    def _update_hover(self) -> None:
        self.hover = hit_test(self.cursor, self.center, self.config.chart.center_radius, self.segments)

    def _expand_hovered(self) -> None:
        if not self.interactive or self.hover.segment is None:
            return
        entry = self.hover.segment.entry
        if not entry.is_directory:
            return
        self.navigation.expand(entry)
        self._refresh_segments()

    def _collapse(self) -> None:
        if not self.interactive or self.hover.kind is not HoverKind.CENTER:
            return
        if self.navigation.collapse() is not None:
            self._refresh_segments()
