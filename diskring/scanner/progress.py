"""Scan counters and the console lines the CLI prints from them."""

import time
from dataclasses import dataclass, field

import click

_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")


@dataclass
class ScanStats:
    """Counters a scan job keeps while folding scanner events."""

    files_scanned: int = 0
    directories_scanned: int = 0
    total_bytes: int = 0
    started_at: float = field(default_factory=time.monotonic)

    @property
    def elapsed_seconds(self) -> float:
        return time.monotonic() - self.started_at


class ScanReporter:
    """Status lines for a scan watched from the console.

    Progress goes to stderr once per snapshot the worker publishes, so its
    pace follows the worker's notify interval. The summary goes to stdout.
    """

    def __init__(self, show_progress: bool = True) -> None:
        self.show_progress = show_progress

    def started(self, root: str) -> None:
        if self.show_progress:
            click.echo(f"Scanning {root}", err=True)

    def progress(self, stats: ScanStats, scanning_path: str) -> None:
        if not self.show_progress:
            return
        click.echo(
            f"[{stats.directories_scanned:,} dirs, {stats.files_scanned:,} files, "
            f"{format_bytes(stats.total_bytes)}] Scanning: {scanning_path}",
            err=True,
        )

    def finished(self, stats: ScanStats, completed: bool) -> None:
        headline = "Scan complete" if completed else "Scan canceled, results are partial"
        click.echo(
            f"\n{headline}: {stats.files_scanned:,} files in "
            f"{stats.directories_scanned:,} directories ({format_duration(stats.elapsed_seconds)})"
        )
        click.echo(f"Total size: {format_bytes(stats.total_bytes)}")

    def interrupted(self, stats: ScanStats) -> None:
        click.echo(
            f"\nInterrupted after {stats.files_scanned:,} files "
            f"({format_bytes(stats.total_bytes)}). Results are partial.",
            err=True,
        )


def format_duration(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    if hours:
        return f"{hours}h {minutes:02d}m"
    return f"{minutes}m {secs:02d}s"


def format_bytes(size: int) -> str:
    """Binary multiples: ``format_bytes(4_000_000) == "3.81 MB"``."""
    if size < 1024:
        return f"{size} B"
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{value:.2f} {_UNITS[unit]}"
