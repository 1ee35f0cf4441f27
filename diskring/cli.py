"""CLI interface for diskring."""

import logging
import math
import os
import sys
from pathlib import Path

import click

from diskring.chart import HoverKind, NavigationStack, hit_test, layout_sunburst, ring_depth
from diskring.config import Config, WorkerConfig
from diskring.scanner import ScanReporter, ScanStats, canonical_path, format_bytes
from diskring.snapshot import Entry
from diskring.worker import ScanFailed, ScanFinished, ScanProgress, ScanWorker


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.group()
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config"] = Config()


@cli.command()
@click.argument("source_path", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--max-children", type=click.IntRange(min=1), default=None, help="Children kept per directory")
@click.option("--max-depth", type=click.IntRange(min=0), default=None, help="Levels kept below the root")
@click.option("--notify-interval", type=click.IntRange(min=1), default=None, help="Snapshot every N directories")
@click.option("--progress/--no-progress", default=True, help="Print a status line per published snapshot")
@click.option("--show-depth", type=click.IntRange(min=1), default=2, help="Levels of the tree to print")
@click.pass_context
def scan(
    ctx: click.Context,
    source_path: Path,
    max_children: int | None,
    max_depth: int | None,
    notify_interval: int | None,
    progress: bool,
    show_depth: int,
) -> None:
    """Scan SOURCE_PATH and print the largest entries."""
    config: Config = ctx.obj["config"]
    _apply_worker_options(config.worker, max_children, max_depth, notify_interval)
    config.console.show_progress = progress

    result = _run_scan(source_path, config)
    if isinstance(result, ScanFailed):
        click.echo(result.message, err=True)
        sys.exit(1)

    snapshot = result.snapshot
    click.echo(f"\n{snapshot.path}  {format_bytes(snapshot.size_bytes)}")
    _print_tree(snapshot, show_depth)
    ScanReporter(config.console.show_progress).finished(result.stats, result.completed)


@cli.command()
@click.argument("source_path", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option(
    "--expand",
    "expand_paths",
    multiple=True,
    type=click.Path(path_type=Path),
    help="Drill into this directory before laying out (repeatable, outermost first)",
)
@click.option("--cursor", type=(float, float), default=None, help="Report what lies under X Y (center is 0 0)")
@click.option("--max-children", type=click.IntRange(min=1), default=None, help="Children kept per directory")
@click.option("--max-depth", type=click.IntRange(min=0), default=None, help="Levels kept below the root")
@click.pass_context
def rings(
    ctx: click.Context,
    source_path: Path,
    expand_paths: tuple[Path, ...],
    cursor: tuple[float, float] | None,
    max_children: int | None,
    max_depth: int | None,
) -> None:
    """Scan SOURCE_PATH and print the sunburst segments."""
    config: Config = ctx.obj["config"]
    _apply_worker_options(config.worker, max_children, max_depth, None)
    chart = config.chart

    result = _run_scan(source_path, config)
    if isinstance(result, ScanFailed):
        click.echo(result.message, err=True)
        sys.exit(1)

    navigation = NavigationStack()
    for expand_path in expand_paths:
        current = navigation.current_root(result.snapshot)
        target = canonical_path(Path(result.snapshot.path) / expand_path)
        entry = current.find(target)
        if entry is None or not entry.is_directory:
            click.echo(f"Error: {expand_path} is not a directory shown under {current.path}", err=True)
            sys.exit(1)
        navigation.expand(entry)

    root = navigation.current_root(result.snapshot)
    segments = layout_sunburst(
        root,
        chart.outer_radius,
        chart.inner_radius,
        chart.ring_thickness,
        min_sweep=chart.min_sweep,
    )

    click.echo(f"\n{root.path}  {format_bytes(root.size_bytes)}")
    click.echo("Ring".rjust(4) + "Start".rjust(10) + "Sweep".rjust(10) + "Size".rjust(12) + "  Path")
    click.echo("-" * 80)
    for segment in segments:
        depth = ring_depth(segment, chart.inner_radius, chart.ring_thickness)
        click.echo(
            f"{depth:>4} "
            f"{math.degrees(segment.start_angle):>9.2f} "
            f"{math.degrees(segment.sweep_angle):>9.2f} "
            f"{format_bytes(segment.entry.size_bytes):>11}  "
            f"{_relative(segment.entry, root)}"
        )

    if cursor is not None:
        hover = hit_test(cursor, (0.0, 0.0), chart.center_radius, segments)
        if hover.kind is HoverKind.CENTER:
            click.echo(f"\nHover: center ({root.path})")
        elif hover.segment is not None:
            click.echo(f"\nHover: {_relative(hover.segment.entry, root)}")
        else:
            click.echo("\nHover: nothing")


def _apply_worker_options(
    worker: WorkerConfig,
    max_children: int | None,
    max_depth: int | None,
    notify_interval: int | None,
) -> None:
    if max_children is not None:
        worker.max_children = max_children
    if max_depth is not None:
        worker.max_depth = max_depth
    if notify_interval is not None:
        worker.notify_interval = notify_interval


def _run_scan(source_path: Path, config: Config) -> ScanFinished | ScanFailed:
    worker = ScanWorker(config=config.worker)
    reporter = ScanReporter(config.console.show_progress)
    stats = ScanStats()

    handle = worker.start(source_path)
    reporter.started(handle.root)

    try:
        while True:
            message = worker.channel.receive(timeout=0.1)
            if isinstance(message, ScanProgress):
                stats = message.stats
                reporter.progress(stats, message.scanning_path)
            elif isinstance(message, (ScanFinished, ScanFailed)):
                return message
    except KeyboardInterrupt:
        worker.cancel()
        reporter.interrupted(stats)
        sys.exit(130)


def _print_tree(entry: Entry, show_depth: int, depth: int = 0) -> None:
    for child in entry.children:
        name = child.name + os.sep if child.is_directory else child.name
        click.echo(f"{format_bytes(child.size_bytes):>12}  {'  ' * depth}{name}")
        if depth + 1 < show_depth:
            _print_tree(child, show_depth, depth + 1)


def _relative(entry: Entry, root: Entry) -> str:
    return os.path.relpath(entry.path, root.path)


def main() -> None:
    """Entry point for the CLI."""
    cli(standalone_mode=True)  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
