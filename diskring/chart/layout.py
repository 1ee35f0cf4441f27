"""Sunburst layout: turn a snapshot tree into concentric ring segments."""

import math
from dataclasses import dataclass

from diskring.snapshot.models import Entry

FULL_CIRCLE = 2 * math.pi

# Narrower wedges (radians) are not laid out at all.
MIN_SWEEP = 0.01


@dataclass(frozen=True)
class Segment:
    """One annular wedge of the chart."""

    entry: Entry
    is_directory: bool
    inner_radius: float
    outer_radius: float
    start_angle: float
    sweep_angle: float

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle


def layout_sunburst(
    root: Entry,
    outer_radius: float,
    inner_radius: float,
    ring_thickness: float,
    start_angle: float = 0.0,
    end_angle: float = FULL_CIRCLE,
    min_sweep: float = MIN_SWEEP,
) -> list[Segment]:
    """Lay out ``root``'s descendants as rings around the center.

    The root's children occupy the band ``[inner_radius, outer_radius]``;
    every further level moves out by ``ring_thickness``. Each child gets a
    share of its parent's arc proportional to its size, in child order.

    Children whose share is below ``min_sweep`` are left out together with
    their descendants, but still take up their arc so later siblings keep
    their positions.

    Args:
        root: Entry at the center of the chart.
        outer_radius: Outer radius of the first ring.
        inner_radius: Inner radius of the first ring.
        ring_thickness: Radial step between nested rings.
        start_angle: Start of the arc shared by the root's children.
        end_angle: End of that arc.
        min_sweep: Smallest sweep (radians) that is laid out.

    Returns:
        Flat list of segments, parents before their children.
    """
    segments, _ = _layout_ring(
        root, outer_radius, inner_radius, ring_thickness, start_angle, end_angle, min_sweep
    )
    return segments


def _layout_ring(
    parent: Entry,
    outer_radius: float,
    inner_radius: float,
    ring_thickness: float,
    start_angle: float,
    end_angle: float,
    min_sweep: float,
) -> tuple[list[Segment], float]:
    segments: list[Segment] = []
    position = start_angle

    if parent.size_bytes <= 0:
        return segments, position

    for child in parent.children:
        sweep = child.size_bytes / parent.size_bytes * (end_angle - start_angle)

        if sweep >= min_sweep:
            segments.append(
                Segment(
                    entry=child,
                    is_directory=child.is_directory,
                    inner_radius=inner_radius,
                    outer_radius=outer_radius,
                    start_angle=position,
                    sweep_angle=sweep,
                )
            )
            if child.children:
                nested, _ = _layout_ring(
                    child,
                    outer_radius + ring_thickness,
                    inner_radius + ring_thickness,
                    ring_thickness,
                    position,
                    position + sweep,
                    min_sweep,
                )
                segments.extend(nested)

        position += sweep

    return segments, position


def ring_depth(segment: Segment, inner_radius: float, ring_thickness: float) -> int:
    """Ring index of ``segment``; 0 is the ring adjacent to the center."""
    return round((segment.inner_radius - inner_radius) / ring_thickness)
