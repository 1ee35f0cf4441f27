"""Configuration module for diskring."""

from dataclasses import dataclass, field

from diskring.chart.layout import MIN_SWEEP
from diskring.snapshot.materializer import MAX_CHILDREN, MAX_DEPTH


@dataclass
class ConsoleConfig:
    show_progress: bool = True


@dataclass
class WorkerConfig:
    notify_interval: int = 300
    max_children: int = MAX_CHILDREN
    max_depth: int = MAX_DEPTH


@dataclass
class ChartConfig:
    center_radius: float = 40.0
    inner_radius: float = 40.0
    outer_radius: float = 60.0
    ring_thickness: float = 20.0
    min_sweep: float = MIN_SWEEP


@dataclass
class Config:
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    worker: WorkerConfig = field(default_factory=WorkerConfig)
    chart: ChartConfig = field(default_factory=ChartConfig)
