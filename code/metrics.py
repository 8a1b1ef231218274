"""Helpers for collecting instrumentation data during dungeon generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class StepMetrics:
    """Aggregated metrics for a single pipeline step across invocations."""

    name: str
    invocations: int = 0
    total_time: float = 0.0
    total_cells_carved: int = 0
    total_regions_added: int = 0

    def record(self, duration: float, cells_delta: int, regions_delta: int) -> None:
        self.invocations += 1
        self.total_time += duration
        self.total_cells_carved += cells_delta
        self.total_regions_added += regions_delta

    def to_dict(self) -> Dict[str, float | int]:
        average_time = self.total_time / self.invocations if self.invocations else 0.0
        return {
            "invocations": self.invocations,
            "total_time": self.total_time,
            "average_time": average_time,
            "total_cells_carved": self.total_cells_carved,
            "total_regions_added": self.total_regions_added,
        }


@dataclass
class GenerationMetrics:
    """Container for step metrics recorded during a generation run."""

    steps: Dict[str, StepMetrics] = field(default_factory=dict)

    def record_step(
        self,
        name: str,
        duration: float,
        cells_delta: int,
        regions_delta: int,
    ) -> None:
        metrics = self.steps.get(name)
        if metrics is None:
            metrics = StepMetrics(name=name)
            self.steps[name] = metrics
        metrics.record(duration, cells_delta, regions_delta)

    @property
    def total_time(self) -> float:
        return sum(step.total_time for step in self.steps.values())

    def snapshot(self) -> Dict[str, Dict[str, float | int]]:
        return {name: metrics.to_dict() for name, metrics in self.steps.items()}
