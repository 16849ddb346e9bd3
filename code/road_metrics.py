"""Helpers for collecting instrumentation data during road generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class PhaseMetrics:
    """Aggregated metrics for a single generation phase across invocations."""

    name: str
    invocations: int = 0
    total_time: float = 0.0
    total_cells_delta: int = 0

    def record(self, duration: float, cells_delta: int) -> None:
        self.invocations += 1
        self.total_time += duration
        self.total_cells_delta += cells_delta

    def to_dict(self) -> Dict[str, float | int]:
        average_time = self.total_time / self.invocations if self.invocations else 0.0
        average_cells = (
            self.total_cells_delta / self.invocations if self.invocations else 0.0
        )
        return {
            "invocations": self.invocations,
            "total_time": self.total_time,
            "average_time": average_time,
            "total_cells_delta": self.total_cells_delta,
            "average_cells_delta": average_cells,
        }


@dataclass
class GenerationMetrics:
    """Container for phase metrics recorded during generation runs."""

    phases: Dict[str, PhaseMetrics] = field(default_factory=dict)

    def record_phase(self, name: str, duration: float, cells_delta: int) -> None:
        metrics = self.phases.get(name)
        if metrics is None:
            metrics = PhaseMetrics(name=name)
            self.phases[name] = metrics
        metrics.record(duration, cells_delta)

    def snapshot(self) -> Dict[str, Dict[str, float | int]]:
        return {name: metrics.to_dict() for name, metrics in self.phases.items()}
