"""Context object providing shared state for road grower implementations."""

from __future__ import annotations

from dataclasses import dataclass

from random_source import RandomSource
from road_config import RoadConfig
from road_layout import RoadLayout


@dataclass
class GrowerContext:
    """Encapsulates shared state for grower implementations."""

    config: RoadConfig
    layout: RoadLayout
    rng: RandomSource

    def can_grow_more(self) -> bool:
        return (
            bool(self.layout.frontier)
            and self.layout.segments_created < self.config.max_segments
        )
