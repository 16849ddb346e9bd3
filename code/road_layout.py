"""Data container for the mutable state of one road generation run."""

from __future__ import annotations

from typing import List, Optional

from grid_occupancy import GridOccupancy
from road_config import RoadConfig
from road_geometry import Cell, Rect
from road_models import RoadSegment


class RoadLayout:
    """Stores the occupancy, junctions, frontier and accepted segments of a run."""

    def __init__(self, config: RoadConfig) -> None:
        self.config = config
        self.bounds = Rect.square(config.map_size)
        self.occupancy = GridOccupancy()
        self.junctions: List[Cell] = []
        self.frontier: List[Cell] = []
        self.segments: List[RoadSegment] = []
        self.origin: Optional[Cell] = None

    def reset(self) -> None:
        self.occupancy.clear()
        self.junctions.clear()
        self.frontier.clear()
        self.segments.clear()
        self.origin = None

    def center_cell(self) -> Cell:
        return Cell(self.config.map_size // 2, self.config.map_size // 2)

    def seed_origin(self, origin: Cell) -> None:
        """Register ``origin`` as the first junction and the only frontier entry."""
        if self.junctions:
            raise ValueError("Origin must be seeded into an empty layout")
        self.origin = origin
        self.junctions.append(origin)
        self.frontier.append(origin)

    @property
    def segments_created(self) -> int:
        return len(self.segments)

    def register_segment(self, segment: RoadSegment) -> None:
        """Record an accepted segment; its end becomes a new junction on the frontier."""
        self.segments.append(segment)
        self.junctions.append(segment.end)
        self.frontier.append(segment.end)

    def retire_junction(self, junction: Cell) -> None:
        """Drop ``junction`` from the frontier; it is never re-added."""
        self.frontier.remove(junction)

    def in_bounds(self, cell: Cell) -> bool:
        return self.bounds.contains(cell)
