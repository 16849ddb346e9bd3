"""Core dataclasses produced by the road generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Hashable, Optional, Tuple

from road_config import RoadConfig
from road_geometry import CORNER_ORIENTATIONS, Cell, CornerOrientation, Direction


class StopReason(Enum):
    """Why a straight run stopped advancing."""
    COMPLETED = "completed"  # Walked the full requested length.
    BOUNDARY = "boundary"  # Next cell fell inside the map boundary margin.
    COLLISION = "collision"  # Next cell was too close to existing road.


@dataclass(frozen=True)
class SegmentGrowth:
    """Outcome of extending one straight run from an origin cell."""

    origin: Cell
    direction: Direction
    end: Cell
    committed: Tuple[Cell, ...]
    stop_reason: StopReason

    @property
    def length(self) -> int:
        return len(self.committed)

    @property
    def distance(self) -> float:
        return self.origin.distance_to(self.end)


@dataclass(frozen=True)
class RoadSegment:
    """An accepted straight run between two junctions."""

    start: Cell
    end: Cell
    direction: Direction
    length: int


@dataclass(frozen=True)
class CornerCell:
    """One diagonal outer corner of the widened band around a junction."""

    orientation: CornerOrientation
    cell: Cell
    on_road: bool


@dataclass(frozen=True)
class CornerAssignment:
    """The four outer corners around a junction, in NE, NW, SW, SE order."""

    junction: Cell
    corners: Tuple[CornerCell, ...]

    def marked(self) -> Tuple[CornerCell, ...]:
        """Corners that land on the road mask and receive a marker."""
        return tuple(corner for corner in self.corners if corner.on_road)


@dataclass(frozen=True)
class LandmarkPosition:
    """Off-road cell near a junction where a landmark object is placed."""

    junction: Cell
    cell: Cell


@dataclass(frozen=True)
class RoadTileSet:
    """Tile kinds used when drawing a road map into a tile sink."""

    road: Optional[Hashable]
    background: Optional[Hashable] = None
    # Markers indexed in CornerOrientation order (NE, NW, SW, SE).
    corner_markers: Tuple[Optional[Hashable], ...] = ()

    @property
    def has_complete_corner_markers(self) -> bool:
        markers = self.corner_markers
        if len(markers) != len(CORNER_ORIENTATIONS):
            return False
        if any(marker is None for marker in markers):
            return False
        return len(set(markers)) == len(CORNER_ORIENTATIONS)

    def corner_marker(self, orientation: CornerOrientation) -> Any:
        return self.corner_markers[CORNER_ORIENTATIONS.index(orientation)]


@dataclass(frozen=True)
class RoadMap:
    """Immutable result of a single generation run."""

    config: RoadConfig
    origin: Cell
    skeleton_cells: FrozenSet[Cell]
    road_cells: FrozenSet[Cell]
    junctions: Tuple[Cell, ...]
    segments: Tuple[RoadSegment, ...]
    corners: Tuple[CornerAssignment, ...]
    landmarks: Tuple[LandmarkPosition, ...]

    @property
    def map_size(self) -> int:
        return self.config.map_size

    @property
    def segments_created(self) -> int:
        return len(self.segments)

    @property
    def road_tile_count(self) -> int:
        return len(self.road_cells)

    @property
    def corner_marker_count(self) -> int:
        return sum(len(assignment.marked()) for assignment in self.corners)

    def is_road(self, cell: Cell) -> bool:
        return cell in self.road_cells

    def road_coverage(self) -> float:
        """Fraction of the map covered by road tiles."""
        area = self.map_size * self.map_size
        return len(self.road_cells) / area if area else 0.0
