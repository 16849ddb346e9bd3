"""Straight-run growth from a junction in a single direction."""

from __future__ import annotations

from typing import List, Set

from grid_occupancy import GridOccupancy
from road_config import RoadConfig
from road_geometry import Cell, Direction
from road_models import SegmentGrowth, StopReason


def is_within_margin(cell: Cell, map_size: int, boundary_margin: int) -> bool:
    """True if ``cell`` stays at least ``boundary_margin`` tiles from every map edge."""
    upper = map_size - boundary_margin
    return boundary_margin <= cell.x < upper and boundary_margin <= cell.y < upper


def grow_straight_segment(
    occupancy: GridOccupancy,
    origin: Cell,
    direction: Direction,
    requested_length: int,
    *,
    map_size: int,
    boundary_margin: int,
    collision_check_radius: int,
    min_length_before_collision_check: int,
    ignore_own_segment: bool = False,
) -> SegmentGrowth:
    """
    Advance from ``origin`` one cell at a time, committing each cell to ``occupancy``.

    The run stops early, returning the last committed cell, when the next cell
    falls inside the boundary margin or, once the step index exceeds
    ``min_length_before_collision_check``, when existing road lies within
    ``collision_check_radius`` of it. Committed cells are never rolled back;
    the caller decides whether the resulting length is acceptable.

    Every occupied cell in the neighbourhood counts, including this run's own
    trailing cells, so with a positive radius a run stops as soon as checks begin. With
    ``ignore_own_segment`` the origin and the cells this run committed are
    skipped and only road laid down earlier stops the run.
    """
    current = origin
    committed: List[Cell] = []
    own_cells: Set[Cell] = {origin} if ignore_own_segment else set()

    for step_index in range(requested_length):
        candidate = current.step(direction)

        if not is_within_margin(candidate, map_size, boundary_margin):
            return SegmentGrowth(origin, direction, current, tuple(committed), StopReason.BOUNDARY)

        if step_index > min_length_before_collision_check and occupancy.any_within(
            candidate, collision_check_radius, ignore=own_cells
        ):
            return SegmentGrowth(origin, direction, current, tuple(committed), StopReason.COLLISION)

        occupancy.add(candidate)
        committed.append(candidate)
        if ignore_own_segment:
            own_cells.add(candidate)
        current = candidate

    return SegmentGrowth(origin, direction, current, tuple(committed), StopReason.COMPLETED)


class SegmentGrower:
    """Binds grow_straight_segment to the tuning values of a RoadConfig."""

    def __init__(self, config: RoadConfig) -> None:
        self.config = config

    def grow(
        self,
        occupancy: GridOccupancy,
        origin: Cell,
        direction: Direction,
        requested_length: int,
    ) -> SegmentGrowth:
        config = self.config
        return grow_straight_segment(
            occupancy,
            origin,
            direction,
            requested_length,
            map_size=config.map_size,
            boundary_margin=config.boundary_margin,
            collision_check_radius=config.collision_radius,
            min_length_before_collision_check=config.collision_start_length,
            ignore_own_segment=config.ignore_own_segment_in_collision,
        )

    def is_accepted(self, growth: SegmentGrowth) -> bool:
        return growth.distance > self.config.acceptance_distance
