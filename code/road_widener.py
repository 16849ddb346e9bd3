"""Dilates the one-cell skeleton into a full-width road mask."""

from __future__ import annotations

from typing import FrozenSet, Set

from grid_occupancy import GridOccupancy
from road_geometry import Cell, Rect, iter_square


def dilate_cells(skeleton: FrozenSet[Cell], half_width: int, map_size: int) -> FrozenSet[Cell]:
    """Expand every skeleton cell into a square of half-width ``half_width``, clipped to the map."""
    bounds = Rect.square(map_size)
    widened: Set[Cell] = set()
    for road_cell in skeleton:
        for wide_cell in iter_square(road_cell, half_width):
            if bounds.contains(wide_cell):
                widened.add(wide_cell)
    return frozenset(widened)


def widen_roads(occupancy: GridOccupancy, road_width: int, map_size: int) -> FrozenSet[Cell]:
    """Replace ``occupancy`` with its dilation and return the resulting road mask.

    Skeleton cells are kept even when a caller placed them outside the map, so the
    mask is always a superset of the skeleton.
    """
    skeleton = occupancy.snapshot()
    widened = dilate_cells(skeleton, road_width // 2, map_size)
    occupancy.update(widened)
    return occupancy.snapshot()
