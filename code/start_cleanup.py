"""Clears the stub left around the origin by the first growth attempts."""

from __future__ import annotations

from typing import Tuple

from grid_occupancy import GridOccupancy
from road_geometry import Cell, iter_square


def clean_start_point(occupancy: GridOccupancy, origin: Cell, radius: int) -> Tuple[Cell, ...]:
    """Remove every occupied cell within the square of ``radius`` around ``origin``."""
    removed = tuple(cell for cell in iter_square(origin, radius) if occupancy.contains(cell))
    for cell in removed:
        occupancy.remove(cell)
    return removed
