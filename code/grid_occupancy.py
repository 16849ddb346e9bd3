"""Occupancy index tracking which grid cells are currently road."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import AbstractSet, FrozenSet, Set

from road_geometry import Cell, iter_square


class GridOccupancy:
    """Hash-based set of road cells with O(1) membership checks."""

    def __init__(self, cells: Iterable[Cell] = ()) -> None:
        self._cells: Set[Cell] = set(cells)

    def contains(self, cell: Cell) -> bool:
        return cell in self._cells

    def add(self, cell: Cell) -> None:
        self._cells.add(cell)

    def remove(self, cell: Cell) -> None:
        """Remove ``cell`` if present; removing an unoccupied cell is a no-op."""
        self._cells.discard(cell)

    def update(self, cells: Iterable[Cell]) -> None:
        self._cells.update(cells)

    def clear(self) -> None:
        """Remove all cached data."""
        self._cells.clear()

    def count(self) -> int:
        return len(self._cells)

    def any_within(
        self,
        center: Cell,
        radius: int,
        *,
        ignore: AbstractSet[Cell] = frozenset(),
    ) -> bool:
        """Return True if an occupied cell (not in ``ignore``) lies in the square around ``center``."""
        for cell in iter_square(center, radius):
            if cell in self._cells and cell not in ignore:
                return True
        return False

    def snapshot(self) -> FrozenSet[Cell]:
        return frozenset(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)
