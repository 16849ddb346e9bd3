"""Geometry helpers for working with grid cells, directions, and rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class Direction(Enum):
    """Cardinal directions with unit vectors on the cell grid (y points up)."""

    UP = (0, 1)
    DOWN = (0, -1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


CARDINAL_DIRECTIONS = tuple(Direction)


class CornerOrientation(Enum):
    """Diagonal quadrants around a junction, as (x sign, y sign)."""

    NE = (1, 1)
    NW = (-1, 1)
    SW = (-1, -1)
    SE = (1, -1)

    @property
    def sx(self) -> int:
        return self.value[0]

    @property
    def sy(self) -> int:
        return self.value[1]


CORNER_ORIENTATIONS = tuple(CornerOrientation)


@dataclass(frozen=True, order=True)
class Cell:
    """Integer grid coordinate."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Cell:
        return Cell(self.x + dx, self.y + dy)

    def step(self, direction: Direction) -> Cell:
        return Cell(self.x + direction.dx, self.y + direction.dy)

    def corner(self, orientation: CornerOrientation, distance: int) -> Cell:
        """Return the cell ``distance`` tiles away along both axes of ``orientation``."""
        return Cell(self.x + orientation.sx * distance, self.y + orientation.sy * distance)

    def distance_to(self, other: Cell) -> float:
        """Euclidean distance between cell coordinates."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5

    def to_tuple(self) -> Tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class Rect:
    """Immutable axis-aligned rectangle using integer cell coordinates."""

    x: int
    y: int
    width: int
    height: int

    @property
    def max_x(self) -> int:
        """Right edge (exclusive)."""
        return self.x + self.width

    @property
    def max_y(self) -> int:
        """Top edge (exclusive)."""
        return self.y + self.height

    def contains(self, point: Cell) -> bool:
        """Return True if the provided cell lies inside this rect."""
        return self.x <= point.x < self.max_x and self.y <= point.y < self.max_y

    def cells(self) -> Iterator[Cell]:
        for cy in range(self.y, self.max_y):
            for cx in range(self.x, self.max_x):
                yield Cell(cx, cy)

    @classmethod
    def square(cls, size: int) -> Rect:
        return cls(0, 0, size, size)


def iter_square(center: Cell, radius: int) -> Iterator[Cell]:
    """Yield every cell within Chebyshev distance ``radius`` of ``center``."""
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            yield Cell(center.x + dx, center.y + dy)
