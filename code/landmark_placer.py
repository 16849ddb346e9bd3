"""Picks off-road cells next to junctions for landmark objects."""

from __future__ import annotations

from typing import AbstractSet, Iterable, List, Set, Tuple

from road_geometry import Cell, Rect
from road_models import LandmarkPosition

# Candidate order around each junction: (+,+), (-,+), (+,-), (-,-).
LANDMARK_SIGNS = ((1, 1), (-1, 1), (1, -1), (-1, -1))


def landmark_candidates(junction: Cell, offset: int) -> Tuple[Cell, ...]:
    return tuple(junction.offset(sx * offset, sy * offset) for sx, sy in LANDMARK_SIGNS)


def place_landmarks(
    junctions: Iterable[Cell],
    road_mask: AbstractSet[Cell],
    road_width: int,
    map_size: int,
    *,
    deduplicate: bool = False,
) -> Tuple[LandmarkPosition, ...]:
    """
    Return landmark positions just outside the widened band around each junction.

    A candidate is kept only if it is inside the map and not road. Junctions
    close to each other can yield the same cell more than once unless
    ``deduplicate`` is set, in which case only the first occurrence is kept.
    """
    offset = road_width // 2 + 1
    bounds = Rect.square(map_size)
    seen: Set[Cell] = set()
    positions: List[LandmarkPosition] = []
    for junction in junctions:
        for cell in landmark_candidates(junction, offset):
            if cell in road_mask or not bounds.contains(cell):
                continue
            if deduplicate:
                if cell in seen:
                    continue
                seen.add(cell)
            positions.append(LandmarkPosition(junction=junction, cell=cell))
    return tuple(positions)
