"""Finds the outer corners of the widened band around each junction."""

from __future__ import annotations

from typing import AbstractSet, Iterable, Tuple

from road_geometry import CORNER_ORIENTATIONS, Cell
from road_models import CornerAssignment, CornerCell


def classify_junction(junction: Cell, road_mask: AbstractSet[Cell], half_width: int) -> CornerAssignment:
    corners = []
    for orientation in CORNER_ORIENTATIONS:
        cell = junction.corner(orientation, half_width)
        corners.append(CornerCell(orientation, cell, cell in road_mask))
    return CornerAssignment(junction=junction, corners=tuple(corners))


def classify_corners(
    junctions: Iterable[Cell],
    road_mask: AbstractSet[Cell],
    road_width: int,
) -> Tuple[CornerAssignment, ...]:
    """Return NE/NW/SW/SE corner cells per junction, flagged by whether each lies on the road."""
    half_width = road_width // 2
    return tuple(classify_junction(junction, road_mask, half_width) for junction in junctions)
