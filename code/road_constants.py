"""Shared constants for the road network generator."""

from __future__ import annotations

DEFAULT_MAP_SIZE = 200
DEFAULT_ROAD_WIDTH = 6

# Boundary margin and collision radius are derived from the half road width plus these pads.
BOUNDARY_MARGIN_PAD = 3
COLLISION_RADIUS_PAD = 1
# Start cleanup and landmarks both sit one tile beyond the widened band.
OUTER_RING_PAD = 1

# Dense preset: shorter straights, more segments, lenient acceptance.
DENSE_MIN_STRAIGHT_LENGTH = 30
DENSE_MAX_STRAIGHT_LENGTH = 60
DENSE_MAX_SEGMENTS = 60
DENSE_ACCEPTANCE_FRACTION = 0.3

# Sparse preset: long straights, wide collision clearance.
SPARSE_MIN_STRAIGHT_LENGTH = 50
SPARSE_MAX_STRAIGHT_LENGTH = 100
SPARSE_MAX_SEGMENTS = 40
SPARSE_ACCEPTANCE_FRACTION = 0.5
