"""Configuration container for the road network generator."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from random_source import RandomSource
from road_constants import (
    BOUNDARY_MARGIN_PAD,
    COLLISION_RADIUS_PAD,
    DEFAULT_MAP_SIZE,
    DEFAULT_ROAD_WIDTH,
    DENSE_ACCEPTANCE_FRACTION,
    DENSE_MAX_SEGMENTS,
    DENSE_MAX_STRAIGHT_LENGTH,
    DENSE_MIN_STRAIGHT_LENGTH,
    OUTER_RING_PAD,
    SPARSE_ACCEPTANCE_FRACTION,
    SPARSE_MAX_SEGMENTS,
    SPARSE_MAX_STRAIGHT_LENGTH,
    SPARSE_MIN_STRAIGHT_LENGTH,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StraightLengthRange:
    """Uniform integer range ``[min_length, max_length)`` for requested segment lengths."""

    min_length: int
    max_length: int

    def __post_init__(self) -> None:
        min_length = int(self.min_length)
        max_length = int(self.max_length)
        if min_length <= 0:
            raise ValueError("Straight min_length must be positive")
        if max_length <= min_length:
            raise ValueError("Straight max_length must be > min_length")
        object.__setattr__(self, "min_length", min_length)
        object.__setattr__(self, "max_length", max_length)

    def sample(self, rng: RandomSource) -> int:
        return rng.next_int(self.min_length, self.max_length)


INTEGER_FIELDS = (
    "map_size",
    "road_width",
    "min_straight_length",
    "max_straight_length",
    "max_segments",
)
OPTIONAL_INTEGER_FIELDS = (
    "collision_check_radius",
    "min_length_before_collision_check",
)


def _coerce_int(name: str, value: Any) -> int:
    """Accept ints and integral strings or floats (as read from JSON); reject anything else."""
    if isinstance(value, bool):
        raise ValueError(f"RoadConfig {name} must be an integer, got {value!r}")
    try:
        coerced = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"RoadConfig {name} must be an integer, got {value!r}") from exc
    if isinstance(value, float) and value != coerced:
        raise ValueError(f"RoadConfig {name} must be an integer, got {value!r}")
    return coerced


def _coerce_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"RoadConfig {name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"RoadConfig {name} must be a number, got {value!r}") from exc


@dataclass
class RoadConfig:
    """Aggregates all tunable parameters for road network generation."""

    map_size: int = DEFAULT_MAP_SIZE
    road_width: int = DEFAULT_ROAD_WIDTH
    min_straight_length: int = DENSE_MIN_STRAIGHT_LENGTH
    max_straight_length: int = DENSE_MAX_STRAIGHT_LENGTH
    # Cap on accepted segments; the growth loop may end earlier if the frontier empties.
    max_segments: int = DENSE_MAX_SEGMENTS
    # A grown segment is kept if it reaches further than this fraction of min_straight_length.
    acceptance_fraction: float = DENSE_ACCEPTANCE_FRACTION
    # None derives road_width // 2 + 1 through ``collision_radius``.
    collision_check_radius: Optional[int] = None
    # None follows min_straight_length through ``collision_start_length``.
    min_length_before_collision_check: Optional[int] = None
    # When True, the origin and a run's own trailing cells are left out of the collision scan.
    ignore_own_segment_in_collision: bool = False
    deduplicate_landmarks: bool = False
    random_seed: int | None = None
    collect_metrics: bool = False
    _straight_length: StraightLengthRange = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for name in INTEGER_FIELDS:
            setattr(self, name, _coerce_int(name, getattr(self, name)))
        for name in OPTIONAL_INTEGER_FIELDS:
            value = getattr(self, name)
            if value is not None:
                setattr(self, name, _coerce_int(name, value))
        self.acceptance_fraction = _coerce_float("acceptance_fraction", self.acceptance_fraction)

        if self.road_width < 2:
            raise ValueError("RoadConfig road_width must be at least 2")
        if self.map_size <= 2 * self.boundary_margin:
            raise ValueError(
                f"RoadConfig map_size must exceed twice the boundary margin ({2 * self.boundary_margin})"
            )
        if self.min_straight_length <= 0:
            raise ValueError("RoadConfig min_straight_length must be positive")
        if self.max_straight_length <= self.min_straight_length:
            raise ValueError("RoadConfig max_straight_length must be greater than min_straight_length")
        if self.max_segments < 0:
            raise ValueError("RoadConfig max_segments cannot be negative")
        if self.acceptance_fraction < 0:
            raise ValueError("RoadConfig acceptance_fraction cannot be negative")
        if self.collision_check_radius is not None and self.collision_check_radius < 0:
            raise ValueError("RoadConfig collision_check_radius cannot be negative")
        if (
            self.min_length_before_collision_check is not None
            and self.min_length_before_collision_check < 0
        ):
            raise ValueError("RoadConfig min_length_before_collision_check cannot be negative")

        if self.collision_radius < self.half_width:
            # Widened bands of neighbouring segments may touch or overlap.
            logger.warning(
                "collision_check_radius %d is below half the road width %d",
                self.collision_radius,
                self.half_width,
            )

        self._straight_length = StraightLengthRange(
            self.min_straight_length, self.max_straight_length
        )

    @property
    def collision_radius(self) -> int:
        if self.collision_check_radius is None:
            return self.road_width // 2 + COLLISION_RADIUS_PAD
        return self.collision_check_radius

    @property
    def collision_start_length(self) -> int:
        if self.min_length_before_collision_check is None:
            return self.min_straight_length
        return self.min_length_before_collision_check

    @property
    def half_width(self) -> int:
        return self.road_width // 2

    @property
    def boundary_margin(self) -> int:
        return self.road_width // 2 + BOUNDARY_MARGIN_PAD

    @property
    def cleanup_radius(self) -> int:
        return self.road_width // 2 + OUTER_RING_PAD

    @property
    def landmark_offset(self) -> int:
        return self.road_width // 2 + OUTER_RING_PAD

    @property
    def acceptance_distance(self) -> float:
        return self.min_straight_length * self.acceptance_fraction

    @property
    def straight_length(self) -> StraightLengthRange:
        return self._straight_length

    def to_dict(self) -> dict[str, Any]:
        return {
            "map_size": self.map_size,
            "road_width": self.road_width,
            "min_straight_length": self.min_straight_length,
            "max_straight_length": self.max_straight_length,
            "max_segments": self.max_segments,
            "acceptance_fraction": self.acceptance_fraction,
            "collision_check_radius": self.collision_check_radius,
            "min_length_before_collision_check": self.min_length_before_collision_check,
            "ignore_own_segment_in_collision": self.ignore_own_segment_in_collision,
            "deduplicate_landmarks": self.deduplicate_landmarks,
            "random_seed": self.random_seed,
            "collect_metrics": self.collect_metrics,
        }


def dense_road_config(**overrides: Any) -> RoadConfig:
    """Busy city layout: many short straights packed close together."""
    return RoadConfig(**overrides)


def sparse_road_config(**overrides: Any) -> RoadConfig:
    """Open layout with long straights and wide spacing between parallel roads."""
    road_width = int(overrides.get("road_width", DEFAULT_ROAD_WIDTH))
    kwargs: dict[str, Any] = dict(
        min_straight_length=SPARSE_MIN_STRAIGHT_LENGTH,
        max_straight_length=SPARSE_MAX_STRAIGHT_LENGTH,
        max_segments=SPARSE_MAX_SEGMENTS,
        acceptance_fraction=SPARSE_ACCEPTANCE_FRACTION,
        collision_check_radius=road_width + COLLISION_RADIUS_PAD,
    )
    kwargs.update(overrides)
    return RoadConfig(**kwargs)


PRESETS = {
    "dense": dense_road_config,
    "sparse": sparse_road_config,
}


def preset_config(name: str, **overrides: Any) -> RoadConfig:
    try:
        factory = PRESETS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown road preset {name!r}; expected one of {sorted(PRESETS)}") from exc
    return factory(**overrides)
