"""RoadGenerator sequences the phases of a single road network generation run."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Callable, Optional, TypeVar

from grower_context import GrowerContext
from growers import run_junction_frontier_grower
from random_source import RandomSource, SeededRandomSource
from road_config import RoadConfig
from road_layout import RoadLayout
from road_metrics import GenerationMetrics
from road_models import RoadMap
from corner_classifier import classify_corners
from landmark_placer import place_landmarks
from road_widener import widen_roads
from start_cleanup import clean_start_point

logger = logging.getLogger(__name__)

R = TypeVar("R")


class RoadGenerator:
    """Owns the grid state of a run and produces immutable RoadMap values."""

    def __init__(self, config: RoadConfig) -> None:
        if config is None:
            raise ValueError("RoadGenerator requires a RoadConfig")
        self.config = config
        self.layout = RoadLayout(config)
        self.metrics = GenerationMetrics() if config.collect_metrics else None

    def _run_phase(self, name: str, func: Callable[..., R], *args, **kwargs) -> R:
        if self.metrics is None:
            return func(*args, **kwargs)

        cells_before = self.layout.occupancy.count()
        start = perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            duration = perf_counter() - start
            cells_delta = self.layout.occupancy.count() - cells_before
            self.metrics.record_phase(name, duration, cells_delta)

    def generate(
        self,
        rng: Optional[RandomSource] = None,
        *,
        classify_corners_step: bool = True,
        place_landmarks_step: bool = True,
    ) -> RoadMap:
        """Reset all state, grow, clean, widen and decorate; return the finished RoadMap."""
        config = self.config
        if rng is None:
            rng = SeededRandomSource(config.random_seed)

        layout = self.layout
        layout.reset()
        origin = layout.center_cell()
        layout.seed_origin(origin)

        # Step 1: grow the one-cell skeleton from the origin.
        context = GrowerContext(config=config, layout=layout, rng=rng)
        segments_created = self._run_phase("growth", run_junction_frontier_grower, context)
        logger.debug(
            "Growth finished: %d segments, %d skeleton cells, %d junctions",
            segments_created,
            layout.occupancy.count(),
            len(layout.junctions),
        )

        # Step 2: clear the origin stub, then widen to full road width.
        removed = self._run_phase(
            "cleanup", clean_start_point, layout.occupancy, origin, config.cleanup_radius
        )
        logger.debug("Start cleanup removed %d cells around %s", len(removed), origin.to_tuple())
        skeleton = layout.occupancy.snapshot()
        road_mask = self._run_phase(
            "widen", widen_roads, layout.occupancy, config.road_width, config.map_size
        )

        # Step 3: decorations derived from the final mask.
        junctions = tuple(layout.junctions)
        corners = ()
        if classify_corners_step:
            corners = self._run_phase(
                "corners", classify_corners, junctions, road_mask, config.road_width
            )
        landmarks = ()
        if place_landmarks_step:
            landmarks = self._run_phase(
                "landmarks",
                place_landmarks,
                junctions,
                road_mask,
                config.road_width,
                config.map_size,
                deduplicate=config.deduplicate_landmarks,
            )

        road_map = RoadMap(
            config=config,
            origin=origin,
            skeleton_cells=skeleton,
            road_cells=road_mask,
            junctions=junctions,
            segments=tuple(layout.segments),
            corners=corners,
            landmarks=landmarks,
        )
        logger.info(
            "Road map generated: %d road tiles, %d junctions, %d segments",
            road_map.road_tile_count,
            len(road_map.junctions),
            road_map.segments_created,
        )
        return road_map
