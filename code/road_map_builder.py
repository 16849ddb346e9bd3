"""Entry point that validates collaborators, generates a road map and renders it."""

from __future__ import annotations

import logging
from typing import Any, Optional

from random_source import RandomSource
from road_config import RoadConfig
from road_generator import RoadGenerator
from road_models import RoadMap, RoadTileSet
from road_renderer import RenderSummary, RoadMapRenderer
from road_sinks import InstantiationSink, TileSink

logger = logging.getLogger(__name__)


class RoadMapBuilder:
    """Holds configuration and sinks; ``generate_road_map`` rebuilds everything on each call."""

    def __init__(
        self,
        config: Optional[RoadConfig],
        tile_sink: Optional[TileSink],
        tiles: Optional[RoadTileSet],
        instantiation_sink: Optional[InstantiationSink] = None,
        landmark_prefab: Optional[Any] = None,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self.config = config
        self.tile_sink = tile_sink
        self.tiles = tiles
        self.instantiation_sink = instantiation_sink
        self.landmark_prefab = landmark_prefab
        self.random_source = random_source
        self.road_map: Optional[RoadMap] = None
        self.render_summary: Optional[RenderSummary] = None
        self.generator: Optional[RoadGenerator] = None

    def missing_requirements(self) -> list[str]:
        missing = []
        if self.config is None:
            missing.append("road config")
        if self.tile_sink is None:
            missing.append("tile sink")
        if self.tiles is None or self.tiles.road is None:
            missing.append("road tile")
        return missing

    def generate_road_map(self) -> Optional[RoadMap]:
        """Generate and render a fresh road map; returns None if a required collaborator is missing."""
        missing = self.missing_requirements()
        if missing:
            logger.error("Cannot generate road map, missing: %s", ", ".join(missing))
            return None

        draw_corners = self.tiles.has_complete_corner_markers
        if not draw_corners:
            logger.warning("Corner marker set is incomplete; skipping corner markers")
        place_landmarks = self.landmark_prefab is not None and self.instantiation_sink is not None
        if not place_landmarks:
            logger.info("No landmark prefab or instantiation sink configured; skipping landmarks")

        if self.generator is None or self.generator.config is not self.config:
            self.generator = RoadGenerator(self.config)
        road_map = self.generator.generate(
            self.random_source,
            classify_corners_step=draw_corners,
            place_landmarks_step=place_landmarks,
        )

        renderer = RoadMapRenderer(
            self.tile_sink,
            self.tiles,
            instantiation_sink=self.instantiation_sink,
            landmark_prefab=self.landmark_prefab,
        )
        self.render_summary = renderer.render(road_map)
        self.road_map = road_map
        return road_map
