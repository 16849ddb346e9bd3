"""Pushes a finished RoadMap into tile and instantiation sinks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from road_geometry import Rect
from road_models import RoadMap, RoadTileSet
from road_sinks import InstantiationSink, TileSink


@dataclass
class RenderSummary:
    """Counts of the sink calls made while rendering one road map."""

    background_tiles: int = 0
    road_tiles: int = 0
    corner_markers: int = 0
    landmarks: int = 0


class RoadMapRenderer:
    """Draws background, road and corner tiles, then instantiates landmarks."""

    def __init__(
        self,
        tile_sink: TileSink,
        tiles: RoadTileSet,
        instantiation_sink: Optional[InstantiationSink] = None,
        landmark_prefab: Optional[Any] = None,
    ) -> None:
        self.tile_sink = tile_sink
        self.tiles = tiles
        self.instantiation_sink = instantiation_sink
        self.landmark_prefab = landmark_prefab

    @property
    def draws_corners(self) -> bool:
        return self.tiles.has_complete_corner_markers

    @property
    def places_landmarks(self) -> bool:
        return self.instantiation_sink is not None and self.landmark_prefab is not None

    def render(self, road_map: RoadMap) -> RenderSummary:
        summary = RenderSummary()
        sink = self.tile_sink
        sink.clear_all()

        # Cells cleared around the origin simply stay background here.
        if self.tiles.background is not None:
            for cell in Rect.square(road_map.map_size).cells():
                sink.set_tile(cell, self.tiles.background)
                summary.background_tiles += 1

        for cell in sorted(road_map.road_cells):
            sink.set_tile(cell, self.tiles.road)
            summary.road_tiles += 1

        if self.draws_corners:
            for assignment in road_map.corners:
                for corner in assignment.marked():
                    sink.set_tile(corner.cell, self.tiles.corner_marker(corner.orientation))
                    summary.corner_markers += 1

        if self.places_landmarks:
            for landmark in road_map.landmarks:
                world_position = sink.cell_to_world_center(landmark.cell)
                self.instantiation_sink.instantiate(self.landmark_prefab, world_position)
                summary.landmarks += 1

        return summary
