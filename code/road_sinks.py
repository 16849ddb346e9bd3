from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Hashable, List, Optional, Protocol, Tuple

from road_geometry import Cell

WorldPosition = Tuple[float, float]


class TileSink(Protocol):
    """
    Defines the contract a tile surface must fulfill to receive a road map.
    Downstream spawners read tiles back through ``get_tile``.
    """

    def clear_all(self) -> None:
        ...

    def set_tile(self, cell: Cell, tile: Optional[Hashable]) -> None:
        ...

    def get_tile(self, cell: Cell) -> Optional[Hashable]:
        ...

    def cell_to_world_center(self, cell: Cell) -> WorldPosition:
        ...


class InstantiationSink(Protocol):
    """Receives one call per landmark object to create."""

    def instantiate(self, prefab_id: Any, world_position: WorldPosition) -> None:
        ...


@dataclass
class RecordingInstantiationSink:
    """InstantiationSink that keeps every request, for the CLI and tests."""

    placements: List[Tuple[Any, WorldPosition]] = field(default_factory=list)

    def instantiate(self, prefab_id: Any, world_position: WorldPosition) -> None:
        self.placements.append((prefab_id, world_position))

    def clear(self) -> None:
        self.placements.clear()

    def __len__(self) -> int:
        return len(self.placements)
