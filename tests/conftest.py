import sys
from pathlib import Path
from typing import Callable, Iterable, List, Optional

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
CODE_DIR = ROOT_DIR / "code"
if str(CODE_DIR) not in sys.path:
    sys.path.insert(0, str(CODE_DIR))

from grid_renderer import GridTileSink
from grower_context import GrowerContext
from random_source import SeededRandomSource
from road_config import RoadConfig
from road_layout import RoadLayout
from road_models import RoadTileSet


class ScriptedRandomSource:
    """Returns queued integers (or the low bound once exhausted) and never reorders lists."""

    def __init__(self, ints: Iterable[int] = ()) -> None:
        self._ints: List[int] = list(ints)
        self.next_int_calls = 0
        self.shuffle_calls = 0

    def next_int(self, low: int, high: int) -> int:
        self.next_int_calls += 1
        if self._ints:
            value = self._ints.pop(0)
            assert low <= value < high
            return value
        return low

    def shuffle(self, items) -> None:
        self.shuffle_calls += 1


class RecordingTileSink(GridTileSink):
    """GridTileSink that logs every call made to it."""

    def __init__(self, size: int, cell_size: float = 1.0) -> None:
        super().__init__(size, cell_size)
        self.calls: list = []

    def clear_all(self) -> None:
        self.calls.append(("clear_all",))
        super().clear_all()

    def set_tile(self, cell, tile) -> None:
        self.calls.append(("set_tile", cell, tile))
        super().set_tile(cell, tile)

    def set_tile_calls(self, tile=None) -> list:
        return [call for call in self.calls if call[0] == "set_tile" and (tile is None or call[2] == tile)]


@pytest.fixture
def scenario_config() -> RoadConfig:
    return RoadConfig(
        map_size=50,
        road_width=6,
        min_straight_length=10,
        max_straight_length=15,
        max_segments=5,
    )


@pytest.fixture
def make_context(scenario_config: RoadConfig) -> Callable[..., GrowerContext]:
    def _make_context(
        *,
        config: Optional[RoadConfig] = None,
        rng=None,
    ) -> GrowerContext:
        config = config if config is not None else scenario_config
        layout = RoadLayout(config)
        layout.seed_origin(layout.center_cell())
        return GrowerContext(
            config=config,
            layout=layout,
            rng=rng if rng is not None else SeededRandomSource(1234),
        )

    return _make_context


@pytest.fixture
def full_tiles() -> RoadTileSet:
    return RoadTileSet(
        road="road",
        background="grass",
        corner_markers=("corner_ne", "corner_nw", "corner_sw", "corner_se"),
    )


@pytest.fixture
def recording_sink() -> RecordingTileSink:
    return RecordingTileSink(50)
