"""In-memory tile sink that renders road maps to an ASCII grid."""

from __future__ import annotations

from typing import Dict, Hashable, List, Mapping, Optional

from road_geometry import Cell, Rect
from road_sinks import WorldPosition

DEFAULT_GLYPHS: Mapping[Hashable, str] = {
    "road": "░",
    "grass": ".",
    "corner_ne": "┐",
    "corner_nw": "┌",
    "corner_sw": "└",
    "corner_se": "┘",
}


class GridTileSink:
    """Square tile surface backed by a dict; cells outside the grid are ignored."""

    def __init__(self, size: int, cell_size: float = 1.0) -> None:
        self.size = size
        self.cell_size = cell_size
        self.bounds = Rect.square(size)
        self.tiles: Dict[Cell, Hashable] = {}

    def clear_all(self) -> None:
        self.tiles.clear()

    def set_tile(self, cell: Cell, tile: Optional[Hashable]) -> None:
        if not self.bounds.contains(cell):
            return
        if tile is None:
            self.tiles.pop(cell, None)
        else:
            self.tiles[cell] = tile

    def get_tile(self, cell: Cell) -> Optional[Hashable]:
        return self.tiles.get(cell)

    def cell_to_world_center(self, cell: Cell) -> WorldPosition:
        half = self.cell_size / 2
        return cell.x * self.cell_size + half, cell.y * self.cell_size + half

    def count(self, tile: Hashable) -> int:
        return sum(1 for value in self.tiles.values() if value == tile)

    def to_lines(
        self,
        glyphs: Optional[Mapping[Hashable, str]] = None,
        horizontal_sep: str = "",
        empty: str = " ",
    ) -> List[str]:
        """Render rows top (highest y) to bottom; unknown tiles fall back to their first character."""
        glyphs = DEFAULT_GLYPHS if glyphs is None else glyphs
        lines = []
        for y in range(self.size - 1, -1, -1):
            row = []
            for x in range(self.size):
                tile = self.tiles.get(Cell(x, y))
                if tile is None:
                    row.append(empty)
                elif tile in glyphs:
                    row.append(glyphs[tile])
                else:
                    row.append(str(tile)[:1] or empty)
            lines.append(horizontal_sep.join(row))
        return lines

    def print_grid(self, horizontal_sep: str = "") -> None:
        """Prints the ASCII grid to the console."""
        for line in self.to_lines(horizontal_sep=horizontal_sep):
            print(line)
