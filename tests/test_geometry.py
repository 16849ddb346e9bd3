import pytest

from road_geometry import (
    CARDINAL_DIRECTIONS,
    Cell,
    CornerOrientation,
    Direction,
    Rect,
    iter_square,
)


def test_cardinal_directions_are_unit_vectors_in_canonical_order():
    assert CARDINAL_DIRECTIONS == (Direction.UP, Direction.DOWN, Direction.RIGHT, Direction.LEFT)
    for direction in CARDINAL_DIRECTIONS:
        assert abs(direction.dx) + abs(direction.dy) == 1


def test_cell_step_and_offset():
    cell = Cell(5, 5)

    assert cell.step(Direction.RIGHT) == Cell(6, 5)
    assert cell.step(Direction.DOWN) == Cell(5, 4)
    assert cell.offset(-2, 4) == Cell(3, 9)


@pytest.mark.parametrize(
    "orientation,expected",
    [
        (CornerOrientation.NE, Cell(7, 7)),
        (CornerOrientation.NW, Cell(3, 7)),
        (CornerOrientation.SW, Cell(3, 3)),
        (CornerOrientation.SE, Cell(7, 3)),
    ],
)
def test_cell_corner_follows_orientation_signs(orientation, expected):
    assert Cell(5, 5).corner(orientation, 2) == expected


def test_cell_distance_is_euclidean():
    assert Cell(0, 0).distance_to(Cell(3, 4)) == pytest.approx(5.0)


def test_iter_square_covers_chebyshev_neighbourhood():
    cells = set(iter_square(Cell(2, 2), 1))

    assert len(cells) == 9
    assert Cell(1, 1) in cells and Cell(3, 3) in cells
    assert set(iter_square(Cell(2, 2), 0)) == {Cell(2, 2)}


def test_rect_contains_is_half_open():
    rect = Rect(4, 4, 3, 3)

    assert rect.contains(Cell(4, 4))
    assert rect.contains(Cell(6, 6))
    assert not rect.contains(Cell(7, 5))


def test_rect_cells_enumerates_every_cell():
    assert len(list(Rect(1, 1, 3, 2).cells())) == 6
