import pytest

from grid_occupancy import GridOccupancy
from road_geometry import Cell
from road_widener import dilate_cells, widen_roads
from start_cleanup import clean_start_point


@pytest.mark.parametrize("road_width,expected", [(2, 9), (3, 9), (4, 25), (6, 49)])
def test_single_cell_dilates_to_square(road_width, expected):
    occupancy = GridOccupancy([Cell(20, 20)])

    mask = widen_roads(occupancy, road_width, 50)

    assert len(mask) == expected
    assert Cell(20, 20) in mask
    half = road_width // 2
    assert Cell(20 + half, 20 - half) in mask
    assert Cell(20 + half + 1, 20) not in mask


def test_widening_replaces_occupancy_with_superset():
    skeleton = [Cell(x, 10) for x in range(10, 20)] + [Cell(19, y) for y in range(10, 20)]
    occupancy = GridOccupancy(skeleton)

    mask = widen_roads(occupancy, 6, 50)

    assert set(skeleton) <= mask
    assert occupancy.snapshot() == mask
    # The inside of the bend is filled.
    assert Cell(16, 13) in mask


def test_dilation_is_clipped_to_map_bounds():
    mask = dilate_cells(frozenset({Cell(0, 0)}), 2, 50)

    assert mask == frozenset(Cell(x, y) for x in range(3) for y in range(3))


def test_empty_skeleton_stays_empty():
    occupancy = GridOccupancy()

    assert widen_roads(occupancy, 6, 50) == frozenset()


def test_clean_start_point_removes_only_the_square():
    origin = Cell(25, 25)
    occupancy = GridOccupancy(Cell(x, 25) for x in range(15, 36))

    removed = clean_start_point(occupancy, origin, 4)

    assert set(removed) == {Cell(x, 25) for x in range(21, 30)}
    assert not occupancy.contains(origin)
    assert occupancy.contains(Cell(20, 25))
    assert occupancy.contains(Cell(30, 25))
    assert occupancy.count() == 21 - 9


def test_clean_start_point_on_empty_origin_is_noop():
    occupancy = GridOccupancy([Cell(40, 40)])

    assert clean_start_point(occupancy, Cell(25, 25), 4) == ()
    assert occupancy.count() == 1
