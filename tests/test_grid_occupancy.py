from grid_occupancy import GridOccupancy
from road_geometry import Cell


def test_add_contains_remove_and_count():
    occupancy = GridOccupancy()
    cell = Cell(3, 4)

    occupancy.add(cell)
    occupancy.add(cell)

    assert occupancy.contains(cell)
    assert cell in occupancy
    assert occupancy.count() == 1

    occupancy.remove(cell)

    assert not occupancy.contains(cell)
    assert occupancy.count() == 0


def test_remove_missing_cell_is_noop():
    occupancy = GridOccupancy([Cell(1, 1)])

    occupancy.remove(Cell(9, 9))

    assert len(occupancy) == 1


def test_clear_empties_everything():
    occupancy = GridOccupancy(Cell(x, 0) for x in range(5))

    occupancy.clear()

    assert occupancy.count() == 0
    assert list(occupancy) == []


def test_any_within_scans_square_neighbourhood():
    occupancy = GridOccupancy([Cell(5, 5)])

    assert occupancy.any_within(Cell(7, 7), 2)
    assert not occupancy.any_within(Cell(8, 5), 2)
    assert not occupancy.any_within(Cell(7, 7), 2, ignore={Cell(5, 5)})


def test_snapshot_is_detached_from_later_changes():
    occupancy = GridOccupancy([Cell(0, 0)])

    snapshot = occupancy.snapshot()
    occupancy.add(Cell(1, 0))

    assert snapshot == frozenset({Cell(0, 0)})
