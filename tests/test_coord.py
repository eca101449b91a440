import pytest

from aoc2024.coord import Coord


def test_default_is_origin():
    assert Coord() == Coord(0, 0)


def test_dist_is_manhattan():
    assert Coord(0, 0).dist(Coord(2, 3)) == 5


def test_dist_is_symmetric():
    a, b = Coord(4, 1), Coord(2, 7)
    assert a.dist(b) == b.dist(a)


def test_adjacent_at_corner_drops_off_grid_neighbours():
    neighbours = Coord(0, 0).adjacent_4_way(Coord(3, 3))
    assert neighbours[0] is None
    assert neighbours[2] is None
    present = [n for n in neighbours if n is not None]
    assert len(present) == 2
    assert all(n.dist(Coord(0, 0)) == 1 for n in present)


def test_adjacent_respects_upper_bounds():
    bounds = Coord(3, 3)
    neighbours = Coord(2, 2).adjacent_4_way(bounds)
    assert neighbours[1] is None
    assert neighbours[3] is None
    assert sum(n is not None for n in neighbours) == 2


def test_adjacent_in_middle_has_four():
    centre = Coord(1, 1)
    neighbours = centre.adjacent_4_way(Coord(3, 3))
    assert all(n is not None and n.dist(centre) == 1 for n in neighbours)
    assert len(set(neighbours)) == 4


def test_add_then_sub_round_trips():
    start = Coord(4, 9)
    assert (start + (3, 2)) - (3, 2) == start


def test_sub_below_zero_raises():
    with pytest.raises(ValueError):
        Coord(0, 5) - (1, 0)
    with pytest.raises(ValueError):
        Coord(5, 0) - (0, 1)


def test_ordering_is_row_major():
    assert sorted([Coord(1, 0), Coord(0, 5)]) == [Coord(0, 5), Coord(1, 0)]