import pytest

from swordlord.tiles import Rect, Tile


def test_overlapping_rects_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    b = Rect(10, 0, 10, 10)
    assert not a.intersects(b)
    assert not a.intersects(Rect(0, 10, 10, 10))


def test_empty_rect_never_intersects():
    a = Rect(0, 0, 10, 10)
    assert not a.intersects(Rect(2, 2, 0, 5))
    assert not a.intersects(Rect(2, 2, 5, -1))


def test_separated_rects_do_not_intersect():
    assert not Rect(0, 0, 5, 5).intersects(Rect(20, 20, 5, 5))


@pytest.mark.parametrize(
    "point, inside",
    [((0, 0), True), ((9.5, 9.5), True), ((10, 5), False), ((5, 10), False), ((-1, 5), False)],
)
def test_contains_point(point, inside):
    assert Rect(0, 0, 10, 10).contains_point(*point) is inside


def test_moved_returns_shifted_copy():
    original = Rect(1, 2, 3, 4)
    shifted = original.moved(10, -2)
    assert shifted == Rect(11, 0, 3, 4)
    assert original == Rect(1, 2, 3, 4)


def test_tile_defaults_are_not_solid():
    tile = Tile()
    assert tile.solid is False
    assert tile.rect.is_empty