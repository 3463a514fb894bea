import pytest

from librarydash.geometry import Rect


@pytest.mark.parametrize("rect", [Rect(0, 0, 1, 1), Rect(10, 20, 5, 7), Rect(-30, -4, 25, 25)])
def test_edges_are_inclusive(rect):
    assert rect.right() - rect.x + 1 == rect.width
    assert rect.bottom() - rect.y + 1 == rect.height


def test_overlapping_rects_intersect_both_ways():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 5, 10, 10)
    assert a.intersects(b)
    assert b.intersects(a)


def test_adjacent_rects_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    assert not a.intersects(Rect(a.right() + 1, 0, 10, 10))
    assert not a.intersects(Rect(0, a.bottom() + 1, 10, 10))


def test_shared_edge_pixel_counts_as_intersection():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(a.right(), a.bottom(), 10, 10))


def test_contained_rect_intersects():
    outer = Rect(0, 0, 100, 100)
    inner = Rect(40, 40, 4, 4)
    assert outer.intersects(inner)
    assert inner.intersects(outer)


def test_empty_rect_never_intersects():
    a = Rect(0, 0, 10, 10)
    assert not a.intersects(Rect(5, 5, 0, 5))
    assert not Rect(5, 5, 5, 0).intersects(a)
    assert Rect(5, 5, 0, 0).is_empty