import dataclasses

import pytest

from starvolley.geometry import WIN_HEIGHT, WIN_WIDTH, Point, Rect, intersects


def test_window_size_is_fixed():
    window = Rect(0, 0, WIN_WIDTH, WIN_HEIGHT)
    assert window.center() == Point(512, 384)
    assert intersects(window, Rect(1023, 767, 1, 1))
    assert not intersects(window, Rect(1024, 0, 10, 10))
    assert not intersects(window, Rect(0, 768, 10, 10))


def test_center_of_rect():
    assert Rect(0, 0, 10, 20).center() == Point(5, 10)


def test_center_lies_inside_rect():
    rect = Rect(3.5, -7.0, 13, 33)
    c = rect.center()
    assert rect.x < c.x < rect.x + rect.width
    assert rect.y < c.y < rect.y + rect.height


def test_overlapping_rects_intersect():
    assert intersects(Rect(0, 0, 10, 10), Rect(5, 5, 10, 10))


def test_contained_rect_intersects():
    assert intersects(Rect(0, 0, 100, 100), Rect(40, 40, 5, 5))


def test_touching_edges_do_not_intersect():
    a = Rect(0, 0, 10, 10)
    assert not intersects(a, Rect(10, 0, 10, 10))
    assert not intersects(a, Rect(0, 10, 10, 10))


def test_separate_rects_do_not_intersect():
    assert not intersects(Rect(0, 0, 10, 10), Rect(50, 50, 10, 10))


def test_overlap_on_one_axis_only_is_not_enough():
    assert not intersects(Rect(0, 0, 10, 10), Rect(5, 30, 10, 10))


@pytest.mark.parametrize(
    "a,b",
    [
        (Rect(0, 0, 10, 10), Rect(5, 5, 10, 10)),
        (Rect(0, 0, 10, 10), Rect(20, 0, 10, 10)),
        (Rect(-5, -5, 3, 3), Rect(-4, -4, 1, 1)),
    ],
)
def test_intersection_is_symmetric(a, b):
    assert intersects(a, b) == intersects(b, a)


def test_zero_width_rect_never_intersects():
    assert not intersects(Rect(5, 5, 0, 10), Rect(0, 0, 20, 20))


def test_rect_is_immutable():
    rect = Rect(0, 0, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        rect.x = 5
    assert rect.x == 0
    assert rect.center() == Point(0.5, 0.5)