import pytest

from mutiny.collision import FloatRect, check_rect_collision


def test_overlapping_rectangles_collide():
    a = FloatRect(0, 0, 10, 10)
    b = FloatRect(5, 5, 10, 10)
    assert check_rect_collision(a, b) is True


def test_contained_rectangle_collides():
    outer = FloatRect(0, 0, 100, 100)
    inner = FloatRect(40, 40, 5, 5)
    assert outer.intersects(inner)
    assert inner.intersects(outer)


@pytest.mark.parametrize(
    "other",
    [
        FloatRect(10, 0, 5, 5),
        FloatRect(0, 10, 5, 5),
        FloatRect(-5, 0, 5, 5),
        FloatRect(0, -5, 5, 5),
    ],
)
def test_touching_edges_do_not_collide(other):
    assert check_rect_collision(FloatRect(0, 0, 10, 10), other) is False


def test_separated_rectangles_do_not_collide():
    assert not check_rect_collision(FloatRect(0, 0, 1, 1), FloatRect(50, 50, 1, 1))


@pytest.mark.parametrize(
    "a, b",
    [
        (FloatRect(0, 0, 10, 10), FloatRect(9, 9, 3, 3)),
        (FloatRect(0, 0, 10, 10), FloatRect(20, 0, 3, 3)),
        (FloatRect(-3, 2, 4, 1), FloatRect(0, 2.5, 1, 1)),
    ],
)
def test_collision_is_symmetric(a, b):
    assert check_rect_collision(a, b) == check_rect_collision(b, a)