"""Tests for closed-interval rectangle geometry."""

from __future__ import annotations

import pytest

from equirect_projection.geo.rectangle import Rectangle


def test_derived_edges_are_inclusive() -> None:
    """right/bottom name the last occupied column and row."""
    rect = Rectangle(-50, -50, 100, 100)

    assert rect.right() == 49
    assert rect.bottom() == 49


def test_contains_point_includes_both_edges() -> None:
    """Points on every edge are inside; one past the far edge is outside."""
    rect = Rectangle(0, 0, 10, 5)

    assert rect.contains_point(0, 0)
    assert rect.contains_point(9, 4)
    assert not rect.contains_point(10, 4)
    assert not rect.contains_point(9, 5)
    assert not rect.contains_point(-1, 0)


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (Rectangle(0, 0, 10, 10), Rectangle(5, 5, 10, 10), True),
        (Rectangle(0, 0, 10, 10), Rectangle(9, 9, 1, 1), True),
        (Rectangle(0, 0, 10, 10), Rectangle(10, 0, 10, 10), False),
        (Rectangle(0, 0, 10, 10), Rectangle(0, 10, 10, 10), False),
        (Rectangle(0, 0, 10, 10), Rectangle(-20, -20, 5, 5), False),
        (Rectangle(-50, -50, 100, 100), Rectangle(0, 0, 100, 100), True),
    ],
)
def test_intersects_is_symmetric(a: Rectangle, b: Rectangle, expected: bool) -> None:
    """Intersection result does not depend on argument order."""
    assert a.intersects(b) is expected
    assert b.intersects(a) is expected


def test_positive_rectangle_intersects_itself() -> None:
    """A rectangle with positive size intersects itself."""
    rect = Rectangle(3, -7, 2, 4)

    assert rect.intersects(rect)


def test_zero_width_rectangle_does_not_reach_its_own_left_column() -> None:
    """A zero-width rectangle ends one column before it starts."""
    empty = Rectangle(5, 0, 0, 10)

    assert empty.right() == 4
    assert not empty.intersects(Rectangle(5, 0, 10, 10))
    assert not empty.contains_point(5, 0)


def test_str_format() -> None:
    """The debug string shows origin and size."""
    assert str(Rectangle(-50, -50, 100, 100)) == "(-50, -50) 100 x 100"
    assert Rectangle(1, 2, 3, 4).to_dict()["right"] == 3
