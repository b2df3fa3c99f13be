"""Axis-aligned pixel rectangles with closed-interval edges."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Rectangle occupying ``width`` x ``height`` discrete cells from (left, top).

    Edges are inclusive: ``right()`` and ``bottom()`` name the last occupied
    column and row, so a zero-width rectangle has ``right() == left - 1``.
    """

    left: float
    top: float
    width: float
    height: float

    def right(self) -> float:
        return self.left + self.width - 1

    def bottom(self) -> float:
        return self.top + self.height - 1

    def contains_point(self, x: float, y: float) -> bool:
        """Return True when (x, y) lies within the closed rectangle."""
        return self.left <= x <= self.right() and self.top <= y <= self.bottom()

    def intersects(self, other: Rectangle) -> bool:
        """Return True unless the rectangles are separated on either axis."""
        return not (
            self.left > other.right()
            or self.right() < other.left
            or self.top > other.bottom()
            or self.bottom() < other.top
        )

    def to_dict(self) -> dict[str, float]:
        """Serialize to a JSON-compatible dictionary including derived edges."""
        return {
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
            "right": self.right(),
            "bottom": self.bottom(),
        }

    def __str__(self) -> str:
        return f"({self.left}, {self.top}) {self.width} x {self.height}"
