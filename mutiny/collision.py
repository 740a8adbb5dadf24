"""Axis-aligned rectangle overlap tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FloatRect:
    """A rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def intersects(self, other: FloatRect) -> bool:
        """True when the rectangles overlap; touching edges do not count."""
        return (
            self.left + self.width > other.left
            and other.left + other.width > self.left
            and other.top + other.height > self.top
            and self.top + self.height > other.top
        )


def check_rect_collision(rect1: FloatRect, rect2: FloatRect) -> bool:
    """True when two rectangles overlap."""
    return rect1.intersects(rect2)