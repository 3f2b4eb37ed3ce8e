"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with a width, a height and an area.

    Example::

        r = Rectangle(10, 20)
        r.width       # 10
        r.get_area()  # 200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    return Rectangle(width=width, height=height)
