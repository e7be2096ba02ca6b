"""Colours and graph nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    ORANGE: ClassVar[Color]
    PINK: ClassVar[Color]


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.ORANGE = Color(199, 119, 0)
Color.PINK = Color(255, 105, 180)


@dataclass
class Node:
    """A circular node placed on the canvas.

    ``padding`` widens the clickable area around the circle. ``prev`` holds
    the id of the node a traversal reached this one from; it takes no part
    in equality.
    """

    id: int
    x: int
    y: int
    radius: int
    padding: int
    value: float
    color: Color
    prev: int | None = field(default=None, compare=False)

    def within_bounds(self, x: int, y: int) -> bool:
        """Whether the point lies in the padded square around the node."""
        reach = self.radius + self.padding
        return self.x - reach <= x <= self.x + reach and self.y - reach <= y <= self.y + reach

    def strictly_within_bounds(self, x: int, y: int) -> bool:
        """Whether the point lies in the square bounding the circle itself."""
        reach = self.radius
        return self.x - reach <= x <= self.x + reach and self.y - reach <= y <= self.y + reach