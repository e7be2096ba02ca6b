"""Graph edges."""

from __future__ import annotations

from dataclasses import dataclass, field

from .node import Color


@dataclass
class Edge:
    """A directed link between two node ids; colour takes no part in equality."""

    src: int
    dst: int
    weight: float = 1.0
    bidirectional: bool = False
    color: Color = field(default=Color.WHITE, compare=False)

    def connects(self, a: int, b: int) -> bool:
        """Whether this edge joins ``a`` and ``b`` in either direction."""
        return (self.src == a and self.dst == b) or (self.src == b and self.dst == a)