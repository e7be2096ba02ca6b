"""Clickable rectangular buttons."""

from __future__ import annotations

from dataclasses import dataclass

from .node import Color


@dataclass
class Button:
    """A labelled rectangle that toggles between an active and inactive colour."""

    x: int
    y: int
    width: int
    height: int
    active: bool
    active_color: Color
    inactive_color: Color
    text: str

    def flip_active_state(self) -> None:
        """Toggle the active flag."""
        self.active = not self.active

    def current_color(self) -> Color:
        """The colour matching the current state."""
        return self.active_color if self.active else self.inactive_color

    def is_within_bounds(self, x: int, y: int) -> bool:
        """Whether the point lies on the button, edges included."""
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height