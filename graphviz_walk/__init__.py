"""Interactive graph builder with animated breadth-first and depth-first search."""

__version__ = "0.1.0"