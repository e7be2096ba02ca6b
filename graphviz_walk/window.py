"""The drawing window: owns the graph, its buttons and labels, and animates traversals."""

from __future__ import annotations

import contextlib
import random
import time
from collections import deque
from dataclasses import dataclass

import pygame

from .button import Button
from .graph import Graph
from .node import Color, Node


@dataclass
class _Label:
    text: str
    position: tuple[int, int]
    size: int
    color: Color


def _rgba(color: Color) -> pygame.Color:
    return pygame.Color(color.r, color.g, color.b, color.a)


def _weight_label(weight: float) -> str:
    """Format a weight with two decimals, truncated rather than rounded."""
    text = f"{weight:.6f}"
    return text[: text.find(".") + 3]


class Window:
    """A canvas holding a graph, buttons and labels.

    With ``show`` false the window draws to an off-screen surface, which is
    what tests and scripted use want; with ``show`` true it opens a display.
    """

    def __init__(
        self,
        width: int = 1920,
        height: int = 1080,
        title: str = "Graph Visualizer",
        framerate_limit: int = 60,
        font_path: str | None = None,
        *,
        show: bool = False,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.title = title
        self.framerate_limit = framerate_limit
        self.font_path = font_path
        self.shown = show
        self.graph = Graph()
        self.buttons: list[Button] = []
        self._labels: list[_Label] = []
        self._fonts: dict[int, pygame.font.Font] = {}
        self._rng = rng if rng is not None else random.Random()
        self._clock = pygame.time.Clock()
        if show:
            pygame.init()
            self.surface = pygame.display.set_mode((width, height))
            pygame.display.set_caption(title)
        else:
            self.surface = pygame.Surface((width, height))

    # Graph and widget bookkeeping

    def add_node(self, node: Node) -> None:
        """Add a node to the graph; ValueError if its id is taken."""
        self.graph.add_node(node)

    def remove_node(self, node_id: int) -> None:
        """Remove a node and its edges; KeyError if unknown."""
        self.graph.remove_node(node_id)

    def add_button(self, button: Button) -> None:
        """Register a button to be drawn."""
        self.buttons.append(button)

    def set_all_buttons_inactive(self) -> None:
        """Switch every active button off."""
        for button in self.buttons:
            if button.active:
                button.flip_active_state()

    def node_color(self, node_id: int) -> Color:
        """Current colour of a node."""
        return self.graph.nodes[node_id].color

    def set_node_color(self, node_id: int, color: Color) -> None:
        """Recolour a node."""
        self.graph.nodes[node_id].color = color

    def edge_handler(self, src_id: int, dst_id: int, bidirectional: bool, color: Color) -> None:
        """Remove the edge between two nodes if present, otherwise add one."""
        if self.graph.has_edge(src_id, dst_id):
            with contextlib.suppress(KeyError):
                self.graph.remove_edge(src_id, dst_id)
        else:
            self.graph.add_edge(src_id, dst_id, bidirectional, color)

    def generate_random_graph(
        self,
        nodes: int,
        edges: int,
        node_radius: int,
        padding: int,
        node_color: Color,
        weighted: bool,
    ) -> None:
        """Replace the graph with randomly placed nodes joined by random edges.

        Every node gets weight 1; ``weighted`` is accepted but changes nothing.
        """
        self.graph = Graph()
        area_x = int(self.width * 0.8)
        area_y = int(self.height * 0.9)
        span_x = int(self.width * 0.8 - 2 * padding)
        span_y = int(self.height * 0.9 - 2 * padding)
        for _ in range(nodes):
            x = self._rng.randrange(span_x) + padding
            y = self._rng.randrange(span_y) + padding
            while self.graph.node_at(x, y) is not None:
                x = self._rng.randrange(area_x)
                y = self._rng.randrange(area_y)
            value = 1.0
            node = Node(self.graph.assign_node_id(), x, y, node_radius, padding, value, node_color)
            self.graph.add_node(node)

        for _ in range(edges):
            src = self._rng.randrange(nodes)
            dst = self._rng.randrange(nodes)
            while self.graph.has_edge(src, dst):
                src = self._rng.randrange(nodes)
                dst = self._rng.randrange(nodes)
            self.graph.add_edge(src, dst, True, Color.WHITE)

    # Drawing

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(self.font_path, size)
            self._fonts[size] = font
        return font

    def draw_button(self, button: Button) -> None:
        """Draw a button with its label centred on it."""
        rect = pygame.Rect(button.x, button.y, button.width, button.height)
        pygame.draw.rect(self.surface, _rgba(button.current_color()), rect)
        rendered = self._font(20).render(button.text, True, _rgba(Color.BLACK))
        self.surface.blit(rendered, rendered.get_rect(center=rect.center))

    def add_text(self, text: str, position: tuple[int, int], size: int, color: Color) -> None:
        """Register a fixed label drawn at ``position`` on every update."""
        self._labels.append(_Label(text, (int(position[0]), int(position[1])), size, color))

    def draw_graph(self) -> None:
        """Draw nodes as circles, then edges as lines with non-unit weights labelled."""
        for node in self.graph.nodes.values():
            pygame.draw.circle(self.surface, _rgba(node.color), (node.x, node.y), node.radius)

        for edge in self.graph.edges:
            src = self.graph.nodes[edge.src]
            dst = self.graph.nodes[edge.dst]
            pygame.draw.line(self.surface, _rgba(edge.color), (src.x, src.y), (dst.x, dst.y))
            if edge.weight != 1:
                rendered = self._font(10).render(_weight_label(edge.weight), True, _rgba(Color.BLUE))
                midpoint = ((src.x + dst.x) // 2, (src.y + dst.y) // 2)
                self.surface.blit(rendered, midpoint)

    def update(self) -> None:
        """Clear the canvas and redraw buttons, labels and the graph."""
        self.surface.fill(_rgba(Color.BLACK))
        for button in self.buttons:
            self.draw_button(button)
        for label in self._labels:
            rendered = self._font(label.size).render(label.text, True, _rgba(label.color))
            self.surface.blit(rendered, label.position)
        self.draw_graph()

    def display(self) -> None:
        """Show the drawn frame, keeping to the frame-rate limit."""
        if not self.shown:
            return
        pygame.event.pump()
        pygame.display.flip()
        self._clock.tick(self.framerate_limit)

    def _frame(self, speed: int) -> None:
        self.update()
        self.display()
        time.sleep((1000 // speed) / 1000)

    # Graph state

    def clear_graph(self) -> None:
        """Discard the graph for an empty one."""
        self.graph = Graph()

    def reset_graph(self, hard_reset: bool) -> None:
        """Restore default colours; a hard reset also forgets traversal paths."""
        self.graph.reset(hard_reset)

    def red_out_graph(self) -> None:
        """Colour every node and edge red."""
        for node in self.graph.nodes.values():
            node.color = Color.RED
        for edge in self.graph.edges:
            edge.color = Color.RED

    def draw_path(self, start_id: int, end_id: int) -> None:
        """Colour the recorded path from ``end_id`` back to its origin green."""
        nodes = self.graph.nodes
        node_id = end_id
        while nodes[node_id].prev is not None:
            prev = nodes[node_id].prev
            nodes[node_id].color = Color.GREEN
            for edge in self.graph.edges:
                if edge.connects(node_id, prev):
                    edge.color = Color.GREEN
            node_id = prev
        nodes[start_id].color = Color.PINK
        nodes[end_id].color = Color.PINK

    # Traversals

    def _explore(self, node_id: int, neighbour: int, start: int) -> None:
        for edge in self.graph.edges:
            if edge.connects(node_id, neighbour):
                edge.color = Color.RED
        target = self.graph.nodes[neighbour]
        if target.prev is None and neighbour != start:
            target.prev = node_id

    def bfs(self, start: int, end: int, speed: int, testing: bool) -> bool:
        """Breadth-first search, drawing a frame per expanded node unless testing."""
        queue = deque([start])
        visited: set[int] = set()
        while queue:
            node_id = queue.popleft()
            if node_id in visited:
                continue
            if node_id == end:
                return True
            visited.add(node_id)
            if node_id != start:
                self.set_node_color(node_id, Color.GREEN)
            for neighbour in list(self.graph.adjacency[node_id]):
                self._explore(node_id, neighbour, start)
                queue.append(neighbour)
                if neighbour not in (start, end):
                    self.set_node_color(neighbour, Color.ORANGE)
            if not testing:
                self._frame(speed)
        return False

    def dfs(
        self,
        curr: int,
        start: int,
        end: int,
        speed: int,
        visited: set[int] | None,
        testing: bool,
    ) -> bool:
        """Depth-first search, drawing a frame per visited node unless testing."""
        if visited is None:
            visited = set()
        if not testing:
            if curr not in (start, end):
                self.set_node_color(curr, Color.ORANGE)
            self._frame(speed)
        if curr == end:
            return True
        if curr in visited:
            return False
        visited.add(curr)
        found = False
        for neighbour in list(self.graph.adjacency[curr]):
            self._explore(curr, neighbour, start)
            if self.dfs(neighbour, start, end, speed, visited, testing):
                found = True
                break
            if neighbour not in (start, end):
                self.set_node_color(neighbour, Color.ORANGE)
        self.set_node_color(curr, Color.GREEN)
        return found