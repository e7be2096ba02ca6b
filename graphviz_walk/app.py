"""The interactive application: canvas clicks edit the graph, panel buttons pick modes."""

from __future__ import annotations

import argparse
import random
import time
from enum import Enum, auto

import pygame

from .button import Button
from .node import Color, Node
from .window import Window

WIDTH = 1920
HEIGHT = 1080
GRAPH_AREA_LIMIT_X = int(WIDTH * 0.8)
GRAPH_AREA_LIMIT_Y = int(HEIGHT * 0.9)
FRAMERATE_LIMIT = 60

NODE_RADIUS = 15
NODE_PADDING = 30
CREATION_BUTTON_BASE = (1600, 100)
SELECT_NODE_BUTTON_BASE = (1600, 415)
ALGORITHM_BUTTON_BASE = (1600, 600)
QUIT_BUTTON_BASE = (1600, 800)
BUTTON_HEIGHT = 50
BUTTON_WIDTH = 250
BUTTON_SPACING = 65

RANDOM_NODES = 20
RANDOM_EDGES = 30
ALGORITHM_SPEED = 1
RESULT_PAUSE_SECONDS = 5.0

TITLE = "Graph Visualizer"

LIGHT_GRAY = Color(148, 148, 148)
DARK_GRAY = Color(84, 84, 84)

_HELP_LINES = (
    "* Use the create node function and select two nodes to create or delete the edge between them.",
    "* During traversal orange nodes indicate frontier nodes (those on queue/stack), green indicates "
    "fully explored nodes, pink indicates start/goal nodes, and red indicates unexplored nodes.",
    "* You can modify the number of random nodes and edges by changing RANDOM_NODES and RANDOM_EDGES "
    "in the source code. Can also adjust animation speed with ALGORITHM_SPEED variable.",
)
_HELP_BASE = (150, 960)
_HELP_SPACING = 25
_HELP_SIZE = 15


class CreationState(Enum):
    """What a click on the canvas does."""

    CREATE = auto()
    DELETE = auto()
    RANDOM = auto()
    CLEARED = auto()
    SELECT_START = auto()
    SELECT_END = auto()
    NONE = auto()


def _panel_button(base: tuple[int, int], row: int, active: bool, text: str) -> Button:
    x, y = base
    return Button(
        x, y + BUTTON_SPACING * row, BUTTON_WIDTH, BUTTON_HEIGHT, active, DARK_GRAY, LIGHT_GRAY, text
    )


class App:
    """Holds the window, the mode buttons and the user's current selections."""

    def __init__(
        self,
        window: Window | None = None,
        *,
        random_nodes: int = RANDOM_NODES,
        random_edges: int = RANDOM_EDGES,
        speed: int = ALGORITHM_SPEED,
        animate: bool = True,
    ) -> None:
        if window is None:
            window = Window(WIDTH, HEIGHT, TITLE, FRAMERATE_LIMIT, show=True)
        self.window = window
        self.random_nodes = random_nodes
        self.random_edges = random_edges
        self.speed = speed
        self.animate = animate
        self.state = CreationState.CREATE
        self.running = True

        self.selected_src: int | None = None
        self.selected_dst: int | None = None
        self.start_id: int | None = None
        self.end_id: int | None = None

        self.create_button = _panel_button(CREATION_BUTTON_BASE, 0, True, "Create Node")
        self.delete_button = _panel_button(CREATION_BUTTON_BASE, 1, False, "Delete Node")
        self.random_button = _panel_button(CREATION_BUTTON_BASE, 2, False, "Random Graph")
        self.clear_button = _panel_button(CREATION_BUTTON_BASE, 3, False, "Clear Graph")
        self.start_button = _panel_button(SELECT_NODE_BUTTON_BASE, 0, False, "Choose Start Node")
        self.end_button = _panel_button(SELECT_NODE_BUTTON_BASE, 1, False, "Choose End Node")
        self.bfs_button = _panel_button(ALGORITHM_BUTTON_BASE, 0, False, "BFS")
        self.dfs_button = _panel_button(ALGORITHM_BUTTON_BASE, 1, False, "DFS")
        self.quit_button = _panel_button(QUIT_BUTTON_BASE, 0, False, "Quit")

        for button in (
            self.create_button,
            self.delete_button,
            self.random_button,
            self.clear_button,
            self.start_button,
            self.end_button,
            self.bfs_button,
            self.dfs_button,
            self.quit_button,
        ):
            self.window.add_button(button)

        base_x, base_y = _HELP_BASE
        for row, line in enumerate(_HELP_LINES):
            self.window.add_text(line, (base_x, base_y + _HELP_SPACING * row), _HELP_SIZE, Color.WHITE)

    # Selection bookkeeping

    def _clear_selection(self) -> None:
        self.selected_src = None
        self.selected_dst = None

    def _clear_endpoints(self) -> None:
        self.start_id = None
        self.end_id = None

    # Canvas clicks

    def _toggle_selection(self, node_id: int) -> None:
        window = self.window
        color = window.node_color(node_id)
        if color in (Color.RED, Color.PINK):
            if color == Color.RED:
                window.set_node_color(node_id, Color.BLUE)
            if self.selected_src is None:
                self.selected_src = node_id
            elif self.selected_dst is None:
                self.selected_dst = node_id
        else:
            window.set_node_color(node_id, Color.RED)
            if self.selected_src == node_id:
                self.selected_src = None
            elif self.selected_dst == node_id:
                self.selected_dst = None

    def _link_selection(self) -> None:
        if self.selected_src is None or self.selected_dst is None:
            return
        window = self.window
        window.edge_handler(self.selected_src, self.selected_dst, True, Color.WHITE)
        for node_id in (self.selected_src, self.selected_dst):
            if window.node_color(node_id) != Color.PINK:
                window.set_node_color(node_id, Color.RED)
        self._clear_selection()

    def _click_canvas(self, x: int, y: int) -> None:
        window = self.window
        graph = window.graph
        node_id = graph.node_at(x, y)

        if self.state is CreationState.CREATE:
            if node_id is None:
                window.add_node(
                    Node(graph.assign_node_id(), x, y, NODE_RADIUS, NODE_PADDING, 1.0, Color.RED)
                )
                return
            if graph.nodes[node_id].strictly_within_bounds(x, y):
                self._toggle_selection(node_id)
            self._link_selection()
        elif self.state is CreationState.DELETE:
            if node_id is not None and graph.nodes[node_id].strictly_within_bounds(x, y):
                window.remove_node(node_id)
        elif self.state is CreationState.SELECT_START:
            if node_id is not None:
                if self.start_id is not None:
                    window.set_node_color(self.start_id, Color.RED)
                self.start_id = node_id
                window.set_node_color(node_id, Color.PINK)
        elif self.state is CreationState.SELECT_END:
            if node_id is not None:
                if self.end_id is not None:
                    window.set_node_color(self.end_id, Color.RED)
                self.end_id = node_id
                window.set_node_color(node_id, Color.PINK)

    # Panel clicks

    def _activate(self, state: CreationState, button: Button) -> None:
        self.state = state
        self.window.set_all_buttons_inactive()
        button.flip_active_state()

    def _traverse(self, button: Button, use_bfs: bool) -> bool:
        if self.start_id is None or self.end_id is None:
            return False
        start, end = self.start_id, self.end_id
        window = self.window
        self._activate(CreationState.NONE, button)
        testing = not self.animate
        if use_bfs:
            found = window.bfs(start, end, self.speed, testing)
        else:
            found = window.dfs(start, start, end, self.speed, set(), testing)
        if found:
            window.reset_graph(False)
            window.draw_path(start, end)
        else:
            window.red_out_graph()
        window.update()
        window.display()
        button.flip_active_state()
        return True

    def _click_panel(self, x: int, y: int) -> bool:
        window = self.window
        if self.create_button.is_within_bounds(x, y):
            self._activate(CreationState.CREATE, self.create_button)
        elif self.delete_button.is_within_bounds(x, y):
            self._activate(CreationState.DELETE, self.delete_button)
        elif self.random_button.is_within_bounds(x, y):
            self._activate(CreationState.RANDOM, self.random_button)
            window.generate_random_graph(
                self.random_nodes, self.random_edges, NODE_RADIUS, NODE_PADDING, Color.RED, False
            )
            self._clear_selection()
            self._clear_endpoints()
        elif self.clear_button.is_within_bounds(x, y):
            self.state = CreationState.CLEARED
            window.clear_graph()
            window.set_all_buttons_inactive()
            self.clear_button.flip_active_state()
            self._clear_selection()
            self._clear_endpoints()
        elif self.start_button.is_within_bounds(x, y):
            self._activate(CreationState.SELECT_START, self.start_button)
        elif self.end_button.is_within_bounds(x, y):
            self._activate(CreationState.SELECT_END, self.end_button)
        elif self.bfs_button.is_within_bounds(x, y):
            return self._traverse(self.bfs_button, use_bfs=True)
        elif self.dfs_button.is_within_bounds(x, y):
            return self._traverse(self.dfs_button, use_bfs=False)
        elif self.quit_button.is_within_bounds(x, y):
            self.running = False
        return False

    def handle_click(self, x: int, y: int) -> bool:
        """Act on a mouse click; True when a traversal ran and its result is on show."""
        if x <= GRAPH_AREA_LIMIT_X and y <= GRAPH_AREA_LIMIT_Y:
            self._click_canvas(x, y)
            return False
        return self._click_panel(x, y)

    def _finish_traversal(self) -> None:
        self.window.reset_graph(True)
        self._clear_selection()
        self._clear_endpoints()

    def run(self) -> None:
        """Process events and redraw until the window is closed or Quit is pressed."""
        while self.running:
            traversal_shown = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    x, y = event.pos
                    if self.handle_click(x, y):
                        traversal_shown = True
            if traversal_shown:
                time.sleep(RESULT_PAUSE_SECONDS)
                self._finish_traversal()
            self.window.update()
            self.window.display()


def main(argv: list[str] | None = None) -> int:
    """Open the visualiser window and run it until closed."""
    parser = argparse.ArgumentParser(prog="graphviz-walk", description="Draw graphs and watch BFS and DFS.")
    parser.parse_args(argv)
    pygame.init()
    try:
        window = Window(WIDTH, HEIGHT, TITLE, FRAMERATE_LIMIT, show=True, rng=random.Random())
        App(window).run()
    finally:
        pygame.quit()
    return 0