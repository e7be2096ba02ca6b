import random

import pytest

from graphviz_walk.app import (
    DARK_GRAY,
    GRAPH_AREA_LIMIT_X,
    LIGHT_GRAY,
    NODE_RADIUS,
    App,
    CreationState,
    main,
)
from graphviz_walk.node import Color


@pytest.fixture
def app():
    from graphviz_walk.window import Window

    return App(Window(rng=random.Random(7)), random_nodes=6, random_edges=4, animate=False)


def press(app, button):
    return app.handle_click(button.x + button.width // 2, button.y + button.height // 2)


def make_chain(app):
    """Place three nodes at (100,100), (300,100), (500,100) and link 0-1 and 1-2."""
    for x in (100, 300, 500):
        app.handle_click(x, 100)
    for a, b in ((100, 300), (300, 500)):
        app.handle_click(a, 100)
        app.handle_click(b, 100)


def choose_endpoints(app, start_xy, end_xy):
    press(app, app.start_button)
    app.handle_click(*start_xy)
    press(app, app.end_button)
    app.handle_click(*end_xy)


def test_initial_state(app):
    assert app.state is CreationState.CREATE
    assert app.create_button.active
    assert app.create_button.current_color() == DARK_GRAY
    assert app.delete_button.current_color() == LIGHT_GRAY
    assert len(app.window.buttons) == 9
    assert app.start_id is None and app.end_id is None


def test_click_on_empty_canvas_adds_red_node(app):
    assert app.handle_click(100, 120) is False
    node = app.window.graph.nodes[0]
    assert (node.x, node.y) == (100, 120)
    assert node.radius == NODE_RADIUS
    assert node.color == Color.RED


def test_selecting_two_nodes_creates_edge(app):
    app.handle_click(100, 100)
    app.handle_click(300, 100)
    app.handle_click(100, 100)
    assert app.window.node_color(0) == Color.BLUE
    assert app.selected_src == 0
    app.handle_click(300, 100)
    graph = app.window.graph
    assert graph.has_edge(0, 1)
    assert len(graph.edges) == 2
    assert app.window.node_color(0) == Color.RED
    assert app.window.node_color(1) == Color.RED
    assert app.selected_src is None and app.selected_dst is None


def test_selecting_linked_nodes_removes_edge(app):
    make_chain(app)
    app.handle_click(100, 100)
    app.handle_click(300, 100)
    graph = app.window.graph
    assert not graph.has_edge(0, 1)
    assert graph.has_edge(1, 2)
    assert graph.adjacency[0] == []


def test_clicking_selected_node_deselects(app):
    app.handle_click(100, 100)
    app.handle_click(100, 100)
    app.handle_click(100, 100)
    assert app.window.node_color(0) == Color.RED
    assert app.selected_src is None
    assert len(app.window.graph.nodes) == 1


def test_click_in_padding_neither_adds_nor_selects(app):
    app.handle_click(100, 100)
    app.handle_click(100 + NODE_RADIUS + 5, 100)
    assert list(app.window.graph.nodes) == [0]
    assert app.window.node_color(0) == Color.RED
    assert app.selected_src is None


def test_delete_mode_removes_node_and_edges(app):
    make_chain(app)
    press(app, app.delete_button)
    assert app.state is CreationState.DELETE
    assert app.delete_button.active and not app.create_button.active
    app.handle_click(300, 100)
    graph = app.window.graph
    assert sorted(graph.nodes) == [0, 2]
    assert graph.edges == []


def test_choosing_start_again_restores_previous(app):
    make_chain(app)
    press(app, app.start_button)
    app.handle_click(100, 100)
    assert app.start_id == 0
    assert app.window.node_color(0) == Color.PINK
    app.handle_click(300, 100)
    assert app.start_id == 1
    assert app.window.node_color(0) == Color.RED
    assert app.window.node_color(1) == Color.PINK


def test_pink_node_stays_pink_after_linking(app):
    for x in (100, 300):
        app.handle_click(x, 100)
    press(app, app.start_button)
    app.handle_click(100, 100)
    press(app, app.create_button)
    app.handle_click(100, 100)
    app.handle_click(300, 100)
    assert app.window.graph.has_edge(0, 1)
    assert app.window.node_color(0) == Color.PINK
    assert app.window.node_color(1) == Color.RED


def test_bfs_draws_found_path(app):
    make_chain(app)
    choose_endpoints(app, (100, 100), (500, 100))
    assert press(app, app.bfs_button) is True
    assert app.state is CreationState.NONE
    assert not any(button.active for button in app.window.buttons)
    assert app.window.node_color(0) == Color.PINK
    assert app.window.node_color(1) == Color.GREEN
    assert app.window.node_color(2) == Color.PINK
    assert all(edge.color == Color.GREEN for edge in app.window.graph.edges)


def test_dfs_draws_found_path(app):
    make_chain(app)
    choose_endpoints(app, (500, 100), (100, 100))
    assert press(app, app.dfs_button) is True
    assert app.window.graph.nodes[0].prev == 1
    assert app.window.graph.nodes[1].prev == 2
    assert app.window.node_color(1) == Color.GREEN
    assert app.window.node_color(0) == Color.PINK


def test_unreachable_end_reds_out_graph(app):
    for x in (100, 300, 500):
        app.handle_click(x, 100)
    app.handle_click(100, 100)
    app.handle_click(300, 100)
    choose_endpoints(app, (100, 100), (500, 100))
    assert press(app, app.bfs_button) is True
    window = app.window
    assert all(window.node_color(n) == Color.RED for n in window.graph.nodes)
    assert all(edge.color == Color.RED for edge in window.graph.edges)


def test_traversal_needs_both_endpoints(app):
    make_chain(app)
    press(app, app.start_button)
    app.handle_click(100, 100)
    assert press(app, app.bfs_button) is False
    assert press(app, app.dfs_button) is False
    assert app.state is CreationState.SELECT_START
    assert app.start_button.active


def test_canvas_ignored_after_traversal(app):
    make_chain(app)
    choose_endpoints(app, (100, 100), (500, 100))
    press(app, app.bfs_button)
    app.handle_click(700, 400)
    assert len(app.window.graph.nodes) == 3


def test_random_graph_button(app):
    make_chain(app)
    choose_endpoints(app, (100, 100), (500, 100))
    press(app, app.random_button)
    graph = app.window.graph
    assert app.state is CreationState.RANDOM
    assert app.random_button.active
    assert len(graph.nodes) == app.random_nodes
    assert len(graph.edges) == 2 * app.random_edges
    assert app.start_id is None and app.end_id is None
    for node in graph.nodes.values():
        assert node.x <= GRAPH_AREA_LIMIT_X
        assert node.color == Color.RED


def test_clear_graph_button(app):
    make_chain(app)
    choose_endpoints(app, (100, 100), (500, 100))
    press(app, app.clear_button)
    assert app.state is CreationState.CLEARED
    assert app.clear_button.active
    assert app.window.graph.nodes == {}
    assert app.start_id is None and app.end_id is None


def test_quit_button_stops_running(app):
    assert app.running
    press(app, app.quit_button)
    assert app.running is False


def test_click_on_empty_panel_changes_nothing(app):
    assert app.handle_click(GRAPH_AREA_LIMIT_X + 10, 50) is False
    assert app.state is CreationState.CREATE
    assert app.create_button.active
    assert app.window.graph.nodes == {}


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2