# graphviz_walk

An interactive window for drawing small graphs and watching breadth-first
and depth-first search move through them.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
graphviz-walk
```

This opens a 1920×1080 window. The drawing area is on the left and a column of
buttons is on the right:

- **Create Node**: click an empty spot to place a node. Click two nodes, one
  after the other, to add an edge between them. If the edge is already there,
  the two clicks remove it instead. A selected node turns blue until the second
  node is chosen.
- **Delete Node**: click a node to remove it and every edge that touches it.
- **Random Graph**: replace the graph with 20 randomly placed nodes joined by
  30 random edges.
- **Clear Graph**: remove everything.
- **Choose Start Node** / **Choose End Node**: pick where the search begins
  and the node it looks for. Both are shown in pink.
- **BFS** / **DFS**: animate the search. These buttons do nothing until a
  start node and an end node have been chosen.
  - Orange nodes are the frontier.
  - Green nodes have been fully explored.
  - Pink marks the start and goal.
  - Red nodes have not been reached.

  If the goal is found, the path to it is drawn in green. If it cannot be
  reached, the whole graph turns red. After five seconds the colours return to
  normal and the start and end choices are cleared.
- **Quit**: close the window. Closing the window directly does the same.

## Using the model directly

The graph model works without a window:

```python
from graphviz_walk.graph import Graph
from graphviz_walk.node import Color, Node

graph = Graph()
for node_id in range(3):
    graph.add_node(Node(node_id, 100 * node_id, 100, 10, 5, 1, Color.WHITE))
graph.add_edge(0, 1, True, Color.WHITE)
graph.add_edge(1, 2, True, Color.WHITE)

assert graph.bfs(0, 2)
assert graph.nodes[2].prev == 1
```

`Graph` keeps its nodes in `nodes`, its directed edges in `edges` and its
neighbour lists in `adjacency`:

- A bidirectional edge is stored as two `Edge` objects, one for each
  direction.
- `add_node` raises `ValueError` if the id is already in use.
- `add_edge` raises `ValueError` if the two nodes are already joined.
- `remove_node` and `remove_edge` raise `KeyError` when there is nothing to
  remove.

`Graph.bfs(start, end)` and `Graph.dfs(curr, start, end, visited)` return
whether `end` can be reached. They also colour the nodes and edges they visit.
Each node they reach stores the id of the node it was reached from in its
`prev` field. You can follow these ids back from the goal to rebuild the path.

To restore the colours afterwards:

- `Graph.reset(False)` makes nodes red and edges white, and keeps the `prev`
  links.
- `Graph.reset(True)` does the same and also clears the `prev` links.

`graphviz_walk.window.Window` draws a graph with pygame. By default it draws
to an off-screen surface. Pass `show=True` to open a display. Its `bfs` and
`dfs` methods work like the graph's, with two extra arguments:

- `speed` sets the number of frames drawn per second while the search runs.
- `testing=True` skips drawing altogether.

`graphviz_walk.app.App` holds the buttons and the current mode.
`App.handle_click(x, y)` applies one mouse click, so the application can be
driven by a script.

## What it does not do

- Graphs cannot be saved or loaded. Everything is lost when the window closes.
- Edge weights can be set only through `Graph.add_weighted_edge`. The window
  creates edges of weight 1 only, and the searches ignore weights.
- The number of random nodes and edges and the animation speed cannot be set
  on the command line. Pass `random_nodes`, `random_edges` and `speed` to
  `App` instead.