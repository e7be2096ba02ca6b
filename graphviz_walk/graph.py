"""A graph of placed nodes with traversals that colour what they visit."""

from __future__ import annotations

from collections import deque

from .edge import Edge
from .node import Color, Node


class Graph:
    """Nodes keyed by id, a list of directed edges and an adjacency map."""

    def __init__(self) -> None:
        self.nodes: dict[int, Node] = {}
        self.edges: list[Edge] = []
        self.adjacency: dict[int, list[int]] = {}
        self._next_id = 0

    def reset(self, hard_reset: bool) -> None:
        """Recolour nodes red and edges white; a hard reset also clears paths."""
        for node in self.nodes.values():
            node.color = Color.RED
            if hard_reset:
                node.prev = None
        for edge in self.edges:
            edge.color = Color.WHITE

    def node_at(self, x: int, y: int) -> int | None:
        """Id of the lowest-numbered node whose padded area holds the point."""
        for node_id in sorted(self.nodes):
            if self.nodes[node_id].within_bounds(x, y):
                return node_id
        return None

    def assign_node_id(self) -> int:
        """Hand out the next unused node id."""
        node_id = self._next_id
        self._next_id += 1
        return node_id

    def add_node(self, node: Node) -> None:
        """Add a node; raises ValueError if its id is taken."""
        if node.id in self.nodes:
            raise ValueError(f"node {node.id} already exists")
        self.nodes[node.id] = node
        self.adjacency[node.id] = []

    def remove_node(self, node_id: int) -> None:
        """Remove a node with every edge touching it; KeyError if unknown."""
        if node_id not in self.nodes:
            raise KeyError(node_id)
        del self.nodes[node_id]
        self.edges = [e for e in self.edges if node_id not in (e.src, e.dst)]
        for neighbours in self.adjacency.values():
            neighbours[:] = [n for n in neighbours if n != node_id]
        del self.adjacency[node_id]

    def has_edge(self, src_id: int, dst_id: int) -> bool:
        """Whether any edge joins the two ids in either direction."""
        return any(edge.connects(src_id, dst_id) for edge in self.edges)

    def _link(self, src_id: int, dst_id: int, weight: float, bidirectional: bool, color: Color) -> None:
        for node_id in (src_id, dst_id):
            if node_id not in self.adjacency:
                raise KeyError(node_id)
        self.edges.append(Edge(src_id, dst_id, weight, bidirectional, color))
        if bidirectional:
            self.edges.append(Edge(dst_id, src_id, weight, True, color))
            self.adjacency[src_id].append(dst_id)
            self.adjacency[dst_id].append(src_id)
        else:
            self.adjacency[src_id].append(dst_id)

    def add_edge(self, src_id: int, dst_id: int, bidirectional: bool, color: Color) -> None:
        """Add an edge of weight 1; ValueError if the nodes are already joined."""
        if self.has_edge(src_id, dst_id):
            raise ValueError(f"edge between {src_id} and {dst_id} already exists")
        self._link(src_id, dst_id, 1.0, bidirectional, color)

    def add_weighted_edge(
        self, src_id: int, dst_id: int, weight: float, bidirectional: bool, color: Color
    ) -> None:
        """Add a weighted edge; ValueError if this exact direction exists."""
        if any(e.src == src_id and e.dst == dst_id for e in self.edges):
            raise ValueError(f"edge from {src_id} to {dst_id} already exists")
        self._link(src_id, dst_id, float(weight), bidirectional, color)

    def remove_edge(self, src_id: int, dst_id: int) -> None:
        """Remove the edge in each direction and the matching adjacency entries.

        Raises KeyError if no edge or no adjacency entry was found.
        """
        src_neighbours = self.adjacency[src_id]
        dst_neighbours = self.adjacency[dst_id]
        edge_removed = False
        for a, b in ((src_id, dst_id), (dst_id, src_id)):
            match = next((e for e in self.edges if e.src == a and e.dst == b), None)
            if match is not None:
                self.edges.remove(match)
                edge_removed = True
        entry_removed = False
        for neighbours, target in ((src_neighbours, dst_id), (dst_neighbours, src_id)):
            if target in neighbours:
                neighbours.remove(target)
                entry_removed = True
        if not (edge_removed and entry_removed):
            raise KeyError((src_id, dst_id))

    def _explore(self, node_id: int, neighbour: int, start: int) -> None:
        for edge in self.edges:
            if edge.connects(node_id, neighbour):
                edge.color = Color.RED
        target = self.nodes[neighbour]
        if target.prev is None and neighbour != start:
            target.prev = node_id

    def bfs(self, start: int, end: int) -> bool:
        """Breadth-first search from ``start``, recording paths and colours."""
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
                self.nodes[node_id].color = Color.GREEN
            for neighbour in list(self.adjacency[node_id]):
                self._explore(node_id, neighbour, start)
                queue.append(neighbour)
                if neighbour not in (start, end):
                    self.nodes[neighbour].color = Color.ORANGE
        return False

    def dfs(self, curr: int, start: int, end: int, visited: set[int] | None = None) -> bool:
        """Depth-first search from ``curr``, recording paths and colours."""
        if visited is None:
            visited = set()
        if curr == end:
            return True
        if curr in visited:
            return False
        visited.add(curr)
        found = False
        for neighbour in list(self.adjacency[curr]):
            self._explore(curr, neighbour, start)
            if self.dfs(neighbour, start, end, visited):
                found = True
                break
            if neighbour not in (start, end):
                self.nodes[neighbour].color = Color.ORANGE
        self.nodes[curr].color = Color.GREEN
        return found