"""Strict undirected weighted graph with validation and tree helpers.

`StrictGraph` extends `networkx.Graph` to enforce explicit node management and
predictable error handling, and adds the operations spanning-tree enumeration
relies on: weighted edge listing, cycle extraction from a vertex, tree checks
and copy-then-modify construction of new graphs.
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Optional, Tuple

import networkx as nx

NodeID = Hashable
AttrDict = Dict[str, Any]
Edge = Tuple[NodeID, NodeID]
WeightedEdge = Tuple[Edge, Any]


class StrictGraph(nx.Graph):
    """An undirected simple graph with strict rules.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes or duplicate edges (raises ValueError).
      - Removing a non-existent edge raises ValueError.
      - ``copy()`` always returns an independent, mutable graph, even when the
        source graph is frozen.

    Inherits from:
        networkx.Graph
    """

    @classmethod
    def from_weighted_edges(
        cls,
        vertices: Iterable[NodeID],
        weighted_edges: Iterable[WeightedEdge],
        weight_attr: str = "weight",
    ) -> StrictGraph:
        """Build a graph from a vertex collection and ``((u, v), weight)`` pairs.

        Args:
            vertices: Vertices to add, in order.
            weighted_edges: Edges with their weights.
            weight_attr: Attribute name the weights are stored under.

        Returns:
            StrictGraph: A new graph.
        """
        graph = cls()
        for vertex in vertices:
            graph.add_node(vertex)
        for (u, v), weight in weighted_edges:
            graph.add_edge(u, v, **{weight_attr: weight})
        return graph

    @classmethod
    def from_networkx(cls, nx_graph: nx.Graph) -> StrictGraph:
        """Convert an undirected NetworkX graph, keeping node and edge attributes.

        Args:
            nx_graph: Source graph. Directed graphs and multigraphs are rejected.

        Returns:
            StrictGraph: A new graph.

        Raises:
            ValueError: If ``nx_graph`` is directed or a multigraph.
        """
        if nx_graph.is_directed():
            raise ValueError("Directed graphs are not supported.")
        if nx_graph.is_multigraph():
            raise ValueError("Multigraphs are not supported.")
        graph = cls()
        for node, attr in nx_graph.nodes(data=True):
            graph.add_node(node, **attr)
        for u, v, attr in nx_graph.edges(data=True):
            graph.add_edge(u, v, **attr)
        return graph

    def copy(self, as_view: bool = False) -> StrictGraph:  # type: ignore[override]
        """Create an independent copy of this graph.

        Node and edge attribute dictionaries are copied, so changes to the copy
        never reach the source graph. The copy is mutable even if this graph
        is frozen.

        Args:
            as_view: If True, return a read-only view (NetworkX semantics).

        Returns:
            StrictGraph: A new graph.
        """
        if as_view:
            return super().copy(as_view=True)  # type: ignore[return-value]
        graph = self.__class__()
        graph.graph.update(self.graph)
        for node, attr in self.nodes(data=True):
            graph.add_node(node, **attr)
        for u, v, attr in self.edges(data=True):
            graph.add_edge(u, v, **attr)
        return graph

    def freeze(self) -> StrictGraph:
        """Make this graph immutable in place and return it."""
        return nx.freeze(self)

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    #
    # Edge management
    #
    def add_edge(self, u_for_edge: NodeID, v_for_edge: NodeID, **attr: Any) -> None:
        """Add an undirected edge between two existing nodes.

        Args:
            u_for_edge: First endpoint. Must exist in the graph.
            v_for_edge: Second endpoint. Must exist in the graph.
            **attr: Arbitrary edge attributes.

        Raises:
            ValueError: If either node does not exist or the edge already exists.
        """
        if u_for_edge not in self:
            raise ValueError(f"Node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Node '{v_for_edge}' does not exist.")
        if self.has_edge(u_for_edge, v_for_edge):
            raise ValueError(
                f"Edge ({u_for_edge!r}, {v_for_edge!r}) already exists in this graph."
            )
        super().add_edge(u_for_edge, v_for_edge, **attr)

    def remove_edge(self, u: NodeID, v: NodeID) -> None:
        """Remove the edge between ``u`` and ``v``.

        Raises:
            ValueError: If there is no such edge.
        """
        if not self.has_edge(u, v):
            raise ValueError(f"No edge ({u!r}, {v!r}) to remove.")
        super().remove_edge(u, v)

    #
    # Convenience methods
    #
    def edges_with_weights(
        self, weight_attr: str = "weight", default: Any = 1
    ) -> List[WeightedEdge]:
        """List every edge with its weight, in the graph's edge order.

        Args:
            weight_attr: Attribute holding the weight.
            default: Weight reported for edges without the attribute.

        Returns:
            List[WeightedEdge]: ``((u, v), weight)`` pairs.
        """
        return [
            ((u, v), attr.get(weight_attr, default))
            for u, v, attr in self.edges(data=True)
        ]

    def edge_weight(
        self, edge: Edge, weight_attr: str = "weight", default: Any = 1
    ) -> Any:
        """Return the weight of ``edge``.

        Raises:
            ValueError: If the edge does not exist.
        """
        u, v = edge
        if not self.has_edge(u, v):
            raise ValueError(f"Edge ({u!r}, {v!r}) not found.")
        return self[u][v].get(weight_attr, default)

    def get_cycle(self, start: NodeID, end: Optional[NodeID] = None) -> List[NodeID]:
        """Return the vertices of the cycle through ``start``.

        The sequence begins at ``start`` and lists each cycle vertex once; the
        closing edge back to ``start`` is implied. When ``end`` is given and is
        a neighbour of ``start`` on the cycle, the sequence is oriented so that
        it finishes at ``end``.

        Args:
            start: Vertex on the cycle.
            end: Optional vertex that should close the sequence.

        Returns:
            List[NodeID]: Cycle vertices, starting at ``start``.

        Raises:
            ValueError: If ``start`` is not in the graph or no cycle passes
                through it.
        """
        if start not in self:
            raise ValueError(f"Node '{start}' does not exist.")
        try:
            cycle_edges = nx.find_cycle(self, source=start)
        except nx.NetworkXNoCycle:
            raise ValueError(f"No cycle reachable from node '{start}'.") from None

        vertices = [u for u, _ in cycle_edges]
        if start not in vertices:
            raise ValueError(f"Node '{start}' is not on a cycle.")

        idx = vertices.index(start)
        vertices = vertices[idx:] + vertices[:idx]
        if end is not None and len(vertices) > 2 and vertices[1] == end:
            vertices = [start] + vertices[:0:-1]
        return vertices

    def is_tree(self) -> bool:
        """Return True if the graph is non-empty, connected and acyclic."""
        return self.number_of_nodes() > 0 and nx.is_tree(self)

    def spans(self, vertices: Iterable[NodeID]) -> bool:
        """Return True if the graph's vertex set equals ``vertices``."""
        return set(self.nodes) == set(vertices)
