"""Minimum spanning tree over an undirected weighted graph."""

from __future__ import annotations

from typing import List, Tuple

import networkx as nx

from ngtree.algorithms.base import Cost, Edge
from ngtree.config import MST_ALGORITHMS


def minimum_spanning_tree(
    graph: nx.Graph,
    *,
    weight: str = "weight",
    algorithm: str = "kruskal",
) -> Tuple[Cost, List[Edge]]:
    """Compute a minimum spanning tree (or forest) of ``graph``.

    Args:
        graph: Undirected graph.
        weight: Edge attribute holding the weight. Missing weights count as 1.
        algorithm: One of ``kruskal``, ``prim`` or ``boruvka``.

    Returns:
        A tuple ``(total_weight, edges)`` where ``edges`` lists the tree edges
        as ``(u, v)`` tuples in the order the algorithm selected them.

    Raises:
        ValueError: If ``algorithm`` is unknown or ``graph`` is directed.
    """
    if algorithm not in MST_ALGORITHMS:
        valid = ", ".join(MST_ALGORITHMS)
        raise ValueError(f"Invalid MST algorithm '{algorithm}'. Valid values are: {valid}")
    if graph.is_directed():
        raise ValueError("Minimum spanning trees require an undirected graph.")

    total: Cost = 0
    edges: List[Edge] = []
    for u, v, attr in nx.minimum_spanning_edges(
        graph, algorithm=algorithm, weight=weight, data=True
    ):
        total += attr.get(weight, 1)
        edges.append((u, v))
    return total, edges
