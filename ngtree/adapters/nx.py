"""Build raw algorithm results from NetworkX graphs.

The interpretation functions in ``ngtree.algorithms`` consume predecessor
tables and flow entry lists. This module produces both from standard NetworkX
algorithms so the two sides can be used together.

Example:
    >>> import networkx as nx
    >>> from ngtree.adapters.nx import predecessor_table
    >>> from ngtree.algorithms.paths import reconstruct_all_paths
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B", weight=2)
    >>> G.add_edge("B", "C", weight=3)
    >>> G.add_node("D")
    >>> table = predecessor_table(G, "A")
    >>> paths = reconstruct_all_paths(G.nodes, table)
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Hashable, Iterator, List, Tuple

import networkx as nx
from networkx.algorithms import flow as nx_flow

from ngtree.algorithms.base import FLOW, ROOT, Cost

#: Max-flow implementations selectable by name.
FLOW_FUNCS: Dict[str, Callable] = {
    "edmonds_karp": nx_flow.edmonds_karp,
    "shortest_augmenting_path": nx_flow.shortest_augmenting_path,
    "preflow_push": nx_flow.preflow_push,
    "dinitz": nx_flow.dinitz,
    "boykov_kolmogorov": nx_flow.boykov_kolmogorov,
}

TRAVERSAL_METHODS = ("dijkstra", "bfs", "dfs")


def _tree_edge_table(
    graph: nx.Graph,
    source: Hashable,
    tree_edges: Iterator[Tuple[Hashable, Hashable]],
    weight: str,
    root: Any,
) -> Dict[Hashable, Tuple[Cost, Any]]:
    """Accumulate edge weights along traversal tree edges."""
    table: Dict[Hashable, Tuple[Cost, Any]] = {source: (0, root)}
    for u, v in tree_edges:
        cost = table[u][0] + graph[u][v].get(weight, 1)
        table[v] = (cost, u)
    return table


def predecessor_table(
    graph: nx.Graph,
    source: Hashable,
    *,
    method: str = "dijkstra",
    weight: str = "weight",
    root: Any = ROOT,
) -> Dict[Hashable, Tuple[Cost, Any]]:
    """Run a traversal from ``source`` and return its predecessor table.

    Args:
        graph: Directed or undirected simple graph.
        source: Traversal root.
        method: ``dijkstra`` (shortest paths), ``bfs`` or ``dfs``. For BFS
            and DFS the cost is the summed weight along the traversal tree.
        weight: Edge attribute holding the weight; missing weights count as 1.
        root: Marker stored as the predecessor of ``source``.

    Returns:
        Dict mapping each reached vertex to ``(cost, predecessor)``.

    Raises:
        KeyError: If ``source`` is not in the graph.
        ValueError: If ``method`` is unknown or ``graph`` is a multigraph.
    """
    if method not in TRAVERSAL_METHODS:
        valid = ", ".join(TRAVERSAL_METHODS)
        raise ValueError(f"Invalid traversal method '{method}'. Valid values are: {valid}")
    if graph.is_multigraph():
        raise ValueError("Multigraphs are not supported.")
    if source not in graph:
        raise KeyError(f"Source node '{source}' is not in the graph.")

    if method == "bfs":
        return _tree_edge_table(graph, source, nx.bfs_edges(graph, source), weight, root)
    if method == "dfs":
        return _tree_edge_table(graph, source, nx.dfs_edges(graph, source), weight, root)

    preds, dist = nx.dijkstra_predecessor_and_distance(graph, source, weight=weight)
    # Equal-cost predecessors: keep the first one found
    return {v: (dist[v], preds[v][0] if preds[v] else root) for v in dist}


def flow_entries(
    graph: nx.Graph,
    source: Hashable,
    sink: Hashable,
    *,
    method: str = "edmonds_karp",
    capacity: str = "capacity",
    marker: Any = FLOW,
) -> List[Tuple[Any, Cost]]:
    """Run a max-flow algorithm and return its result as ``(key, value)`` entries.

    Args:
        graph: Flow network. Edges without ``capacity`` are uncapacitated.
        source: Source vertex.
        sink: Sink vertex.
        method: Name of a key in ``FLOW_FUNCS``.
        capacity: Edge attribute holding the capacity.
        marker: Key used for the total flow entry.

    Returns:
        ``[(marker, value), ((u, v), amount), ...]`` listing only edges that
        carry positive flow.

    Raises:
        ValueError: If ``method`` is unknown.
    """
    flow_func = FLOW_FUNCS.get(method)
    if flow_func is None:
        valid = ", ".join(FLOW_FUNCS)
        raise ValueError(f"Invalid flow method '{method}'. Valid values are: {valid}")

    value, flow_dict = nx.maximum_flow(
        graph, source, sink, capacity=capacity, flow_func=flow_func
    )
    entries: List[Tuple[Any, Cost]] = [(marker, value)]
    for u, targets in flow_dict.items():
        for v, amount in targets.items():
            if amount > 0:
                entries.append(((u, v), amount))
    return entries
