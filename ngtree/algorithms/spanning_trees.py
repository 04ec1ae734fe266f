"""Spanning-tree enumeration by chord substitution.

Starting from one minimum spanning tree (the base tree), every edge outside
the tree (a chord) closes exactly one cycle when added to it. Removing any
other edge of that cycle yields another spanning tree. ``generate_trees``
returns the base tree together with all trees obtained this way.

This is a partial enumeration: only trees one edge swap away from the base
tree are produced, and isomorphic trees are not deduplicated.
"""

from __future__ import annotations

from typing import Hashable, Iterable, List, Optional

import networkx as nx

from ngtree.algorithms.mst import minimum_spanning_tree
from ngtree.config import TREE_CONFIG, TreeEnumerationConfig
from ngtree.graph.undirected import StrictGraph, WeightedEdge
from ngtree.logging import get_logger
from ngtree.utils.iterables import IGNORE, zip_with_padding

logger = get_logger(__name__)


def _check_input(graph: nx.Graph) -> None:
    if graph.is_directed():
        raise ValueError("Spanning-tree enumeration requires an undirected graph.")
    if graph.is_multigraph():
        raise ValueError("Spanning-tree enumeration does not support multigraphs.")
    if graph.number_of_nodes() == 0:
        raise ValueError("Cannot enumerate spanning trees of an empty graph.")
    if not nx.is_connected(graph):
        raise ValueError("Graph is disconnected; it has no spanning tree.")


def _swap_chord(
    base_tree: StrictGraph,
    chord: WeightedEdge,
    vertices: Iterable[Hashable],
    weight_attr: str,
) -> List[StrictGraph]:
    """Return the trees obtained by adding ``chord`` and breaking its cycle.

    Trees are listed in reverse order of the removed cycle edge.
    """
    (v1, v2), chord_weight = chord
    tree = base_tree.copy()
    tree.add_edge(v1, v2, **{weight_attr: chord_weight})

    # [v1, ..., v2]; the closing pair (v2, v1) is the chord itself and is
    # dropped by the IGNORE zip
    cycle = tree.get_cycle(v1, end=v2)

    batch: List[StrictGraph] = []
    for u, v in zip_with_padding(cycle, cycle[1:], IGNORE):
        new_tree = tree.copy()
        new_tree.remove_edge(u, v)
        if not (new_tree.is_tree() and new_tree.spans(vertices)):
            raise RuntimeError(
                f"Removing edge ({u!r}, {v!r}) after adding chord ({v1!r}, {v2!r}) "
                "did not produce a spanning tree."
            )
        batch.append(new_tree.freeze())
    batch.reverse()
    return batch


def generate_trees(
    graph: nx.Graph, *, config: Optional[TreeEnumerationConfig] = None
) -> List[StrictGraph]:
    """Enumerate spanning trees one chord swap away from a minimum spanning tree.

    Args:
        graph: Connected undirected weighted graph. A plain ``networkx.Graph``
            is converted to ``StrictGraph`` first.
        config: Enumeration settings; defaults to ``TREE_CONFIG``.

    Returns:
        List[StrictGraph]: Frozen trees. Trees from the last chord come first,
        those from the first chord come last, and the base tree closes the list.

    Raises:
        ValueError: If the graph is directed, a multigraph, empty or
            disconnected, or if ``config`` is invalid.
        RuntimeError: If a generated graph is not a spanning tree.
    """
    cfg = config if config is not None else TREE_CONFIG
    cfg.validate()
    _check_input(graph)

    source = graph if isinstance(graph, StrictGraph) else StrictGraph.from_networkx(graph)
    weight_attr = cfg.weight_attr
    vertices = list(source.nodes)

    weighted_edges = source.edges_with_weights(weight_attr)
    _, mst_edges = minimum_spanning_tree(
        source, weight=weight_attr, algorithm=cfg.mst_algorithm
    )
    branches = [(edge, source.edge_weight(edge, weight_attr)) for edge in mst_edges]
    base_tree = StrictGraph.from_weighted_edges(vertices, branches, weight_attr).freeze()

    # Match on unordered endpoints and weight
    branch_keys = {(frozenset(edge), w) for edge, w in branches}
    chords = [
        (edge, w) for edge, w in weighted_edges if (frozenset(edge), w) not in branch_keys
    ]
    logger.debug(
        "Base tree has %d edges; %d chords to substitute", len(branches), len(chords)
    )

    batches: List[List[StrictGraph]] = []
    for chord in chords:
        batch = _swap_chord(base_tree, chord, vertices, weight_attr)
        logger.debug("Chord %s produced %d trees", chord[0], len(batch))
        batches.append(batch)

    trees: List[StrictGraph] = [tree for batch in reversed(batches) for tree in batch]
    trees.append(base_tree)
    logger.debug("Generated %d spanning trees", len(trees))
    return trees
