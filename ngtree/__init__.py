"""ngtree: interpretation of graph-algorithm results and spanning-tree enumeration.

Primary API:
    reconstruct_all_paths() - Expand a predecessor table into explicit paths
    reconstruct_flow() - Split flow output into value and sorted edge flows
    generate_trees() - Enumerate spanning trees one chord swap from an MST
    StrictGraph - Undirected weighted graph used for trees

Example:
    from ngtree import StrictGraph, generate_trees

    g = StrictGraph.from_weighted_edges(
        [1, 2, 3, 4],
        [((1, 2), 1), ((2, 3), 1), ((3, 4), 1), ((4, 1), 1)],
    )
    trees = generate_trees(g)  # the 4 spanning trees of a 4-cycle
"""

from __future__ import annotations

from ngtree import logging
from ngtree._version import __version__
from ngtree.algorithms.base import FLOW, ROOT, UNREACHABLE
from ngtree.algorithms.flow import FlowResult, reconstruct_flow
from ngtree.algorithms.mst import minimum_spanning_tree
from ngtree.algorithms.paths import (
    PathInfo,
    Reachable,
    reconstruct_all_paths,
    reconstruct_path,
)
from ngtree.algorithms.spanning_trees import generate_trees
from ngtree.config import TREE_CONFIG, TreeEnumerationConfig
from ngtree.graph.undirected import StrictGraph
from ngtree.utils.iterables import IGNORE, zip_with_padding

__all__ = [
    # Version
    "__version__",
    # Graph
    "StrictGraph",
    # Paths
    "ROOT",
    "UNREACHABLE",
    "PathInfo",
    "Reachable",
    "reconstruct_path",
    "reconstruct_all_paths",
    # Flow
    "FLOW",
    "FlowResult",
    "reconstruct_flow",
    # Trees
    "generate_trees",
    "minimum_spanning_tree",
    "TreeEnumerationConfig",
    "TREE_CONFIG",
    # Utilities
    "IGNORE",
    "zip_with_padding",
    "logging",
]
