"""Graph primitives.

This package provides the strict undirected graph type `StrictGraph` used both
as the input of spanning-tree enumeration and as the type of the trees it
returns.
"""

from ngtree.graph.undirected import StrictGraph

__all__ = ["StrictGraph"]
