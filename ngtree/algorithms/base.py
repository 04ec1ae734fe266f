"""Sentinels and type aliases shared by the algorithms."""

from __future__ import annotations

from typing import Hashable, Mapping, Tuple, Union

#: Numeric cost or weight.
Cost = Union[int, float]

Vertex = Hashable

#: Undirected edge as ``(u, v)``; ``(v, u)`` names the same edge.
Edge = Tuple[Vertex, Vertex]


class Marker:
    """Named singleton used as a sentinel value."""

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return self.name

    def __reduce__(self) -> str:
        return self.name


#: Predecessor of the traversal root: the path terminus.
ROOT = Marker("ROOT")

#: Outcome for a vertex that has no path from the root.
UNREACHABLE = Marker("UNREACHABLE")

#: Key that carries the total flow value in flow-algorithm output.
FLOW = "flow"

#: Mapping of vertex to ``(cost, predecessor)``.
PredecessorTable = Mapping[Vertex, Tuple[Cost, Vertex]]
