"""Path reconstruction from predecessor tables.

Traversal and shortest-path algorithms (BFS, DFS, Dijkstra) summarise their
result as a predecessor table: each reached vertex maps to ``(cost, pred)``
where ``pred`` is the previous vertex on the chosen path and the traversal
root has the ``ROOT`` marker as predecessor. The functions below expand such a
table into explicit root-to-vertex paths.

A vertex missing from the table is unreachable; that is a normal outcome,
reported as ``UNREACHABLE``. A predecessor missing from the table is a broken
table and raises ``KeyError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, NamedTuple, Tuple, Union

from ngtree.algorithms.base import (
    ROOT,
    UNREACHABLE,
    Cost,
    Marker,
    PredecessorTable,
    Vertex,
)
from ngtree.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Reachable:
    """Cost and vertex sequence of a path from the root.

    Attributes:
        cost: Cost recorded for the target vertex.
        path: Vertices from the first hop after the root up to and including
            the target vertex.
    """

    cost: Cost
    path: Tuple[Vertex, ...]


#: ``Reachable`` or the ``UNREACHABLE`` marker.
Outcome = Union[Reachable, Marker]


class PathInfo(NamedTuple):
    """Reconstruction result for one vertex.

    ``outcome`` is a ``Reachable`` instance or the ``UNREACHABLE`` marker.
    """

    vertex: Vertex
    outcome: Outcome

    @property
    def reachable(self) -> bool:
        return self.outcome is not UNREACHABLE


def reconstruct_path(
    table: PredecessorTable, vertex: Vertex, *, root: Any = ROOT
) -> PathInfo:
    """Reconstruct the path to a single vertex.

    Args:
        table: Predecessor table ``{vertex: (cost, predecessor)}``.
        vertex: Target vertex.
        root: Predecessor marker that terminates the walk.

    Returns:
        PathInfo: ``Reachable(cost, path)`` or ``UNREACHABLE``.

    Raises:
        KeyError: If a predecessor on the chain is missing from the table.
        ValueError: If the predecessor chain loops without reaching ``root``.
    """
    if vertex not in table:
        return PathInfo(vertex, UNREACHABLE)

    cost, pred = table[vertex]
    path = [vertex]
    # A valid chain visits each table entry at most once
    max_hops = len(table)
    while pred != root:
        if len(path) >= max_hops:
            raise ValueError(
                f"Predecessor chain of vertex {vertex!r} does not reach the root."
            )
        path.append(pred)
        _, pred = table[pred]
    path.reverse()
    return PathInfo(vertex, Reachable(cost, tuple(path)))


def reconstruct_all_paths(
    vertices: Iterable[Vertex], table: PredecessorTable, *, root: Any = ROOT
) -> List[PathInfo]:
    """Reconstruct paths for every vertex, ordered by vertex.

    Args:
        vertices: Vertices to report on. Must be mutually comparable.
        table: Predecessor table produced by a traversal algorithm.
        root: Predecessor marker that terminates each walk.

    Returns:
        List[PathInfo]: One entry per vertex, sorted by vertex.

    Raises:
        KeyError: If a predecessor chain is broken.
        ValueError: If a predecessor chain loops.
    """
    results = [reconstruct_path(table, v, root=root) for v in sorted(vertices)]
    logger.debug(
        "Reconstructed paths for %d vertices (%d unreachable)",
        len(results),
        sum(1 for info in results if not info.reachable),
    )
    return results
