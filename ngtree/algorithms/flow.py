"""Normalization of flow-algorithm output."""

from __future__ import annotations

from typing import Any, Iterable, List, NamedTuple, Sequence, Tuple

from ngtree.algorithms.base import FLOW, Cost, Edge
from ngtree.logging import get_logger

logger = get_logger(__name__)


class FlowResult(NamedTuple):
    """Total flow value and the per-edge flow assignment.

    Attributes:
        value: Total flow from source to sink.
        edge_flows: ``(edge, amount)`` pairs sorted by edge, then amount.
            Extra flow-value entries, if any, come first.
    """

    value: Cost
    edge_flows: List[Tuple[Edge, Cost]]


def reconstruct_flow(
    entries: Iterable[Sequence[Any]], *, marker: Any = FLOW
) -> FlowResult:
    """Split flow-algorithm output into the flow value and edge flows.

    The first entry keyed by ``marker`` supplies the flow value and exactly
    that entry is removed. Any further ``marker`` entries are kept with the
    edge flows.

    Args:
        entries: ``(key, value)`` pairs, e.g. ``[("flow", 10), (("a", "b"), 3)]``.
        marker: Key that identifies the flow value entry.

    Returns:
        FlowResult: The flow value and the sorted remaining entries.

    Raises:
        KeyError: If no entry is keyed by ``marker``.
    """
    items = [tuple(entry) for entry in entries]
    for idx, (key, value) in enumerate(items):
        if key == marker:
            del items[idx]
            break
    else:
        raise KeyError(marker)

    # Leftover marker entries sort ahead of edge entries
    items.sort(key=lambda item: (item[0] != marker, item))
    logger.debug("Flow value %s over %d edge entries", value, len(items))
    return FlowResult(value, items)
