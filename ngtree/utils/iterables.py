"""Sequence helpers.

``zip_with_padding`` pairs two sequences of possibly different lengths. With an
explicit padding value the shorter side is padded; with ``IGNORE`` the zip ends
as soon as either side is exhausted.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple


class _Ignore:
    """Padding marker meaning "do not pad"."""

    _instance = None

    def __new__(cls) -> "_Ignore":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "IGNORE"

    def __reduce__(self) -> str:
        return "IGNORE"


IGNORE = _Ignore()


def zip_with_padding(
    xs: Iterable[Any], ys: Iterable[Any], padding: Any = IGNORE
) -> List[Tuple[Any, Any]]:
    """Pair elements of ``xs`` and ``ys`` positionally.

    Args:
        xs: Left-hand sequence.
        ys: Right-hand sequence.
        padding: Value used in place of the missing element once the shorter
            sequence is exhausted. ``IGNORE`` drops the excess elements of the
            longer sequence instead.

    Returns:
        List of ``(x, y)`` tuples.

    Example:
        >>> zip_with_padding([1, 2], ["a", "b", "c"], "x")
        [(1, 'a'), (2, 'b'), ('x', 'c')]
        >>> zip_with_padding([1, 2], ["a", "b", "c"])
        [(1, 'a'), (2, 'b')]
    """
    left = list(xs)
    right = list(ys)
    common = min(len(left), len(right))

    pairs = list(zip(left[:common], right[:common]))
    if padding is IGNORE:
        return pairs

    pairs.extend((x, padding) for x in left[common:])
    pairs.extend((padding, y) for y in right[common:])
    return pairs
