"""Neighbor filtering for the search engine."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from hexpath.utils.hex_math import CubeCoordinates, offset_index


def walkable_neighbors(
    neighbors: Iterable[CubeCoordinates], cost_layer: Sequence[int], columns: int
) -> list[CubeCoordinates]:
    """Return the neighbors whose cost in ``cost_layer`` is above zero."""

    return [n for n in neighbors if cost_layer[offset_index(n, columns)] > 0]
