"""Domain layer for hexpath.

This package hosts the search engine and the data it runs on.  It exposes:

* The immutable map store and per-query search nodes (see :mod:`models`).
* Terrain tag enumerations (see :mod:`enums`).
* The neighbor filter used by every search (see :mod:`neighbors`).
* The :class:`~hexpath.domain.pathfinding.PathFinder` query surface.
"""

from . import enums, models, neighbors, pathfinding

__all__ = [
    "enums",
    "models",
    "neighbors",
    "pathfinding",
]
