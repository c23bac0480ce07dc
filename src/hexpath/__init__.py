"""Hex-grid pathfinding: shortest paths, movement ranges and attack ranges."""

from hexpath.domain.enums import TileProperty
from hexpath.domain.models import MapData, MapDataError, WeightedCoordinates
from hexpath.domain.pathfinding import PathFinder
from hexpath.utils.hex_math import CubeCoordinates, OffsetCoordinates

__all__ = [
    "CubeCoordinates",
    "MapData",
    "MapDataError",
    "OffsetCoordinates",
    "PathFinder",
    "TileProperty",
    "WeightedCoordinates",
]
