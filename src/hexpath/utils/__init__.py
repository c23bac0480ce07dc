"""Utility functions for the hexpath engine."""

from hexpath.utils.hex_math import (
    CubeCoordinates,
    OffsetCoordinates,
    cube_to_offset,
    hex_distance,
    neighbors_in_bounds,
    offset_to_cube,
)
from hexpath.utils.rng import generate_seed, seeded_random, shuffle

__all__ = [
    "CubeCoordinates",
    "OffsetCoordinates",
    "cube_to_offset",
    "generate_seed",
    "hex_distance",
    "neighbors_in_bounds",
    "offset_to_cube",
    "seeded_random",
    "shuffle",
]
