"""
Hexagonal coordinate system mathematics for hexpath.

This module implements the coordinate operations the search engine consumes.
It supports:
- Conversion between cube and offset coordinates
- Distance calculations between hexes
- Finding adjacent hexes, optionally clipped to the map bounds

Coordinate Systems:
-------------------
We use two coordinate systems:

1. Cube Coordinates (x, y, z) - for identity, distance and adjacency
   - three coordinates with constraint x + y + z = 0
   - x is the axial column (q), y is the row (r)
   - Distance is simply max(|dx|, |dy|, |dz|)

2. Offset Coordinates (x, y) - for indexing the flattened map layers
   - x: column, y: row
   - "odd-r" layout: odd rows are shifted right by half a hex
   - Conversion: x_cube = column - (row - (row & 1)) // 2, y_cube = row

A cell's position inside a flattened, row-major layer is
``row * columns + column``.

References:
-----------
Based on the excellent guide at: https://www.redblobgames.com/grids/hexagons/
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CubeCoordinates:
    """
    A hexagonal coordinate using the cube coordinate system.

    Attributes:
        x: Axial column coordinate (q)
        y: Row coordinate (r)
        z: Third axis, always ``-x - y``

    Example:
        >>> origin = CubeCoordinates(0, 0, 0)
        >>> hex_distance(origin, CubeCoordinates(1, 0, -1))
        1

    Raises:
        ValueError: If the three coordinates do not sum to zero
    """

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            msg = f"Cube coordinates must sum to zero, got ({self.x}, {self.y}, {self.z})"
            raise ValueError(msg)

    def to_offset(self) -> "OffsetCoordinates":
        """Shorthand for :func:`cube_to_offset`."""
        return cube_to_offset(self)


@dataclass(frozen=True)
class OffsetCoordinates:
    """
    A hexagonal coordinate using the odd-r offset system.

    Attributes:
        x: Column
        y: Row

    Example:
        >>> OffsetCoordinates(3, 3).to_cube()
        CubeCoordinates(x=2, y=3, z=-5)
    """

    x: int
    y: int

    def to_cube(self) -> CubeCoordinates:
        """Shorthand for :func:`offset_to_cube`."""
        return offset_to_cube(self)


def offset_to_cube(coord: OffsetCoordinates) -> CubeCoordinates:
    """
    Convert odd-r offset coordinates (column, row) to cube coordinates.

    The conversion follows:
        x = column - (row - (row & 1)) // 2
        y = row
        z = -x - y

    Args:
        coord: A hex coordinate in offset system

    Returns:
        The same cell in cube coordinates

    Example:
        >>> offset_to_cube(OffsetCoordinates(0, 2))
        CubeCoordinates(x=-1, y=2, z=-1)
    """
    x = coord.x - (coord.y - (coord.y & 1)) // 2
    y = coord.y
    return CubeCoordinates(x, y, -x - y)


def cube_to_offset(coord: CubeCoordinates) -> OffsetCoordinates:
    """
    Convert cube coordinates back to odd-r offset coordinates.

    The conversion follows:
        column = x + (y - (y & 1)) // 2
        row = y

    The z coordinate is redundant (z = -x - y) and is not used.

    Args:
        coord: A hex coordinate in cube system

    Returns:
        The same cell in offset coordinates

    Example:
        >>> cube_to_offset(CubeCoordinates(2, 3, -5))
        OffsetCoordinates(x=3, y=3)
    """
    column = coord.x + (coord.y - (coord.y & 1)) // 2
    return OffsetCoordinates(column, coord.y)


def hex_distance(a: CubeCoordinates, b: CubeCoordinates) -> int:
    """
    Calculate the distance between two hexes.

    The distance is the minimum number of hex steps to move from hex a to hex b:
        distance = max(|dx|, |dy|, |dz|)

    Args:
        a: First hex coordinate
        b: Second hex coordinate

    Returns:
        The distance between the two hexes (non-negative integer)

    Example:
        >>> hex_distance(CubeCoordinates(0, 0, 0), CubeCoordinates(2, 3, -5))
        5
    """
    return max(abs(a.x - b.x), abs(a.y - b.y), abs(a.z - b.z))


# Direction vectors for the 6 neighbors in cube coordinates
# Order matters: searches visit neighbors in this sequence
_NEIGHBOR_DIRECTIONS: list[tuple[int, int, int]] = [
    (1, 0, -1),  # East
    (1, -1, 0),  # Northeast
    (0, -1, 1),  # Northwest
    (-1, 0, 1),  # West
    (-1, 1, 0),  # Southwest
    (0, 1, -1),  # Southeast
]


def hex_neighbors(coord: CubeCoordinates) -> list[CubeCoordinates]:
    """
    Find all 6 adjacent hexes to the given hex, ignoring map bounds.

    Args:
        coord: The center hex coordinate

    Returns:
        A list of 6 CubeCoordinates in East, Northeast, Northwest, West,
        Southwest, Southeast order
    """
    return [
        CubeCoordinates(coord.x + dx, coord.y + dy, coord.z + dz)
        for dx, dy, dz in _NEIGHBOR_DIRECTIONS
    ]


def in_bounds(coord: CubeCoordinates, rows: int, columns: int) -> bool:
    """Return True if the hex lies on a ``rows`` x ``columns`` offset grid."""
    offset = cube_to_offset(coord)
    return 0 <= offset.x < columns and 0 <= offset.y < rows


def offset_index(coord: CubeCoordinates, columns: int) -> int:
    """Return the row-major index of a hex inside a flattened layer."""
    offset = cube_to_offset(coord)
    return offset.y * columns + offset.x


def neighbors_in_bounds(coord: CubeCoordinates, rows: int, columns: int) -> list[CubeCoordinates]:
    """
    Find the adjacent hexes that lie on the grid.

    Corner hexes have 2 or 3 neighbors, edge hexes 3 or 4 and interior
    hexes all 6.

    Args:
        coord: The center hex coordinate
        rows: Number of grid rows
        columns: Number of grid columns

    Returns:
        The in-bounds neighbors, in :func:`hex_neighbors` order

    Example:
        >>> neighbors_in_bounds(CubeCoordinates(0, 0, 0), 46, 74)
        [CubeCoordinates(x=1, y=0, z=-1), CubeCoordinates(x=0, y=1, z=-1)]
    """
    return [n for n in hex_neighbors(coord) if in_bounds(n, rows, columns)]
