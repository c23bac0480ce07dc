"""Dataclasses describing the map store and the search working set.

``MapData`` is the immutable input every query runs against.  ``SearchNode``
instances only live for the duration of a single query; ``WeightedCoordinates``
is a derived output value.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from hexpath.domain.enums import TileProperty
from hexpath.utils.hex_math import CubeCoordinates


class MapDataError(ValueError):
    """Raised when a map store is constructed from inconsistent data."""


@dataclass(frozen=True, slots=True)
class MapData:
    """Layered cost map with a parallel terrain tag grid per layer.

    Attributes:
        layers: One flattened, row-major cost grid per layer (0 = impassable)
        properties: One terrain tag grid per layer, same shape as ``layers``
        rows: Number of grid rows
        columns: Number of grid columns
    """

    layers: tuple[tuple[int, ...], ...]
    properties: tuple[tuple[TileProperty, ...], ...]
    rows: int
    columns: int

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.columns <= 0:
            raise MapDataError(
                f"rows and columns must be positive, got {self.rows}x{self.columns}"
            )
        if len(self.layers) != len(self.properties):
            raise MapDataError(
                f"{len(self.layers)} cost layers but {len(self.properties)} property layers"
            )
        size = self.size
        for index, layer in enumerate(self.layers):
            if len(layer) != size:
                raise MapDataError(f"cost layer {index} has {len(layer)} cells, expected {size}")
            if any(cost < 0 for cost in layer):
                raise MapDataError(f"cost layer {index} contains negative costs")
        for index, layer in enumerate(self.properties):
            if len(layer) != size:
                raise MapDataError(
                    f"property layer {index} has {len(layer)} cells, expected {size}"
                )

    @classmethod
    def create(
        cls,
        layers: Sequence[Sequence[int]],
        rows: int,
        columns: int,
        properties: Sequence[Sequence[TileProperty | str]] | None = None,
    ) -> MapData:
        """Build a map store, filling in ``NONE`` tags when none match the layers."""

        if layers is None:
            raise MapDataError("cost layers are required")
        frozen_layers = tuple(tuple(int(cost) for cost in layer) for layer in layers)
        if properties is not None and len(properties) == len(frozen_layers):
            frozen_properties = tuple(
                tuple(TileProperty(tag) for tag in layer) for layer in properties
            )
        else:
            frozen_properties = tuple(
                (TileProperty.NONE,) * len(layer) for layer in frozen_layers
            )
        return cls(frozen_layers, frozen_properties, rows, columns)

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def has_layer(self, layer: int) -> bool:
        return 0 <= layer < len(self.layers)


@dataclass(slots=True, eq=False)
class SearchNode:
    """Per-query search state for one grid cell.

    Nodes are identified by their coordinates: two nodes at the same cell
    compare equal whatever their costs.
    """

    coordinates: CubeCoordinates
    index: int
    g: int = 0
    h: int = 0
    f: int = 0
    opened: bool = field(default=False, repr=False)
    closed: bool = field(default=False, repr=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchNode):
            return NotImplemented
        return self.coordinates == other.coordinates

    def __hash__(self) -> int:
        return hash(self.coordinates)

    def score(self, g: int, h: int) -> None:
        self.g = g
        self.h = h
        self.f = g + h


@dataclass(frozen=True, slots=True)
class WeightedCoordinates:
    """A path cell paired with the terrain cost of one layer."""

    coordinates: CubeCoordinates
    cost: int
