"""Path, reachability and targeting queries over a layered hex cost map.

This module implements the search engine: an A* shortest path search, a
cost-bounded flood fill honouring the river fording rule, and the attackable
tile composition built on top of it.  Every query allocates a scratch grid of
:class:`SearchNode` objects (one per cell, indexed like the flattened layers),
runs against the immutable :class:`MapData` and discards its working set on
return.

Failed searches are not exceptional: an out-of-range layer, an impassable or
off-map start, an unreachable goal and an exhausted iteration cap all produce
an empty result.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Sequence

from hexpath.domain.enums import RIVER_TAGS, TileProperty
from hexpath.domain.models import MapData, SearchNode, WeightedCoordinates
from hexpath.domain.neighbors import walkable_neighbors
from hexpath.utils.hex_math import (
    CubeCoordinates,
    OffsetCoordinates,
    cube_to_offset,
    hex_distance,
    in_bounds,
    neighbors_in_bounds,
    offset_index,
    offset_to_cube,
)
from hexpath.utils.rng import seeded_random, shuffle

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 10_000
# Cost given to river and riverbank cells during a flood fill; such cells can
# be entered but never expanded.
UNREACHABLE_COST = 2**31 - 1


class PathFinder:
    """Stateless query surface over one map store.

    Args:
        map_data: The layered cost map to search
        rng: Random source used to break ties during path reconstruction
        max_iterations: Expansion cap applied to every search loop
    """

    def __init__(
        self,
        map_data: MapData,
        *,
        rng: random.Random | None = None,
        max_iterations: int = MAX_ITERATIONS,
    ) -> None:
        if max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")
        self._map = map_data
        self._rng = rng or seeded_random()
        self._max_iterations = max_iterations

    @classmethod
    def from_layers(
        cls,
        cost_map: Sequence[Sequence[int]],
        rows: int,
        columns: int,
        property_map: Sequence[Sequence[TileProperty | str]] | None = None,
        *,
        rng: random.Random | None = None,
        max_iterations: int = MAX_ITERATIONS,
    ) -> PathFinder:
        """Build a pathfinder straight from raw cost and property layers."""

        map_data = MapData.create(cost_map, rows, columns, property_map)
        return cls(map_data, rng=rng, max_iterations=max_iterations)

    @property
    def map_data(self) -> MapData:
        return self._map

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    # ------------------------------------------------------------------
    # Queries

    def compute_path(
        self, start: CubeCoordinates, end: CubeCoordinates, layer: int
    ) -> list[CubeCoordinates]:
        """Compute the cheapest path from ``start`` to ``end`` (A* search).

        The open list is a plain list: the node with the lowest ``f`` is
        taken, the earliest one in the list among equals.  Newly discovered
        nodes are appended, already open ones are relaxed in place.

        The path is rebuilt backwards without parent pointers: from the goal,
        the neighbors are scanned in a shuffled order and every closed
        neighbor cheaper than the current cell replaces it, so the walk steps
        to the cheapest closed neighbor and picks randomly among equals.

        Args:
            start: First cell of the path
            end: Last cell of the path
            layer: Index of the cost layer to search

        Returns:
            The cells from ``start`` to ``end`` inclusive, or an empty list
            when no path was found
        """
        if not self._accepts(start, layer, "path"):
            return []
        if not in_bounds(end, self._map.rows, self._map.columns):
            logger.debug("path goal %s lies outside the map", end)
            return []

        costs = self._map.layers[layer]
        if costs[self._index(start)] == 0:
            return []

        grid = self._scratch_grid()
        start_node = grid[self._index(start)]
        start_node.score(0, hex_distance(start, end))
        start_node.opened = True
        open_list = [start_node]

        goal: SearchNode | None = None
        for _ in range(self._max_iterations):
            if not open_list:
                break
            node = open_list.pop(_lowest_f(open_list))
            node.opened = False
            node.closed = True
            if node.coordinates == end:
                goal = node
                break
            for neighbor in self._walkable(node, grid, costs):
                if neighbor.closed:
                    continue
                g = node.g + costs[neighbor.index]
                if not neighbor.opened:
                    neighbor.score(g, hex_distance(neighbor.coordinates, end))
                    neighbor.opened = True
                    open_list.append(neighbor)
                elif neighbor.g > g:
                    neighbor.score(g, hex_distance(neighbor.coordinates, end))
        else:
            if open_list:
                self._log_exhausted("path", start, layer)

        if goal is None:
            return []

        path: list[CubeCoordinates] = []
        current = goal
        for _ in range(self._max_iterations):
            path.append(current.coordinates)
            if current.coordinates == start:
                break
            for coordinates in shuffle(self._neighbors(current.coordinates), self._rng):
                candidate = grid[self._index(coordinates)]
                if candidate.closed and candidate.g < current.g:
                    current = candidate
        else:
            self._log_exhausted("path reconstruction", start, layer)
            return []
        path.reverse()
        return path

    def compute_path_offset(
        self, start: OffsetCoordinates, end: OffsetCoordinates, layer: int
    ) -> list[OffsetCoordinates]:
        """Same as :meth:`compute_path`, for offset coordinates."""

        path = self.compute_path(offset_to_cube(start), offset_to_cube(end), layer)
        return [cube_to_offset(coordinates) for coordinates in path]

    def reachable_tiles(
        self, start: CubeCoordinates, max_cost: int, layer: int
    ) -> list[CubeCoordinates]:
        """Return the cells reachable from ``start`` within ``max_cost``.

        The start cell itself is never part of the result.  River and
        riverbank cells end movement; stepping between a riverbank and a
        river cell is only possible straight from ``start``.
        """
        return self._flood(start, max_cost, layer, frozenset())

    def attackable_tiles(
        self,
        start: CubeCoordinates,
        move_range: int,
        attack_range: int,
        layer: int,
        non_blocking_obstacles: Iterable[CubeCoordinates] = (),
        blocking_obstacles: Iterable[CubeCoordinates] = (),
        *,
        include_reachable: bool = False,
    ) -> list[CubeCoordinates]:
        """Return the cells that can be attacked after moving.

        Movement follows :meth:`reachable_tiles` with blocking obstacles
        treated as impassable.  Every reachable cell not occupied by an
        obstacle, plus ``start``, is a position to attack from; from each one
        the attack spreads up to ``attack_range`` steps, stopping at (but
        including) blocking obstacles.

        Args:
            start: Cell the unit stands on
            move_range: Movement budget, exclusive like ``max_cost``
            attack_range: Attack reach in hex steps
            layer: Index of the cost layer to search
            non_blocking_obstacles: Occupied cells that can be moved through
            blocking_obstacles: Occupied cells that cannot be moved through
            include_reachable: Add every position the unit can attack from,
                other than ``start``, to the result instead of removing them

        Returns:
            Attackable cells in discovery order, never including ``start``
        """
        if move_range <= 0 or attack_range <= 0:
            return []
        if not self._accepts(start, layer, "attack"):
            return []
        if self._map.layers[layer][self._index(start)] == 0:
            return []

        rows, columns = self._map.rows, self._map.columns
        blocking = {c for c in blocking_obstacles if in_bounds(c, rows, columns)}
        blocking.discard(start)
        occupied = blocking.union(non_blocking_obstacles)

        blocked_indexes = frozenset(self._index(c) for c in blocking)
        reachable = self._flood(start, move_range, layer, blocked_indexes)
        bases = [start, *(c for c in reachable if c not in occupied)]
        excluded = {start} if include_reachable else set(bases)

        attackable: dict[CubeCoordinates, None] = {}
        if include_reachable:
            attackable.update(dict.fromkeys(bases[1:]))
        for base in bases:
            for coordinates in self._attack_spread(base, attack_range, blocking):
                if coordinates not in excluded:
                    attackable.setdefault(coordinates)
        return list(attackable)

    def neighbor_tiles(self, coordinates: CubeCoordinates) -> list[CubeCoordinates]:
        """Return the 2 to 6 neighbors of a cell that lie on the map."""

        return self._neighbors(coordinates)

    def create_weighted_path(
        self, coordinates: Sequence[CubeCoordinates], layer: int
    ) -> list[WeightedCoordinates]:
        """Pair every cell of a path with its cost on ``layer``.

        Raises:
            ValueError: If a cell lies outside the map
        """
        if not self._map.has_layer(layer) or not coordinates:
            return []
        costs = self._map.layers[layer]
        weighted: list[WeightedCoordinates] = []
        for cell in coordinates:
            if not in_bounds(cell, self._map.rows, self._map.columns):
                raise ValueError(
                    f"{cell} lies outside the {self._map.rows}x{self._map.columns} map"
                )
            weighted.append(WeightedCoordinates(cell, costs[self._index(cell)]))
        return weighted

    def get_cost_map(self, layer: int) -> list[int]:
        """Return a copy of a cost layer, or an empty list for an unknown layer."""

        if not self._map.has_layer(layer):
            return []
        return list(self._map.layers[layer])

    def get_property_map(self, layer: int) -> list[TileProperty]:
        """Return a copy of a property layer, or an empty list for an unknown layer."""

        if not self._map.has_layer(layer):
            return []
        return list(self._map.properties[layer])

    # ------------------------------------------------------------------
    # Internals

    def _flood(
        self,
        start: CubeCoordinates,
        max_cost: int,
        layer: int,
        blocked: frozenset[int],
    ) -> list[CubeCoordinates]:
        # Depth-first flood: discovered cells go to the front of the open list
        # and are enqueued whenever their parent is still below max_cost.
        # Closed cells may be rediscovered with a different cost.
        if not self._accepts(start, layer, "reachability"):
            return []

        costs: Sequence[int] = self._map.layers[layer]
        if blocked:
            costs = [0 if index in blocked else cost for index, cost in enumerate(costs)]
        tags = self._map.properties[layer]

        grid = self._scratch_grid()
        start_node = grid[self._index(start)]
        start_node.opened = True
        open_list = [start_node]
        closed: list[SearchNode] = []
        start_passable = costs[start_node.index] > 0

        for _ in range(self._max_iterations):
            if not open_list:
                break
            node = open_list.pop(0)
            node.opened = False
            if node.coordinates != start and not node.closed:
                node.closed = True
                closed.append(node)
            if not start_passable:
                break
            node_tag = tags[node.index]
            for neighbor in self._walkable(node, grid, costs):
                if neighbor.opened:
                    continue
                neighbor.g = node.g + costs[neighbor.index]
                tag = tags[neighbor.index]
                if tag in RIVER_TAGS:
                    if {tag, node_tag} == RIVER_TAGS and node.coordinates != start:
                        continue
                    neighbor.g = UNREACHABLE_COST
                if node.g < max_cost:
                    neighbor.opened = True
                    open_list.insert(0, neighbor)
        else:
            if open_list:
                self._log_exhausted("reachability", start, layer)

        return [node.coordinates for node in closed]

    def _attack_spread(
        self, origin: CubeCoordinates, attack_range: int, blocking: set[CubeCoordinates]
    ) -> list[CubeCoordinates]:
        seen = {origin}
        spread: list[CubeCoordinates] = []
        frontier = [origin]
        for _ in range(attack_range):
            next_frontier: list[CubeCoordinates] = []
            for cell in frontier:
                for neighbor in self._neighbors(cell):
                    if neighbor in seen:
                        continue
                    seen.add(neighbor)
                    spread.append(neighbor)
                    if neighbor not in blocking:
                        next_frontier.append(neighbor)
            frontier = next_frontier
        return spread

    def _scratch_grid(self) -> list[SearchNode]:
        columns = self._map.columns
        return [
            SearchNode(offset_to_cube(OffsetCoordinates(index % columns, index // columns)), index)
            for index in range(self._map.size)
        ]

    def _walkable(
        self, node: SearchNode, grid: list[SearchNode], costs: Sequence[int]
    ) -> list[SearchNode]:
        columns = self._map.columns
        neighbors = walkable_neighbors(self._neighbors(node.coordinates), costs, columns)
        return [grid[offset_index(n, columns)] for n in neighbors]

    def _neighbors(self, coordinates: CubeCoordinates) -> list[CubeCoordinates]:
        return neighbors_in_bounds(coordinates, self._map.rows, self._map.columns)

    def _index(self, coordinates: CubeCoordinates) -> int:
        return offset_index(coordinates, self._map.columns)

    def _accepts(self, start: CubeCoordinates, layer: int, kind: str) -> bool:
        if not self._map.has_layer(layer):
            logger.debug(
                "%s query on layer %d ignored, map has %d layers",
                kind,
                layer,
                len(self._map.layers),
            )
            return False
        if not in_bounds(start, self._map.rows, self._map.columns):
            logger.debug("%s query from %s ignored, start lies outside the map", kind, start)
            return False
        return True

    def _log_exhausted(self, kind: str, start: CubeCoordinates, layer: int) -> None:
        logger.warning(
            "%s search from %s on layer %d stopped after %d iterations",
            kind,
            start,
            layer,
            self._max_iterations,
        )


def _lowest_f(open_list: list[SearchNode]) -> int:
    best = 0
    for index in range(1, len(open_list)):
        if open_list[index].f < open_list[best].f:
            best = index
    return best
