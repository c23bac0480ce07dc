"""Runtime primitives backing the hexpath HTTP API."""

from __future__ import annotations

import logging
import random
import threading

from hexpath.config import Settings, get_settings
from hexpath.domain.models import MapData
from hexpath.domain.pathfinding import PathFinder
from hexpath.repository import JsonMapRepository
from hexpath.utils.rng import generate_seed, seeded_random

logger = logging.getLogger(__name__)


class MapService:
    """Load, store and cache the pathfinders behind named maps."""

    def __init__(
        self,
        repository: JsonMapRepository,
        *,
        max_iterations: int,
        shuffle_seed: str | None = None,
    ) -> None:
        self._repository = repository
        self._max_iterations = max_iterations
        self._shuffle_seed = shuffle_seed
        self._finders: dict[str, PathFinder] = {}
        self._lock = threading.Lock()

    def list_maps(self) -> list[str]:
        return self._repository.list_maps()

    def get_map(self, name: str) -> MapData:
        """Return a stored map or raise ``FileNotFoundError``."""

        return self.pathfinder(name).map_data

    def save_map(self, name: str, map_data: MapData) -> MapData:
        """Persist ``map_data`` under ``name``, replacing any cached pathfinder."""

        self._repository.save(name, map_data)
        self._evict(name)
        return map_data

    def delete_map(self, name: str) -> None:
        """Remove a stored map, raising ``FileNotFoundError`` if it is unknown."""

        if name not in self._repository.list_maps():
            raise FileNotFoundError(f"map {name!r} not found")
        self._repository.delete(name)
        self._evict(name)

    def pathfinder(self, name: str) -> PathFinder:
        """Return the cached pathfinder for a map, loading it on first use."""

        with self._lock:
            finder = self._finders.get(name)
            if finder is not None:
                return finder
            map_data = self._repository.load(name)
            finder = PathFinder(
                map_data, rng=self._rng_for(name), max_iterations=self._max_iterations
            )
            self._finders[name] = finder
        logger.info(
            "loaded map %s (%dx%d, %d layers)",
            name,
            map_data.rows,
            map_data.columns,
            len(map_data.layers),
        )
        return finder

    def clear(self) -> None:
        """Drop every cached pathfinder."""

        with self._lock:
            self._finders.clear()

    def _rng_for(self, name: str) -> random.Random:
        if self._shuffle_seed is None:
            return seeded_random()
        return seeded_random(generate_seed(self._shuffle_seed, name))

    def _evict(self, name: str) -> None:
        with self._lock:
            evicted = self._finders.pop(name, None)
        if evicted is not None:
            logger.info("evicted cached map %s", name)


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(self, *, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.repository = JsonMapRepository(self.settings.data_dir)
        self.maps = MapService(
            self.repository,
            max_iterations=self.settings.max_iterations,
            shuffle_seed=self.settings.shuffle_seed,
        )

    async def shutdown(self) -> None:
        self.maps.clear()


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
