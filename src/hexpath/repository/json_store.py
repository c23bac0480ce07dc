"""JSON-based repository for hexpath maps."""

from __future__ import annotations

import re
from pathlib import Path

from hexpath import savegame
from hexpath.domain.models import MapData

_NAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")


class JsonMapRepository:
    """Persist named maps as JSON documents on disk."""

    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _path_for(self, name: str) -> Path:
        if not _NAME_PATTERN.fullmatch(name):
            raise ValueError(f"invalid map name: {name!r}")
        return self.base_path / f"{name}{savegame.TEXT_SUFFIX}"

    def save(self, name: str, map_data: MapData) -> Path:
        """Serialize a map to disk and return the document path."""

        return savegame.save_map(map_data, self._path_for(name))

    def load(self, name: str) -> MapData:
        """Load a previously saved map, raising ``FileNotFoundError`` if absent."""

        path = self._path_for(name)
        if not path.exists():
            raise FileNotFoundError(f"map {name!r} not found")
        return savegame.load_map(path)

    def list_maps(self) -> list[str]:
        """Return the names of all maps currently persisted in the repository."""

        names = [
            path.stem
            for path in self.base_path.glob(f"*{savegame.TEXT_SUFFIX}")
            if _NAME_PATTERN.fullmatch(path.stem)
        ]
        return sorted(names)

    def delete(self, name: str) -> None:
        """Remove a map document if it exists."""

        path = self._path_for(name)
        if path.exists():
            path.unlink()
