"""Tests for the JSON map repository."""

from __future__ import annotations

import pytest

from hexpath.domain.models import MapData
from hexpath.repository import JsonMapRepository


def _map() -> MapData:
    return MapData.create([[1, 1, 0, 1]], 2, 2, [["NONE", "RIVER", "NONE", "RIVERBANK"]])


def test_save_and_load_map(tmp_path):
    repo = JsonMapRepository(tmp_path)

    path = repo.save("skirmish", _map())

    assert path == tmp_path / "skirmish.json"
    assert path.exists()
    assert repo.load("skirmish") == _map()


def test_list_maps_sorted(tmp_path):
    repo = JsonMapRepository(tmp_path)
    repo.save("zulu", _map())
    repo.save("alpha-1", _map())
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    assert repo.list_maps() == ["alpha-1", "zulu"]


def test_delete(tmp_path):
    repo = JsonMapRepository(tmp_path)
    repo.save("skirmish", _map())

    repo.delete("skirmish")
    repo.delete("skirmish")

    assert repo.list_maps() == []


def test_missing_map(tmp_path):
    repo = JsonMapRepository(tmp_path)
    with pytest.raises(FileNotFoundError):
        repo.load("nowhere")


@pytest.mark.parametrize("name", ["../escape", "with space", "", "dots.json"])
def test_rejects_unsafe_names(tmp_path, name):
    repo = JsonMapRepository(tmp_path)
    with pytest.raises(ValueError, match="invalid map name"):
        repo.save(name, _map())


def test_creates_base_directory(tmp_path):
    base = tmp_path / "deep" / "maps"
    JsonMapRepository(base)
    assert base.is_dir()
